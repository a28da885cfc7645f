"""
Users API - Inspection and removal of a user's stored patterns.
"""

from typing import Any, List

from ..models import UserQuery, CheckResult, DeleteResult
from ._http import HTTPClient, RequestSpec, encode_component


def build_user_path(query: UserQuery) -> str:
    """
    Build ``/user/{id}`` with its query string.
    
    Parameters are appended in order: every type, then textid, then device.
    """
    params: List[str] = []
    for pattern_type in query.types:
        params.append("type=" + encode_component(pattern_type))
    if query.text_id:
        params.append("textid=" + encode_component(query.text_id))
    if query.device:
        params.append("device=" + encode_component(query.device))
    
    path = "/user/" + encode_component(query.user_id)
    if params:
        path += "?" + "&".join(params)
    return path


class UsersAPI:
    """
    API for user pattern management.
    
    Handles:
    - Counting stored patterns
    - Deleting stored patterns
    """
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Users API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def check_request(self, options: Any) -> RequestSpec:
        query = UserQuery.from_options(options)
        return RequestSpec(method="GET", path=build_user_path(query))
    
    def check(self, options: Any) -> CheckResult:
        """
        Get the number of patterns stored for a user.
        
        Args:
            options: Mapping or UserQuery with userId and optional
                type, textId and device filters
        """
        response = self._http.request(self.check_request(options))
        return CheckResult.from_response(response)
    
    def delete_request(self, options: Any) -> RequestSpec:
        query = UserQuery.from_options(options)
        return RequestSpec(method="DELETE", path=build_user_path(query))
    
    def delete(self, options: Any) -> DeleteResult:
        """Delete the patterns of a user, filtered like ``check``."""
        response = self._http.request(self.delete_request(options))
        return DeleteResult.from_response(response)
