"""
Quotes API - Texts for the user to type.
"""

from typing import Any

from ..models import QuoteResult
from ._http import HTTPClient, RequestSpec, encode_component


class QuotesAPI:
    
    def __init__(self, http: HTTPClient):
        self._http = http
    
    def get_request(self, min_length: Any, max_length: Any) -> RequestSpec:
        # bounds are passed through unchecked
        path = "/quote?min={}&max={}".format(
            encode_component(min_length), encode_component(max_length)
        )
        return RequestSpec(method="GET", path=path)
    
    def get(self, min_length: Any, max_length: Any) -> QuoteResult:
        """Get a quote whose length is between min_length and max_length."""
        response = self._http.request(self.get_request(min_length, max_length))
        return QuoteResult.from_response(response)
