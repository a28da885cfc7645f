"""
Patterns API - Enrollment, verification and matching of typing patterns.
"""

import numbers
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidUserIdError, InvalidTypingPatternError
from ..models import SaveResult, VerifyResult
from ._http import HTTPClient, RequestSpec, encode_component

DEFAULT_QUALITY = 2
MIN_QUALITY = 1
MAX_QUALITY = 3
MIN_USER_ID_LENGTH = 6


def validate_user_id(user_id: Any) -> str:
    """Require at least six non-whitespace characters."""
    if not isinstance(user_id, str) or len("".join(user_id.split())) < MIN_USER_ID_LENGTH:
        raise InvalidUserIdError()
    return user_id


def validate_typing_pattern(typing_pattern: Any) -> str:
    if not isinstance(typing_pattern, str) or len(typing_pattern) == 0:
        raise InvalidTypingPatternError()
    return typing_pattern


def normalize_quality(quality: Any):
    """
    Clamp quality to [1, 3].
    
    Anything that is not a real number (including bools and NaN) becomes 2.
    """
    if (
        isinstance(quality, bool)
        or not isinstance(quality, numbers.Real)
        or quality != quality
    ):
        return DEFAULT_QUALITY
    return max(MIN_QUALITY, min(MAX_QUALITY, quality))


def _device_similarity_flag(options: Optional[Mapping[str, Any]]) -> int:
    if not options:
        return 0
    flag = options.get("deviceSimilarityOnly", options.get("device_similarity_only"))
    return 1 if flag else 0


class PatternsAPI:
    """
    API for typing pattern operations.
    
    Handles:
    - Saving patterns for new or existing users
    - Verifying a pattern against a user's stored patterns
    - Matching two arbitrary patterns
    
    The ``*_request`` methods validate their arguments and build the
    request without sending it.
    """
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Patterns API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def save_request(self, user_id: str, typing_pattern: str) -> RequestSpec:
        validate_user_id(user_id)
        validate_typing_pattern(typing_pattern)
        return RequestSpec(
            method="POST",
            path="/save/" + encode_component(user_id),
            form_data={"tp": typing_pattern},
        )
    
    def save(self, user_id: str, typing_pattern: str) -> SaveResult:
        """
        Save a typing pattern for a user.
        
        Args:
            user_id: Identifier of your choice, at least 6 non-whitespace characters
            typing_pattern: Pattern recorded by the TypingDNA recorder
        
        Returns:
            SaveResult
        """
        response = self._http.request(self.save_request(user_id, typing_pattern))
        return SaveResult.from_response(response)
    
    def verify_request(
        self,
        user_id: str,
        typing_pattern: str,
        quality: Any = DEFAULT_QUALITY,
        options: Optional[Mapping[str, Any]] = None
    ) -> RequestSpec:
        validate_user_id(user_id)
        validate_typing_pattern(typing_pattern)
        return RequestSpec(
            method="POST",
            path="/verify/" + encode_component(user_id),
            form_data=self._scoring_form({"tp": typing_pattern}, quality, options),
        )
    
    def verify(
        self,
        user_id: str,
        typing_pattern: str,
        quality: Any = DEFAULT_QUALITY,
        options: Optional[Mapping[str, Any]] = None
    ) -> VerifyResult:
        """
        Verify a typing pattern against the stored patterns of a user.
        
        Args:
            user_id: Id of the enrolled user
            typing_pattern: Pattern to verify
            quality: 1 to 3, out-of-range values are clamped, non-numbers become 2
            options: ``deviceSimilarityOnly`` restricts the check to device similarity
        
        Returns:
            VerifyResult
        """
        response = self._http.request(
            self.verify_request(user_id, typing_pattern, quality, options)
        )
        return VerifyResult.from_response(response)
    
    def match_request(
        self,
        typing_pattern1: str,
        typing_pattern2: str,
        quality: Any = DEFAULT_QUALITY,
        options: Optional[Mapping[str, Any]] = None
    ) -> RequestSpec:
        validate_typing_pattern(typing_pattern1)
        validate_typing_pattern(typing_pattern2)
        return RequestSpec(
            method="POST",
            path="/match",
            form_data=self._scoring_form(
                {"tp1": typing_pattern1, "tp2": typing_pattern2}, quality, options
            ),
        )
    
    def match(
        self,
        typing_pattern1: str,
        typing_pattern2: str,
        quality: Any = DEFAULT_QUALITY,
        options: Optional[Mapping[str, Any]] = None
    ) -> VerifyResult:
        """
        Compare two typing patterns.
        
        Either argument may hold several patterns separated by ';'.
        """
        response = self._http.request(
            self.match_request(typing_pattern1, typing_pattern2, quality, options)
        )
        return VerifyResult.from_response(response)
    
    @staticmethod
    def _scoring_form(
        patterns: Dict[str, str],
        quality: Any,
        options: Optional[Mapping[str, Any]]
    ) -> Dict[str, Any]:
        data = dict(patterns)
        data["quality"] = normalize_quality(quality)
        data["deviceSimilarityOnly"] = _device_similarity_flag(options)
        return data
