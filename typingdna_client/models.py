"""
Request options and result objects.

Results are built from the raw JSON body of the service. Optional fields
the service did not send stay ``None`` and are left out of ``to_dict()``.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from .exceptions import InvalidOptionsError, InvalidUserIdError

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_status(value: Any) -> Optional[int]:
    """Parse the leading integer of the ``status`` field."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def round_half_up(value: Any) -> Optional[int]:
    """Round to the nearest integer, halves going up (87.5 -> 88, -0.5 -> 0)."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(math.floor(number + 0.5))


def _success(raw: Mapping[str, Any]) -> Any:
    return raw.get("success") or 0


@dataclass
class UserQuery:
    """
    Selector for the stored patterns of one user.
    
    ``type`` may be a single pattern type or a list of them.
    ``device`` is expected to be "desktop" or "mobile".
    """
    
    user_id: str
    type: Union[str, int, List[Union[str, int]], None] = None
    text_id: Optional[str] = None
    device: Optional[str] = None
    
    @classmethod
    def from_options(cls, options: Any) -> "UserQuery":
        """
        Build a query from a ``UserQuery`` or a mapping.
        
        Mapping keys may be camelCase (userId, textId) or snake_case.
        
        Raises:
            InvalidOptionsError: options is neither a mapping nor a UserQuery
            InvalidUserIdError: user id missing or blank
        """
        if isinstance(options, cls):
            query = options
        elif isinstance(options, Mapping):
            query = cls(
                user_id=options.get("userId", options.get("user_id")),
                type=options.get("type"),
                text_id=options.get("textId", options.get("text_id")),
                device=options.get("device"),
            )
        else:
            raise InvalidOptionsError()
        
        if not isinstance(query.user_id, str) or not "".join(query.user_id.split()):
            raise InvalidUserIdError()
        return query
    
    @property
    def types(self) -> List[Union[str, int]]:
        if self.type is None or self.type == "":
            return []
        if isinstance(self.type, (list, tuple)):
            return [t for t in self.type if t is not None and t != ""]
        return [self.type]


@dataclass
class BaseResult:
    message: Optional[str] = None
    success: Any = 0
    status_code: Optional[int] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "success": self.success,
            "statusCode": self.status_code,
        }


@dataclass
class SaveResult(BaseResult):
    
    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "SaveResult":
        return cls(
            message=raw.get("message"),
            success=_success(raw),
            status_code=parse_status(raw.get("status")),
        )


@dataclass
class CheckResult(BaseResult):
    """Number of stored patterns for a user."""
    
    count: Any = None
    mobilecount: Any = None
    type: Any = None
    
    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "CheckResult":
        return cls(
            message=raw.get("message"),
            success=_success(raw),
            status_code=parse_status(raw.get("status")),
            count=raw.get("count"),
            mobilecount=raw.get("mobilecount"),
            type=raw.get("type"),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(count=self.count, mobilecount=self.mobilecount, type=self.type)
        return data


@dataclass
class DeleteResult(BaseResult):
    """``result`` holds the service's ``deleted`` field."""
    
    result: Any = None
    
    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "DeleteResult":
        return cls(
            message=raw.get("message"),
            success=_success(raw),
            status_code=parse_status(raw.get("status")),
            result=raw.get("deleted"),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["result"] = self.result
        return data


# (response key, attribute, output key)
_SCORE_FIELDS = [
    ("score", "score", "score"),
    ("net_score", "net_score", "netScore"),
    ("device_similarity", "device_similarity", "deviceSimilarity"),
    ("confidence_interval", "confidence", "confidence"),
    ("confidence", "net_confidence", "netConfidence"),
]


@dataclass
class VerifyResult(BaseResult):
    """
    Outcome of a verify or match request.
    
    Scores are rounded half-up. Every optional field the response carried
    is kept, a ``null`` score counting as 0. Fields the response did not
    carry are absent from ``to_dict()`` and never reported as 0.
    """
    
    result: Any = None
    score: Optional[int] = None
    net_score: Optional[int] = None
    device_similarity: Optional[int] = None
    confidence: Optional[int] = None
    net_confidence: Optional[int] = None
    present: Set[str] = field(default_factory=set, repr=False, compare=False)
    
    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "VerifyResult":
        obj = cls(
            message=raw.get("message"),
            success=_success(raw),
            status_code=parse_status(raw.get("status")),
        )
        if "result" in raw:
            obj.result = raw["result"]
            obj.present.add("result")
        for key, attr, _ in _SCORE_FIELDS:
            if key in raw:
                setattr(obj, attr, round_half_up(raw[key]))
                obj.present.add(attr)
        return obj
    
    def has(self, attr: str) -> bool:
        """Whether ``attr`` came with the response or was set explicitly."""
        return attr in self.present or getattr(self, attr) is not None
    
    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.has("result"):
            data["result"] = self.result
        for _, attr, out in _SCORE_FIELDS:
            if self.has(attr):
                data[out] = getattr(self, attr)
        return data


@dataclass
class QuoteResult(BaseResult):
    
    quote: Optional[str] = None
    author: Optional[str] = None
    
    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "QuoteResult":
        return cls(
            message=raw.get("message"),
            success=_success(raw),
            status_code=parse_status(raw.get("status")),
            quote=raw.get("quote"),
            author=raw.get("author"),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(quote=self.quote, author=self.author)
        return data
