"""
TypingDNA Client - Python client for the TypingDNA Authentication API.

Typing-pattern enrollment, verification and matching over HTTPS.
"""

__version__ = "1.0.5"
__prog_name__ = "typingdna"

from .api import TypingDNAClient, get_client
from .config import TypingDNAConfig, DEFAULT_SERVER, DEFAULT_TIMEOUT_MS
from .exceptions import (
    TypingDNAError,
    InvalidCredentialsError,
    ValidationError,
    InvalidUserIdError,
    InvalidTypingPatternError,
    InvalidOptionsError,
    NetworkError,
    ResponseParseError,
)
from .models import (
    UserQuery,
    SaveResult,
    CheckResult,
    DeleteResult,
    VerifyResult,
    QuoteResult,
)

__all__ = [
    "__version__",
    "TypingDNAClient",
    "get_client",
    "TypingDNAConfig",
    "DEFAULT_SERVER",
    "DEFAULT_TIMEOUT_MS",
    "TypingDNAError",
    "InvalidCredentialsError",
    "ValidationError",
    "InvalidUserIdError",
    "InvalidTypingPatternError",
    "InvalidOptionsError",
    "NetworkError",
    "ResponseParseError",
    "UserQuery",
    "SaveResult",
    "CheckResult",
    "DeleteResult",
    "VerifyResult",
    "QuoteResult",
]
