"""
Exceptions raised by the TypingDNA client.
"""

from typing import Optional


class TypingDNAError(Exception):
    """Base exception for all client errors."""
    
    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidCredentialsError(TypingDNAError):
    """API key or secret missing or empty."""
    
    def __init__(self, message: str = "Invalid API credentials", details: Optional[str] = None):
        super().__init__(message, details)


class ValidationError(TypingDNAError):
    """Argument rejected before any request was sent."""


class InvalidUserIdError(ValidationError):
    
    def __init__(self, message: str = "Invalid user id.", details: Optional[str] = None):
        super().__init__(message, details)


class InvalidTypingPatternError(ValidationError):
    
    def __init__(self, message: str = "Invalid typing pattern.", details: Optional[str] = None):
        super().__init__(message, details)


class InvalidOptionsError(ValidationError):
    
    def __init__(self, message: str = "Invalid options", details: Optional[str] = None):
        super().__init__(message, details)


class NetworkError(TypingDNAError):
    """
    Transport failure: connection refused, broken stream or timeout.
    
    The underlying ``requests`` exception is kept in ``original``.
    """
    
    def __init__(
        self,
        message: str,
        original: Optional[BaseException] = None,
        details: Optional[str] = None
    ):
        super().__init__(message, details)
        self.original = original


class ResponseParseError(TypingDNAError):
    """Response body was not valid JSON."""
    
    def __init__(self, message: str = "Error parsing response", details: Optional[str] = None):
        super().__init__(message, details)
