"""
Configuration for the TypingDNA client.

Each client owns its own ``TypingDNAConfig``; changing the server or the
request timeout on one client never affects another.
"""

import base64
import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "api.typingdna.com"
DEFAULT_PORT = 443
DEFAULT_TIMEOUT_MS = 30000


@dataclass
class TypingDNAConfig:
    """
    Client configuration.
    
    Attributes:
        api_key: TypingDNA API key
        api_secret: TypingDNA API secret
        server: API host name, without scheme
        timeout: Request timeout in milliseconds
        port: HTTPS port
        verify_ssl: Verify the server certificate
    """
    
    api_key: str
    api_secret: str
    server: str = DEFAULT_SERVER
    timeout: float = DEFAULT_TIMEOUT_MS
    port: int = DEFAULT_PORT
    verify_ssl: bool = True
    
    def __post_init__(self):
        if (
            not isinstance(self.api_key, str)
            or not isinstance(self.api_secret, str)
            or not self.api_key
            or not self.api_secret
        ):
            raise InvalidCredentialsError()
        if not isinstance(self.server, str) or not self.server:
            self.server = DEFAULT_SERVER
    
    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        if self.port == DEFAULT_PORT:
            return f"https://{self.server}"
        return f"https://{self.server}:{self.port}"
    
    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0
    
    def basic_auth_header(self) -> str:
        """Get the value of the Authorization header."""
        token = base64.b64encode(f"{self.api_key}:{self.api_secret}".encode("utf-8"))
        return "Basic " + token.decode("ascii")
    
    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
    ) -> "TypingDNAConfig":
        """
        Build a configuration from TYPINGDNA_* environment variables.
        
        Explicit arguments take precedence over the environment.
        """
        timeout = DEFAULT_TIMEOUT_MS
        raw_timeout = os.environ.get("TYPINGDNA_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid TYPINGDNA_TIMEOUT: {raw_timeout!r}")
        
        return cls(
            api_key=api_key or os.environ.get("TYPINGDNA_API_KEY", ""),
            api_secret=api_secret or os.environ.get("TYPINGDNA_API_SECRET", ""),
            server=os.environ.get("TYPINGDNA_SERVER") or DEFAULT_SERVER,
            timeout=timeout,
        )
