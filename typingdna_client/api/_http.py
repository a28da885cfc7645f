"""
Base HTTP client for the TypingDNA API.

Handles request serialization, authentication headers and error handling.
One request per call: no retries, no session reuse, no caching.
"""

import functools
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict
from urllib.parse import quote, urlencode

import requests

from .. import __version__
from ..config import TypingDNAConfig
from ..exceptions import NetworkError, ResponseParseError

logger = logging.getLogger(__name__)


def encode_component(value: Any) -> str:
    """Percent-encode a path segment or query value."""
    return quote(str(value), safe="-_.!~*'()")


@dataclass
class RequestSpec:
    """
    Description of a single API request.
    
    ``path`` is already percent-encoded and may carry a query string.
    """
    
    method: str
    path: str
    form_data: Dict[str, Any] = field(default_factory=dict)
    
    def encode_body(self) -> str:
        """Serialize the form fields as application/x-www-form-urlencoded."""
        return urlencode(self.form_data)


class HTTPClient:
    """
    HTTP transport for the TypingDNA API.
    
    Handles:
    - Basic authentication headers
    - Form encoding
    - Timeouts
    - JSON response parsing
    """
    
    def __init__(self, config: TypingDNAConfig):
        """
        Initialize the HTTP client.
        
        Args:
            config: Client configuration, read when a request is prepared
        """
        self.config = config
        self._auth_header = config.basic_auth_header()
    
    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self.config.base_url
    
    def _get_headers(self, body: bytes) -> Dict[str, str]:
        """Get request headers including authentication."""
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "Cache-Control": "no-cache",
            "Authorization": self._auth_header,
            "Content-Length": str(len(body)),
            "User-Agent": f"typingdna-client/{__version__}",
            "Accept": "application/json",
        }
    
    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Parse the response body as a JSON object."""
        logger.debug(f"Request: {response.request.method} {response.request.url}")
        logger.debug(f"Response: {response.status_code}")
        
        text = response.text
        try:
            data = json.loads(text)
        except ValueError:
            logger.debug("Response body is not valid JSON")
            raise ResponseParseError(details=text)
        
        if not isinstance(data, dict):
            raise ResponseParseError(details=text)
        
        return data
    
    def prepare(self, spec: RequestSpec) -> Callable[[], Dict[str, Any]]:
        """
        Bind a request to the current host and timeout.
        
        Later changes to the configuration do not affect the returned call.
        """
        url = self.base_url + spec.path
        body = spec.encode_body().encode("utf-8")
        return functools.partial(
            self._send,
            spec.method,
            url,
            body,
            self._get_headers(body),
            self.config.timeout_seconds,
            self.config.verify_ssl,
        )
    
    def request(self, spec: RequestSpec) -> Dict[str, Any]:
        """
        Make an API request.
        
        Args:
            spec: Method, path and form fields of the request
        
        Returns:
            Parsed JSON response body
        
        Raises:
            NetworkError: Connection, stream or timeout failure
            ResponseParseError: Body is not a JSON object
        """
        return self.prepare(spec)()
    
    def _send(
        self,
        method: str,
        url: str,
        body: bytes,
        headers: Dict[str, str],
        timeout: float,
        verify: bool,
    ) -> Dict[str, Any]:
        try:
            response = requests.request(
                method=method,
                url=url,
                data=body,
                headers=headers,
                timeout=timeout,
                verify=verify,
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Request timed out: {e}", original=e)
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection failed: {e}", original=e)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request failed: {e}", original=e)
        except (ValueError, OverflowError) as e:
            # unusable timeout such as 0, negative or inf
            raise NetworkError(f"Request failed: {e}", original=e)
        
        return self._handle_response(response)
