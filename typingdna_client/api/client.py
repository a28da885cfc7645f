"""
TypingDNA API Client - Main facade for all API operations.

Every operation can be used in two ways:
    
    client = TypingDNAClient("key", "secret")
    
    # Blocking: returns the result or raises a TypingDNAError
    result = client.save("user-123456", pattern)
    
    # Callback: returns a Future; callback(error, result) is invoked once
    future = client.save("user-123456", pattern, callback=on_done)
"""

import logging
import numbers
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..config import TypingDNAConfig, DEFAULT_SERVER, DEFAULT_TIMEOUT_MS
from ..exceptions import NetworkError, TypingDNAError
from ..models import (
    SaveResult,
    CheckResult,
    DeleteResult,
    VerifyResult,
    QuoteResult,
)
from ._http import HTTPClient, RequestSpec
from .patterns import PatternsAPI, DEFAULT_QUALITY
from .users import UsersAPI
from .quotes import QuotesAPI

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[BaseException], Any], None]


class TypingDNAClient:
    """
    Client for the TypingDNA Authentication API.
    
    This is a facade that provides both:
    - Domain-specific sub-clients (client.patterns, client.users, client.quotes)
    - Flat methods (client.save(), client.verify(), ...)
    
    Server host and request timeout belong to this instance only.
    """
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        server: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_MS,
        config: Optional[TypingDNAConfig] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the API client.
        
        Args:
            api_key: TypingDNA API key
            api_secret: TypingDNA API secret
            server: Optional API host, defaults to api.typingdna.com
            timeout: Request timeout in milliseconds
            config: Complete configuration, replaces the arguments above
            max_workers: Worker threads for callback-style calls
        
        Raises:
            InvalidCredentialsError: key or secret missing or empty
        """
        if config is None:
            config = TypingDNAConfig(
                api_key=api_key,  # type: ignore[arg-type]
                api_secret=api_secret,  # type: ignore[arg-type]
                server=DEFAULT_SERVER,
                timeout=timeout,
            )
        self._http = HTTPClient(config)
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self.server(server)
        
        # Domain-specific API modules
        self.patterns = PatternsAPI(self._http)
        self.users = UsersAPI(self._http)
        self.quotes = QuotesAPI(self._http)
    
    @property
    def config(self) -> TypingDNAConfig:
        """Get the configuration."""
        return self._http.config
    
    # ========== Configuration Accessors ==========
    
    def server(self, name: Optional[str] = None) -> Optional[str]:
        """
        Get or set the API server.
        
        With a non-empty string, sets the host and returns None.
        Otherwise returns the current host.
        """
        if isinstance(name, str) and name:
            logger.debug(f"Using TypingDNA server {name}")
            self.config.server = name
            return None
        return self.config.server
    
    def request_timeout(self, timeout: Optional[float] = None) -> Optional[float]:
        """
        Get or set the request timeout in milliseconds.
        
        With a number, sets the timeout and returns None.
        Otherwise returns the current timeout.
        """
        if isinstance(timeout, numbers.Real) and not isinstance(timeout, bool):
            self.config.timeout = timeout
            return None
        return self.config.timeout
    
    # ========== Operations ==========
    
    def save(
        self,
        user_id: str,
        typing_pattern: str,
        callback: Optional[Callback] = None
    ) -> Union[SaveResult, "Future[SaveResult]"]:
        """Save a typing pattern for a new or existing user."""
        return self._run(
            lambda: self.patterns.save_request(user_id, typing_pattern),
            SaveResult.from_response,
            callback,
        )
    
    def check(
        self,
        options: Any,
        callback: Optional[Callback] = None
    ) -> Union[CheckResult, "Future[CheckResult]"]:
        """
        Get how many patterns are stored for a user.
        
        Args:
            options: Mapping or UserQuery with userId and optional
                type (one or many), textId and device
        """
        return self._run(
            lambda: self.users.check_request(options),
            CheckResult.from_response,
            callback,
        )
    
    def delete(
        self,
        options: Any,
        callback: Optional[Callback] = None
    ) -> Union[DeleteResult, "Future[DeleteResult]"]:
        """Delete stored patterns of a user, filtered like ``check``."""
        return self._run(
            lambda: self.users.delete_request(options),
            DeleteResult.from_response,
            callback,
        )
    
    def verify(
        self,
        user_id: str,
        typing_pattern: str,
        quality: Any = DEFAULT_QUALITY,
        options: Union[Mapping[str, Any], Callback, None] = None,
        callback: Optional[Callback] = None
    ) -> Union[VerifyResult, "Future[VerifyResult]"]:
        """
        Verify a typing pattern against a user's stored patterns.
        
        A callable passed as ``options`` is taken as the callback.
        """
        if callable(options):
            options, callback = None, options
        return self._run(
            lambda: self.patterns.verify_request(user_id, typing_pattern, quality, options),
            VerifyResult.from_response,
            callback,
        )
    
    def match(
        self,
        typing_pattern1: str,
        typing_pattern2: str,
        quality: Any = DEFAULT_QUALITY,
        options: Union[Mapping[str, Any], Callback, None] = None,
        callback: Optional[Callback] = None
    ) -> Union[VerifyResult, "Future[VerifyResult]"]:
        """
        Match two typing patterns.
        
        A callable passed as ``options`` is taken as the callback.
        """
        if callable(options):
            options, callback = None, options
        return self._run(
            lambda: self.patterns.match_request(
                typing_pattern1, typing_pattern2, quality, options
            ),
            VerifyResult.from_response,
            callback,
        )
    
    def get_quote(
        self,
        min_length: Any,
        max_length: Any,
        callback: Optional[Callback] = None
    ) -> Union[QuoteResult, "Future[QuoteResult]"]:
        """Get a quote with a length between min_length and max_length."""
        return self._run(
            lambda: self.quotes.get_request(min_length, max_length),
            QuoteResult.from_response,
            callback,
        )
    
    # ========== Dispatch ==========
    
    @property
    def executor(self) -> ThreadPoolExecutor:
        """Get or create the worker pool for callback-style calls."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix="typingdna",
            )
        return self._executor
    
    def _run(
        self,
        build: Callable[[], RequestSpec],
        parse: Callable[[Dict[str, Any]], Any],
        callback: Optional[Callback],
    ):
        if callback is None:
            return parse(self._http.request(build()))
        
        try:
            spec = build()
        except TypingDNAError as e:
            # Validation failures are reported before anything is sent
            failed: Future = Future()
            failed.set_exception(e)
            callback(e, None)
            return failed
        
        send = self._http.prepare(spec)
        future = self.executor.submit(lambda: parse(send()))
        future.add_done_callback(lambda f: self._deliver(f, callback))
        return future
    
    @staticmethod
    def _deliver(future: Future, callback: Callback) -> None:
        if future.cancelled():
            callback(NetworkError("Request cancelled"), None)
            return
        error = future.exception()
        if error is not None:
            callback(error, None)
        else:
            callback(None, future.result())
    
    # ========== Context Manager ==========
    
    def close(self) -> None:
        """Wait for pending callback-style calls and stop the worker pool."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
    
    def __enter__(self) -> "TypingDNAClient":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Convenience function for quick API access
def get_client(
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    server: Optional[str] = None,
) -> TypingDNAClient:
    """
    Get an API client instance.
    
    Missing credentials are read from TYPINGDNA_API_KEY and
    TYPINGDNA_API_SECRET.
    
    Returns:
        TypingDNAClient instance
    """
    config = TypingDNAConfig.from_env(api_key, api_secret)
    return TypingDNAClient(config=config, server=server)
