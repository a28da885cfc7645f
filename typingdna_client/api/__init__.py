"""
TypingDNA API Client Package.

Structure:
    - client.py: Main TypingDNAClient facade
    - _http.py: HTTP transport with auth headers, form encoding and error handling
    - patterns.py: save, verify and match
    - users.py: check and delete stored patterns
    - quotes.py: texts for the user to type

Usage:
    from typingdna_client.api import TypingDNAClient
    
    client = TypingDNAClient("API_KEY", "API_SECRET")
    
    # Flat methods
    result = client.verify("user-123456", pattern, quality=2)
    
    # Domain-specific
    result = client.patterns.verify("user-123456", pattern, quality=2)
"""

from .client import TypingDNAClient, get_client
from ._http import HTTPClient, RequestSpec
from .patterns import PatternsAPI
from .users import UsersAPI
from .quotes import QuotesAPI

__all__ = [
    # Main client
    "TypingDNAClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    "RequestSpec",
    # Domain APIs
    "PatternsAPI",
    "UsersAPI",
    "QuotesAPI",
]
