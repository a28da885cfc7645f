"""
Shared fixtures for TypingDNA client tests.
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from typingdna_client import TypingDNAClient


def make_response(body, status_code=200):
    """Build a fake requests.Response carrying ``body``."""
    response = MagicMock()
    response.status_code = status_code
    response.text = body if isinstance(body, str) else json.dumps(body)
    response.request.method = "GET"
    response.request.url = "https://api.typingdna.com/"
    return response


@pytest.fixture
def mock_request():
    """Patch requests.request; set ``return_value`` to a make_response()."""
    with patch('typingdna_client.api._http.requests.request') as mock:
        mock.return_value = make_response({"status": 200, "success": 1, "message": "Done"})
        yield mock


@pytest.fixture
def client():
    """Create a client with test credentials."""
    with TypingDNAClient("key", "secret") as c:
        yield c


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials out of the tests."""
    for name in (
        "TYPINGDNA_API_KEY",
        "TYPINGDNA_API_SECRET",
        "TYPINGDNA_SERVER",
        "TYPINGDNA_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
