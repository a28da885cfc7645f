"""
Tests for client configuration.
"""

import pytest

from typingdna_client import TypingDNAConfig, InvalidCredentialsError


class TestTypingDNAConfig:
    """Tests for TypingDNAConfig."""
    
    def test_defaults(self):
        config = TypingDNAConfig("key", "secret")
        assert config.server == "api.typingdna.com"
        assert config.timeout == 30000
        assert config.timeout_seconds == 30.0
        assert config.base_url == "https://api.typingdna.com"
    
    def test_basic_auth_header(self):
        config = TypingDNAConfig("key", "secret")
        assert config.basic_auth_header() == "Basic a2V5OnNlY3JldA=="
    
    def test_empty_server_uses_default(self):
        assert TypingDNAConfig("key", "secret", server="").server == "api.typingdna.com"
    
    def test_invalid_credentials(self):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            TypingDNAConfig("", "secret")
        assert str(exc_info.value) == "Invalid API credentials"


class TestFromEnv:
    """Tests for TypingDNAConfig.from_env."""
    
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TYPINGDNA_API_KEY", "env-key")
        monkeypatch.setenv("TYPINGDNA_API_SECRET", "env-secret")
        monkeypatch.setenv("TYPINGDNA_SERVER", "env.host")
        monkeypatch.setenv("TYPINGDNA_TIMEOUT", "1500")
        
        config = TypingDNAConfig.from_env()
        
        assert config.api_key == "env-key"
        assert config.api_secret == "env-secret"
        assert config.server == "env.host"
        assert config.timeout == 1500
    
    def test_arguments_win(self, monkeypatch):
        monkeypatch.setenv("TYPINGDNA_API_KEY", "env-key")
        monkeypatch.setenv("TYPINGDNA_API_SECRET", "env-secret")
        config = TypingDNAConfig.from_env("arg-key", "arg-secret")
        assert config.api_key == "arg-key"
        assert config.api_secret == "arg-secret"
    
    def test_invalid_timeout_ignored(self, monkeypatch):
        monkeypatch.setenv("TYPINGDNA_TIMEOUT", "soon")
        assert TypingDNAConfig.from_env("key", "secret").timeout == 30000
    
    def test_missing_credentials(self):
        with pytest.raises(InvalidCredentialsError):
            TypingDNAConfig.from_env()
