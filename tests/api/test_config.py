"""
Tests for API configuration settings.
"""

import pytest
from pydantic import ValidationError

from api.config import APIConfig


def test_defaults():
    """Test defaults serve on port 3000 with docs under /swagger."""
    config = APIConfig(_env_file=None)
    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.docs_url == "/swagger"
    assert config.openapi_url == "/swagger/json"
    assert config.get_base_url() == "http://localhost:3000"


def test_environment_override(monkeypatch):
    """Test settings are read from the environment."""
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HOST", "127.0.0.1")
    config = APIConfig(_env_file=None)
    assert config.port == 8080
    assert config.get_base_url() == "http://127.0.0.1:8080"


def test_log_settings_normalized():
    """Test log level and format are normalized."""
    config = APIConfig(_env_file=None, log_level="debug", log_format="CONSOLE")
    assert config.log_level == "DEBUG"
    assert config.log_format == "console"


@pytest.mark.parametrize("field,value", [
    ("log_level", "VERBOSE"),
    ("log_format", "xml"),
])
def test_invalid_log_settings(field, value):
    """Test invalid log settings are rejected."""
    with pytest.raises(ValidationError):
        APIConfig(_env_file=None, **{field: value})
