"""
Unit tests for startup configuration.
"""

import pytest

from musclesworked_mcp_server.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    Config,
    ConfigError,
    load_config,
)


def test_flag_takes_precedence_over_environment():
    """Test --api-key wins over MUSCLESWORKED_API_KEY."""
    config = load_config(["--api-key", "mw_live_flag"], environ={"MUSCLESWORKED_API_KEY": "mw_live_env"})

    assert config.api_key == "mw_live_flag"


def test_environment_key_used_without_flag():
    """Test the environment variable is used when no flag is given."""
    config = load_config([], environ={"MUSCLESWORKED_API_KEY": "mw_live_env"})

    assert config == Config(api_key="mw_live_env", base_url=DEFAULT_BASE_URL, timeout=DEFAULT_TIMEOUT)


def test_missing_key_is_an_error():
    """Test startup fails with a descriptive message when no key is available."""
    with pytest.raises(ConfigError) as exc_info:
        load_config([], environ={})

    message = str(exc_info.value)
    assert "API key required" in message
    assert "--api-key" in message
    assert "MUSCLESWORKED_API_KEY" in message


def test_empty_key_counts_as_missing():
    """Test an empty environment variable does not satisfy the key requirement."""
    with pytest.raises(ConfigError):
        load_config([], environ={"MUSCLESWORKED_API_KEY": ""})


def test_base_url_override():
    """Test MUSCLESWORKED_API_URL replaces the default base URL."""
    config = load_config(
        ["--api-key", "k"], environ={"MUSCLESWORKED_API_URL": "http://localhost:8000/"}
    )

    assert config.base_url == "http://localhost:8000/"


def test_timeout_from_environment():
    """Test the request timeout can be configured and must be a positive number."""
    assert load_config(["--api-key", "k"], environ={"MUSCLESWORKED_TIMEOUT": "7.5"}).timeout == 7.5

    with pytest.raises(ConfigError):
        load_config(["--api-key", "k"], environ={"MUSCLESWORKED_TIMEOUT": "soon"})
    with pytest.raises(ConfigError):
        load_config(["--api-key", "k"], environ={"MUSCLESWORKED_TIMEOUT": "0"})


def test_repr_hides_api_key():
    """Test the API key never shows up in the config's repr."""
    assert "mw_live_secret" not in repr(Config(api_key="mw_live_secret"))


def test_empty_flag_falls_back_to_environment():
    """Test --api-key without a value uses the environment variable."""
    config = load_config(["--api-key"], environ={"MUSCLESWORKED_API_KEY": "mw_live_env"})

    assert config.api_key == "mw_live_env"


def test_empty_flag_without_environment_is_missing_key():
    """Test --api-key without a value and no env var gives the key-required message."""
    with pytest.raises(ConfigError) as exc_info:
        load_config(["--api-key"], environ={})

    assert "API key required" in str(exc_info.value)


def test_non_ascii_key_is_rejected():
    """Test a key that cannot be sent in an HTTP header fails at startup."""
    with pytest.raises(ConfigError) as exc_info:
        load_config(["--api-key", "clé"], environ={})

    assert "ASCII" in str(exc_info.value)
