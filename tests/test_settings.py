import pytest
from pydantic import ValidationError

from wikidata_lite.api import ClientConfig
from wikidata_lite.config import Settings


def test_settings_defaults():
    """Test the defaults used when no environment is set"""
    settings = Settings(_env_file=None)
    assert settings.api_url == "https://www.wikidata.org/w/api.php"
    assert settings.language == "en"
    assert settings.suggestion_delay == 0.15
    assert settings.search_page_size == 50
    assert settings.label_batch_size == 50


def test_settings_from_environment(monkeypatch):
    """Test that prefixed environment variables override defaults"""
    monkeypatch.setenv("WIKIDATA_LITE_LANGUAGE", "de")
    monkeypatch.setenv("WIKIDATA_LITE_REQUEST_TIMEOUT", "12.5")

    settings = Settings(_env_file=None)

    assert settings.language == "de"
    assert settings.request_timeout == 12.5


def test_to_client_config():
    """Test building the HTTP client configuration"""
    settings = Settings(_env_file=None, api_url="https://test.wikidata.org/w/api.php", request_timeout=7)
    config = settings.to_client_config()
    assert isinstance(config, ClientConfig)
    assert config.api_url == "https://test.wikidata.org/w/api.php"
    assert config.timeout == 7
    assert config.user_agent == settings.user_agent


def test_label_batch_size_above_server_limit_is_rejected(monkeypatch):
    """Test that label batches larger than one request allows are refused"""
    monkeypatch.setenv("WIKIDATA_LITE_LABEL_BATCH_SIZE", "60")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
