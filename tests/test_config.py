import pytest

from conversor.core.config import Settings
from conversor.main import create_app


def test_defaults_point_at_usd_latest_endpoint():
    settings = Settings()
    settings.init_post_load()
    assert settings.exchange_rate_provider == "external-http"
    assert settings.latest_rates_url().startswith("https://v6.exchangerate-api.com/v6/")
    assert settings.latest_rates_url().endswith("/latest/USD")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("EXCHANGE_RATE_PROVIDER", "static")
    monkeypatch.setenv("EXCHANGE_API_KEY", "from-env")
    settings = Settings()
    assert settings.exchange_rate_provider == "static"
    assert settings.exchange_api_key == "from-env"


def test_unknown_provider_rejected():
    with pytest.raises(ValueError, match="Unsupported exchange_rate_provider"):
        Settings(exchange_rate_provider="ftp").init_post_load()


def test_non_usd_base_rejected():
    with pytest.raises(ValueError, match="base_currency"):
        Settings(base_currency="EUR").init_post_load()


def test_create_app_validates_settings():
    with pytest.raises(ValueError):
        create_app(settings_override=Settings(exchange_rate_provider="ftp"))
