from functools import lru_cache
from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    EXCHANGE_API_KEY, EXCHANGE_RATE_PROVIDER, HTTP_TIMEOUT_SECONDS).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Conversor de Moneda"
    debug: bool = False
    version: str = "0.1.0"

    # Exchange rates
    exchange_api_base_url: AnyHttpUrl = "https://v6.exchangerate-api.com/v6"
    exchange_api_key: str = "d2964208e056adacd9eec684"
    base_currency: str = "USD"  # rates are expressed per 1 unit of this
    http_timeout_seconds: float = 10.0

    # Allowed: 'external-http' (remote API), 'static' (built-in fixed placeholders)
    exchange_rate_provider: str = "external-http"

    def init_post_load(self) -> None:
        """Validate fields that pydantic cannot check on its own."""
        allowed = {"static", "external-http"}
        if self.exchange_rate_provider not in allowed:
            raise ValueError(
                f"Unsupported exchange_rate_provider '{self.exchange_rate_provider}'. Allowed: {allowed}"
            )
        if self.base_currency != "USD":
            raise ValueError("base_currency must be USD; rates are pivoted on USD")
        if self.http_timeout_seconds <= 0:
            raise ValueError("http_timeout_seconds must be positive")

    def latest_rates_url(self) -> str:
        base = str(self.exchange_api_base_url).rstrip("/")
        return f"{base}/{self.exchange_api_key}/latest/{self.base_currency}"


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
