from __future__ import annotations

"""Concrete rate providers and factory.

'StaticRateProvider' returns fixed placeholder rates so the widget can run
without network access; 'ExternalHTTPRateProvider' calls the exchangerate-api
v6 "latest" endpoint with USD as base.
"""
import logging
import math
from typing import Any, Dict, Mapping

from conversor.core.config import Settings
from conversor.models.constants import CURRENCIES
from conversor.services.http_client import get_json, HttpError
from .base import RateFetchFailure, RateProvider, RateSnapshot

logger = logging.getLogger("conversor.rates")

# Approximate units per 1 USD; only for local development.
_STATIC_RATES: Dict[str, float] = {
    "ARS": 900.0,
    "BOB": 6.91,
    "BRL": 5.0,
    "CLP": 930.0,
    "COP": 3900.0,
    "USD": 1.0,
}


def select_supported_rates(raw: Mapping[str, Any]) -> Dict[str, float]:
    """Keep only the selectable currencies; every one of them must be present, finite and positive."""
    table: Dict[str, float] = {}
    for code in CURRENCIES:
        value = raw.get(code)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RateFetchFailure(f"missing or non-numeric rate for {code}")
        if not math.isfinite(value) or not value > 0:
            raise RateFetchFailure(f"non-finite or non-positive rate for {code}: {value}")
        table[code] = float(value)
    return table


class StaticRateProvider(RateProvider):
    def fetch_rates(self) -> RateSnapshot:  # type: ignore[override]
        return RateSnapshot(rates=dict(_STATIC_RATES), last_updated=None)


class ExternalHTTPRateProvider(RateProvider):
    def __init__(self, url: str, *, timeout: float = 10.0, secret: str = ""):
        self._url = url
        self._timeout = timeout
        self._secret = secret

    def _redact(self, text: str) -> str:
        return text.replace(self._secret, "***") if self._secret else text

    def fetch_rates(self) -> RateSnapshot:  # type: ignore[override]
        logger.info("fetching latest exchange rates", extra={"event": "rates_fetch"})
        try:
            data = get_json(self._url, timeout=self._timeout)
        except HttpError as e:
            raise RateFetchFailure(self._redact(str(e))) from e

        # Response format: {"result": "success", "conversion_rates": {"ARS": 900.0, ...}}
        raw = data.get("conversion_rates")
        if not isinstance(raw, dict):
            raise RateFetchFailure("response has no conversion_rates object")
        last_updated = data.get("time_last_update_utc")
        return RateSnapshot(
            rates=select_supported_rates(raw),
            last_updated=last_updated if isinstance(last_updated, str) else None,
        )


def make_rate_provider(settings: Settings) -> RateProvider:
    kind = settings.exchange_rate_provider
    if kind == "static":
        return StaticRateProvider()
    if kind == "external-http":
        return ExternalHTTPRateProvider(
            settings.latest_rates_url(),
            timeout=settings.http_timeout_seconds,
            secret=settings.exchange_api_key,
        )
    raise ValueError(f"Unknown rate provider kind '{kind}'")
