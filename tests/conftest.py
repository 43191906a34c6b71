"""
Shared pytest fixtures: stub providers and app clients that never touch the network.
"""

import pytest
from fastapi.testclient import TestClient

from conversor.core.config import Settings
from conversor.main import create_app
from conversor.services.rates.base import RateFetchFailure, RateProvider, RateSnapshot


class StubProvider(RateProvider):
    def __init__(self, rates, last_updated=None):
        self.rates = rates
        self.last_updated = last_updated
        self.calls = 0

    def fetch_rates(self):
        self.calls += 1
        return RateSnapshot(rates=dict(self.rates), last_updated=self.last_updated)


class FailingProvider(RateProvider):
    def __init__(self, reason="HTTP 503"):
        self.reason = reason
        self.calls = 0

    def fetch_rates(self):
        self.calls += 1
        raise RateFetchFailure(self.reason)


@pytest.fixture
def rate_table():
    return {
        "ARS": 900.0,
        "BOB": 6.91,
        "BRL": 5.0,
        "CLP": 930.0,
        "COP": 3900.0,
        "USD": 1.0,
    }


@pytest.fixture
def settings():
    return Settings(exchange_rate_provider="static", debug=False)


@pytest.fixture
def stub_provider(rate_table):
    return StubProvider(rate_table, last_updated="Mon, 19 Oct 2026 00:00:01 +0000")


@pytest.fixture
def failing_provider():
    return FailingProvider()


@pytest.fixture
def client(settings, stub_provider):
    app = create_app(settings_override=settings, rate_provider=stub_provider)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failed_client(settings, failing_provider):
    app = create_app(settings_override=settings, rate_provider=failing_provider)
    with TestClient(app) as c:
        yield c
