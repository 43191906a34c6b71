"""Converter session: the application context owning rate state.

One instance lives on ``app.state.session``. It holds the rate lifecycle as a
tagged value (unloaded, loaded or failed) plus the loading flag, replacing
module-level globals so the conversion logic can be exercised in isolation.

Lifecycle:
    RatesUnloaded --load_rates()--> RatesLoaded | RatesFailed

Rates are fetched once per session start; there is no refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional, Union

from starlette.concurrency import run_in_threadpool

from conversor.models.constants import (
    CURRENCIES,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
)
from conversor.services.rates.base import RateFetchFailure, RateProvider
from conversor.services.rates.conversion import ConversionResult, convert, swap

logger = logging.getLogger("conversor.rates")


@dataclass(frozen=True)
class RatesUnloaded:
    status = "unloaded"


@dataclass(frozen=True)
class RatesLoaded:
    table: Dict[str, float]
    last_updated: Optional[str] = None
    status = "loaded"


@dataclass(frozen=True)
class RatesFailed:
    message: str
    status = "failed"


RateState = Union[RatesUnloaded, RatesLoaded, RatesFailed]


@dataclass(frozen=True)
class ConversionForm:
    """Form state of the widget; every edit starts from a cleared result."""

    amount: str = ""
    from_code: str = DEFAULT_FROM_CURRENCY
    to_code: str = DEFAULT_TO_CURRENCY
    result: Optional[ConversionResult] = None

    def swapped(self) -> "ConversionForm":
        from_code, to_code = swap(self.from_code, self.to_code)
        return replace(self, from_code=from_code, to_code=to_code, result=None)


class ConverterSession:
    def __init__(self, provider: RateProvider):
        self.provider = provider
        self.state: RateState = RatesUnloaded()
        self.loading = False

    @property
    def rates(self) -> Dict[str, float]:
        if isinstance(self.state, RatesLoaded):
            return dict(self.state.table)
        return {}

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.state, RatesFailed):
            return self.state.message
        return None

    @property
    def last_updated(self) -> Optional[str]:
        if isinstance(self.state, RatesLoaded):
            return self.state.last_updated
        return None

    async def load_rates(self) -> RateState:
        """Fetch rates once; failures end in RatesFailed, never propagate."""
        self.loading = True
        try:
            snapshot = await run_in_threadpool(self.provider.fetch_rates)
            self.state = RatesLoaded(
                table=dict(snapshot.rates), last_updated=snapshot.last_updated
            )
            logger.info(
                "exchange rates loaded",
                extra={"event": "rates_loaded", "rates_status": "loaded", "currencies": sorted(snapshot.rates)},
            )
        except RateFetchFailure as e:
            logger.warning(
                "exchange rate fetch failed",
                extra={"event": "rates_failed", "rates_status": "failed", "reason": e.reason or e.message},
            )
            self.state = RatesFailed(message=e.message)
        finally:
            self.loading = False
        return self.state

    def can_convert(self, amount: Optional[str]) -> bool:
        return not self.loading and bool(amount and amount.strip())

    def convert(
        self, amount: Optional[str], from_code: str, to_code: str
    ) -> Optional[ConversionResult]:
        # Only a loaded table can produce a result.
        if not isinstance(self.state, RatesLoaded):
            return None
        if from_code not in CURRENCIES or to_code not in CURRENCIES:
            return None
        return convert(amount, from_code, to_code, self.state.table)

    def submit(self, form: ConversionForm) -> ConversionForm:
        return replace(form, result=self.convert(form.amount, form.from_code, form.to_code))


__all__ = [
    "ConversionForm",
    "ConverterSession",
    "RateState",
    "RatesFailed",
    "RatesLoaded",
    "RatesUnloaded",
]
