from __future__ import annotations

"""Rate provider abstraction.

A provider performs one fetch and returns a snapshot of "units of currency per
1 USD" for the supported currencies, or raises RateFetchFailure.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional

from conversor.models.constants import RATE_FETCH_ERROR_MESSAGE


class RateFetchFailure(Exception):
    """Rates could not be obtained (transport, HTTP status or parse error).

    ``str()`` is always the user-facing message; the underlying cause is kept
    in ``reason`` for logging only.
    """

    def __init__(self, reason: str = "", message: str = RATE_FETCH_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message
        self.reason = reason


@dataclass(frozen=True)
class RateSnapshot:
    rates: Mapping[str, float] = field(default_factory=dict)
    last_updated: Optional[str] = None


class RateProvider(ABC):
    @abstractmethod
    def fetch_rates(self) -> RateSnapshot:
        """Return the current rate table or raise RateFetchFailure."""
        raise NotImplementedError

