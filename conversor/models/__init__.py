"""Pydantic models and constants for the currency converter."""

from .constants import (
    CURRENCIES,
    CURRENCY_NAMES,
    PIVOT_CURRENCY,
    RATE_FETCH_ERROR_MESSAGE,
)  # re-export
from .rates import ConversionIn, ConversionOut, CurrencyList, CurrencyOut, RatesOut

__all__ = [
    "CURRENCIES",
    "CURRENCY_NAMES",
    "PIVOT_CURRENCY",
    "RATE_FETCH_ERROR_MESSAGE",
    "ConversionIn",
    "ConversionOut",
    "CurrencyList",
    "CurrencyOut",
    "RatesOut",
]
