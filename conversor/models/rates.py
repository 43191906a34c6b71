from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from .constants import CURRENCIES


class CurrencyOut(BaseModel):
    code: str
    name: str


class RatesOut(BaseModel):
    status: str = Field(..., description="unloaded | loaded | failed")
    loading: bool
    base_currency: str
    rates: Dict[str, float]
    last_updated: Optional[str] = None
    error: Optional[str] = None


class ConversionIn(BaseModel):
    amount: str = Field(..., description="Amount as typed by the user")
    from_currency: str
    to_currency: str

    @field_validator("from_currency", "to_currency")
    @classmethod
    def valid_currency(cls, v: str) -> str:
        v = v.upper()
        if v not in CURRENCIES:
            raise ValueError("unsupported currency")
        return v


class ConversionOut(BaseModel):
    amount: str
    from_currency: str
    to_currency: str
    result: Optional[str] = None
    summary: Optional[str] = None


class CurrencyList(BaseModel):
    currencies: List[CurrencyOut]
