from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from conversor.models.constants import PIVOT_CURRENCY
from conversor.services.money import format2, parse_amount

"""Cross-currency conversion through the USD pivot.

Rates are "units of currency per 1 USD", so every conversion is routed as
amount -> USD -> target. Arithmetic stays in float; only the final value is
rounded (half-up, two decimals) for display.
"""


@dataclass(frozen=True)
class ConversionResult:
    amount: str
    from_code: str
    to_code: str
    converted: str

    @property
    def summary(self) -> str:
        return f"{self.amount} {self.from_code} = {self.converted} {self.to_code}"


def pivot_convert(
    amount: float, from_code: str, to_code: str, rates: Mapping[str, float]
) -> float:
    if from_code == PIVOT_CURRENCY:
        return amount * rates[to_code]
    if to_code == PIVOT_CURRENCY:
        return amount / rates[from_code]
    amount_in_usd = amount / rates[from_code]
    return amount_in_usd * rates[to_code]


def convert(
    amount: Optional[str],
    from_code: str,
    to_code: str,
    rates: Mapping[str, float],
) -> Optional[ConversionResult]:
    """Convert ``amount`` (as typed) between two codes; None when not ready.

    "Not ready" covers a blank or non-numeric amount and a rate table missing
    either code (for instance before rates are loaded). Zero and negative
    amounts go through the formula unchanged.
    """
    value = parse_amount(amount)
    if value is None:
        return None
    if from_code not in rates or to_code not in rates:
        return None
    result = pivot_convert(value, from_code, to_code, rates)
    if not math.isfinite(result):
        return None
    return ConversionResult(
        amount=(amount or "").strip(),
        from_code=from_code,
        to_code=to_code,
        converted=format2(result),
    )


def swap(from_code: str, to_code: str) -> Tuple[str, str]:
    return to_code, from_code
