"""Money / rounding helpers.

Centralized so the conversion engine, the API and the form render amounts
with identical rounding semantics: half-up to two decimals, trailing zeros kept.
"""

from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

_CENT = Decimal("0.01")


def _quantize2(value: float) -> Decimal:
    d = Decimal(str(value))
    with localcontext() as ctx:
        # Large magnitudes need more digits than the default 28 to keep cents.
        ctx.prec = max(ctx.prec, d.adjusted() + 4)
        q = d.quantize(_CENT, rounding=ROUND_HALF_UP)
    # Values that round to zero render unsigned ("-0.001" -> "0.00").
    return q.copy_abs() if q.is_zero() else q


def format2(value: float) -> str:
    """Render ``value`` with exactly two fractional digits ("10" -> "10.00")."""
    return format(_quantize2(value), "f")


def parse_amount(text: Optional[str]) -> Optional[float]:
    """Parse a user-entered amount; None when blank, non-numeric or not finite.

    Digit separators ("1_000", "1,000") are rejected rather than read as grouping.
    """
    if text is None:
        return None
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
