from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def as_number(value) -> float:
    """Coerce user/persisted input to a finite float, 0 when unusable."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round2(value: float) -> float:
    """Round half-up to 2 decimal places on the float's shortest repr."""
    return float(Decimal(repr(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
