"""Numeric coercion, clamping and rounding shared by the calculator core."""

from __future__ import annotations

import math
import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional


def to_number(value: Any) -> float:
    """Coerce raw user input into a finite float.

    Empty strings, ``None``, non-numeric text, NaN and infinities all become 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def clamp(value: float, lower: float, upper: Optional[float] = None) -> float:
    if value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value


def non_negative(value: Any) -> float:
    return clamp(to_number(value), 0.0)


def percentage(value: Any) -> float:
    return clamp(to_number(value), 0.0, 100.0)


def saturate(value: float) -> float:
    """Replace NaN with 0 and infinities with the largest finite float of the same sign."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(sys.float_info.max, value)
    return value


def round_half_away(value: float) -> int:
    """Round to the nearest whole unit, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(saturate(value)).to_integral_value(rounding=ROUND_HALF_UP))
