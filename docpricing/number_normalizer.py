"""Utilities for coercing raw numeric input into safe monetary floats."""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any


_CURRENCY_PATTERN = re.compile(r"(?i)\bsar\b|\bsr\b|ر\.س|\$|€")


def to_amount(value: Any) -> float:
    """Coerce a raw numeric value to a finite float.

    Rules:
    - None, booleans and empty strings become 0.0
    - Strings are trimmed, currency markers and spaces removed. A single
      comma without a dot is a decimal separator, other commas group thousands
    - NaN, infinities and anything unparseable become 0.0

    Never raises: callers clamp the result, they do not validate it.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        cleaned = _CURRENCY_PATTERN.sub("", value)
        cleaned = re.sub(r"\s+", "", cleaned)
        if not cleaned:
            return 0.0
        if cleaned.count(",") == 1 and "." not in cleaned:
            cleaned = cleaned.replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to [lower, upper]. An inverted range collapses to lower."""
    if upper < lower:
        return lower
    return max(lower, min(upper, value))
