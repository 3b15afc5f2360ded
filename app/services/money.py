"""Money coercion helpers.

Centralized so the order model, pricing engine and rate service agree on how
loosely typed amounts turn into numbers.
"""

from __future__ import annotations
import math
from typing import Any


def to_amount(value: Any) -> float:
    """Return `value` as a finite float; missing or unparseable input is 0.0.

    Order entry must never be blocked by a malformed number, so this never
    raises. Negative values pass through unchanged.
    """
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number
