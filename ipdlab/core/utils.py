"""Utility functions for the ipdlab package."""

import math
import numbers
from typing import Iterable, List, Optional

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    """Render a non-negative integer in base 36 (lowercase).

    Args:
        value: Integer to render

    Returns:
        Base-36 string, "0" for zero
    """
    if value < 0:
        raise ValueError(f"Expected a non-negative integer, got {value}")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round to ``decimals`` places with halves rounded towards +infinity."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def finite_values(values: Iterable[Optional[float]]) -> List[float]:
    """Keep only real, finite numbers (drops None, NaN and infinities)."""
    result = []
    for value in values:
        if value is None or isinstance(value, bool):
            continue
        if isinstance(value, numbers.Real) and math.isfinite(value):
            result.append(float(value))
    return result
