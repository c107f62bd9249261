"""
Range primitives shared by every colour model.

All functions are total over the reals. NaN input is not special-cased and
follows IEEE comparison semantics; infinities clamp to the nearest bound.
"""

from __future__ import annotations

from dataclasses import dataclass


def range_valid(minimum: float, value: float, maximum: float) -> bool:
    """Return True if minimum <= value <= maximum (both ends inclusive)."""
    return minimum <= value and value <= maximum


def min_value(a: float, b: float) -> float:
    """Return the smaller of two values."""
    return a if a < b else b


def max_value(a: float, b: float) -> float:
    """Return the larger of two values."""
    return a if a > b else b


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Force value into the closed interval [minimum, maximum]."""
    return min_value(max_value(value, minimum), maximum)


@dataclass(frozen=True)
class ChannelRange:
    """
    Closed interval a single colour channel is expected to lie in.

    Attributes:
        minimum: Lower bound (inclusive)
        maximum: Upper bound (inclusive)
    """

    minimum: float
    maximum: float

    def valid(self, value: float) -> bool:
        return range_valid(self.minimum, value, self.maximum)

    def clamp(self, value: float) -> float:
        return clamp(value, self.minimum, self.maximum)
