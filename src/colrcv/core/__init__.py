"""Core primitives: range helpers, colour value types and version info."""

from colrcv.core.data_types import (
    COLOR_VALUE_TYPES,
    DEFAULT_TOLERANCE,
    HSL,
    HSV,
    LAB,
    RGB,
    XYZ,
    ColorModel,
    ColorValue,
)
from colrcv.core.ranges import ChannelRange, clamp, max_value, min_value, range_valid

__all__ = [
    "COLOR_VALUE_TYPES",
    "DEFAULT_TOLERANCE",
    "ColorModel",
    "ColorValue",
    "RGB",
    "HSV",
    "HSL",
    "LAB",
    "XYZ",
    "ChannelRange",
    "range_valid",
    "min_value",
    "max_value",
    "clamp",
]
