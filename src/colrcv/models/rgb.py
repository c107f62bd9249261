"""
RGB validity and clamping.

Every channel lies in [0, 255].
"""

from __future__ import annotations

from dataclasses import replace

from colrcv.core.data_types import RGB
from colrcv.core.ranges import ChannelRange

RGB_MIN_VALUE = 0.0
RGB_MAX_VALUE = 255.0

RGB_RANGE = ChannelRange(RGB_MIN_VALUE, RGB_MAX_VALUE)


def rgb_r_valid(rgb: RGB) -> bool:
    return RGB_RANGE.valid(rgb.r)


def rgb_g_valid(rgb: RGB) -> bool:
    return RGB_RANGE.valid(rgb.g)


def rgb_b_valid(rgb: RGB) -> bool:
    return RGB_RANGE.valid(rgb.b)


def rgb_valid(rgb: RGB) -> bool:
    """Return True if every channel is in range."""
    return rgb_r_valid(rgb) and rgb_g_valid(rgb) and rgb_b_valid(rgb)


def rgb_clamp_r(rgb: RGB) -> RGB:
    return replace(rgb, r=RGB_RANGE.clamp(rgb.r))


def rgb_clamp_g(rgb: RGB) -> RGB:
    return replace(rgb, g=RGB_RANGE.clamp(rgb.g))


def rgb_clamp_b(rgb: RGB) -> RGB:
    return replace(rgb, b=RGB_RANGE.clamp(rgb.b))


def rgb_clamp(rgb: RGB) -> RGB:
    """Return a copy of rgb with every channel forced into [0, 255]."""
    return RGB(
        RGB_RANGE.clamp(rgb.r),
        RGB_RANGE.clamp(rgb.g),
        RGB_RANGE.clamp(rgb.b),
    )
