"""HSL validity and clamping."""

from __future__ import annotations

from dataclasses import replace

from colrcv.core.data_types import HSL
from colrcv.core.ranges import ChannelRange

HSL_MIN_VALUE = 0.0
HSL_H_MAX_VALUE = 360.0
HSL_S_MAX_VALUE = 100.0
HSL_L_MAX_VALUE = 100.0

HSL_H_RANGE = ChannelRange(HSL_MIN_VALUE, HSL_H_MAX_VALUE)
HSL_S_RANGE = ChannelRange(HSL_MIN_VALUE, HSL_S_MAX_VALUE)
HSL_L_RANGE = ChannelRange(HSL_MIN_VALUE, HSL_L_MAX_VALUE)


def hsl_h_valid(hsl: HSL) -> bool:
    return HSL_H_RANGE.valid(hsl.h)


def hsl_s_valid(hsl: HSL) -> bool:
    return HSL_S_RANGE.valid(hsl.s)


def hsl_l_valid(hsl: HSL) -> bool:
    return HSL_L_RANGE.valid(hsl.l)


def hsl_valid(hsl: HSL) -> bool:
    return hsl_h_valid(hsl) and hsl_s_valid(hsl) and hsl_l_valid(hsl)


def hsl_clamp_h(hsl: HSL) -> HSL:
    return replace(hsl, h=HSL_H_RANGE.clamp(hsl.h))


def hsl_clamp_s(hsl: HSL) -> HSL:
    return replace(hsl, s=HSL_S_RANGE.clamp(hsl.s))


def hsl_clamp_l(hsl: HSL) -> HSL:
    return replace(hsl, l=HSL_L_RANGE.clamp(hsl.l))


def hsl_clamp(hsl: HSL) -> HSL:
    return HSL(
        HSL_H_RANGE.clamp(hsl.h),
        HSL_S_RANGE.clamp(hsl.s),
        HSL_L_RANGE.clamp(hsl.l),
    )
