"""HSV validity and clamping."""

from __future__ import annotations

from dataclasses import replace

from colrcv.core.data_types import HSV
from colrcv.core.ranges import ChannelRange

HSV_MIN_VALUE = 0.0
HSV_H_MAX_VALUE = 360.0
HSV_S_MAX_VALUE = 100.0
HSV_V_MAX_VALUE = 100.0

HSV_H_RANGE = ChannelRange(HSV_MIN_VALUE, HSV_H_MAX_VALUE)
HSV_S_RANGE = ChannelRange(HSV_MIN_VALUE, HSV_S_MAX_VALUE)
HSV_V_RANGE = ChannelRange(HSV_MIN_VALUE, HSV_V_MAX_VALUE)


def hsv_h_valid(hsv: HSV) -> bool:
    return HSV_H_RANGE.valid(hsv.h)


def hsv_s_valid(hsv: HSV) -> bool:
    return HSV_S_RANGE.valid(hsv.s)


def hsv_v_valid(hsv: HSV) -> bool:
    return HSV_V_RANGE.valid(hsv.v)


def hsv_valid(hsv: HSV) -> bool:
    return hsv_h_valid(hsv) and hsv_s_valid(hsv) and hsv_v_valid(hsv)


def hsv_clamp_h(hsv: HSV) -> HSV:
    return replace(hsv, h=HSV_H_RANGE.clamp(hsv.h))


def hsv_clamp_s(hsv: HSV) -> HSV:
    return replace(hsv, s=HSV_S_RANGE.clamp(hsv.s))


def hsv_clamp_v(hsv: HSV) -> HSV:
    return replace(hsv, v=HSV_V_RANGE.clamp(hsv.v))


def hsv_clamp(hsv: HSV) -> HSV:
    return HSV(
        HSV_H_RANGE.clamp(hsv.h),
        HSV_S_RANGE.clamp(hsv.s),
        HSV_V_RANGE.clamp(hsv.v),
    )
