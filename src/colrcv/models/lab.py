"""
CIE-L*a*b* validity and clamping.

Lightness lies in [0, 100]; a and b in [-100, 100].
"""

from __future__ import annotations

from dataclasses import replace

from colrcv.core.data_types import LAB
from colrcv.core.ranges import ChannelRange

LAB_L_MIN_VALUE = 0.0
LAB_A_MIN_VALUE = -100.0
LAB_B_MIN_VALUE = -100.0
LAB_MAX_VALUE = 100.0

LAB_L_RANGE = ChannelRange(LAB_L_MIN_VALUE, LAB_MAX_VALUE)
LAB_A_RANGE = ChannelRange(LAB_A_MIN_VALUE, LAB_MAX_VALUE)
LAB_B_RANGE = ChannelRange(LAB_B_MIN_VALUE, LAB_MAX_VALUE)


def lab_l_valid(lab: LAB) -> bool:
    return LAB_L_RANGE.valid(lab.l)


def lab_a_valid(lab: LAB) -> bool:
    return LAB_A_RANGE.valid(lab.a)


def lab_b_valid(lab: LAB) -> bool:
    return LAB_B_RANGE.valid(lab.b)


def lab_valid(lab: LAB) -> bool:
    return lab_l_valid(lab) and lab_a_valid(lab) and lab_b_valid(lab)


def lab_clamp_l(lab: LAB) -> LAB:
    return replace(lab, l=LAB_L_RANGE.clamp(lab.l))


def lab_clamp_a(lab: LAB) -> LAB:
    return replace(lab, a=LAB_A_RANGE.clamp(lab.a))


def lab_clamp_b(lab: LAB) -> LAB:
    return replace(lab, b=LAB_B_RANGE.clamp(lab.b))


def lab_clamp(lab: LAB) -> LAB:
    return LAB(
        LAB_L_RANGE.clamp(lab.l),
        LAB_A_RANGE.clamp(lab.a),
        LAB_B_RANGE.clamp(lab.b),
    )
