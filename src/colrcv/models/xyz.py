"""
CIE-XYZ validity and clamping.

The accepted ranges are wider than the D65 reference white
(95.047, 100.0, 108.883) so that slightly out-of-gamut tristimulus
values produced by the LAB conversions still validate. Do not confuse
these bounds with the reference white used by the conversions.
"""

from __future__ import annotations

from dataclasses import replace

from colrcv.core.data_types import XYZ
from colrcv.core.ranges import ChannelRange

XYZ_MIN_VALUE = 0.0
XYZ_X_MAX_VALUE = 112.0
XYZ_Y_MAX_VALUE = 100.0
XYZ_Z_MAX_VALUE = 123.0

XYZ_X_RANGE = ChannelRange(XYZ_MIN_VALUE, XYZ_X_MAX_VALUE)
XYZ_Y_RANGE = ChannelRange(XYZ_MIN_VALUE, XYZ_Y_MAX_VALUE)
XYZ_Z_RANGE = ChannelRange(XYZ_MIN_VALUE, XYZ_Z_MAX_VALUE)


def xyz_x_valid(xyz: XYZ) -> bool:
    return XYZ_X_RANGE.valid(xyz.x)


def xyz_y_valid(xyz: XYZ) -> bool:
    return XYZ_Y_RANGE.valid(xyz.y)


def xyz_z_valid(xyz: XYZ) -> bool:
    return XYZ_Z_RANGE.valid(xyz.z)


def xyz_valid(xyz: XYZ) -> bool:
    return xyz_x_valid(xyz) and xyz_y_valid(xyz) and xyz_z_valid(xyz)


def xyz_clamp_x(xyz: XYZ) -> XYZ:
    return replace(xyz, x=XYZ_X_RANGE.clamp(xyz.x))


def xyz_clamp_y(xyz: XYZ) -> XYZ:
    return replace(xyz, y=XYZ_Y_RANGE.clamp(xyz.y))


def xyz_clamp_z(xyz: XYZ) -> XYZ:
    return replace(xyz, z=XYZ_Z_RANGE.clamp(xyz.z))


def xyz_clamp(xyz: XYZ) -> XYZ:
    return XYZ(
        XYZ_X_RANGE.clamp(xyz.x),
        XYZ_Y_RANGE.clamp(xyz.y),
        XYZ_Z_RANGE.clamp(xyz.z),
    )
