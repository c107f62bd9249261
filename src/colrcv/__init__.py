"""
colrcv - convert colours between RGB, HSV, HSL, CIE-L*a*b* and CIE-XYZ.

Usage:
    from colrcv import RGB, convert_color, rgb_to_lab

    lab = rgb_to_lab(RGB(33, 33, 33))
    hsl = convert_color(lab, "HSL")
"""

import logging

from colrcv.core.data_types import HSL, HSV, LAB, RGB, XYZ, ColorModel, ColorValue
from colrcv.core.version import VERSION, Version, __version__
from colrcv.color.conversions import (
    D65_2_WHITE,
    conversion_route,
    convert_color,
    hsl_to_hsv,
    hsl_to_lab,
    hsl_to_rgb,
    hsl_to_xyz,
    hsv_to_hsl,
    hsv_to_lab,
    hsv_to_rgb,
    hsv_to_xyz,
    lab_to_hsl,
    lab_to_hsv,
    lab_to_rgb,
    lab_to_xyz,
    list_color_models,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_hsl,
    xyz_to_hsv,
    xyz_to_lab,
    xyz_to_rgb,
)
from colrcv.models import clamp, is_valid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "VERSION",
    "Version",
    "ColorModel",
    "ColorValue",
    "RGB",
    "HSV",
    "HSL",
    "LAB",
    "XYZ",
    "D65_2_WHITE",
    "conversion_route",
    "convert_color",
    "list_color_models",
    "is_valid",
    "clamp",
    "rgb_to_hsv",
    "rgb_to_hsl",
    "rgb_to_xyz",
    "rgb_to_lab",
    "hsv_to_rgb",
    "hsv_to_hsl",
    "hsv_to_xyz",
    "hsv_to_lab",
    "hsl_to_rgb",
    "hsl_to_hsv",
    "hsl_to_xyz",
    "hsl_to_lab",
    "xyz_to_rgb",
    "xyz_to_hsv",
    "xyz_to_hsl",
    "xyz_to_lab",
    "lab_to_rgb",
    "lab_to_hsv",
    "lab_to_hsl",
    "lab_to_xyz",
]
