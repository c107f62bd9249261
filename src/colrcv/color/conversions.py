"""
Colour model conversion functions.

Direct formulas exist for RGB <-> HSV, RGB <-> HSL, RGB <-> XYZ and
XYZ <-> LAB. Every other ordered pair is composed through at most two
intermediate models. All functions take and return immutable colour
values; none of them raise, and out-of-range input flows through the
formulas unchanged. Zero denominators and overflowing powers follow IEEE
semantics and yield inf or nan. The only clamp applied is on the RGB
produced by xyz_to_rgb.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from colrcv.core.data_types import HSL, HSV, LAB, RGB, XYZ, ColorModel, ColorValue
from colrcv.models.rgb import rgb_clamp

logger = logging.getLogger(__name__)

# Reference white, 2 degree observer, D65 illuminant
D65_2_WHITE = XYZ(95.047, 100.0, 108.883)

# sRGB transfer function
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_GAMMA_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_SLOPE = 12.92

# CIE-L*a*b* transfer function
CIE_EPSILON = 0.008856
CIE_SLOPE = 7.787
CIE_OFFSET = 16.0 / 116.0
ONE_THIRD = 1.0 / 3.0

# sRGB (D65) primaries
SRGB_TO_XYZ: NDArray[np.float64] = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])
XYZ_TO_SRGB: NDArray[np.float64] = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])
SRGB_TO_XYZ.setflags(write=False)
XYZ_TO_SRGB.setflags(write=False)

RGB_SCALE = 255.0
PERCENT = 100.0
HUE_DEGREES = 360.0


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: a zero denominator gives inf or nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _power(base: float, exponent: float) -> float:
    """Raise to a power, overflowing to inf instead of raising."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.power(np.float64(base), exponent))


def _apply_matrix(matrix: NDArray[np.float64], a: float, b: float, c: float) -> tuple[float, float, float]:
    """Multiply a 3x3 matrix by the column vector (a, b, c)."""
    with np.errstate(over="ignore", invalid="ignore"):
        out = matrix @ np.array([a, b, c], dtype=np.float64)
    return float(out[0]), float(out[1]), float(out[2])


def _normalise_hue(h: float) -> float:
    """Bring a hue in degrees into [0, 360)."""
    if h >= HUE_DEGREES:
        h -= HUE_DEGREES
    elif h < 0.0:
        h += HUE_DEGREES
    return h


def _rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue in degrees for a chromatic colour with channels in [0, 1]."""
    if r == max_c:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif g == max_c:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)
    return _normalise_hue(h)


# =============================================================================
# RGB -> *
# =============================================================================

def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert RGB to HSV."""
    r, g, b = rgb.r / RGB_SCALE, rgb.g / RGB_SCALE, rgb.b / RGB_SCALE

    min_c = min(r, g, b)
    max_c = max(r, g, b)
    delta = max_c - min_c

    v = max_c * PERCENT

    # Achromatic
    if delta == 0:
        return HSV(0.0, 0.0, v)

    s = _divide(delta, max_c) * PERCENT
    return HSV(_rgb_hue(r, g, b, max_c, delta), s, v)


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL."""
    r, g, b = rgb.r / RGB_SCALE, rgb.g / RGB_SCALE, rgb.b / RGB_SCALE

    min_c = min(r, g, b)
    max_c = max(r, g, b)
    delta = max_c - min_c

    l = (max_c + min_c) / 2.0 * PERCENT  # noqa: E741

    # Achromatic
    if delta == 0:
        return HSL(0.0, 0.0, l)

    if l < 50.0:
        s = _divide(delta, max_c + min_c) * PERCENT
    else:
        s = _divide(delta, 2.0 - max_c - min_c) * PERCENT
    return HSL(_rgb_hue(r, g, b, max_c, delta), s, l)


def _srgb_to_linear(c: float) -> float:
    """Inverse sRGB companding of a channel in [0, 1]."""
    if c > SRGB_LINEAR_THRESHOLD:
        return _power((c + SRGB_OFFSET) / SRGB_SCALE, SRGB_GAMMA)
    return c / SRGB_SLOPE


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Convert RGB to XYZ (sRGB primaries, D65)."""
    r = _srgb_to_linear(rgb.r / RGB_SCALE) * PERCENT
    g = _srgb_to_linear(rgb.g / RGB_SCALE) * PERCENT
    b = _srgb_to_linear(rgb.b / RGB_SCALE) * PERCENT
    return XYZ(*_apply_matrix(SRGB_TO_XYZ, r, g, b))


def rgb_to_lab(rgb: RGB) -> LAB:
    """Convert RGB to LAB via XYZ."""
    return xyz_to_lab(rgb_to_xyz(rgb))


# =============================================================================
# HSV -> *
# =============================================================================

def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert HSV to RGB."""
    s = hsv.s / PERCENT
    v = hsv.v / PERCENT

    # Achromatic
    if s == 0:
        return RGB(v * RGB_SCALE, v * RGB_SCALE, v * RGB_SCALE)

    h = (hsv.h / 60.0) % 6.0

    # Undefined hue (infinite or nan input)
    if math.isnan(h):
        return RGB(math.nan, math.nan, math.nan)

    i = math.floor(h)
    f = h - i

    a = v * (1.0 - s)
    b = v * (1.0 - s * f)
    c = v * (1.0 - s * (1.0 - f))

    sector = int(i) % 6
    if sector == 0:
        rgb = (v, c, a)
    elif sector == 1:
        rgb = (b, v, a)
    elif sector == 2:
        rgb = (a, v, c)
    elif sector == 3:
        rgb = (a, b, v)
    elif sector == 4:
        rgb = (c, a, v)
    else:
        rgb = (v, a, b)

    return RGB(rgb[0] * RGB_SCALE, rgb[1] * RGB_SCALE, rgb[2] * RGB_SCALE)


def hsv_to_hsl(hsv: HSV) -> HSL:
    return rgb_to_hsl(hsv_to_rgb(hsv))


def hsv_to_xyz(hsv: HSV) -> XYZ:
    return rgb_to_xyz(hsv_to_rgb(hsv))


def hsv_to_lab(hsv: HSV) -> LAB:
    return rgb_to_lab(hsv_to_rgb(hsv))


# =============================================================================
# HSL -> *
# =============================================================================

def _hue_to_rgb(a: float, b: float, h: float) -> float:
    """Resolve one RGB channel from the HSL temporaries and a shifted hue."""
    if h < 0.0:
        h += 1.0
    elif h > 1.0:
        h -= 1.0

    if 6.0 * h < 1.0:
        return a + (b - a) * 6.0 * h
    if 2.0 * h < 1.0:
        return b
    if 3.0 * h < 2.0:
        return a + (b - a) * (2.0 / 3.0 - h) * 6.0
    return a


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to RGB."""
    # Achromatic
    if hsl.s == 0:
        grey = hsl.l / PERCENT * RGB_SCALE
        return RGB(grey, grey, grey)

    h = hsl.h / HUE_DEGREES
    s = hsl.s / PERCENT
    l = hsl.l / PERCENT  # noqa: E741

    if l < 0.5:
        temp_b = l * (1.0 + s)
    else:
        temp_b = l + s - s * l
    temp_a = 2.0 * l - temp_b

    return RGB(
        RGB_SCALE * _hue_to_rgb(temp_a, temp_b, h + ONE_THIRD),
        RGB_SCALE * _hue_to_rgb(temp_a, temp_b, h),
        RGB_SCALE * _hue_to_rgb(temp_a, temp_b, h - ONE_THIRD),
    )


def hsl_to_hsv(hsl: HSL) -> HSV:
    return rgb_to_hsv(hsl_to_rgb(hsl))


def hsl_to_xyz(hsl: HSL) -> XYZ:
    return rgb_to_xyz(hsl_to_rgb(hsl))


def hsl_to_lab(hsl: HSL) -> LAB:
    return rgb_to_lab(hsl_to_rgb(hsl))


# =============================================================================
# XYZ -> *
# =============================================================================

def _linear_to_srgb(c: float) -> float:
    """Forward sRGB companding of a linear channel."""
    if c > SRGB_GAMMA_THRESHOLD:
        return SRGB_SCALE * _power(c, 1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return SRGB_SLOPE * c


def xyz_to_rgb(xyz: XYZ) -> RGB:
    """
    Convert XYZ to RGB.

    Out-of-gamut XYZ routinely lands outside [0, 255], so the result is
    always clamped.
    """
    r, g, b = _apply_matrix(
        XYZ_TO_SRGB, xyz.x / PERCENT, xyz.y / PERCENT, xyz.z / PERCENT
    )
    return rgb_clamp(RGB(
        _linear_to_srgb(r) * RGB_SCALE,
        _linear_to_srgb(g) * RGB_SCALE,
        _linear_to_srgb(b) * RGB_SCALE,
    ))


def _lab_f(c: float) -> float:
    if c > CIE_EPSILON:
        return _power(c, ONE_THIRD)
    return CIE_SLOPE * c + CIE_OFFSET


def xyz_to_lab(xyz: XYZ, white: XYZ = D65_2_WHITE) -> LAB:
    """
    Convert XYZ to LAB.

    Args:
        xyz: Tristimulus values to convert
        white: Reference white to normalise against, D65/2 degree by default

    Returns:
        CIE-L*a*b* colour
    """
    fx = _lab_f(_divide(xyz.x, white.x))
    fy = _lab_f(_divide(xyz.y, white.y))
    fz = _lab_f(_divide(xyz.z, white.z))

    return LAB(
        116.0 * fy - 16.0,
        500.0 * (fx - fy),
        200.0 * (fy - fz),
    )


def xyz_to_hsv(xyz: XYZ) -> HSV:
    return rgb_to_hsv(xyz_to_rgb(xyz))


def xyz_to_hsl(xyz: XYZ) -> HSL:
    return rgb_to_hsl(xyz_to_rgb(xyz))


# =============================================================================
# LAB -> *
# =============================================================================

def _lab_f_inverse(c: float) -> float:
    c3 = c * c * c
    if c3 > CIE_EPSILON:
        return c3
    return (c - CIE_OFFSET) / CIE_SLOPE


def lab_to_xyz(lab: LAB, white: XYZ = D65_2_WHITE) -> XYZ:
    """Convert LAB to XYZ, the inverse of xyz_to_lab()."""
    fy = (lab.l + 16.0) / 116.0
    fx = lab.a / 500.0 + fy
    fz = fy - lab.b / 200.0

    return XYZ(
        _lab_f_inverse(fx) * white.x,
        _lab_f_inverse(fy) * white.y,
        _lab_f_inverse(fz) * white.z,
    )


def lab_to_rgb(lab: LAB) -> RGB:
    return xyz_to_rgb(lab_to_xyz(lab))


def lab_to_hsv(lab: LAB) -> HSV:
    return xyz_to_hsv(lab_to_xyz(lab))


def lab_to_hsl(lab: LAB) -> HSL:
    return xyz_to_hsl(lab_to_xyz(lab))


# =============================================================================
# Conversion dispatch
# =============================================================================

_RGB, _HSV, _HSL, _LAB, _XYZ = (
    ColorModel.RGB, ColorModel.HSV, ColorModel.HSL, ColorModel.LAB, ColorModel.XYZ
)

# All conversion functions keyed by (source, destination)
COLOR_MODEL_CONVERTERS: dict[tuple[ColorModel, ColorModel], Callable[[ColorValue], ColorValue]] = {
    (_RGB, _HSV): rgb_to_hsv,
    (_RGB, _HSL): rgb_to_hsl,
    (_RGB, _XYZ): rgb_to_xyz,
    (_RGB, _LAB): rgb_to_lab,
    (_HSV, _RGB): hsv_to_rgb,
    (_HSV, _HSL): hsv_to_hsl,
    (_HSV, _XYZ): hsv_to_xyz,
    (_HSV, _LAB): hsv_to_lab,
    (_HSL, _RGB): hsl_to_rgb,
    (_HSL, _HSV): hsl_to_hsv,
    (_HSL, _XYZ): hsl_to_xyz,
    (_HSL, _LAB): hsl_to_lab,
    (_XYZ, _RGB): xyz_to_rgb,
    (_XYZ, _HSV): xyz_to_hsv,
    (_XYZ, _HSL): xyz_to_hsl,
    (_XYZ, _LAB): xyz_to_lab,
    (_LAB, _RGB): lab_to_rgb,
    (_LAB, _HSV): lab_to_hsv,
    (_LAB, _HSL): lab_to_hsl,
    (_LAB, _XYZ): lab_to_xyz,
}

# Model path taken by each conversion, endpoints included
CONVERSION_ROUTES: dict[tuple[ColorModel, ColorModel], tuple[ColorModel, ...]] = {
    (_RGB, _HSV): (_RGB, _HSV),
    (_RGB, _HSL): (_RGB, _HSL),
    (_RGB, _XYZ): (_RGB, _XYZ),
    (_RGB, _LAB): (_RGB, _XYZ, _LAB),
    (_HSV, _RGB): (_HSV, _RGB),
    (_HSV, _HSL): (_HSV, _RGB, _HSL),
    (_HSV, _XYZ): (_HSV, _RGB, _XYZ),
    (_HSV, _LAB): (_HSV, _RGB, _XYZ, _LAB),
    (_HSL, _RGB): (_HSL, _RGB),
    (_HSL, _HSV): (_HSL, _RGB, _HSV),
    (_HSL, _XYZ): (_HSL, _RGB, _XYZ),
    (_HSL, _LAB): (_HSL, _RGB, _XYZ, _LAB),
    (_XYZ, _RGB): (_XYZ, _RGB),
    (_XYZ, _HSV): (_XYZ, _RGB, _HSV),
    (_XYZ, _HSL): (_XYZ, _RGB, _HSL),
    (_XYZ, _LAB): (_XYZ, _LAB),
    (_LAB, _RGB): (_LAB, _XYZ, _RGB),
    (_LAB, _HSV): (_LAB, _XYZ, _RGB, _HSV),
    (_LAB, _HSL): (_LAB, _XYZ, _RGB, _HSL),
    (_LAB, _XYZ): (_LAB, _XYZ),
}


def _resolve_model(model: ColorModel | str) -> ColorModel:
    if isinstance(model, ColorModel):
        return model
    try:
        return ColorModel(str(model).upper())
    except ValueError:
        raise ValueError(f"Unknown colour model: {model}") from None


def conversion_route(
    from_model: ColorModel | str,
    to_model: ColorModel | str,
) -> tuple[ColorModel, ...]:
    """
    Get the sequence of models a conversion passes through.

    Args:
        from_model: Source colour model
        to_model: Target colour model

    Returns:
        Tuple of models from source to target, both included. A
        same-model request yields a one-element tuple.
    """
    src = _resolve_model(from_model)
    dst = _resolve_model(to_model)
    if src is dst:
        return (src,)
    return CONVERSION_ROUTES[(src, dst)]


def convert_color(value: ColorValue, to_model: ColorModel | str) -> ColorValue:
    """
    Convert a colour value into another colour model.

    Args:
        value: Colour in any supported model
        to_model: Target colour model, enum member or case-insensitive name

    Returns:
        The converted colour. Same-model requests return value itself.

    Raises:
        TypeError: If value is not a colour value
        ValueError: If to_model is not a supported colour model
    """
    if not isinstance(value, ColorValue):
        raise TypeError(f"Expected a colour value, got {type(value).__name__}")

    src = value.model
    dst = _resolve_model(to_model)

    if src is dst:
        return value

    logger.debug(
        "Converting %s via %s",
        value,
        " -> ".join(m.value for m in CONVERSION_ROUTES[(src, dst)]),
    )
    return COLOR_MODEL_CONVERTERS[(src, dst)](value)


def list_color_models() -> list[str]:
    """Get list of supported colour models."""
    return sorted(m.value for m in ColorModel)
