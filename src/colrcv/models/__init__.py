"""Per-model validity predicates and clamping."""

from __future__ import annotations

from typing import Callable

from colrcv.core.data_types import ColorModel, ColorValue
from colrcv.models.hsl import hsl_clamp, hsl_valid
from colrcv.models.hsv import hsv_clamp, hsv_valid
from colrcv.models.lab import lab_clamp, lab_valid
from colrcv.models.rgb import rgb_clamp, rgb_valid
from colrcv.models.xyz import xyz_clamp, xyz_valid

# All validators: (is_valid, clamp)
MODEL_VALIDATORS: dict[ColorModel, tuple[Callable, Callable]] = {
    ColorModel.RGB: (rgb_valid, rgb_clamp),
    ColorModel.HSV: (hsv_valid, hsv_clamp),
    ColorModel.HSL: (hsl_valid, hsl_clamp),
    ColorModel.LAB: (lab_valid, lab_clamp),
    ColorModel.XYZ: (xyz_valid, xyz_clamp),
}


def _validators_for(value: ColorValue) -> tuple[Callable, Callable]:
    if not isinstance(value, ColorValue):
        raise TypeError(f"Expected a colour value, got {type(value).__name__}")
    return MODEL_VALIDATORS[value.model]


def is_valid(value: ColorValue) -> bool:
    """Return True if every channel of value lies in its model's range."""
    valid, _ = _validators_for(value)
    return valid(value)


def clamp(value: ColorValue) -> ColorValue:
    """Return a copy of value with every channel forced into range."""
    _, clamp_func = _validators_for(value)
    return clamp_func(value)


__all__ = [
    "MODEL_VALIDATORS",
    "is_valid",
    "clamp",
]
