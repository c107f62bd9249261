"""Conversion between the supported colour models."""

from colrcv.color.conversions import (
    COLOR_MODEL_CONVERTERS,
    CONVERSION_ROUTES,
    D65_2_WHITE,
    conversion_route,
    convert_color,
    list_color_models,
)

__all__ = [
    "COLOR_MODEL_CONVERTERS",
    "CONVERSION_ROUTES",
    "D65_2_WHITE",
    "conversion_route",
    "convert_color",
    "list_color_models",
]
