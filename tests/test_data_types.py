"""
Tests for the colour value types.
"""

import dataclasses

import numpy as np
import pytest

from colrcv.core.data_types import (
    COLOR_VALUE_TYPES,
    HSL,
    HSV,
    LAB,
    RGB,
    XYZ,
    ColorModel,
)


class TestColorValue:
    """Tests shared by every colour value type."""

    def test_channels_coerced_to_float(self):
        rgb = RGB(33, 66, 99)

        assert rgb.channels == (33.0, 66.0, 99.0)
        assert all(isinstance(c, float) for c in rgb.channels)

    def test_defaults_are_zero(self):
        assert LAB() == LAB(0.0, 0.0, 0.0)

    def test_immutable(self):
        hsv = HSV(20, 75, 100)

        with pytest.raises(dataclasses.FrozenInstanceError):
            hsv.h = 40  # type: ignore[misc]

    def test_replace_returns_new_value(self):
        hsl = HSL(108, 86, 86)
        changed = dataclasses.replace(hsl, l=50)

        assert changed == HSL(108, 86, 50)
        assert hsl == HSL(108, 86, 86)

    def test_iteration_order(self):
        r, g, b = RGB(1, 2, 3)

        assert (r, g, b) == (1.0, 2.0, 3.0)

    def test_channel_names(self):
        assert RGB.channel_names() == ("r", "g", "b")
        assert HSV.channel_names() == ("h", "s", "v")
        assert HSL.channel_names() == ("h", "s", "l")
        assert LAB.channel_names() == ("l", "a", "b")
        assert XYZ.channel_names() == ("x", "y", "z")

    def test_model_is_not_a_field(self):
        assert "model" not in RGB.channel_names()
        assert RGB().model is ColorModel.RGB

    def test_type_table_covers_every_model(self):
        assert set(COLOR_VALUE_TYPES) == set(ColorModel)
        for model, value_type in COLOR_VALUE_TYPES.items():
            assert value_type.model is model


class TestArrayInterop:
    """Tests for numpy conversion."""

    def test_to_array(self):
        arr = XYZ(1.5, 2.5, 3.5).to_array()

        assert arr.dtype == np.float64
        assert arr.shape == (3,)
        np.testing.assert_array_equal(arr, [1.5, 2.5, 3.5])

    def test_from_array(self):
        lab = LAB.from_array(np.array([29.0, 27.343, -17.187]))

        assert lab == LAB(29.0, 27.343, -17.187)

    def test_from_sequence(self):
        assert RGB.from_array([255, 0, 128]) == RGB(255, 0, 128)

    @pytest.mark.parametrize("data", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0], []])
    def test_from_array_wrong_length(self, data):
        with pytest.raises(ValueError):
            RGB.from_array(data)


class TestIsClose:
    """Tests for tolerance-based comparison."""

    def test_within_tolerance(self):
        assert RGB(200.878, 250.002, 188.598).isclose(RGB(200.8784, 250.0016, 188.5981))

    def test_outside_tolerance(self):
        assert not RGB(200.878, 250.002, 188.598).isclose(RGB(200.88, 250.002, 188.598))

    def test_custom_tolerance(self):
        assert HSV(10, 10, 10).isclose(HSV(10.4, 10, 10), tolerance=0.5)

    def test_different_models_never_close(self):
        assert not HSV(0, 0, 0).isclose(HSL(0, 0, 0))

    def test_non_colour_never_close(self):
        assert not RGB(0, 0, 0).isclose((0.0, 0.0, 0.0))  # type: ignore[arg-type]
