"""
Core data types for colrcv.

Provides the ColorModel enum and one immutable three-channel value type per
colour model. Values carry no behaviour beyond channel access and numpy
interop; validation lives in colrcv.models and conversion in
colrcv.color.conversions.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

DEFAULT_TOLERANCE = 0.001


class ColorModel(str, Enum):
    """Supported colour models."""

    RGB = "RGB"
    HSV = "HSV"
    HSL = "HSL"
    LAB = "LAB"
    XYZ = "XYZ"


@dataclass(frozen=True)
class ColorValue:
    """
    Base class for a colour expressed in one colour model.

    Subclasses declare exactly three float fields, in channel order.
    Instances are immutable; use dataclasses.replace() to derive a
    modified copy.
    """

    model: ClassVar[ColorModel]

    def __post_init__(self) -> None:
        """Coerce every channel to float."""
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    @property
    def channels(self) -> tuple[float, float, float]:
        """Channel values in declaration order."""
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore

    @classmethod
    def channel_names(cls) -> tuple[str, ...]:
        """Names of the channels in declaration order."""
        return tuple(f.name for f in fields(cls))

    def __iter__(self) -> Iterator[float]:
        return iter(self.channels)

    def to_array(self) -> NDArray[np.float64]:
        """Return the channels as a float64 array of shape (3,)."""
        return np.array(self.channels, dtype=np.float64)

    @classmethod
    def from_array(cls, data: NDArray | Sequence[float]):
        """
        Build a value from any array-like holding three numbers.

        Args:
            data: Array-like of length 3, in channel order

        Returns:
            New instance of this colour model

        Raises:
            ValueError: If data does not hold exactly three values
        """
        arr = np.asarray(data, dtype=np.float64).ravel()
        if arr.shape != (3,):
            raise ValueError(
                f"{cls.__name__} needs exactly 3 channel values, got {arr.size}"
            )
        return cls(*(float(v) for v in arr))

    def isclose(self, other: ColorValue, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        Compare channel-wise against another value of the same model.

        Values of different models never compare close.
        """
        if not isinstance(other, ColorValue) or other.model is not self.model:
            return False
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=0.0, atol=tolerance))


@dataclass(frozen=True)
class RGB(ColorValue):
    """Red/green/blue device colour, channels in [0, 255]."""

    model: ClassVar[ColorModel] = ColorModel.RGB

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


@dataclass(frozen=True)
class HSV(ColorValue):
    """Hue [0, 360], saturation [0, 100], value [0, 100]."""

    model: ClassVar[ColorModel] = ColorModel.HSV

    h: float = 0.0
    s: float = 0.0
    v: float = 0.0


@dataclass(frozen=True)
class HSL(ColorValue):
    """Hue [0, 360], saturation [0, 100], lightness [0, 100]."""

    model: ClassVar[ColorModel] = ColorModel.HSL

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741


@dataclass(frozen=True)
class LAB(ColorValue):
    """CIE-L*a*b*: lightness [0, 100], a and b [-100, 100]."""

    model: ClassVar[ColorModel] = ColorModel.LAB

    l: float = 0.0  # noqa: E741
    a: float = 0.0
    b: float = 0.0


@dataclass(frozen=True)
class XYZ(ColorValue):
    """
    CIE-XYZ tristimulus values, 2 degree observer, D65 illuminant.

    See colrcv.models.xyz for the accepted channel ranges.
    """

    model: ClassVar[ColorModel] = ColorModel.XYZ

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


COLOR_VALUE_TYPES: dict[ColorModel, type[ColorValue]] = {
    ColorModel.RGB: RGB,
    ColorModel.HSV: HSV,
    ColorModel.HSL: HSL,
    ColorModel.LAB: LAB,
    ColorModel.XYZ: XYZ,
}
