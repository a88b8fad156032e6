from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Optional, Union

Scalar = int | float
ChannelInput = Optional[Scalar]

RGB_MAX = 255
ALPHA_MAX = 255
HUE_MAX = 360
PERCENT_MAX = 100
HSL_DEFAULT = 50


class ColorMode(str, Enum):
    RGB = "rgb"
    HSL = "hsl"


ColorModeLike = Union[ColorMode, str]


class PackedColor(NamedTuple):
    """Canonical color: ``0xRRGGBB`` packed integer plus a separate alpha byte."""
    color: int
    alpha: int


class RGBView(NamedTuple):
    red: int
    green: int
    blue: int


class HSLView(NamedTuple):
    hue: int
    saturation: float
    lightness: float


def to_color_mode(mode: ColorModeLike) -> ColorMode:
    """
    Normalize a color mode given as a member or a case-insensitive name.

    Args:
        mode: ColorMode member or string such as "rgb" or "HSL"
    Returns:
        The matching ColorMode
    Raises:
        ValueError: If the name is not a known color mode
    """
    if isinstance(mode, ColorMode):
        return mode
    return ColorMode(str(mode).lower())
