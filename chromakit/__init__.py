"""
Chromakit - Packed Color Values
===============================

A small color toolkit: a mutable ``Color`` value type over a packed
``0xRRGGBB`` integer with cached RGB and HSL views, hexadecimal string
parsing, and scalar and numpy conversions between the representations.

Quick Start
-----------
>>> from chromakit import Color, ColorMode, color_mode
>>>
>>> c = Color("#336699")
>>> c.red, c.green, c.blue, c.alpha
(51, 102, 153, 255)
>>> c.hsl
HSLView(hue=210, saturation=50.0, lightness=40.0)
>>>
>>> with color_mode(ColorMode.HSL):
...     green = Color(120, 100, 50)
>>> green.hex
'#00FF00FF'

Modules
-------
- colors: the Color class and the input resolver
- conversions: packed <-> RGB/HSL conversions and hex parsing
- config: the process-wide ColorMode setting
- errors: InvalidFormat
"""

from .colors import Color
from .config import ColorConfig, get_config, get_color_mode, set_color_mode, color_mode
from .errors import InvalidFormat
from .types.color_types import ColorMode, PackedColor, RGBView, HSLView
from .conversions import (
    rgb_to_packed,
    hsl_to_packed,
    packed_to_rgb,
    packed_to_hsl,
    np_rgb_to_packed,
    np_hsl_to_packed,
    np_packed_to_rgb,
    np_packed_to_hsl,
    parse_hex,
    packed_to_hex,
)

from boundednumbers import clamp

__version__ = "1.0.0"

__all__ = [
    # Color
    "Color",
    "ColorMode",
    "PackedColor",
    "RGBView",
    "HSLView",

    # Configuration
    "ColorConfig",
    "get_config",
    "get_color_mode",
    "set_color_mode",
    "color_mode",

    # Errors
    "InvalidFormat",

    # Conversions
    "rgb_to_packed",
    "hsl_to_packed",
    "packed_to_rgb",
    "packed_to_hsl",
    "np_rgb_to_packed",
    "np_hsl_to_packed",
    "np_packed_to_rgb",
    "np_packed_to_hsl",
    "parse_hex",
    "packed_to_hex",

    # Utility functions
    "clamp",

    # Version
    "__version__",
]
