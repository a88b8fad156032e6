"""
Chromakit Color Conversions
===========================

Conversions between the packed ``0xRRGGBB`` representation and the RGB and
HSL color spaces, plus hexadecimal string parsing. Every scalar function has
a vectorized numpy counterpart prefixed with ``np_``.

Conversion Functions
-------------------

RGB → packed:
    rgb_to_packed(r, g, b, alpha=255)
        Clamp and pack channels into (color, alpha)
    np_rgb_to_packed(r, g, b)
        Vectorized packing

HSL → packed:
    hsl_to_packed(h, s, l, alpha=255)
        Hue in degrees, saturation/lightness as percentages
    np_hsl_to_packed(h, s, l)
        Vectorized conversion

packed → RGB:
    packed_to_rgb(color)
        Exact channel extraction
    np_packed_to_rgb(color)
        Vectorized extraction

packed → HSL:
    packed_to_hsl(color)
        Lossy: hue rounded to degrees, saturation/lightness to one decimal
    np_packed_to_hsl(color)
        Vectorized conversion

Hexadecimal:
    parse_hex(text)
        "#RGB", "#RGBA", "#RRGGBB" or "#RRGGBBAA" to (color, alpha)
    packed_to_hex(color, alpha=None)
        (color, alpha) to "#RRGGBB" / "#RRGGBBAA"

Examples
--------
>>> from chromakit.conversions import parse_hex, packed_to_hsl
>>> color, alpha = parse_hex("#336699")
>>> packed_to_hsl(color)
HSLView(hue=210, saturation=50.0, lightness=40.0)
"""

from .to_packed import rgb_to_packed, np_rgb_to_packed, hsl_to_packed, np_hsl_to_packed
from .from_packed import packed_to_rgb, np_packed_to_rgb, packed_to_hsl, np_packed_to_hsl
from .hex import parse_hex, packed_to_hex, has_alpha_digits, HEX_LENGTHS

__all__ = [
    # RGB → packed
    'rgb_to_packed',
    'np_rgb_to_packed',

    # HSL → packed
    'hsl_to_packed',
    'np_hsl_to_packed',

    # packed → RGB / HSL
    'packed_to_rgb',
    'np_packed_to_rgb',
    'packed_to_hsl',
    'np_packed_to_hsl',

    # Hexadecimal
    'parse_hex',
    'packed_to_hex',
    'has_alpha_digits',
    'HEX_LENGTHS',
]
