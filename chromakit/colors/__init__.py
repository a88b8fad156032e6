"""
Chromakit Color Class
=====================

``Color`` keeps one canonical value, a packed ``0xRRGGBB`` integer and an
alpha byte, and derives RGB and HSL views from it on demand.

Usage
-----
>>> from chromakit.colors import Color
>>>
>>> # Hexadecimal input, 3/4/6/8 digits with an optional '#'
>>> Color("#f08a").hex
'#FF0088AA'
>>>
>>> # Numeric input follows the active ColorMode (RGB by default)
>>> gray = Color(128)
>>> gray.rgb
RGBView(red=128, green=128, blue=128)
>>>
>>> # Explicit entry points ignore the ColorMode
>>> Color.from_hsl(120, 100, 50).green
255

Notes
-----
- Every write path clamps; reads never do
- RGB views round-trip exactly, HSL views are rounded and lossy
- Cached views compare the packed value they were built from with the
  current one, so no explicit invalidation is needed
"""

from .color import Color
from .resolver import resolve_parameters, resolve_hex, resolve_channels

__all__ = ['Color', 'resolve_parameters', 'resolve_hex', 'resolve_channels']
