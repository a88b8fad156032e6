from __future__ import annotations
from typing import Optional, Union

from boundednumbers import clamp

from ..conversions import (
    rgb_to_packed, hsl_to_packed,
    packed_to_rgb, packed_to_hsl,
    packed_to_hex, has_alpha_digits,
)
from ..types.color_types import (
    ChannelInput, ColorModeLike, PackedColor, RGBView, HSLView, Scalar,
    ALPHA_MAX,
)
from ._view_cache import CachedView, get_reusable_view
from .resolver import resolve_parameters, resolve_hex, resolve_mode


class Color:
    """
    Mutable color stored as a packed ``0xRRGGBB`` integer plus an alpha byte.

    The RGB and HSL views are derived on first access and reused until the
    packed value changes. Channel setters rebuild the whole triple of their
    color space, so setting ``hue`` on a color last edited through ``red``
    goes through a decode/recompose round trip.

    >>> c = Color("#336699")
    >>> c.rgb
    RGBView(red=51, green=102, blue=153)
    >>> c.hue = 30
    >>> c.hex
    '#996633FF'
    """

    __slots__ = ('_color', '_alpha', '_rgb_cache', '_hsl_cache')

    def __init__(
        self,
        a: Union[str, Scalar, Color],
        b: ChannelInput = None,
        c: ChannelInput = None,
        d: ChannelInput = None,
        *,
        mode: Optional[ColorModeLike] = None,
    ) -> None:
        """
        Args:
            a: Hexadecimal string, another Color, or red/hue depending on the mode
            b: Green or saturation
            c: Blue or lightness
            d: Alpha in [0, 255]
            mode: ColorMode for reading (a, b, c); defaults to the configured one

        Raises:
            InvalidFormat: If ``a`` is a malformed hexadecimal string
            TypeError: If a channel is neither a string nor a number
        """
        if isinstance(a, Color):
            color, alpha = a.color, a.alpha
        else:
            color, alpha = resolve_parameters(a, b, c, d, mode=resolve_mode(mode))
        self._color: int = color
        self._alpha: int = alpha
        self._rgb_cache: Optional[CachedView[RGBView]] = None
        self._hsl_cache: Optional[CachedView[HSLView]] = None

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, text: str, alpha: ChannelInput = None) -> Color:
        color, alpha = resolve_hex(text, alpha)
        return cls.from_packed(color, alpha)

    @classmethod
    def from_rgb(cls, r: Scalar, g: Scalar, b: Scalar, alpha: Scalar = ALPHA_MAX) -> Color:
        return cls.from_packed(*rgb_to_packed(r, g, b, alpha))

    @classmethod
    def from_hsl(cls, h: Scalar, s: Scalar, l: Scalar, alpha: Scalar = ALPHA_MAX) -> Color:
        return cls.from_packed(*hsl_to_packed(h, s, l, alpha))

    @classmethod
    def from_packed(cls, color: int, alpha: Scalar = ALPHA_MAX) -> Color:
        """Build a Color from a packed ``0xRRGGBB`` integer; channels outside 24 bits are dropped."""
        instance = cls.__new__(cls)
        return instance._assign(int(color) & 0xFFFFFF, alpha)

    def _assign(self, color: int, alpha: Scalar) -> Color:
        self._color = color
        self._alpha = int(round(clamp(alpha, 0, ALPHA_MAX)))
        self._rgb_cache = None
        self._hsl_cache = None
        return self

    # ------------------ STATIC CONVERSIONS ------------------
    @staticmethod
    def get_color_value_from_rgb(r: Scalar, g: Scalar, b: Scalar, a: Scalar = ALPHA_MAX) -> PackedColor:
        return rgb_to_packed(r, g, b, a)

    @staticmethod
    def get_color_value_from_hsl(h: Scalar, s: Scalar, l: Scalar, a: Scalar = ALPHA_MAX) -> PackedColor:
        return hsl_to_packed(h, s, l, a)

    # ------------------ DERIVED VIEWS ------------------
    @property
    def color(self) -> int:
        return self._color

    @property
    def rgb(self) -> RGBView:
        view = get_reusable_view(self._rgb_cache, self._color)
        if view is None:
            view = packed_to_rgb(self._color)
            self._rgb_cache = CachedView(self._color, view)
        return view

    @property
    def hsl(self) -> HSLView:
        view = get_reusable_view(self._hsl_cache, self._color)
        if view is None:
            view = packed_to_hsl(self._color)
            self._hsl_cache = CachedView(self._color, view)
        return view

    # ------------------ RGB CHANNELS ------------------
    @property
    def red(self) -> int:
        return self.rgb.red

    @red.setter
    def red(self, red: Scalar) -> None:
        self._color = rgb_to_packed(red, self.green, self.blue).color

    @property
    def green(self) -> int:
        return self.rgb.green

    @green.setter
    def green(self, green: Scalar) -> None:
        self._color = rgb_to_packed(self.red, green, self.blue).color

    @property
    def blue(self) -> int:
        return self.rgb.blue

    @blue.setter
    def blue(self, blue: Scalar) -> None:
        self._color = rgb_to_packed(self.red, self.green, blue).color

    # ------------------ HSL CHANNELS ------------------
    @property
    def hue(self) -> int:
        return self.hsl.hue

    @hue.setter
    def hue(self, hue: Scalar) -> None:
        self._color = hsl_to_packed(hue, self.saturation, self.lightness).color

    @property
    def saturation(self) -> float:
        return self.hsl.saturation

    @saturation.setter
    def saturation(self, saturation: Scalar) -> None:
        self._color = hsl_to_packed(self.hue, saturation, self.lightness).color

    @property
    def lightness(self) -> float:
        return self.hsl.lightness

    @lightness.setter
    def lightness(self, lightness: Scalar) -> None:
        self._color = hsl_to_packed(self.hue, self.saturation, lightness).color

    # ------------------ ALPHA / HEX ------------------
    @property
    def alpha(self) -> int:
        return self._alpha

    @alpha.setter
    def alpha(self, alpha: Scalar) -> None:
        """Set alpha, clamped to [0, 255]."""
        self._alpha = int(round(clamp(alpha, 0, ALPHA_MAX)))

    @property
    def hex(self) -> str:
        return self.to_hex()

    @hex.setter
    def hex(self, text: str) -> None:
        """
        Replace the color from a hexadecimal string.

        The alpha is only replaced when the string carries one (4 or 8 digits).

        Raises:
            InvalidFormat: If the string is not a valid hexadecimal color
        """
        color, alpha = resolve_hex(text)
        self._color = color
        if has_alpha_digits(text):
            self._alpha = alpha

    def to_hex(self, include_alpha: bool = True) -> str:
        return packed_to_hex(self._color, self._alpha if include_alpha else None)

    # ------------------ PROTOCOL ------------------
    def copy(self) -> Color:
        return type(self)(self)

    def __repr__(self) -> str:
        return f'Color("{self.to_hex()}")'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._color == other._color and self._alpha == other._alpha

    __hash__ = None  # mutable

