"""Turn the accepted constructor and setter inputs into a canonical (color, alpha) pair."""

from __future__ import annotations
import warnings
from numbers import Real
from typing import Optional, Union

from boundednumbers import clamp

from ..config import get_color_mode
from ..conversions import parse_hex, rgb_to_packed, hsl_to_packed
from ..types.color_types import (
    ChannelInput, ColorMode, ColorModeLike, PackedColor, Scalar,
    ALPHA_MAX, HSL_DEFAULT, to_color_mode,
)


def _check_channel(name: str, value: ChannelInput) -> None:
    if value is not None and (isinstance(value, bool) or not isinstance(value, Real)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")


def resolve_hex(text: str, alpha: ChannelInput = None) -> PackedColor:
    """
    Resolve a hexadecimal string, letting an explicit alpha override the parsed one.

    Raises:
        InvalidFormat: If the string is not a valid hexadecimal color
    """
    _check_channel("alpha", alpha)
    color, parsed_alpha = parse_hex(text)
    if alpha is None:
        return PackedColor(color, parsed_alpha)
    return PackedColor(color, int(round(clamp(alpha, 0, ALPHA_MAX))))


def resolve_channels(
    a: Scalar,
    b: ChannelInput = None,
    c: ChannelInput = None,
    alpha: ChannelInput = None,
    mode: ColorModeLike = ColorMode.RGB,
) -> PackedColor:
    """
    Resolve a numeric channel triple according to the color mode.

    In RGB mode missing green/blue repeat the red value, so a single number is
    a gray. In HSL mode missing saturation/lightness default to 50. A missing
    alpha is fully opaque.

    Args:
        a: Red or hue
        b: Green or saturation
        c: Blue or lightness
        alpha: Alpha in [0, 255]
        mode: How to read the triple

    Returns:
        PackedColor: (color, alpha)
    """
    for name, value in (("a", a), ("b", b), ("c", c), ("alpha", alpha)):
        _check_channel(name, value)
    if a is None:
        raise TypeError("a must be a number, got NoneType")

    alpha = ALPHA_MAX if alpha is None else alpha

    if to_color_mode(mode) is ColorMode.HSL:
        return hsl_to_packed(
            a,
            HSL_DEFAULT if b is None else b,
            HSL_DEFAULT if c is None else c,
            alpha,
        )
    return rgb_to_packed(a, a if b is None else b, a if c is None else c, alpha)


def resolve_parameters(
    a: Union[str, Scalar],
    b: ChannelInput = None,
    c: ChannelInput = None,
    alpha: ChannelInput = None,
    mode: ColorModeLike = ColorMode.RGB,
) -> PackedColor:
    """Dispatch a hexadecimal string or a numeric triple to the matching resolver."""
    if isinstance(a, str):
        if b is not None or c is not None:
            warnings.warn(
                "Channel arguments are ignored when a hexadecimal string is given",
                stacklevel=3,
            )
        return resolve_hex(a, alpha)

    return resolve_channels(a, b, c, alpha, mode)


def resolve_mode(mode: Optional[ColorModeLike]) -> ColorMode:
    """Explicit mode if given, else the configured one."""
    if mode is not None:
        return to_color_mode(mode)
    return get_color_mode()
