import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp

from ..types.color_types import (
    PackedColor, Scalar,
    RGB_MAX, ALPHA_MAX, HUE_MAX, PERCENT_MAX,
)


def _to_channel(value: Scalar, maximum: int = RGB_MAX) -> int:
    return int(round(clamp(value, 0, maximum)))


def _hue_sextant(h: float) -> int:
    """Index of the 60 degree hue sextant, with 360 wrapping to 0."""
    return int(h // 60) % 6


## RGB to packed

def rgb_to_packed(r: Scalar, g: Scalar, b: Scalar, alpha: Scalar = ALPHA_MAX) -> PackedColor:
    """
    Pack red, green and blue channels into a single ``0xRRGGBB`` integer.

    Channels and alpha are clamped to [0, 255] and rounded to integers.

    Args:
        r: Red channel in [0, 255]
        g: Green channel in [0, 255]
        b: Blue channel in [0, 255]
        alpha: Alpha in [0, 255]

    Returns:
        PackedColor: (color, alpha)
    """
    r, g, b = _to_channel(r), _to_channel(g), _to_channel(b)
    return PackedColor(r << 16 | g << 8 | b, _to_channel(alpha, ALPHA_MAX))


def np_rgb_to_packed(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Pack red, green and blue channels.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        packed: uint32 array broadcast from the inputs
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    channels = [
        np.rint(np.clip(np.broadcast_to(c, out_shape), 0, RGB_MAX)).astype(np.uint32)
        for c in (r, g, b)
    ]
    return (channels[0] << 16) | (channels[1] << 8) | channels[2]


## HSL to packed

def _hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    sextant = _hue_sextant(h)
    if sextant == 0:
        r, g, b = c, x, 0.0
    elif sextant == 1:
        r, g, b = x, c, 0.0
    elif sextant == 2:
        r, g, b = 0.0, c, x
    elif sextant == 3:
        r, g, b = 0.0, x, c
    elif sextant == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def hsl_to_packed(h: Scalar, s: Scalar, l: Scalar, alpha: Scalar = ALPHA_MAX) -> PackedColor:
    """
    Convert hue, saturation and lightness into a packed color.

    Args:
        h: Hue in degrees, clamped to [0, 360]
        s: Saturation percentage, clamped to [0, 100]
        l: Lightness percentage, clamped to [0, 100]
        alpha: Alpha in [0, 255]

    Returns:
        PackedColor: (color, alpha)
    """
    h = clamp(h, 0, HUE_MAX)
    s = clamp(s, 0, PERCENT_MAX) / PERCENT_MAX
    l = clamp(l, 0, PERCENT_MAX) / PERCENT_MAX

    r, g, b = _hsl_to_unit_rgb(h, s, l)
    return rgb_to_packed(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX, alpha)


def np_hsl_to_packed(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert hue, saturation and lightness into packed colors.

    Args:
        h: array-like or scalar, hue in degrees [0, 360]
        s: array-like or scalar, saturation percentage [0, 100]
        l: array-like or scalar, lightness percentage [0, 100]

    Returns:
        packed: uint32 array broadcast from the inputs
    """
    h = np.clip(np.asarray(h, dtype=float), 0, HUE_MAX)
    s = np.clip(np.asarray(s, dtype=float), 0, PERCENT_MAX) / PERCENT_MAX
    l = np.clip(np.asarray(l, dtype=float), 0, PERCENT_MAX) / PERCENT_MAX

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = l - c / 2
    zero = np.zeros(out_shape)

    sextant = np.floor(h / 60).astype(int) % 6
    masks = [sextant == i for i in range(5)]
    r = np.select(masks, [c, x, zero, zero, x], default=c)
    g = np.select(masks, [x, c, c, x, zero], default=zero)
    b = np.select(masks, [zero, zero, x, c, c], default=x)

    return np_rgb_to_packed((r + m) * RGB_MAX, (g + m) * RGB_MAX, (b + m) * RGB_MAX)
