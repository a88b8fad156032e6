import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBView, HSLView, RGB_MAX, HUE_MAX, PERCENT_MAX

## Packed to RGB

def packed_to_rgb(color: int) -> RGBView:
    """Split a packed ``0xRRGGBB`` integer into its channels. Exact."""
    return RGBView((color & 0xFF0000) >> 16, (color & 0xFF00) >> 8, color & 0xFF)


def np_packed_to_rgb(color: NDArray) -> NDArray:
    """
    Vectorized: Split packed colors into channels.

    Args:
        color: array-like or scalar of packed ``0xRRGGBB`` integers

    Returns:
        rgb: array of shape (..., 3): (red, green, blue) in [0, 255]
    """
    color = np.asarray(color, dtype=np.uint32)
    return np.stack([(color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF], axis=-1)

## Packed to HSL

def packed_to_hsl(color: int) -> HSLView:
    """
    Convert a packed color to hue, saturation and lightness.

    Hue is rounded to whole degrees in [0, 360); saturation and lightness are
    percentages rounded to one decimal place, so the conversion is lossy.

    Args:
        color: Packed ``0xRRGGBB`` integer

    Returns:
        HSLView: (hue, saturation, lightness)
    """
    red, green, blue = packed_to_rgb(color)
    r = red / RGB_MAX
    g = green / RGB_MAX
    b = blue / RGB_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # Hue sector
    if delta == 0:
        h = 0.0
    elif max_c == r:
        h = ((g - b) / delta) % 6
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4

    hue = round(h * 60) % HUE_MAX

    lightness = (max_c + min_c) / 2
    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * lightness - 1))

    return HSLView(hue, round(saturation * PERCENT_MAX, 1), round(lightness * PERCENT_MAX, 1))


def np_packed_to_hsl(color: NDArray) -> NDArray:
    """
    Vectorized: Convert packed colors to hue, saturation and lightness.

    Args:
        color: array-like or scalar of packed ``0xRRGGBB`` integers

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    rgb = np_packed_to_rgb(color) / RGB_MAX
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    # Red wins ties over green, green over blue
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue = np.zeros_like(max_c)
    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = np.round(hue * 60) % HUE_MAX

    lightness = (max_c + min_c) / 2
    saturation = np.zeros_like(lightness)
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))

    return np.stack([
        hue,
        np.round(saturation * PERCENT_MAX, 1),
        np.round(lightness * PERCENT_MAX, 1),
    ], axis=-1)
