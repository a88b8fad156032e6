"""Basic Chromakit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromakit import (
    Color,
    ColorMode,
    InvalidFormat,
    color_mode,
    np_hsl_to_packed,
    np_packed_to_rgb,
)


def demonstrate_colors() -> None:
    # Parse hex strings and read both color-space views.
    accent = Color("#336699")
    print("RGB:", accent.rgb)
    print("HSL:", accent.hsl)

    # Short form with an alpha digit.
    print("f08a ->", Color("f08a"))

    # Channel edits go through the matching color space.
    accent.hue = 30
    accent.alpha = 128
    print("Rotated hue:", accent.hex)


def demonstrate_modes() -> None:
    # Numeric triples follow the active ColorMode.
    print("RGB mode:", Color(120, 100, 50))
    with color_mode(ColorMode.HSL):
        print("HSL mode:", Color(120, 100, 50))

    try:
        Color("#1234567")
    except InvalidFormat as exc:
        print("Rejected:", exc)


def demonstrate_arrays() -> None:
    # A hue wheel as packed integers, then split back into channels.
    hues = np.linspace(0, 360, 7)
    packed = np_hsl_to_packed(hues, 100, 50)
    print("Hue wheel:", [f"#{int(p):06X}" for p in packed])
    print("Channels:\n", np_packed_to_rgb(packed))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_modes()
    demonstrate_arrays()
