"""
Process-wide color input settings.

The active ColorMode decides how a bare numeric triple passed to ``Color`` is
read: as red/green/blue or as hue/saturation/lightness. The last value set
wins; ``Color(..., mode=...)`` overrides it for a single call.

>>> from chromakit import Color, ColorMode, color_mode
>>> with color_mode(ColorMode.HSL):
...     green = Color(120, 100, 50)
>>> green.rgb
RGBView(red=0, green=255, blue=0)
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from .types.color_types import ColorMode, ColorModeLike, to_color_mode


@dataclass
class ColorConfig:
    mode: ColorMode = ColorMode.RGB

    def __post_init__(self):
        self.mode = to_color_mode(self.mode)


_config = ColorConfig()


def get_config() -> ColorConfig:
    return _config


def get_color_mode() -> ColorMode:
    """Return the ColorMode used when no explicit mode is given."""
    return _config.mode


def set_color_mode(mode: ColorModeLike) -> None:
    """
    Set the ColorMode used when no explicit mode is given.

    Args:
        mode: ColorMode member or its name ("rgb" / "hsl")

    Raises:
        ValueError: If the name is not a known color mode
    """
    _config.mode = to_color_mode(mode)


@contextmanager
def color_mode(mode: ColorModeLike) -> Iterator[ColorMode]:
    """Temporarily switch the ColorMode, restoring the previous one on exit."""
    previous = _config.mode
    set_color_mode(mode)
    try:
        yield _config.mode
    finally:
        _config.mode = previous
