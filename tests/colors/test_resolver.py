import pytest

from chromakit.colors.resolver import resolve_parameters, resolve_hex, resolve_channels, resolve_mode
from chromakit.config import set_color_mode
from chromakit.errors import InvalidFormat
from chromakit.types.color_types import ColorMode, PackedColor


def test_resolve_hex():
    assert resolve_hex("#336699") == PackedColor(0x336699, 255)
    assert resolve_hex("f08a") == PackedColor(0xFF0088, 0xAA)


def test_resolve_hex_alpha_override_is_clamped():
    assert resolve_hex("f08a", 300) == PackedColor(0xFF0088, 255)
    assert resolve_hex("#33669980", 0) == PackedColor(0x336699, 0)


def test_resolve_channels_rgb_defaults():
    assert resolve_channels(64) == PackedColor(0x404040, 255)
    assert resolve_channels(64, 128) == PackedColor(0x408040, 255)
    assert resolve_channels(64, 128, 255, 1) == PackedColor(0x4080FF, 1)


def test_resolve_channels_hsl_defaults():
    assert resolve_channels(0, mode=ColorMode.HSL) == resolve_channels(0, 50, 50, mode=ColorMode.HSL)
    assert resolve_channels(0, 100, mode="hsl") == PackedColor(0xFF0000, 255)


def test_resolve_channels_rejects_missing_first_channel():
    with pytest.raises(TypeError):
        resolve_channels(None)


def test_resolve_channels_rejects_bool():
    with pytest.raises(TypeError):
        resolve_channels(True)


def test_resolve_channels_accepts_numpy_scalars():
    np = pytest.importorskip("numpy")
    assert resolve_channels(np.int64(255), np.float32(0), np.uint8(0)) == PackedColor(0xFF0000, 255)


def test_resolve_parameters_dispatch():
    assert resolve_parameters("#00ff00") == PackedColor(0x00FF00, 255)
    assert resolve_parameters(0, 255, 0) == PackedColor(0x00FF00, 255)
    assert resolve_parameters(120, 100, 50, mode=ColorMode.HSL) == PackedColor(0x00FF00, 255)


def test_resolve_parameters_does_not_read_global_mode():
    set_color_mode(ColorMode.HSL)
    # the mode argument defaults to RGB; only Color consults the setting
    assert resolve_parameters(120, 100, 50) == PackedColor(0x786432, 255)


def test_resolve_parameters_propagates_invalid_format():
    with pytest.raises(InvalidFormat):
        resolve_parameters("#1234567")


def test_resolve_parameters_warns_on_ignored_channels():
    with pytest.warns(UserWarning):
        assert resolve_parameters("#336699", 1, None, 7) == PackedColor(0x336699, 7)


def test_resolve_mode():
    assert resolve_mode(ColorMode.HSL) is ColorMode.HSL
    assert resolve_mode("RGB") is ColorMode.RGB
    set_color_mode("hsl")
    assert resolve_mode(None) is ColorMode.HSL
