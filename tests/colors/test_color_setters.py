import pytest

from chromakit import Color, InvalidFormat


def test_set_rgb_channels():
    c = Color(0)
    c.red = 255
    c.green = 128
    c.blue = 64
    assert c.color == 0xFF8040
    assert c.alpha == 255


def test_set_rgb_channel_clamps():
    c = Color(10, 20, 30)
    c.green = 999
    c.blue = -5
    assert c.rgb == (10, 255, 0)


def test_set_hue_after_reading_red():
    c = Color(255, 0, 0)
    assert c.red == 255
    c.hue = 120
    assert c.rgb == (0, 255, 0)


def test_set_saturation_and_lightness():
    c = Color("#ff0000")
    c.lightness = 25
    assert c.color == 0x800000
    assert c.hsl == (0, 100.0, 25.1)

    c.saturation = 0
    assert c.saturation == 0.0
    assert c.red == c.green == c.blue


def test_set_hue_keeps_alpha():
    c = Color(255, 0, 0, 77)
    c.hue = 240
    assert c.color == 0x0000FF
    assert c.alpha == 77


def test_set_hue_clamps():
    c = Color("#ff0000")
    c.hue = 500
    assert c.color == 0xFF0000


def test_alpha_setter():
    c = Color("#336699")
    c.alpha = 128
    assert c.alpha == 128
    c.alpha = 400
    assert c.alpha == 255
    c.alpha = -3
    assert c.alpha == 0
    assert c.color == 0x336699


def test_alpha_setter_is_idempotent():
    c = Color("#33669980")
    rgb, hsl = c.rgb, c.hsl
    c.alpha = c.alpha
    assert c.alpha == 0x80
    assert c.color == 0x336699
    assert c.rgb is rgb
    assert c.hsl is hsl


def test_hex_setter_keeps_alpha_without_alpha_digits():
    c = Color(0, 0, 0, 100)
    c.hex = "#336699"
    assert c.color == 0x336699
    assert c.alpha == 100


def test_hex_setter_replaces_alpha_with_alpha_digits():
    c = Color(0, 0, 0, 100)
    c.hex = "f08a"
    assert c.color == 0xFF0088
    assert c.alpha == 0xAA

    c.hex = "#12345678"
    assert c.color == 0x123456
    assert c.alpha == 0x78


def test_hex_setter_rejects_invalid_string():
    c = Color("#336699")
    with pytest.raises(InvalidFormat):
        c.hex = "#12345"
    assert c.color == 0x336699
