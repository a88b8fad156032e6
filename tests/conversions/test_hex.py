import pytest

from chromakit.conversions import parse_hex, packed_to_hex, has_alpha_digits
from chromakit.errors import InvalidFormat


def test_parse_six_digits():
    assert parse_hex("#336699") == (0x336699, 255)
    assert parse_hex("336699") == (0x336699, 255)


def test_parse_eight_digits_takes_last_byte_as_alpha():
    assert parse_hex("#33669980") == (0x336699, 0x80)


def test_parse_three_digits_doubles_each_digit():
    assert parse_hex("#f08") == (0xFF0088, 255)
    assert parse_hex("abc") == (0xAABBCC, 255)


def test_parse_four_digits_doubles_alpha_digit():
    assert parse_hex("f08a") == (0xFF0088, 0xAA)
    assert parse_hex("#0000") == (0x000000, 0)


def test_parse_is_case_insensitive():
    assert parse_hex("#AbCdEf") == parse_hex("#abcdef")


@pytest.mark.parametrize("text", ["#1234567", "", "#", "12", "#12345", "123456789"])
def test_parse_rejects_bad_length(text):
    with pytest.raises(InvalidFormat, match="expected 3, 4, 6 or 8 digits"):
        parse_hex(text)


@pytest.mark.parametrize("text", ["#ggg", "12345z", "# 12345", "##123"])
def test_parse_rejects_non_hex_digits(text):
    with pytest.raises(InvalidFormat, match="non-hexadecimal"):
        parse_hex(text)


def test_invalid_format_is_value_error():
    with pytest.raises(ValueError):
        parse_hex("#1234567")


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        parse_hex(0x336699)


def test_packed_to_hex():
    assert packed_to_hex(0x336699) == "#336699"
    assert packed_to_hex(0x336699, 255) == "#336699FF"
    assert packed_to_hex(0x0000FF, 0) == "#0000FF00"


def test_has_alpha_digits():
    assert has_alpha_digits("#f08a")
    assert has_alpha_digits("33669980")
    assert not has_alpha_digits("#f08")
    assert not has_alpha_digits("336699")
