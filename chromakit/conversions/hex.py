from __future__ import annotations
import re
from typing import Optional

from ..errors import InvalidFormat
from ..types.color_types import PackedColor, ALPHA_MAX

HEX_LENGTHS = (3, 4, 6, 8)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_hex(text: str) -> PackedColor:
    """
    Parse a hexadecimal color string.

    Accepted forms, each optionally prefixed with ``#``:

    - ``RGB`` and ``RGBA``: every digit is doubled (``a`` -> ``aa``)
    - ``RRGGBB`` and ``RRGGBBAA``: full bytes

    Forms without an alpha digit are fully opaque.

    Args:
        text: Hexadecimal color string

    Returns:
        PackedColor: (color, alpha)

    Raises:
        InvalidFormat: If the digit count is not 3, 4, 6 or 8, or a digit is not hexadecimal
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a hexadecimal string, got {type(text).__name__}")
    digits = text[1:] if text.startswith("#") else text

    if len(digits) not in HEX_LENGTHS:
        raise InvalidFormat(
            f"Invalid hexadecimal string {text!r}: expected 3, 4, 6 or 8 digits, got {len(digits)}"
        )
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidFormat(f"Invalid hexadecimal string {text!r}: non-hexadecimal digit")

    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)

    alpha = int(digits[6:8], 16) if len(digits) == 8 else ALPHA_MAX
    return PackedColor(int(digits[:6], 16), alpha)


def packed_to_hex(color: int, alpha: Optional[int] = None) -> str:
    """Format a packed color as ``#RRGGBB``, or ``#RRGGBBAA`` when alpha is given."""
    if alpha is None:
        return f"#{color:06X}"
    return f"#{color:06X}{alpha:02X}"


def has_alpha_digits(text: str) -> bool:
    """Whether a hexadecimal string carries its own alpha (4 or 8 digit forms)."""
    digits = text[1:] if text.startswith("#") else text
    return len(digits) in (4, 8)
