"""RGB colour values as accepted on the command line."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DECIMAL_BYTE = re.compile(r"\+?[0-9]+")
_HEX_BYTE = re.compile(r"\+?[0-9a-fA-F]+")


def _parse_byte(text: str, *, hexadecimal: bool, error: str) -> int:
    pattern = _HEX_BYTE if hexadecimal else _DECIMAL_BYTE
    if not pattern.fullmatch(text):
        raise ValueError(error)
    value = int(text, 16 if hexadecimal else 10)
    if value > 0xFF:
        raise ValueError(error)
    return value


@dataclass(frozen=True)
class Colour:
    """A colour with 8-bit red, green and blue channels."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be between 0 and 255, got {value}")

    @classmethod
    def parse(cls, text: str) -> Colour:
        """Parse ``#RRGGBB``, ``#RGB`` or ``R,G,B`` (decimal) into a colour."""
        byte_length = len(text.encode("utf-8"))
        if text.startswith("#") and byte_length in (4, 7):
            if byte_length == 7:
                digits = text[1:]
            else:
                digits = "".join(ch * 2 for ch in text[1:4])
            return cls(
                _parse_byte(digits[0:2], hexadecimal=True, error="Invalid red value in hex"),
                _parse_byte(digits[2:4], hexadecimal=True, error="Invalid green value in hex"),
                _parse_byte(digits[4:6], hexadecimal=True, error="Invalid blue value in hex"),
            )

        parts = text.split(",")
        if len(parts) != 3:
            raise ValueError("Colour must be in the format R,G,B")
        red, green, blue = parts
        return cls(
            _parse_byte(red, hexadecimal=False, error="Invalid red value"),
            _parse_byte(green, hexadecimal=False, error="Invalid green value"),
            _parse_byte(blue, hexadecimal=False, error="Invalid blue value"),
        )