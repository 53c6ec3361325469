"""
Hex color decoding for Tarnish filters.

Colors are given on the command line as six hexadecimal digits (RRGGBB),
without a prefix and in either case. Alpha is never part of the format;
filters keep the alpha of the pixel they are rewriting.

Classes:
    InvalidColorFormat: Raised when a color string cannot be decoded

Functions:
    decode_hex_color: Parse RRGGBB into three float channel values
    encode_hex_color: Format channel values back into RRGGBB
"""

import string
from typing import Sequence

from Tarnish_Libs.ImageEditingLib.image_models import RgbColor
from Tarnish_Libs.constants import CHANNEL_MAX, HEX_COLOR_LENGTH

REASON_MISSING_DIGITS = "missing digits"
REASON_TOO_MANY_DIGITS = "too many digits"
REASON_NOT_HEX = "not a hexadecimal number"

_HEX_DIGITS = set(string.hexdigits)


class InvalidColorFormat(ValueError):
    """A color string is not exactly six hexadecimal digits."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Invalid color '{value}': {reason}")
        self.value = value
        self.reason = reason


def decode_hex_color(value: str) -> RgbColor:
    """
    Decode an RRGGBB string into red, green and blue channel values.

    Args:
        value: Six hexadecimal digits, e.g. "FF8000" or "ff8000"

    Returns:
        Tuple of three floats in [0, 255]

    Raises:
        InvalidColorFormat: If the string is too short, too long, or any
            two-digit pair is not hexadecimal
    """
    if len(value) < HEX_COLOR_LENGTH:
        raise InvalidColorFormat(value, REASON_MISSING_DIGITS)
    if len(value) > HEX_COLOR_LENGTH:
        raise InvalidColorFormat(value, REASON_TOO_MANY_DIGITS)

    channels = []
    for start in range(0, HEX_COLOR_LENGTH, 2):
        pair = value[start:start + 2]
        # int(..., 16) alone would also accept signs and whitespace
        if not all(c in _HEX_DIGITS for c in pair):
            raise InvalidColorFormat(value, REASON_NOT_HEX)
        channels.append(float(int(pair, 16)))

    return channels[0], channels[1], channels[2]


def encode_hex_color(color: Sequence[float]) -> str:
    """Format the first three channels of a color as uppercase RRGGBB."""
    return "".join(
        f"{int(max(0, min(CHANNEL_MAX, round(channel)))):02X}"
        for channel in color[:3]
    )
