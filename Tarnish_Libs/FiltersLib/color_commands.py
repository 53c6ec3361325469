"""
Command-line entry points for the per-pixel color filters.

Each function validates its positional arguments, then delegates to the
matching operation in ImageEditingLib.color_filters.

Functions:
    hue_rotate_filter: huerotate <degrees>
    rgb_replace_filter: rgbreplace <red RRGGBB> <green RRGGBB> <blue RRGGBB>
    colorize_filter: colorize <RRGGBB>
"""

import logging
from typing import Any, List, Sequence

from Tarnish_Libs.ImageEditingLib.color_codec import (
    InvalidColorFormat,
    decode_hex_color,
    encode_hex_color,
)
from Tarnish_Libs.ImageEditingLib.color_filters import (
    apply_channel_remap,
    apply_colorize,
    apply_hue_rotate,
)
from Tarnish_Libs.ImageEditingLib.image_models import (
    ArgumentError,
    FilterResult,
    RgbColor,
    Success,
)
from Tarnish_Libs.FiltersLib.arguments import has_count, parse_int
from Tarnish_Libs.constants import (
    MSG_REQUIRES_COLOR,
    MSG_REQUIRES_DEGREES,
    MSG_REQUIRES_THREE_COLORS,
)

logger = logging.getLogger(__name__)

BASIS_NAMES = ("red", "green", "blue")


def hue_rotate_filter(image: Any, args: Sequence[str]) -> FilterResult:
    """
    Rotate the hue of every pixel.

    Arguments:
        [0]: Signed integer number of degrees
    """
    if not has_count(args, 1):
        return ArgumentError(MSG_REQUIRES_DEGREES)

    degrees = parse_int(args[0])
    if degrees is None:
        return ArgumentError(MSG_REQUIRES_DEGREES)

    logger.debug(f"Rotating hue by {degrees} degrees")
    return Success(apply_hue_rotate(image, degrees))


def rgb_replace_filter(image: Any, args: Sequence[str]) -> FilterResult:
    """
    Recombine each pixel through red, green and blue basis colors.

    Arguments:
        [0]: Color replacing pure red (RRGGBB)
        [1]: Color replacing pure green (RRGGBB)
        [2]: Color replacing pure blue (RRGGBB)
    """
    if not has_count(args, 3):
        return ArgumentError(MSG_REQUIRES_THREE_COLORS)

    bases: List[RgbColor] = []
    for name, value in zip(BASIS_NAMES, args):
        try:
            bases.append(decode_hex_color(value))
        except InvalidColorFormat as e:
            return ArgumentError(f"Invalid {name} color: {e.reason}.")

    logger.debug(
        "Replacing channels with bases "
        + ", ".join(encode_hex_color(basis) for basis in bases)
    )
    return Success(apply_channel_remap(image, bases[0], bases[1], bases[2]))


def colorize_filter(image: Any, args: Sequence[str]) -> FilterResult:
    """
    Recolor the image toward a target color, keeping relative luminance.

    Arguments:
        [0]: Target color (RRGGBB)
    """
    if not has_count(args, 1):
        return ArgumentError(MSG_REQUIRES_COLOR)

    try:
        target = decode_hex_color(args[0])
    except InvalidColorFormat as e:
        return ArgumentError(f"Invalid color: {e.reason}.")

    logger.debug(f"Colorizing toward {encode_hex_color(target)}")
    return Success(apply_colorize(image, target))
