"""
Command-line entry point for the palette quantization filter.

The reference image is decoded with the same loader as the primary input,
so an unreadable reference is an operation error rather than an argument
error.

Functions:
    palettize_filter: pallettize <palette image path>
"""

import logging
from typing import Any, Sequence

from Tarnish_Libs.ImageEditingLib.image_editing_ops import (
    ImageDecodeError,
    ImageOpenError,
    load_image,
)
from Tarnish_Libs.ImageEditingLib.image_models import (
    ArgumentError,
    FilterResult,
    OperationError,
    Success,
)
from Tarnish_Libs.ImageEditingLib.palette_filter import apply_palettize, extract_palette
from Tarnish_Libs.FiltersLib.arguments import has_count
from Tarnish_Libs.constants import MSG_REQUIRES_PALETTE

logger = logging.getLogger(__name__)


def palettize_filter(image: Any, args: Sequence[str]) -> FilterResult:
    """
    Recolor the image using only colors found in a reference image.

    Arguments:
        [0]: Path to the palette (reference) image
    """
    if not has_count(args, 1) or not args[0]:
        return ArgumentError(MSG_REQUIRES_PALETTE)

    palette_path = args[0]
    try:
        reference = load_image(palette_path)
    except ImageOpenError:
        return OperationError(f"Failed to open palette image {palette_path}.")
    except ImageDecodeError:
        return OperationError(f"Failed to decode palette image {palette_path}.")

    palette = extract_palette(reference)
    if not palette:
        return OperationError(f"Palette image {palette_path} has no pixels.")

    logger.debug(f"Palette from {palette_path} has {len(palette)} colors")
    return Success(apply_palettize(image, palette))
