"""
Image loading and saving for Tarnish.

This module is the only place that touches image files. Format detection,
decoding and encoding are left to Pillow; failures are re-raised as the
exception classes below so callers can tell an unreadable path from
undecodable bytes.

Classes:
    ImageLoadError: Base class for load failures (an OSError)
    ImageOpenError: The file could not be opened
    ImageDecodeError: The file was opened but is not a decodable image
    ImageSaveError: The image could not be encoded or written

Functions:
    load_image: Open and fully decode an image file
    to_working_mode: Convert any image to 8-bit RGBA for the pixel filters
    prepare_for_format: Drop alpha for output formats that cannot store it
    save_image: Save an image, inferring the format from the extension
"""

import logging
from pathlib import Path
from typing import Any, Union

import numpy as np

from Tarnish_Libs.pillow_compat import (
    DecompressionBombError,
    Image,
    UnidentifiedImageError,
)
from Tarnish_Libs.constants import (
    FORMATS_WITHOUT_ALPHA,
    WIDE_INTEGER_MODES,
    WORKING_MODE,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ImageLoadError(OSError):
    """An image file could not be loaded."""


class ImageOpenError(ImageLoadError):
    """An image file could not be opened."""


class ImageDecodeError(ImageLoadError):
    """An image file could not be decoded."""


class ImageSaveError(OSError):
    """An image could not be saved."""


def load_image(path: PathLike) -> Any:
    """
    Open and decode an image file.

    Pillow opens lazily; the pixel data is loaded here so decode errors
    surface immediately instead of inside a filter.

    Args:
        path: Path to the image file

    Returns:
        Decoded PIL Image in its original mode

    Raises:
        ImageOpenError: If the file does not exist or cannot be read
        ImageDecodeError: If the file is not a supported or valid image, or
            is too large to decode safely
    """
    path = Path(path)
    try:
        image = Image.open(path)
    except (UnidentifiedImageError, DecompressionBombError) as e:
        raise ImageDecodeError(f"Cannot decode image: {path}") from e
    except OSError as e:
        raise ImageOpenError(f"Cannot open image: {path}") from e

    try:
        image.load()
    except (OSError, ValueError, DecompressionBombError) as e:
        raise ImageDecodeError(f"Cannot decode image: {path}") from e

    logger.debug(f"Loaded {path} ({image.mode} {image.width}x{image.height})")
    return image


def to_working_mode(image: Any) -> Any:
    """
    Convert an image to the 8-bit RGBA mode the pixel filters work in.

    16-bit and 32-bit integer grayscale images are scaled down to 8-bit
    first: a sample keeps the high byte of its 16-bit value, and 32-bit
    samples are clipped to the 16-bit range Pillow loads 16-bit PNGs into.
    A plain convert() would clip every sample above 255 to white.

    Returns:
        The image itself when it is already RGBA, else a converted copy
    """
    if image.mode == WORKING_MODE:
        return image

    if image.mode in WIDE_INTEGER_MODES:
        if image.width == 0 or image.height == 0:
            return Image.new(WORKING_MODE, image.size)
        samples = np.asarray(image)
        if image.mode == "I":
            samples = np.clip(samples, 0, 0xFFFF)
        gray = (samples.astype(np.uint32) >> 8).astype(np.uint8)
        image = Image.fromarray(np.ascontiguousarray(gray))

    return image.convert(WORKING_MODE)


def prepare_for_format(image: Any, path: PathLike) -> Any:
    """
    Convert an image so it can be written in the format implied by path.

    Formats such as JPEG and BMP cannot store alpha, so RGBA-like images
    are flattened to RGB for them. Other images are returned unchanged.
    """
    suffix = Path(path).suffix.lower()
    if suffix in FORMATS_WITHOUT_ALPHA and image.mode in ("RGBA", "LA", "P", "PA"):
        return image.convert("RGB")
    return image


def save_image(image: Any, path: PathLike) -> Path:
    """
    Save an image, letting Pillow infer the format from the extension.

    Args:
        image: PIL Image to save
        path: Destination file path

    Returns:
        The path written to

    Raises:
        ImageSaveError: If the format is unknown or the file cannot be written
    """
    path = Path(path)
    try:
        prepare_for_format(image, path).save(path)
    except (OSError, ValueError, KeyError) as e:
        raise ImageSaveError(f"Cannot save image: {path}") from e

    logger.debug(f"Saved {path}")
    return path
