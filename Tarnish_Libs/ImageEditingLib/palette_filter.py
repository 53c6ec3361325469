"""
Palette quantization filter operation.

Recolors an image using only the colors that appear in a reference image.
Every pixel takes the RGB of the palette entry closest to it in RGB
Euclidean distance; alpha is not part of the distance and each pixel
keeps its own alpha.

Functions:
    extract_palette: Unique colors of an image in order of first appearance
    nearest_palette_indices: Index of the closest palette entry per pixel
    apply_palettize: Full palette quantization on a PIL Image
"""

import logging
from typing import Any, List

import numpy as np

from Tarnish_Libs.pillow_compat import Image
from Tarnish_Libs.ImageEditingLib.image_editing_ops import to_working_mode
from Tarnish_Libs.ImageEditingLib.image_models import RgbaColor
from Tarnish_Libs.constants import DISTANCE_CHUNK_CELLS

logger = logging.getLogger(__name__)


def extract_palette(image: Any) -> List[RgbaColor]:
    """
    Extract all unique colors from an image.

    Args:
        image: A PIL Image object to extract colors from

    Returns:
        Unique RGBA color tuples in row-major order of first appearance
    """
    image = to_working_mode(image)

    pixels = np.asarray(image, dtype=np.uint8).reshape(-1, 4)
    if len(pixels) == 0:
        return []

    _, first_seen = np.unique(pixels, axis=0, return_index=True)
    return [tuple(int(c) for c in pixels[i]) for i in np.sort(first_seen)]


def nearest_palette_indices(pixels: np.ndarray, palette: np.ndarray) -> np.ndarray:
    """
    Find the closest palette entry for each pixel.

    Args:
        pixels: (N, 3) array of RGB values
        palette: (P, 3) array of RGB values

    Returns:
        (N,) array of palette indices; the earliest entry wins exact ties
    """
    pixels = pixels.astype(np.int32)
    palette = palette.astype(np.int32)
    pixels_per_chunk = max(1, DISTANCE_CHUNK_CELLS // max(1, len(palette)))

    indices = np.empty(len(pixels), dtype=np.int64)
    for start in range(0, len(pixels), pixels_per_chunk):
        stop = min(len(pixels), start + pixels_per_chunk)
        diff = pixels[start:stop, None, :] - palette[None, :, :]
        distances = np.einsum("ijk,ijk->ij", diff, diff)
        indices[start:stop] = np.argmin(distances, axis=1)

    return indices


def apply_palettize(image: Any, palette: List[RgbaColor]) -> Any:
    """
    Quantize an image to a palette.

    Args:
        image: PIL Image
        palette: Non-empty list of RGBA colors, e.g. from extract_palette()

    Returns:
        New RGBA PIL Image of the same size

    Raises:
        ValueError: If the palette is empty
    """
    if not palette:
        raise ValueError("palette must contain at least one color")

    image = to_working_mode(image)

    width, height = image.size
    if width == 0 or height == 0:
        return image.copy()

    source = np.asarray(image, dtype=np.uint8).reshape(-1, 4)
    palette_array = np.asarray(palette, dtype=np.uint8).reshape(-1, 4)

    logger.debug(f"Palettizing {width}x{height} image with {len(palette)} colors")

    indices = nearest_palette_indices(source[:, :3], palette_array[:, :3])

    output = np.empty_like(source)
    output[:, :3] = palette_array[indices, :3]
    output[:, 3] = source[:, 3]
    return Image.fromarray(np.ascontiguousarray(output.reshape(height, width, 4)))
