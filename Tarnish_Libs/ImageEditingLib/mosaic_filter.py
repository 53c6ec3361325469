"""
Mosaic (Voronoi tiling) filter operation.

Scatters seed points uniformly over the image and paints every pixel with
the original color found under its nearest seed, producing flat Voronoi
cells. Distances are computed with NumPy one band of rows at a time so the
distance matrix stays bounded.

Functions:
    generate_seed_points: Draw random seed coordinates inside the image
    nearest_seed_indices: Index of the nearest seed for every pixel
    apply_mosaic: Full mosaic filter on a PIL Image
"""

import logging
from typing import Any, Optional, Tuple

import numpy as np

from Tarnish_Libs.pillow_compat import Image
from Tarnish_Libs.ImageEditingLib.image_editing_ops import to_working_mode
from Tarnish_Libs.constants import DISTANCE_CHUNK_CELLS

logger = logging.getLogger(__name__)


def generate_seed_points(
    width: int,
    height: int,
    point_count: int,
    rng: np.random.Generator,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Draw seed coordinates uniformly over [0, width) x [0, height).

    Args:
        width: Image width in pixels
        height: Image height in pixels
        point_count: Number of seeds to draw (>= 1)
        rng: Generator drawn from sequentially for all seeds

    Returns:
        Tuple of (xs, ys) integer arrays of length point_count
    """
    xs = rng.integers(0, width, size=point_count)
    ys = rng.integers(0, height, size=point_count)
    return xs, ys


def nearest_seed_indices(
    width: int,
    height: int,
    seed_xs: np.ndarray,
    seed_ys: np.ndarray,
) -> np.ndarray:
    """
    Find the nearest seed for every pixel.

    Squared Euclidean distance orders seeds the same way as Euclidean
    distance; argmin keeps the first seed on exact ties.

    Returns:
        (height, width) array of seed indices
    """
    point_count = len(seed_xs)
    seed_xs = seed_xs.astype(np.int64)
    seed_ys = seed_ys.astype(np.int64)
    columns = np.arange(width, dtype=np.int64)

    rows_per_band = max(1, DISTANCE_CHUNK_CELLS // max(1, width * point_count))
    indices = np.empty((height, width), dtype=np.int64)

    for top in range(0, height, rows_per_band):
        bottom = min(height, top + rows_per_band)
        rows = np.arange(top, bottom, dtype=np.int64)
        dx = columns[None, :, None] - seed_xs[None, None, :]
        dy = rows[:, None, None] - seed_ys[None, None, :]
        distances = dx * dx + dy * dy
        indices[top:bottom] = np.argmin(distances, axis=2)

    return indices


def apply_mosaic(
    image: Any,
    point_count: int,
    rng: Optional[np.random.Generator] = None,
) -> Any:
    """
    Tile an image into Voronoi cells around random seed points.

    Args:
        image: PIL Image
        point_count: Number of seed points (>= 1)
        rng: Optional generator; a fresh unseeded one is created per call

    Returns:
        New RGBA PIL Image of the same size

    Raises:
        ValueError: If point_count < 1
    """
    if point_count < 1:
        raise ValueError(f"point_count must be >= 1, got {point_count}")

    image = to_working_mode(image)

    if rng is None:
        rng = np.random.default_rng()

    width, height = image.size
    if width == 0 or height == 0:
        return image.copy()

    source = np.asarray(image, dtype=np.uint8)

    seed_xs, seed_ys = generate_seed_points(width, height, point_count, rng)
    seed_colors = source[seed_ys, seed_xs]
    indices = nearest_seed_indices(width, height, seed_xs, seed_ys)

    logger.debug(f"Mosaic of {width}x{height} image with {point_count} seeds")

    output = np.ascontiguousarray(seed_colors[indices], dtype=np.uint8)
    return Image.fromarray(output)
