"""
Command-line entry point for the mosaic filter.

Functions:
    mosaic_filter: mosaic <point count>
"""

from typing import Any, Sequence

from Tarnish_Libs.ImageEditingLib.image_models import ArgumentError, FilterResult, Success
from Tarnish_Libs.ImageEditingLib.mosaic_filter import apply_mosaic
from Tarnish_Libs.FiltersLib.arguments import has_count, parse_int
from Tarnish_Libs.constants import MSG_REQUIRES_POINT_COUNT


def mosaic_filter(image: Any, args: Sequence[str]) -> FilterResult:
    """
    Tile the image into Voronoi cells around random seed points.

    Arguments:
        [0]: Number of seed points, at least 1
    """
    if not has_count(args, 1):
        return ArgumentError(MSG_REQUIRES_POINT_COUNT)

    point_count = parse_int(args[0])
    if point_count is None or point_count < 1:
        return ArgumentError(MSG_REQUIRES_POINT_COUNT)

    return Success(apply_mosaic(image, point_count))
