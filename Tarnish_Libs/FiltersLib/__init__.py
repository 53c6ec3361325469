"""
Tarnish Filters Library.

This module contains the filter entry points invoked by name from the
command line, and the registry that maps names to them. Every filter takes
(image, args) and returns a FilterResult.

Modules:
    basic_commands: copy and the diagnostic filters
    color_commands: huerotate, rgbreplace, colorize
    mosaic_command: mosaic
    palettize_command: pallettize
    filter_registry: FilterRegistry and the default registry
"""

from Tarnish_Libs.FiltersLib.basic_commands import (
    argerror_test_filter,
    copy_filter,
    error_test_filter,
)
from Tarnish_Libs.FiltersLib.color_commands import (
    colorize_filter,
    hue_rotate_filter,
    rgb_replace_filter,
)
from Tarnish_Libs.FiltersLib.mosaic_command import mosaic_filter
from Tarnish_Libs.FiltersLib.palettize_command import palettize_filter
from Tarnish_Libs.FiltersLib.filter_registry import (
    FilterRegistry,
    get_default_registry,
    register_default_filters,
)

__all__ = [
    "argerror_test_filter",
    "copy_filter",
    "error_test_filter",
    "colorize_filter",
    "hue_rotate_filter",
    "rgb_replace_filter",
    "mosaic_filter",
    "palettize_filter",
    "FilterRegistry",
    "get_default_registry",
    "register_default_filters",
]
