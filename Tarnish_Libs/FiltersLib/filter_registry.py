"""
Filter Registry and Manager.

This module provides a centralized registry of filters. It maps the filter
names typed on the command line to filter functions, so new filters can be
added without touching the CLI dispatch.

Classes:
    FilterRegistry: Registry for filter functions

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_filters: Register all built-in filters
"""

from typing import Any, Dict, List, Optional, Sequence
import logging

from Tarnish_Libs.ImageEditingLib.image_models import (
    FilterFunction,
    FilterResult,
    OperationError,
)

logger = logging.getLogger(__name__)


class FilterRegistry:
    """
    Registry for filter functions.

    Filter names are exact, case-sensitive matches. Every filter takes
    (image, args) and returns a FilterResult.

    Example:
        >>> registry = FilterRegistry()
        >>> registry.register("copy", copy_filter)
        >>> registry.register("huerotate", hue_rotate_filter, tags=["color"])
        >>> result = registry.apply("huerotate", image, ["90"])
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._filters: Dict[str, FilterFunction] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        name: str,
        filter_func: FilterFunction,
        description: str = "",
        usage: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a filter.

        Args:
            name: Name used on the command line (e.g., "huerotate")
            filter_func: Callable accepting (image, args) and returning a FilterResult
            description: Human-readable description of the filter
            usage: Argument synopsis shown in listings (e.g., "<degrees>")
            tags: Optional list of tags for categorization (e.g., ["color"])

        Raises:
            ValueError: If name is empty, contains whitespace, or filter_func is not callable
            RuntimeError: If name is already registered
        """
        name = str(name)

        if not name or name != name.strip() or any(c.isspace() for c in name):
            raise ValueError(f"Invalid filter name: {name!r}")

        if not callable(filter_func):
            raise ValueError(f"filter_func must be callable, got {type(filter_func)}")

        if name in self._filters:
            raise RuntimeError(
                f"Filter '{name}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._filters[name] = filter_func
        self._metadata[name] = {
            "description": str(description),
            "usage": str(usage),
            "tags": list(tags) if tags else [],
        }

        logger.debug(f"Registered filter: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a filter.

        Returns:
            True if unregistered, False if name was not registered
        """
        if name in self._filters:
            del self._filters[name]
            del self._metadata[name]
            logger.debug(f"Unregistered filter: {name}")
            return True

        return False

    def get_filter(self, name: str) -> FilterFunction:
        """
        Get the filter function registered under a name.

        Raises:
            KeyError: If name is not registered
        """
        if name not in self._filters:
            available = ", ".join(self.list_filter_names())
            raise KeyError(
                f"No filter registered as '{name}'. "
                f"Available filters: {available}"
            )

        return self._filters[name]

    def has_filter(self, name: str) -> bool:
        return name in self._filters

    def apply(self, name: str, image: Any, args: Sequence[str]) -> FilterResult:
        """
        Run a filter by name.

        A filter that raises instead of returning a result is reported as
        an OperationError; nothing propagates past the filter boundary.

        Args:
            name: The filter to run
            image: Decoded PIL Image
            args: Positional string arguments for the filter

        Returns:
            The filter's FilterResult

        Raises:
            KeyError: If name is not registered
        """
        filter_func = self.get_filter(name)
        try:
            return filter_func(image, list(args))
        except Exception as e:
            logger.exception(f"Filter '{name}' raised an unexpected error")
            return OperationError(f"Filter '{name}' failed: {e}")

    def list_filter_names(self) -> List[str]:
        """
        Get list of all registered filter names.

        Returns:
            Sorted list of filter names
        """
        return sorted(self._filters.keys())

    def get_metadata(self, name: str) -> Dict[str, Any]:
        """
        Get metadata for a filter.

        Returns:
            Dictionary with description, usage, tags

        Raises:
            KeyError: If name is not registered
        """
        if name not in self._metadata:
            raise KeyError(f"No metadata for filter: {name}")

        return dict(self._metadata[name])

    def filter_by_tag(self, tag: str) -> List[str]:
        """
        Get all filters with a specific tag.

        Args:
            tag: The tag to filter by (case-insensitive)

        Returns:
            Sorted list of filter names with the tag
        """
        tag = str(tag).strip().lower()
        return sorted([
            name
            for name, meta in self._metadata.items()
            if tag in [t.lower() for t in meta.get("tags", [])]
        ])


# Global singleton registry
_default_registry: Optional[FilterRegistry] = None


def get_default_registry() -> FilterRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in filters.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = FilterRegistry()
        register_default_filters(_default_registry)

    return _default_registry


def register_default_filters(registry: FilterRegistry) -> None:
    """
    Register all built-in filters.

    This function registers:
    - copy, errortest, argerrortest
    - huerotate, rgbreplace, colorize
    - mosaic
    - pallettize

    Args:
        registry: The registry to register filters with
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
    from Tarnish_Libs.constants import (
        FILTER_ARGERROR_TEST,
        FILTER_COLORIZE,
        FILTER_COPY,
        FILTER_ERROR_TEST,
        FILTER_HUE_ROTATE,
        FILTER_MOSAIC,
        FILTER_PALLETTIZE,
        FILTER_RGB_REPLACE,
    )

    registry.register(
        name=FILTER_COPY,
        filter_func=copy_filter,
        description="Save an unchanged copy of the image",
        tags=["basic"],
    )

    registry.register(
        name=FILTER_ERROR_TEST,
        filter_func=error_test_filter,
        description="Always fail with an error (for testing)",
        tags=["diagnostic"],
    )

    registry.register(
        name=FILTER_ARGERROR_TEST,
        filter_func=argerror_test_filter,
        description="Always fail with an argument error (for testing)",
        tags=["diagnostic"],
    )

    registry.register(
        name=FILTER_HUE_ROTATE,
        filter_func=hue_rotate_filter,
        description="Rotate the hue of every pixel",
        usage="<degrees>",
        tags=["color"],
    )

    registry.register(
        name=FILTER_RGB_REPLACE,
        filter_func=rgb_replace_filter,
        description="Replace red, green and blue with three other colors",
        usage="<RRGGBB> <RRGGBB> <RRGGBB>",
        tags=["color"],
    )

    registry.register(
        name=FILTER_MOSAIC,
        filter_func=mosaic_filter,
        description="Tile the image into cells around random points",
        usage="<points>",
        tags=["spatial"],
    )

    registry.register(
        name=FILTER_COLORIZE,
        filter_func=colorize_filter,
        description="Recolor toward one color, keeping luminance",
        usage="<RRGGBB>",
        tags=["color"],
    )

    registry.register(
        name=FILTER_PALLETTIZE,
        filter_func=palettize_filter,
        description="Recolor using only the colors of another image",
        usage="<palette image>",
        tags=["palette"],
    )

    logger.info("Registered default filters")

