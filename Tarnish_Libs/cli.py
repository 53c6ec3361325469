"""
Command-line interface for Tarnish.

Usage:
    tarnish [-v] <input> <output> <filter> [filter-args...]
    tarnish --list-filters

Everything after the filter name is passed to the filter verbatim, so
negative numbers (``huerotate -90``) need no escaping. Diagnostics go to
stderr prefixed with ERROR or ARGUMENT ERROR; the exit status is 0 on
success and 1 on any failure.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from Tarnish_Libs import __version__
from Tarnish_Libs.FiltersLib.filter_registry import FilterRegistry, get_default_registry
from Tarnish_Libs.ImageEditingLib.image_editing_ops import (
    ImageDecodeError,
    ImageOpenError,
    ImageSaveError,
    load_image,
    save_image,
)
from Tarnish_Libs.constants import (
    DEFAULT_LOG_LEVEL,
    FILTER_CATEGORIES,
    LABEL_ARGUMENT_ERROR,
    LABEL_COMPLETE,
    LABEL_ERROR,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
    MSG_DECODE_FAILED,
    MSG_INVALID_COMMAND,
    MSG_MISSING_PATHS,
    MSG_NO_COMMAND,
    MSG_OPEN_FAILED,
    MSG_SAVE_FAILED,
    STYLE_ARGUMENT_ERROR,
    STYLE_COMPLETE,
    STYLE_ERROR,
    STYLE_RESET,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_STYLES = {
    LABEL_ERROR: STYLE_ERROR,
    LABEL_ARGUMENT_ERROR: STYLE_ARGUMENT_ERROR,
    LABEL_COMPLETE: STYLE_COMPLETE,
}


def format_message(label: str, text: str, color: bool = False) -> str:
    """Format a labelled message, optionally with ANSI styling."""
    if color:
        return f"{_STYLES.get(label, '')}{label}:{STYLE_RESET} {text}"
    return f"{label}: {text}"


def _write(stream: TextIO, label: str, text: str, trailing_blank: bool = False) -> None:
    color = hasattr(stream, "isatty") and stream.isatty()
    stream.write(format_message(label, text, color) + "\n")
    if trailing_blank:
        stream.write("\n")
    stream.flush()


def print_error(text: str) -> None:
    _write(sys.stderr, LABEL_ERROR, text, trailing_blank=True)


def print_argerror(text: str) -> None:
    _write(sys.stderr, LABEL_ARGUMENT_ERROR, text, trailing_blank=True)


def print_complete(text: str) -> None:
    _write(sys.stdout, LABEL_COMPLETE, text)


class TarnishArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as ERROR lines and exits 1."""

    def error(self, message: str) -> None:
        print_error(message)
        self.exit(EXIT_FAILURE)


def build_parser() -> TarnishArgumentParser:
    parser = TarnishArgumentParser(
        prog="tarnish",
        description="Apply one image filter to an image and save the result.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--list-filters",
        action="store_true",
        help="List available filters and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", nargs="?", help="Image to read")
    parser.add_argument("output", nargs="?", help="Path to write the result to")
    parser.add_argument("filter_name", nargs="?", metavar="filter", help="Filter name")
    parser.add_argument(
        "filter_args",
        nargs=argparse.REMAINDER,
        metavar="args",
        help="Arguments passed to the filter",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging for a CLI run.

    --verbose selects DEBUG; otherwise the TARNISH_LOG_LEVEL environment
    variable is used, falling back to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _print_filter(registry: FilterRegistry, name: str) -> None:
    meta = registry.get_metadata(name)
    synopsis = f"{name} {meta['usage']}".strip()
    print(f"  {synopsis:<40} {meta['description']}")


def list_filters(registry: FilterRegistry) -> None:
    """Print the registered filters grouped under their tags."""
    listed = set()
    for category in FILTER_CATEGORIES:
        names = [name for name in registry.filter_by_tag(category) if name not in listed]
        if not names:
            continue
        print(f"{category}:")
        for name in names:
            _print_filter(registry, name)
        listed.update(names)

    others = [name for name in registry.list_filter_names() if name not in listed]
    if others:
        print("other:")
        for name in others:
            _print_filter(registry, name)


def run(
    input_path: str,
    output_path: str,
    filter_name: str,
    filter_args: List[str],
    registry: Optional[FilterRegistry] = None,
) -> int:
    """
    Load an image, apply one filter and save the result.

    Returns:
        Process exit status
    """
    if registry is None:
        registry = get_default_registry()

    if not registry.has_filter(filter_name):
        print_error(MSG_INVALID_COMMAND)
        return EXIT_FAILURE

    try:
        image = load_image(input_path)
    except ImageOpenError:
        print_error(MSG_OPEN_FAILED)
        return EXIT_FAILURE
    except ImageDecodeError:
        print_error(MSG_DECODE_FAILED)
        return EXIT_FAILURE

    logger.debug(f"Applying '{filter_name}' with arguments {filter_args}")
    result = registry.apply(filter_name, image, filter_args)

    if not result.ok:
        if result.label == LABEL_ARGUMENT_ERROR:
            print_argerror(result.message)
        else:
            print_error(result.message)
        return EXIT_FAILURE

    try:
        save_image(result.image, output_path)
    except ImageSaveError:
        print_error(MSG_SAVE_FAILED)
        return EXIT_FAILURE

    print_complete(f"Saved successfully to {output_path}")
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the `tarnish` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.list_filters:
        list_filters(get_default_registry())
        return EXIT_SUCCESS

    if not args.input or not args.output:
        print_error(MSG_MISSING_PATHS)
        return EXIT_FAILURE

    if not args.filter_name:
        print_error(MSG_NO_COMMAND)
        return EXIT_FAILURE

    return run(args.input, args.output, args.filter_name, list(args.filter_args))


if __name__ == "__main__":
    sys.exit(main())
