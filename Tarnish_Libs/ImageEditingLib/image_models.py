"""
Image editing data models for Tarnish.

This module defines core data structures used throughout the filter engine.

Classes:
    Success: Filter outcome carrying the newly produced image
    OperationError: Filter outcome for a data or environment failure
    ArgumentError: Filter outcome for missing or malformed arguments

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
    RgbColor: A tuple of 3 floats representing RGB channel values (0.0-255.0)
    FilterResult: Union of the three filter outcomes
    FilterFunction: Signature shared by every filter entry point
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

from Tarnish_Libs.constants import LABEL_ARGUMENT_ERROR, LABEL_ERROR
from Tarnish_Libs.pillow_compat import Image

RgbaColor = Tuple[int, int, int, int]
RgbColor = Tuple[float, float, float]


@dataclass(frozen=True)
class Success:
    image: 'Image.Image'

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class OperationError:
    """Something about the data or environment prevented completion."""
    message: str
    label = LABEL_ERROR

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ArgumentError:
    """The caller supplied missing, wrong-count, or malformed arguments."""
    message: str
    label = LABEL_ARGUMENT_ERROR

    @property
    def ok(self) -> bool:
        return False


FilterResult = Union[Success, OperationError, ArgumentError]
FilterFunction = Callable[['Image.Image', Sequence[str]], FilterResult]
