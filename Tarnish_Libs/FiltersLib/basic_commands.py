"""
Identity and diagnostic filters.

Functions:
    copy_filter: Return the input image unchanged
    error_test_filter: Always fail with an operation error
    argerror_test_filter: Always fail with an argument error

The two diagnostic filters exist so the error-reporting path of the CLI
can be exercised without a real failure.
"""

from typing import Any, Sequence

from Tarnish_Libs.ImageEditingLib.image_models import (
    ArgumentError,
    FilterResult,
    OperationError,
    Success,
)
from Tarnish_Libs.constants import MSG_INTENTIONAL_ARGERROR, MSG_INTENTIONAL_ERROR


def copy_filter(image: Any, args: Sequence[str]) -> FilterResult:
    """Return a copy of the image. Arguments are ignored."""
    return Success(image.copy())


def error_test_filter(image: Any, args: Sequence[str]) -> FilterResult:
    return OperationError(MSG_INTENTIONAL_ERROR)


def argerror_test_filter(image: Any, args: Sequence[str]) -> FilterResult:
    return ArgumentError(MSG_INTENTIONAL_ARGERROR)
