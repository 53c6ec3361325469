"""
Helpers for parsing positional filter arguments.

Filters receive their arguments as plain strings and own their own
validation; these helpers keep the parsing rules identical across filters.
"""

import re
from typing import Optional, Sequence

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> Optional[int]:
    """
    Parse a signed decimal integer.

    Only an optional sign followed by digits is accepted; whitespace,
    underscores and decimal points are rejected.

    Returns:
        The integer, or None if the string is not a plain integer
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def has_count(args: Sequence[str], count: int) -> bool:
    """True if exactly `count` arguments were supplied."""
    return len(args) == count
