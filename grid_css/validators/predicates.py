"""Pure predicates shared by the track, gap and grid validators.

None of these raise. Each validator composes them and decides which
error to raise when one returns False.
"""

import math
import re
from typing import Any

from grid_css.core.units import SUFFIXES_LONGEST_FIRST

# CSS <number>: optional sign, digits with optional fraction (or a bare
# fraction), optional exponent.
_CSS_NUMBER = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_track_list(value: Any) -> bool:
    """True for a list or tuple whose items are all strings."""
    return isinstance(value, (list, tuple)) and all(is_string(v) for v in value)


def split_suffix(token: str) -> tuple[str, str] | None:
    """Split token into (numeric_prefix, unit), longest unit first.

    Returns None if token does not end with a recognised unit.
    """
    for suffix in SUFFIXES_LONGEST_FIRST:
        if token.endswith(suffix):
            return token[: -len(suffix)], suffix
    return None


def has_correct_suffix(token: Any) -> bool:
    return is_string(token) and split_suffix(token) is not None


def parse_number(text: str) -> float | None:
    """Parse a CSS number, or None if text is not exactly one."""
    if not _CSS_NUMBER.fullmatch(text):
        return None
    return float(text)


def is_positive_number(token: Any) -> bool:
    """True if the prefix before the unit is a number >= 0.

    Zero counts as positive here, matching CSS where 0px is a valid length.
    """
    if not is_string(token):
        return False
    parts = split_suffix(token)
    if parts is None:
        return False
    value = parse_number(parts[0])
    return value is not None and value >= 0


def is_line_number(value: Any) -> bool:
    """True for a finite int or float. bool is rejected even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
