"""CSS length/ratio units recognised in track and gap tokens."""

from enum import Enum


class MeasurementUnit(str, Enum):
    PIXELS = 'px'
    FR = 'fr'
    PERCENT = '%'


# Longest suffix first so a token is matched against 'px' before any
# single-character unit that could also end it.
SUFFIXES_LONGEST_FIRST: tuple[str, ...] = tuple(sorted((u.value for u in MeasurementUnit), key=len, reverse=True))


def is_unit(suffix: str) -> bool:
    """True if suffix is exactly one of the recognised units."""
    return suffix in SUFFIXES_LONGEST_FIRST
