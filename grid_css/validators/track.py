"""Track-size validation for grid-template-rows / grid-template-columns.

A track token is <number><unit> where unit is px, fr or %, and the number
is non-negative. validate() accepts a single token or a list of tokens.
"""

from typing import Any

from grid_css.core.errors import GridFormatError, GridRangeError, GridTypeError
from grid_css.core.units import SUFFIXES_LONGEST_FIRST
from grid_css.validators import predicates

_UNITS = ', '.join(SUFFIXES_LONGEST_FIRST)


def check_token(token: str, field: str) -> None:
    """Raise for a string token without a valid unit or with a negative/bad number."""
    if not predicates.has_correct_suffix(token):
        raise GridFormatError(f'{field} must end with a valid CSS measurement ({_UNITS}), got {token!r}')
    if not predicates.is_positive_number(token):
        raise GridRangeError(f'{field} must be a positive number followed by a CSS measurement, got {token!r}')


class TrackValidator:
    """Validates track tokens for rows and columns."""

    def __init__(self, field: str = 'Track value'):
        self.field = field

    @staticmethod
    def is_string(value: Any) -> bool:
        return predicates.is_string(value)

    @staticmethod
    def has_correct_suffix(token: Any) -> bool:
        return predicates.has_correct_suffix(token)

    @staticmethod
    def is_positive_number(token: Any) -> bool:
        return predicates.is_positive_number(token)

    def validate(self, tracks: Any) -> None:
        """Validate one token or a list/tuple of tokens. First failure wins."""
        if predicates.is_string(tracks):
            check_token(tracks, self.field)
            return
        if not predicates.is_track_list(tracks):
            raise GridTypeError(f'{self.field}s must be a string or a list of strings, got {type(tracks).__name__}')
        if not tracks:
            raise GridFormatError(f'{self.field}s must contain at least one track')
        for token in tracks:
            check_token(token, self.field)
