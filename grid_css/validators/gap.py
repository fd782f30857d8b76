"""Gap validation for grid-row-gap / grid-column-gap.

Same token rule as a track, but exactly one value: a list is a type error.
"""

from typing import Any

from grid_css.core.errors import GridTypeError
from grid_css.validators import predicates
from grid_css.validators.track import check_token


class GapValidator:
    def __init__(self, field: str = 'Gap value'):
        self.field = field

    def validate(self, gap: Any) -> None:
        if not predicates.is_string(gap):
            raise GridTypeError(f'{self.field} must be a string, got {type(gap).__name__}')
        check_token(gap, self.field)
