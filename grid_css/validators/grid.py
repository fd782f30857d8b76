"""Composite validation of a whole grid and of an element placement."""

from collections.abc import Mapping
from typing import Any

from grid_css.core.errors import GridTypeError
from grid_css.core.types import GridSpec, PlacementSpec
from grid_css.validators import predicates
from grid_css.validators.gap import GapValidator
from grid_css.validators.track import TrackValidator


def as_grid_spec(grid: GridSpec | Mapping[str, Any]) -> GridSpec:
    if isinstance(grid, GridSpec):
        return grid
    if isinstance(grid, Mapping):
        return GridSpec.from_mapping(grid)
    raise GridTypeError(f'Grid must be a GridSpec or a mapping, got {type(grid).__name__}')


def as_placement_spec(placement: PlacementSpec | Mapping[str, Any]) -> PlacementSpec:
    if isinstance(placement, PlacementSpec):
        return placement
    if isinstance(placement, Mapping):
        return PlacementSpec.from_mapping(placement)
    raise GridTypeError(f'Placement must be a PlacementSpec or a mapping, got {type(placement).__name__}')


class GridValidator:
    """Delegates each GridSpec field to the track or gap rule, fail-fast."""

    def __init__(self) -> None:
        self._rows = TrackValidator('Row track')
        self._columns = TrackValidator('Column track')
        self._row_gap = GapValidator('Row gap')
        self._column_gap = GapValidator('Column gap')

    @staticmethod
    def is_string(value: Any) -> bool:
        return predicates.is_string(value)

    def validate_all_params(self, grid: GridSpec | Mapping[str, Any]) -> GridSpec:
        """Validate rows, columns, row gap, column gap in that order.

        Omitted (None) fields are skipped; resolve defaults first if they
        must be present. Returns the GridSpec that was checked.
        """
        spec = as_grid_spec(grid)
        if spec.rows is not None:
            self._rows.validate(spec.rows)
        if spec.columns is not None:
            self._columns.validate(spec.columns)
        if spec.row_gap is not None:
            self._row_gap.validate(spec.row_gap)
        if spec.column_gap is not None:
            self._column_gap.validate(spec.column_gap)
        return spec

    def validate_positions(self, placement: PlacementSpec | Mapping[str, Any]) -> PlacementSpec:
        """Check every present field is a finite number. No defaulting happens here."""
        spec = as_placement_spec(placement)
        for name in ('start_row', 'end_row', 'start_column', 'end_column'):
            value = getattr(spec, name)
            if value is not None and not predicates.is_line_number(value):
                raise GridTypeError(f'Position {name} must be a number, got {value!r}')
        return spec
