"""Shared types for grid_css: GridSpec, PlacementSpec, GridArea, GridDefaults."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from grid_css.core.errors import GridTypeError

Tracks = str | Sequence[str]
Number = int | float


def _from_mapping(cls: type, values: Mapping[str, Any]) -> Any:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise GridTypeError(
            f'Unknown {cls.__name__} field(s): {", ".join(unknown)}. Expected: {", ".join(sorted(known))}'
        )
    return cls(**values)


@dataclass(frozen=True)
class GridDefaults:
    """Values used for any GridSpec field left as None."""

    rows: tuple[str, ...] = ('100%',)
    columns: tuple[str, ...] = ('100%',)
    row_gap: str = '0px'
    column_gap: str = '0px'


@dataclass(frozen=True)
class GridSpec:
    """Grid container input. None means the field was omitted.

    List track inputs are stored as tuples so the spec stays hashable and
    later changes to the caller's list cannot reach it.
    """

    rows: Tracks | None = None  # grid-template-rows tokens
    columns: Tracks | None = None  # grid-template-columns tokens
    row_gap: str | None = None
    column_gap: str | None = None

    def __post_init__(self) -> None:
        for name in ('rows', 'columns'):
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> GridSpec:
        return _from_mapping(cls, values)

    def resolved(self, defaults: GridDefaults | None = None) -> GridSpec:
        """Return a copy with every omitted field filled from defaults.

        Does not validate. The receiver is never modified.
        """
        d = defaults or GridDefaults()
        return GridSpec(
            rows=d.rows if self.rows is None else self.rows,
            columns=d.columns if self.columns is None else self.columns,
            row_gap=d.row_gap if self.row_gap is None else self.row_gap,
            column_gap=d.column_gap if self.column_gap is None else self.column_gap,
        )


@dataclass(frozen=True)
class GridArea:
    """A resolved placement: integer grid lines, ends already defaulted."""

    row_start: int
    column_start: int
    row_end: int
    column_end: int


@dataclass(frozen=True)
class PlacementSpec:
    """Line-based placement input. None means the field was omitted."""

    start_row: Number | None = None
    end_row: Number | None = None
    start_column: Number | None = None
    end_column: Number | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> PlacementSpec:
        return _from_mapping(cls, values)

    def resolved(self) -> GridArea | None:
        """Resolve into a GridArea, or None when there is nothing to place.

        Both start values are required. A missing end takes its start value
        (a one-line span). Every value is truncated toward zero.
        Expects numeric fields; validate first.
        """
        if self.start_row is None or self.start_column is None:
            return None
        end_row = self.start_row if self.end_row is None else self.end_row
        end_column = self.start_column if self.end_column is None else self.end_column
        return GridArea(
            row_start=int(self.start_row),
            column_start=int(self.start_column),
            row_end=int(end_row),
            column_end=int(end_column),
        )
