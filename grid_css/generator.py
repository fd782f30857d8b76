"""CSS Grid generation: validated input in, CSS text or sink writes out.

get_grid_css / get_position_css render text. The set_* operations run the
same validation and then write one property at a time to the injected
StyleSink. Validation always completes before the first write, so a bad
input never leaves an element half-styled.

Example:
    gen = GridGenerator()
    gen.get_grid_css({'rows': ['1fr', '2fr'], 'columns': ['50%']})
    gen.get_position_css({'start_row': 1, 'start_column': 2})
"""

import logging
from collections.abc import Mapping
from typing import Any

from grid_css.core.errors import GridTypeError
from grid_css.core.render import format_block, format_inline, join_lines, join_tracks
from grid_css.core.types import GridArea, GridDefaults, GridSpec, PlacementSpec, Tracks
from grid_css.sinks import StyleSink
from grid_css.validators import GapValidator, GridValidator, TrackValidator
from grid_css.validators.grid import as_grid_spec

log = logging.getLogger('grid_css.generator')

GridInput = GridSpec | Mapping[str, Any] | None
PlacementInput = PlacementSpec | Mapping[str, Any] | None


class GridGenerator:
    """Builds grid container and placement declarations.

    Args:
        sink: target for set_* writes. Only the set_* operations need it.
        defaults: values for omitted GridSpec fields. Built-in defaults
            ('100%' tracks, '0px' gaps) when None; see grid_css.core.env
            for loading them from the environment.
    """

    def __init__(self, sink: StyleSink | None = None, defaults: GridDefaults | None = None):
        self.sink = sink
        self.defaults = defaults or GridDefaults()
        self._grid_validator = GridValidator()
        self._track_validator = TrackValidator()
        self._gap_validator = GapValidator()

    # -- rendering --------------------------------------------------------

    def get_grid_declarations(self, grid: GridInput = None) -> dict[str, str]:
        """Resolve defaults, validate, return the ordered container declarations."""
        spec = self._resolve_grid(grid)
        return {
            'display': 'grid',
            'grid-template-rows': join_tracks(spec.rows),
            'grid-template-columns': join_tracks(spec.columns),
            'grid-row-gap': spec.row_gap,
            'grid-column-gap': spec.column_gap,
        }

    def get_grid_css(self, grid: GridInput = None) -> str:
        css = format_block(self.get_grid_declarations(grid))
        log.debug('rendered grid block %r', css)
        return css

    def get_position_declarations(self, placement: PlacementInput = None) -> dict[str, str]:
        """{'grid-area': ...} for a placeable spec, {} when a start value is missing."""
        area = self._resolve_area(placement)
        if area is None:
            return {}
        value = f'{area.row_start} / {area.column_start} / {area.row_end} / {area.column_end}'
        return {'grid-area': value}

    def get_position_css(self, placement: PlacementInput = None) -> str:
        """Render '{ grid-area: r1 / c1 / r2 / c2; }', or '' if there is nothing to place."""
        declarations = self.get_position_declarations(placement)
        if not declarations:
            return ''
        return format_inline(declarations)

    # -- sink writes -------------------------------------------------------

    def set_grid(self, grid: GridInput, element_id: str) -> None:
        sink = self._require_sink()
        declarations = self.get_grid_declarations(grid)
        self._check_element(element_id)
        self._write(sink, element_id, declarations)

    def set_position(self, placement: PlacementInput, element_id: str) -> None:
        """Write grid-row and grid-column. No writes when a start value is missing."""
        sink = self._require_sink()
        area = self._resolve_area(placement)
        self._check_element(element_id)
        if area is None:
            log.debug('placement for %r has no start row/column, nothing written', element_id)
            return
        self._write(
            sink,
            element_id,
            {
                'grid-row': join_lines(area.row_start, area.row_end),
                'grid-column': join_lines(area.column_start, area.column_end),
            },
        )

    def set_rows(self, rows: Tracks, element_id: str) -> None:
        self._set_tracks('grid-template-rows', rows, element_id)

    def set_columns(self, columns: Tracks, element_id: str) -> None:
        self._set_tracks('grid-template-columns', columns, element_id)

    def set_row_gap(self, gap: str, element_id: str) -> None:
        self._set_gap('grid-row-gap', gap, element_id)

    def set_column_gap(self, gap: str, element_id: str) -> None:
        self._set_gap('grid-column-gap', gap, element_id)

    # -- internals ---------------------------------------------------------

    def _resolve_grid(self, grid: GridInput) -> GridSpec:
        # Validate after resolving: defaults may come from the environment.
        resolved = as_grid_spec(GridSpec() if grid is None else grid).resolved(self.defaults)
        return self._grid_validator.validate_all_params(resolved)

    def _resolve_area(self, placement: PlacementInput) -> GridArea | None:
        spec = self._grid_validator.validate_positions(PlacementSpec() if placement is None else placement)
        return spec.resolved()

    def _set_tracks(self, prop: str, tracks: Tracks, element_id: str) -> None:
        sink = self._require_sink()
        self._track_validator.validate(tracks)
        self._check_element(element_id)
        self._write(sink, element_id, {prop: join_tracks(tracks)})

    def _set_gap(self, prop: str, gap: str, element_id: str) -> None:
        sink = self._require_sink()
        self._gap_validator.validate(gap)
        self._check_element(element_id)
        self._write(sink, element_id, {prop: gap})

    def _require_sink(self) -> StyleSink:
        if self.sink is None:
            raise RuntimeError('GridGenerator has no style sink; pass one to use set_* operations')
        return self.sink

    def _check_element(self, element_id: Any) -> None:
        if not self._grid_validator.is_string(element_id):
            raise GridTypeError(f'Element identifier must be a string, got {type(element_id).__name__}')

    @staticmethod
    def _write(sink: StyleSink, element_id: str, declarations: Mapping[str, str]) -> None:
        if not element_id:
            log.debug('empty element identifier, skipping %d declaration(s)', len(declarations))
            return
        for prop, value in declarations.items():
            log.debug('%s { %s: %s }', element_id, prop, value)
            sink.apply_style(element_id, prop, value)
