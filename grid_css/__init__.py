"""grid-css — validate CSS Grid inputs and render grid declarations.

    from grid_css import GridGenerator
    GridGenerator().get_grid_css({'rows': ['1fr', '2fr'], 'row_gap': '8px'})
"""

from grid_css.core.errors import GridError, GridFormatError, GridRangeError, GridTypeError
from grid_css.core.types import GridArea, GridDefaults, GridSpec, PlacementSpec
from grid_css.core.units import MeasurementUnit
from grid_css.generator import GridGenerator
from grid_css.sinks import RecordingSink, StyleSink
from grid_css.validators import GapValidator, GridValidator, TrackValidator

__all__ = [
    'GapValidator',
    'GridArea',
    'GridDefaults',
    'GridError',
    'GridFormatError',
    'GridGenerator',
    'GridRangeError',
    'GridSpec',
    'GridTypeError',
    'GridValidator',
    'MeasurementUnit',
    'PlacementSpec',
    'RecordingSink',
    'StyleSink',
    'TrackValidator',
]
