"""Input validators for grid tracks, gaps and placements.

Every validator is a gate: it returns None (or its input, unchanged) on
success and raises a grid_css.core.errors.GridError subclass on the first
violation it finds.
"""

from grid_css.validators.gap import GapValidator
from grid_css.validators.grid import GridValidator
from grid_css.validators.track import TrackValidator

__all__ = ['GapValidator', 'GridValidator', 'TrackValidator']
