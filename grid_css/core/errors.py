"""Error taxonomy for grid validation.

Each concrete error also subclasses the matching builtin, so callers can
catch either GridError or plain TypeError/ValueError.
"""


class GridError(Exception):
    """Base class for invalid grid or placement input."""


class GridTypeError(GridError, TypeError):
    """Input is not the expected shape (not a string, not a number, ...)."""


class GridFormatError(GridError, ValueError):
    """A track or gap token lacks a recognised trailing unit."""


class GridRangeError(GridError, ValueError):
    """A track or gap token's numeric prefix is negative or unparseable."""
