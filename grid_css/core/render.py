"""Declaration formatting — turns ordered {property: value} maps into CSS text."""

from collections.abc import Mapping

from grid_css.core.types import Tracks


def format_block(declarations: Mapping[str, str]) -> str:
    """Multi-line block, one declaration per line, two-space indent.

    >>> format_block({'display': 'grid'})
    '{ \\n  display: grid;\\n}'
    """
    lines = ['{ ']
    for prop, value in declarations.items():
        lines.append(f'  {prop}: {value};')
    lines.append('}')
    return '\n'.join(lines)


def format_inline(declarations: Mapping[str, str]) -> str:
    """Single-line block, e.g. '{ grid-area: 1 / 2 / 1 / 2; }'."""
    body = ' '.join(f'{prop}: {value};' for prop, value in declarations.items())
    return f'{{ {body} }}'


def join_tracks(tracks: Tracks) -> str:
    """Space-join a track list. A bare string is a one-track list."""
    if isinstance(tracks, str):
        return tracks
    return ' '.join(tracks)


def join_lines(start: int, end: int) -> str:
    """'start / end' shorthand used by grid-row and grid-column."""
    return f'{start} / {end}'
