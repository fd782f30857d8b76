"""Grid defaults from the environment.

Default track and gap values can be overridden per field:

  GRID_CSS_DEFAULT_ROWS         space-separated tracks, e.g. "1fr 2fr"
  GRID_CSS_DEFAULT_COLUMNS      space-separated tracks
  GRID_CSS_DEFAULT_ROW_GAP      single gap token, e.g. "8px"
  GRID_CSS_DEFAULT_COLUMN_GAP   single gap token

The same keys may also live in a KEY=value defaults file passed as
env_file. A non-blank process environment value beats the file, and the
file beats the built-in GridDefaults.

Values are not validated here; they go through the normal validators
when a generator uses them.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path

from grid_css.core.types import GridDefaults

log = logging.getLogger('grid_css.env')

ENV_PREFIX = 'GRID_CSS_DEFAULT_'

# env key -> (GridDefaults field, is a track list)
_KEYS: dict[str, tuple[str, bool]] = {
    f'{ENV_PREFIX}ROWS': ('rows', True),
    f'{ENV_PREFIX}COLUMNS': ('columns', True),
    f'{ENV_PREFIX}ROW_GAP': ('row_gap', False),
    f'{ENV_PREFIX}COLUMN_GAP': ('column_gap', False),
}


def _pick(values: Mapping[str, str], source: str) -> dict[str, str]:
    """Keep non-blank GRID_CSS_DEFAULT_* entries; warn about misspelled ones."""
    picked: dict[str, str] = {}
    for key, raw in values.items():
        if not key.startswith(ENV_PREFIX):
            continue
        if key not in _KEYS:
            log.warning('Skipping unknown grid default %r in %s', key, source)
            continue
        value = raw.strip()
        if value:
            picked[key] = value
    return picked


def read_defaults_file(path: str | Path) -> dict[str, str]:
    """Read GRID_CSS_DEFAULT_* entries from a KEY=value file.

    Blank lines, # comments and lines without '=' are skipped, surrounding
    quotes are stripped. Keys without the prefix are ignored.
    """
    path = Path(path)
    entries: dict[str, str] = {}
    for lineno, raw in enumerate(path.read_text(encoding='utf-8').splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        key, sep, value = line.partition('=')
        if not sep:
            log.warning('%s:%d: expected KEY=value, skipping', path, lineno)
            continue
        entries[key.strip()] = value.strip().strip('"').strip("'")
    return _pick(entries, str(path))


def defaults_from_env(environ: Mapping[str, str] | None = None, env_file: str | Path | None = None) -> GridDefaults:
    """Build GridDefaults field by field: environ, then env_file, then built-ins.

    environ defaults to os.environ. Blank values count as unset.
    """
    chosen = read_defaults_file(env_file) if env_file is not None else {}
    chosen.update(_pick(os.environ if environ is None else environ, 'environment'))

    overrides: dict[str, object] = {}
    for key, value in chosen.items():
        field_name, is_tracks = _KEYS[key]
        overrides[field_name] = tuple(value.split()) if is_tracks else value
    if overrides:
        log.debug('grid default overrides: %s', overrides)
    return replace(GridDefaults(), **overrides)
