"""Where colorcue keeps its data.

  COLORCUE_DB_PATH   database file used when none is given explicitly
  COLORCUE_DATA_DIR  data directory; the default database is <dir>/db.data
  COLORCUE_LOG_DIR   when set, logs also go to <dir>/colorcue.log

Without COLORCUE_DATA_DIR the data directory is %APPDATA%/colorcue on
Windows, ~/Library/Preferences/colorcue on macOS and
~/.local/share/colorcue elsewhere.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

DB_FILENAME = 'db.data'

ENV_DB_PATH = 'COLORCUE_DB_PATH'
ENV_DATA_DIR = 'COLORCUE_DATA_DIR'
ENV_LOG_DIR = 'COLORCUE_LOG_DIR'


def data_dir() -> Path:
    override = os.environ.get(ENV_DATA_DIR)
    if override:
        return Path(override).expanduser()
    appdata = os.environ.get('APPDATA')
    if appdata:
        return Path(appdata) / 'colorcue'
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Preferences' / 'colorcue'
    return Path.home() / '.local' / 'share' / 'colorcue'


def default_db_path() -> Path:
    override = os.environ.get(ENV_DB_PATH)
    if override:
        return Path(override).expanduser()
    return data_dir() / DB_FILENAME


def resolve_db_path(path: str | Path | None = None) -> Path:
    """The given database path, or the configured default."""
    return Path(path) if path else default_db_path()
