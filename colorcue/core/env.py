"""Environment variable loading for colorcue.

Load order (first wins):
  1. Variables already in the OS environment, never overwritten.
  2. The .env file given with --env-file.
  3. The first .env found walking up from the current directory; the walk
     stops at a directory containing .git (a dir or a worktree file).

Recognized variables are listed in colorcue.core.config.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _find_dotenv(start: Path) -> Path | None:
    """First .env at or above start, without leaving the enclosing repository."""
    for directory in [start.resolve(), *start.resolve().parents]:
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            break
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes around the value and an 'export ' prefix are dropped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, sep, value = line.partition('=')
        key = key.strip()
        if not sep or not key:
            continue
        result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | Path | None = None) -> Path | None:
    """Copy .env variables that are not already set into os.environ.

    Returns the file that was loaded, or None when there was none.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            logger.warning('Env file %s not found', env_file)
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    logger.debug('Loaded environment from %s', path)
    return path
