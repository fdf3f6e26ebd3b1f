"""Line-based access to a word database file.

A database is plain UTF-8 text with one `<score><sep><word>` record per
line, sorted ascending by score. The first full scan of a file fills a
RecordCache; later reads of the same file in the process are served from
memory. The cache is never invalidated when the file changes underneath,
except by the Initializer, which resets it after rewriting.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple

from colorcue.core.constants import DEFAULT_SEPARATOR
from colorcue.core.errors import DataIOError

logger = logging.getLogger(__name__)


class ScoreWordRecord(NamedTuple):
    score: int
    word: str


class RecordCache:
    """In-memory copy of one database file's records.

    The first populate wins: once filled, the cache only answers for the
    file it was filled from until reset() is called.
    """

    def __init__(self) -> None:
        self._path: Path | None = None
        self._records: list[ScoreWordRecord] = []

    @property
    def populated(self) -> bool:
        return self._path is not None

    def get(self, path: str | Path) -> list[ScoreWordRecord] | None:
        """Cached records for path, or None if the cache holds another file (or nothing)."""
        if self._path is None or self._path != _key(path):
            return None
        return self._records

    def populate(self, path: str | Path, records: Iterable[ScoreWordRecord]) -> None:
        if self.populated:
            return
        self._path = _key(path)
        self._records = list(records)
        logger.debug('Cached %d records from %s', len(self._records), self._path)

    def reset(self) -> None:
        self._path = None
        self._records = []


def _key(path: str | Path) -> Path:
    return Path(path).resolve()


# Process-wide cache shared by every accessor that is not given its own
DEFAULT_CACHE = RecordCache()


def parse_line(line: str, separator: str = DEFAULT_SEPARATOR) -> ScoreWordRecord | None:
    """Parse one database line; None for a malformed line."""
    score, sep, word = line.rstrip('\r\n').partition(separator)
    if not sep:
        return None
    try:
        value = int(score)
    except ValueError:
        return None
    return ScoreWordRecord(value, word) if value >= 0 else None


def format_line(record: ScoreWordRecord, separator: str = DEFAULT_SEPARATOR) -> str:
    return f'{record.score}{separator}{record.word}'


class DBAccessor:
    """Base for the classes that read or write a database file."""

    def __init__(
        self,
        db_path: str | Path,
        separator: str = DEFAULT_SEPARATOR,
        cache: RecordCache | None = None,
    ):
        self.db_path = Path(db_path)
        self.separator = separator
        self.cache = cache if cache is not None else DEFAULT_CACHE
        self.is_set_up = False

    def set_up(self) -> DBAccessor:
        """Create the database's parent directories if they are missing."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DataIOError(f'Cannot create {self.db_path.parent}: {exc.strerror or exc}') from exc
        self.is_set_up = True
        return self

    def _scan_file(self) -> Iterator[ScoreWordRecord]:
        try:
            with self.db_path.open(encoding='utf-8') as fh:
                for lineno, line in enumerate(fh, 1):
                    if not line.strip():
                        continue
                    record = parse_line(line, self.separator)
                    if record is None:
                        logger.warning('%s:%d: skipping malformed record %r', self.db_path, lineno, line.rstrip('\r\n'))
                        continue
                    yield record
        except OSError as exc:
            raise DataIOError(f'Cannot read {self.db_path}: {exc.strerror or exc}') from exc

    def records(self) -> list[ScoreWordRecord]:
        """All records of the database, from the cache when it holds this file."""
        cached = self.cache.get(self.db_path)
        if cached is not None:
            return cached
        records = list(self._scan_file())
        self.cache.populate(self.db_path, records)
        return records
