"""Score a cleaned word list and write it as a database file."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from colorcue.core.constants import DEFAULT_SEPARATOR, PIVOT
from colorcue.core.errors import DataIOError, SetupError
from colorcue.core.repository import SpecialWordRepository
from colorcue.core.scoring import WordScoreCalculator
from colorcue.database.accessor import DBAccessor, RecordCache, ScoreWordRecord, format_line

logger = logging.getLogger(__name__)


class Initializer(DBAccessor):
    """Writes `score<sep>word` lines sorted by score, replacing the file."""

    def __init__(
        self,
        db_path: str | Path,
        separator: str = DEFAULT_SEPARATOR,
        cache: RecordCache | None = None,
        *,
        repository: SpecialWordRepository | None = None,
    ):
        super().__init__(db_path, separator, cache)
        self.calculator = WordScoreCalculator(0, PIVOT, repository=repository)

    def populate_with(self, words: Sequence[str]) -> int:
        """Score, sort and write words. Returns the number of records written."""
        if not self.is_set_up:
            raise SetupError('Initializer must be set up before populating the database')

        scores = np.asarray(self.calculator.calculate_many(words), dtype=np.int64)
        # stable so words sharing a score keep their input order
        order = np.argsort(scores, kind='stable')
        records = [ScoreWordRecord(int(scores[i]), words[i]) for i in order]

        try:
            with self.db_path.open('w', encoding='utf-8', newline='\n') as fh:
                for record in records:
                    fh.write(format_line(record, self.separator) + '\n')
        except OSError as exc:
            raise DataIOError(f'Cannot write {self.db_path}: {exc.strerror or exc}') from exc

        self.cache.reset()
        logger.debug('Wrote %d records to %s', len(records), self.db_path)
        return len(records)
