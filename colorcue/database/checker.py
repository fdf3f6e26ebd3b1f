"""Verify that a database has a word for every score the encoder can ask for.

Each colour encodes to a score in [0, PIVOT), so a database passes only
when every one of those scores has at least one word.
"""

from __future__ import annotations

import logging

import numpy as np

from colorcue.core.constants import PIVOT
from colorcue.core.types import CoverageReport
from colorcue.database.accessor import DBAccessor

logger = logging.getLogger(__name__)


class DataChecker(DBAccessor):
    required_scores = PIVOT

    def check(self) -> CoverageReport:
        """Scan the database once and summarize its score coverage."""
        records = self.records()
        report = CoverageReport(words=len(records), required_scores=self.required_scores)
        if not records:
            report.missing_scores = list(range(self.required_scores))
            return report

        scores = np.fromiter((r.score for r in records), dtype=np.int64, count=len(records))
        counts = np.bincount(scores, minlength=self.required_scores)
        present = counts[counts > 0]

        report.distinct_scores = int(present.size)
        report.min_score = int(scores.min())
        report.max_score = int(scores.max())
        report.score_span = report.max_score + 1
        report.min_per_score = int(present.min())
        report.max_per_score = int(present.max())
        report.missing_scores = np.flatnonzero(counts[: self.required_scores] == 0).tolist()

        logger.debug(
            'Checked %s: %d words, %d distinct scores, %d missing',
            self.db_path,
            report.words,
            report.distinct_scores,
            len(report.missing_scores),
        )
        return report
