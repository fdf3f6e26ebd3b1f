"""Look words up in a database by score.

Exact lookups first try the system's line search tool (grep, or findstr
on Windows) anchored on `^<score><sep>`, which avoids loading the whole
file for a one-off query. Any failure of that path, including a search
that matches nothing, falls back to a scan of the cached records.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from pathlib import Path

import numpy as np

from colorcue.core.constants import DEFAULT_SEPARATOR
from colorcue.core.errors import NoWordsError
from colorcue.database.accessor import DBAccessor, RecordCache, parse_line

logger = logging.getLogger(__name__)

_BRE_SPECIAL_RE = re.compile(r'([.\[\]*^$\\])')


def word_weights(words: list[str]) -> np.ndarray:
    """Selection weight per word: shorter words weigh more.

    weight = L^2 + L - len(word)^2, where L is the longest candidate's
    length, so the longest word still weighs L.
    """
    lengths = np.array([len(w) for w in words], dtype=np.int64)
    longest = int(lengths.max())
    return longest * longest + longest - lengths * lengths


class Finder(DBAccessor):
    def __init__(
        self,
        db_path: str | Path,
        separator: str = DEFAULT_SEPARATOR,
        cache: RecordCache | None = None,
        *,
        rng: np.random.Generator | None = None,
        use_grep: bool = True,
    ):
        super().__init__(db_path, separator, cache)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.use_grep = use_grep

    def _search_command(self, score: int) -> list[str] | None:
        if os.name == 'nt':
            exe = shutil.which('findstr')
            return [exe, '/B', f'/C:{score}{self.separator}', str(self.db_path)] if exe else None
        exe = shutil.which('grep')
        sep = _BRE_SPECIAL_RE.sub(r'\\\1', self.separator)
        pattern = f'^{score}{sep}'
        return [exe, '-e', pattern, str(self.db_path)] if exe else None

    def _search(self, score: int) -> list[str] | None:
        """Matches from the external search tool, or None when it cannot answer."""
        cmd = self._search_command(score)
        if cmd is None:
            logger.debug('No line search tool available, scanning %s', self.db_path)
            return None
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, encoding='utf-8', check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.debug('Line search for score %d failed (%s), scanning %s', score, exc, self.db_path)
            return None

        words = []
        for line in proc.stdout.splitlines():
            record = parse_line(line, self.separator)
            if record is not None and record.score == score:
                words.append(record.word)
        return words or None

    def get_all_words_by_score(self, score: int) -> list[str]:
        """Every word with exactly this score, in file order.

        Raises NoWordsError when there is none.
        """
        words = self._search(score) if self.use_grep else None
        if words is None:
            words = [r.word for r in self.records() if r.score == score]
        if not words:
            raise NoWordsError(score)
        logger.debug('Found %d words for score %d', len(words), score)
        return words

    def get_one_word_by_score(self, score: int) -> str:
        """One word with this score, picked at random with a bias towards short words."""
        words = self.get_all_words_by_score(score)
        if len(words) == 1:
            return words[0]
        cumulative = np.cumsum(word_weights(words))
        draw = self.rng.random() * cumulative[-1]
        return words[int(np.searchsorted(cumulative, draw, side='right'))]

    def get_closest_word_by_score(self, score: int) -> str:
        """Word whose score is nearest to score; the first one scanned wins a tie."""
        best_word = None
        best_score = None
        best_diff = None
        for record in self.records():
            diff = abs(score - record.score)
            if best_diff is None or diff < best_diff:
                best_word, best_score, best_diff = record.word, record.score, diff
                if diff <= 1:
                    break
        if best_word is None:
            raise NoWordsError(message='No words in database')
        logger.debug('Closest word to score %d is %r (score %d)', score, best_word, best_score)
        return best_word
