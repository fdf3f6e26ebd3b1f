"""Special descriptor words, indexed by hue.

Index 0-360 of the word list is the descriptor for that exact hue; every
word after index 360 is a gray descriptor. The list is loaded once from
the bundled colors.data resource and shared read-only by the encoder, the
decoder, the score calculator and the data cleaner. Each of them also
accepts an explicit repository, which is how tests swap in a fixture.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

import numpy as np

from colorcue.core.constants import GRAY_START, HUE_MAX
from colorcue.core.errors import RepositoryError

logger = logging.getLogger(__name__)

WORDS_PATH = Path(__file__).parent / 'data' / 'colors.data'

_COMMENT_RE = re.compile(r'^\s*#')

_shared: SpecialWordRepository | None = None


class SpecialWordRepository:
    """Immutable, index-addressable list of descriptor words."""

    def __init__(self, words: Iterable[str]):
        self._words: tuple[str, ...] = tuple(words)
        if len(self._words) < GRAY_START:
            raise RepositoryError(
                f'Special word list needs at least {GRAY_START} entries, got {len(self._words)}'
            )
        self._index: dict[str, int] = {}
        for idx, word in enumerate(self._words):
            self._index.setdefault(word.lower(), idx)

    @classmethod
    def from_file(cls, path: str | Path) -> SpecialWordRepository:
        """Load a word list, skipping blank lines and '#' comments."""
        text = Path(path).read_text(encoding='utf-8')
        words = [line.strip() for line in text.splitlines() if line.strip() and not _COMMENT_RE.match(line)]
        logger.debug('Loaded %d special words from %s', len(words), path)
        return cls(words)

    @property
    def words(self) -> Sequence[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.includes(word)

    def includes(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.lower() in self._index

    def index_of(self, word: str) -> int:
        """Case-insensitive index of word, or -1 when absent."""
        return self._index.get(word.lower(), -1)

    def hue_word(self, hue: int) -> str:
        if not 0 <= hue <= HUE_MAX:
            raise IndexError(f'Hue {hue} outside [0, {HUE_MAX}]')
        return self._words[hue]

    def gray_words(self) -> list[str]:
        """Every descriptor past the hues; RepositoryError when there is none."""
        if len(self._words) == GRAY_START:
            raise RepositoryError(f'Special word list has no gray descriptor after index {HUE_MAX}')
        return list(self._words[GRAY_START:])

    def random_gray_word(self, rng: np.random.Generator | None = None) -> str:
        """Draw one gray descriptor uniformly at random."""
        grays = self.gray_words()
        rng = rng if rng is not None else np.random.default_rng()
        return grays[int(rng.integers(len(grays)))]


def get_repository() -> SpecialWordRepository:
    """Return the shared repository, loading the bundled word list on first use."""
    global _shared
    if _shared is None:
        _shared = SpecialWordRepository.from_file(WORDS_PATH)
    return _shared
