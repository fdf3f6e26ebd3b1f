"""Deterministic word -> integer score function.

Each letter contributes its position in the alphabet ('a' is 0) times its
position in the word, offset by start_index. The sum is shifted by the
minimum score and wrapped with a modulo on the maximum score:

    score = (min + sum((ord(c) - 97) * (i + start_index))) % max

Descriptor words are refused so that a scored word can never be mistaken
for a descriptor when a tuple is decoded.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from colorcue.core.errors import ReservedWordError
from colorcue.core.repository import SpecialWordRepository, get_repository

ASCII_START_LETTERS = 97


class WordScoreCalculator:
    """Scores words into [min_score, max_score)."""

    def __init__(
        self,
        min_score: int = 0,
        max_score: float = math.inf,
        *,
        start_index: int = ASCII_START_LETTERS,
        lowercase: bool = True,
        repository: SpecialWordRepository | None = None,
    ):
        self.min = min_score
        self.max = max_score
        self.start_index = start_index
        self.lowercase = lowercase
        self._repository = repository

    @property
    def repository(self) -> SpecialWordRepository:
        if self._repository is None:
            self._repository = get_repository()
        return self._repository

    def calculate(self, word: str | Sequence[str]) -> int | list[int]:
        """Score one word, or each word of a sequence."""
        if not isinstance(word, str):
            return self.calculate_many(word)
        if self.repository.includes(word):
            raise ReservedWordError(f'Trying to calculate the score of a reserved word: {word!r}')

        chars = word.lower() if self.lowercase else word
        positions = np.fromiter((ord(c) - ASCII_START_LETTERS for c in chars), dtype=np.int64, count=len(chars))
        weights = np.arange(self.start_index, self.start_index + len(chars), dtype=np.int64)
        total = self.min + int(positions @ weights)
        if math.isinf(self.max):
            return total
        return total % int(self.max)

    def calculate_many(self, words: Sequence[str]) -> list[int]:
        """Score a batch of words with one matrix product.

        Shorter words are padded with zeros, which add nothing to the sum.
        """
        words = [w.lower() if self.lowercase else w for w in words]
        for word in words:
            if self.repository.includes(word):
                raise ReservedWordError(f'Trying to calculate the score of a reserved word: {word!r}')
        if not words:
            return []

        width = max(len(w) for w in words)
        positions = np.zeros((len(words), width), dtype=np.int64)
        for row, word in enumerate(words):
            positions[row, : len(word)] = [ord(c) - ASCII_START_LETTERS for c in word]
        weights = np.arange(self.start_index, self.start_index + width, dtype=np.int64)
        totals = self.min + positions @ weights
        if not math.isinf(self.max):
            totals %= int(self.max)
        return totals.tolist()
