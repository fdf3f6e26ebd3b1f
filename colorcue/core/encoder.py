"""Colour -> two-word phrase.

The saturation/luminosity pair is packed into one integer with the tuple
codec. The lower half of that range keeps its value as the word score and
puts the scored word first; the upper half is folded with `% PIVOT` and
puts the descriptor first, so word order carries the missing bit. The
descriptor is the special word at index = hue, or a gray word when the
saturation is 0, in which case the scored word encodes luminosity alone.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path
from typing import Any

import numpy as np

from colorcue.core import tuple_codec
from colorcue.core.color import Color
from colorcue.core.constants import CHANNEL_MAX, DEFAULT_MODE, PIVOT
from colorcue.core.errors import InvalidColorError, SetupError
from colorcue.core.repository import SpecialWordRepository, get_repository
from colorcue.database.accessor import RecordCache
from colorcue.database.finder import Finder

logger = logging.getLogger(__name__)


class Encoder:
    def __init__(
        self,
        db_path: str | Path,
        color: Any = None,
        mode: str | None = None,
        *,
        repository: SpecialWordRepository | None = None,
        cache: RecordCache | None = None,
        rng: np.random.Generator | None = None,
        use_grep: bool = True,
    ):
        self.repository = repository if repository is not None else get_repository()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.finder = Finder(db_path, cache=cache, rng=self.rng, use_grep=use_grep)
        self.color: Color | None = None
        if color is not None:
            self.set_color(color, mode)

    def set_color(self, color: Any, mode: str | None = None) -> Encoder:
        """Set the colour to encode, either a Color or a value in the given mode."""
        self.color = color if isinstance(color, Color) else Color(color, mode or DEFAULT_MODE)
        return self

    def encode(self, all_results: bool = False, find_closest: bool = False) -> list[str]:
        """Encode the colour into word tuples.

        With all_results every candidate word (and every gray descriptor)
        is combined; otherwise one tuple is picked at random. With
        find_closest the word whose score is nearest is used instead of
        an exact match. Raises NoWordsError when no exact match exists.
        """
        if self.color is None:
            raise SetupError('No color set to encode')
        if not self.color.is_valid():
            raise InvalidColorError(f'Invalid color: {self.color.color!r}')

        hue, saturation, luminosity = (int(c) for c in self.color.color)
        num = tuple_codec.encode([saturation, luminosity], CHANNEL_MAX)
        descriptor_first = num >= PIVOT
        score = num % PIVOT if descriptor_first else num

        if saturation == 0:
            if all_results:
                descriptors = self.repository.gray_words()
            else:
                descriptors = [self.repository.random_gray_word(self.rng)]
            words = self._find_words(luminosity, all_results, find_closest)
        else:
            descriptors = [self.repository.hue_word(hue)]
            words = self._find_words(score, all_results, find_closest)

        logger.debug(
            'Encoding hsl(%d, %d, %d): score %d, descriptor first: %s',
            hue,
            saturation,
            luminosity,
            score,
            descriptor_first,
        )
        if descriptor_first:
            return [f'{d} {w}' for w, d in itertools.product(words, descriptors)]
        return [f'{w} {d}' for w, d in itertools.product(words, descriptors)]

    def _find_words(self, score: int, all_results: bool, find_closest: bool) -> list[str]:
        if find_closest:
            return [self.finder.get_closest_word_by_score(score)]
        if all_results:
            return self.finder.get_all_words_by_score(score)
        return [self.finder.get_one_word_by_score(score)]
