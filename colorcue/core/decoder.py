"""Two-word phrase -> colour.

Exactly one of the two words must be a special descriptor word. Its index
is the hue, or marks a gray when it is past 360. The other word's score
gives luminosity for a gray, or the packed saturation/luminosity pair
otherwise, with PIVOT added back when the descriptor came first.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from colorcue.core import tuple_codec
from colorcue.core.color import Color
from colorcue.core.constants import CHANNEL_MAX, HUE_MAX, PIVOT
from colorcue.core.errors import InvalidInputError, SetupError, StructureError
from colorcue.core.repository import SpecialWordRepository, get_repository
from colorcue.core.scoring import WordScoreCalculator

logger = logging.getLogger(__name__)

_SEPARATORS_RE = re.compile(r'[\s_.,]+')
_DIGIT_RE = re.compile(r'\d')


def tokenize(text: str) -> list[str]:
    """Split a phrase on runs of whitespace, '_', '.' and ','; lowercased.

    Separators at either end are dropped, so 'ryb.green.' gives two tokens.
    """
    return [token for token in _SEPARATORS_RE.split(text.lower()) if token]


class Decoder:
    def __init__(self, text: str | Sequence[str] | None = None, *, repository: SpecialWordRepository | None = None):
        self.repository = repository if repository is not None else get_repository()
        self.calculator = WordScoreCalculator(0, PIVOT, repository=self.repository)
        self.text: str | None = None
        self._cache: dict[str, Color] = {}
        if text is not None:
            self.set_input(text)

    def set_input(self, text: str | Sequence[str]) -> Decoder:
        self.text = text if isinstance(text, str) else ' '.join(text)
        return self

    def decode(self) -> Color:
        if self.text is None:
            raise SetupError('No input set to decode')

        tokens = tokenize(self.text)
        if len(tokens) != 2 or any(_DIGIT_RE.search(t) for t in tokens):
            raise InvalidInputError(f'Invalid input: {self.text!r}. Expected two words without digits')

        key = ' '.join(tokens)
        if key in self._cache:
            return self._cache[key]

        first, second = (self.repository.includes(t) for t in tokens)
        if first and second:
            raise StructureError(f'Two descriptor words in {self.text!r}')
        if not first and not second:
            raise StructureError(f'No descriptor word in {self.text!r}')

        descriptor_first = first
        descriptor, word = tokens if descriptor_first else tokens[::-1]
        index = self.repository.index_of(descriptor)
        if index < 0:
            raise InvalidInputError(f'Unknown descriptor word: {descriptor!r}')

        score = self.calculator.calculate(word)
        if index > HUE_MAX:
            hsl = [0, 0, score]
        else:
            if descriptor_first:
                score += PIVOT
            hsl = [index, *tuple_codec.decode(score, CHANNEL_MAX)]

        logger.debug('Decoded %r to hsl%s', key, tuple(hsl))
        color = Color(hsl)
        self._cache[key] = color
        return color
