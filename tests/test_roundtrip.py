"""Encoding a colour and decoding the result gives the colour back."""

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from colorcue.core import tuple_codec
from colorcue.core.constants import PIVOT
from colorcue.core.decoder import Decoder
from colorcue.core.encoder import Encoder
from colorcue.core.repository import SpecialWordRepository
from colorcue.core.scoring import WordScoreCalculator
from colorcue.database.accessor import RecordCache

COLORS = [[120, 40, 60], [7, 80, 30], [359, 100, 100], [0, 1, 0], [0, 50, 52], [300, 50, 51]]
GRAY_LUMINOSITIES = [0, 42, 100]


def folded_score(hsl: list[int]) -> int:
    return tuple_codec.encode(hsl[1:], 100) % PIVOT


@pytest.fixture
def db(make_db: Callable[..., Path], score_word: Callable[[int], str]) -> Path:
    scores = sorted({folded_score(c) for c in COLORS} | set(GRAY_LUMINOSITIES))
    return make_db([(score, score_word(score)) for score in scores])


class TestRoundTrip:
    @pytest.mark.parametrize('hsl', COLORS)
    def test_color(
        self,
        db: Path,
        cache: RecordCache,
        repository: SpecialWordRepository,
        rng: np.random.Generator,
        hsl: list[int],
    ) -> None:
        encoder = Encoder(db, hsl, repository=repository, cache=cache, rng=rng)
        [words] = encoder.encode()
        assert len(words.split()) == 2
        assert Decoder(words, repository=repository).decode().color == hsl

    @pytest.mark.parametrize('luminosity', GRAY_LUMINOSITIES)
    def test_gray(
        self,
        db: Path,
        cache: RecordCache,
        repository: SpecialWordRepository,
        rng: np.random.Generator,
        luminosity: int,
    ) -> None:
        encoder = Encoder(db, [200, 0, luminosity], repository=repository, cache=cache, rng=rng)
        for words in encoder.encode(all_results=True):
            assert Decoder(words, repository=repository).decode().color == [0, 0, luminosity]


class TestScoreWords:
    @pytest.mark.parametrize('score', [0, 1, 42, 96, 97, 3008, 4100, 5100, PIVOT - 1])
    def test_any_score_has_a_word(
        self, repository: SpecialWordRepository, score_word: Callable[[int], str], score: int
    ) -> None:
        word = score_word(score)
        assert not repository.includes(word)
        assert WordScoreCalculator(0, PIVOT, repository=repository).calculate(word) == score
