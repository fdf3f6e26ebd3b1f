"""Tests for colorcue.core.encoder: colour -> word tuples."""

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from colorcue.core.color import Color
from colorcue.core.constants import PIVOT
from colorcue.core.encoder import Encoder
from colorcue.core.errors import InvalidColorError, NoWordsError, RepositoryError, SetupError
from colorcue.core.repository import SpecialWordRepository
from colorcue.database.accessor import RecordCache


@pytest.fixture
def encoder_for(
    make_db: Callable[..., Path], cache: RecordCache, repository: SpecialWordRepository, rng: np.random.Generator
) -> Callable[..., Encoder]:
    def _make(records: list[tuple[int, str]], color: object = None, mode: str | None = None) -> Encoder:
        return Encoder(make_db(records), color, mode, repository=repository, cache=cache, rng=rng, use_grep=False)

    return _make


class TestSetUp:
    def test_no_color(self, encoder_for: Callable[..., Encoder]) -> None:
        with pytest.raises(SetupError):
            encoder_for([]).encode()

    def test_invalid_color(self, encoder_for: Callable[..., Encoder]) -> None:
        with pytest.raises(InvalidColorError):
            encoder_for([], [400, 0, 0]).encode()

    def test_set_color_from_mode(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([]).set_color('#70c270', 'hex')
        assert encoder.color == Color([120, 40, 60])

    def test_set_color_instance(self, encoder_for: Callable[..., Encoder]) -> None:
        color = Color([1, 2, 3])
        assert encoder_for([]).set_color(color).color is color


class TestColorEncoding:
    def test_word_first_below_pivot(self, encoder_for: Callable[..., Encoder]) -> None:
        # s=40, l=60 packs to 4100
        encoder = encoder_for([(4100, 'ryb')], [120, 40, 60])
        assert encoder.encode() == ['ryb huebca']

    def test_descriptor_first_above_pivot(self, encoder_for: Callable[..., Encoder]) -> None:
        # s=80, l=30 packs to 8110, folded to 8110 - PIVOT
        encoder = encoder_for([(8110 - PIVOT, 'fold')], [7, 80, 30])
        assert encoder.encode() == ['hueh fold']

    def test_pivot_itself_is_folded(self, encoder_for: Callable[..., Encoder]) -> None:
        # s=50, l=52 packs to exactly PIVOT
        encoder = encoder_for([(0, 'zero')], [0, 50, 52])
        assert encoder.encode() == ['red zero']

    def test_just_below_pivot(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(PIVOT - 1, 'last')], [0, 50, 51])
        assert encoder.encode() == ['last red']

    def test_all_results(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(4100, 'ryb'), (4100, 'other')], [120, 40, 60])
        assert encoder.encode(all_results=True) == ['ryb huebca', 'other huebca']

    def test_float_channels(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(4100, 'ryb')], [120.0, 40.0, 60.0])
        assert encoder.encode() == ['ryb huebca']

    def test_no_words(self, encoder_for: Callable[..., Encoder]) -> None:
        with pytest.raises(NoWordsError):
            encoder_for([(4000, 'near')], [120, 40, 60]).encode()

    def test_closest(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(4000, 'near'), (4500, 'far')], [120, 40, 60])
        assert encoder.encode(find_closest=True) == ['near huebca']


class TestGrayEncoding:
    def test_gray_uses_luminosity(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(42, 'lum'), (4200, 'unused')], [200, 0, 42])
        word, gray = encoder.encode()[0].split()
        assert word == 'lum'
        assert gray in ('ash', 'slate', 'smoke')

    def test_gray_all_results(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(42, 'lum')], [0, 0, 42])
        assert encoder.encode(all_results=True) == ['lum ash', 'lum slate', 'lum smoke']

    def test_gray_closest(self, encoder_for: Callable[..., Encoder]) -> None:
        encoder = encoder_for([(40, 'forty'), (90, 'ninety')], [0, 0, 42])
        assert encoder.encode(all_results=True, find_closest=True) == ['forty ash', 'forty slate', 'forty smoke']

    @pytest.mark.parametrize('all_results', [False, True])
    def test_no_gray_descriptors(
        self, make_db: Callable[..., Path], cache: RecordCache, rng: np.random.Generator, all_results: bool
    ) -> None:
        hues_only = SpecialWordRepository(['red', *(f'hue{h}' for h in range(1, 361))])
        encoder = Encoder(make_db([(42, 'lum')]), [0, 0, 42], repository=hues_only, cache=cache, rng=rng)
        with pytest.raises(RepositoryError):
            encoder.encode(all_results=all_results)
