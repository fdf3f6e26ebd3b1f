"""Tests for colorcue.core.repository: descriptor words indexed by hue."""

from pathlib import Path

import numpy as np
import pytest
from colorcue.core.errors import RepositoryError
from colorcue.core.repository import SpecialWordRepository, get_repository


class TestBundledWords:
    def test_shared_instance(self) -> None:
        assert get_repository() is get_repository()

    def test_has_hues_and_grays(self) -> None:
        repo = get_repository()
        assert len(repo) > 361
        assert repo.hue_word(0) == 'red'
        assert repo.hue_word(120) == 'green'
        assert 'ash' in repo.gray_words()

    def test_words_are_unique(self) -> None:
        words = [w.lower() for w in get_repository().words]
        assert len(words) == len(set(words))


class TestLookup:
    def test_index_of(self, repository: SpecialWordRepository) -> None:
        assert repository.index_of('red') == 0
        assert repository.index_of('huebca') == 120
        assert repository.index_of('ash') == 361
        assert repository.index_of('smoke') == 363

    def test_case_insensitive(self, repository: SpecialWordRepository) -> None:
        assert repository.includes('ReD')
        assert 'SLATE' in repository
        assert repository.index_of('HUEBCA') == 120

    def test_missing(self, repository: SpecialWordRepository) -> None:
        assert repository.index_of('ryb') == -1
        assert not repository.includes('ryb')
        assert 42 not in repository

    def test_hue_word(self, repository: SpecialWordRepository) -> None:
        assert repository.hue_word(360) == 'huedga'

    def test_hue_word_out_of_range(self, repository: SpecialWordRepository) -> None:
        with pytest.raises(IndexError):
            repository.hue_word(361)

    def test_gray_words(self, repository: SpecialWordRepository) -> None:
        assert repository.gray_words() == ['ash', 'slate', 'smoke']

    def test_random_gray_word(self, repository: SpecialWordRepository, rng: np.random.Generator) -> None:
        drawn = {repository.random_gray_word(rng) for _ in range(50)}
        assert drawn <= {'ash', 'slate', 'smoke'}
        assert len(drawn) > 1

    def test_no_gray_descriptors(self, rng: np.random.Generator) -> None:
        hues_only = SpecialWordRepository(f'w{i:03d}' for i in range(361))
        with pytest.raises(RepositoryError, match='no gray descriptor'):
            hues_only.gray_words()
        with pytest.raises(RepositoryError, match='no gray descriptor'):
            hues_only.random_gray_word(rng)


class TestLoading:
    def test_too_few_words(self) -> None:
        with pytest.raises(RepositoryError):
            SpecialWordRepository(['red', 'orange'])

    def test_from_file_skips_comments_and_blanks(self, tmp_path: Path) -> None:
        words = [f'w{i:03d}' for i in range(362)]
        f = tmp_path / 'colors.data'
        head, tail = '\n'.join(words[:100]), '\n'.join(words[100:])
        f.write_text(f'# header\n\n{head}\n   # indented comment\n{tail}\n')
        repo = SpecialWordRepository.from_file(f)
        assert len(repo) == 362
        assert repo.index_of('w100') == 100
        assert repo.gray_words() == ['w361']
