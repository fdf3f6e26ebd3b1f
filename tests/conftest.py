"""Shared fixtures: a small special word list, a private record cache, a seeded rng."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import numpy as np
import pytest
from colorcue.core.config import ENV_DATA_DIR, ENV_DB_PATH, ENV_LOG_DIR
from colorcue.core.constants import HUE_MAX, PIVOT
from colorcue.core.repository import SpecialWordRepository, get_repository
from colorcue.core.scoring import WordScoreCalculator
from colorcue.database.accessor import DEFAULT_CACHE, RecordCache
from colorcue.logging_utils import _remove_managed_handlers

GRAY_WORDS = ['ash', 'slate', 'smoke']


def hue_word(hue: int) -> str:
    """Descriptor used by the test repository for a hue: 'red', then 'hue' + digits as letters."""
    if hue == 0:
        return 'red'
    return 'hue' + ''.join(chr(ord('a') + int(d)) for d in str(hue))


def _words_with_total(total: int, length: int) -> Iterator[str]:
    """Words of the given length whose raw score is total.

    Letter i (0-based, a=0 .. z=25) adds letter * (97 + i) to the raw score.
    Positions are filled from the last one down; a branch is dropped as soon
    as the positions left cannot add up to what remains.
    """
    weights = [97 + i for i in range(length)]

    def fill(pos: int, remaining: int) -> Iterator[list[int]]:
        if pos < 0:
            if remaining == 0:
                yield []
            return
        weight = weights[pos]
        reachable_below = 25 * sum(weights[:pos])
        for letter in range(min(25, remaining // weight), -1, -1):
            rest = remaining - letter * weight
            if rest > reachable_below:
                break
            for head in fill(pos - 1, rest):
                yield [*head, letter]

    for letters in fill(length - 1, total):
        yield ''.join(chr(97 + x) for x in letters)


def word_for_score(score: int, repository: SpecialWordRepository) -> str:
    """A non-reserved word scoring `score` in [0, PIVOT).

    Raw scores 1-96 need the wrap through PIVOT, and some totals are out of
    reach of short words, so longer words are tried in turn.
    """
    calculator = WordScoreCalculator(0, PIVOT, repository=repository)
    for length in range(4, 9):
        for total in (score, score + PIVOT):
            for word in _words_with_total(total, length):
                if not repository.includes(word):
                    assert calculator.calculate(word) == score
                    return word
    raise ValueError(f'No word scores {score}')


def write_db(path: Path, records: Iterable[tuple[int, str]]) -> Path:
    path.write_text(''.join(f'{score},{word}\n' for score, word in records), encoding='utf-8')
    return path


@pytest.fixture
def repository() -> SpecialWordRepository:
    return SpecialWordRepository([hue_word(h) for h in range(HUE_MAX + 1)] + GRAY_WORDS)


@pytest.fixture
def cache() -> RecordCache:
    return RecordCache()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def score_word(repository: SpecialWordRepository) -> Callable[[int], str]:
    return lambda score: word_for_score(score, repository)


@pytest.fixture
def bundled_score_word() -> Callable[[int], str]:
    """Like score_word, but avoiding the bundled descriptor words."""
    bundled = get_repository()
    return lambda score: word_for_score(score, bundled)


@pytest.fixture
def make_db(tmp_path: Path) -> Callable[..., Path]:
    """Write (score, word) records as a database file under tmp_path."""

    def _make(records: Iterable[tuple[int, str]], name: str = 'db.data') -> Path:
        return write_db(tmp_path / name, records)

    return _make


@pytest.fixture
def managed_logging() -> Iterator[None]:
    """Drop the handlers configure_logging() installs once the test is done."""
    root = logging.getLogger()
    level = root.level
    yield
    _remove_managed_handlers(root)
    root.setLevel(level)


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run from an empty repository-like tmp_path with no colorcue variables and an empty shared cache."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for name in (ENV_DB_PATH, ENV_DATA_DIR, ENV_LOG_DIR):
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    DEFAULT_CACHE.reset()
    yield tmp_path
    DEFAULT_CACHE.reset()
