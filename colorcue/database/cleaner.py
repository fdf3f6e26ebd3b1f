"""Filter a raw word list down to words usable in a database.

Rules, each rejecting a line:

  empty          empty or whitespace-only line
  too_short      fewer than 2 characters
  abbreviation   no lowercase letters (e.g. 'NASA')
  special_chars  anything outside A-Z, a-z and Latin-1/Latin Extended-A letters
  reserved       a special descriptor word; cannot be disabled

Rules are disabled by name; the sentinel 'ALL' disables every rule but
'reserved'. The camelCase spellings 'tooShort' and 'specialChars' are
accepted as aliases.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path

from colorcue.core.errors import DataIOError, InvalidInputError
from colorcue.core.repository import SpecialWordRepository, get_repository

logger = logging.getLogger(__name__)

ALL_RULES = 'ALL'

_WORD_RE = re.compile(r'^[A-Za-z\u00c0-\u017f]+$')

_ALIASES = {
    'tooShort': 'too_short',
    'specialChars': 'special_chars',
}


def _empty(word: str) -> bool:
    return not word.strip()


def _too_short(word: str) -> bool:
    return len(word) < 2


def _abbreviation(word: str) -> bool:
    return word == word.upper()


def _special_chars(word: str) -> bool:
    return not _WORD_RE.match(word)


RULES: dict[str, Callable[[str], bool]] = {
    'empty': _empty,
    'too_short': _too_short,
    'abbreviation': _abbreviation,
    'special_chars': _special_chars,
}


def resolve_rules(disabled: Iterable[str] = ()) -> list[str]:
    """Return the names of the optional rules left active after disabling some."""
    names = set()
    for name in disabled:
        if name == ALL_RULES:
            return []
        name = _ALIASES.get(name, name)
        if name == 'reserved':
            logger.warning("The 'reserved' rule cannot be disabled")
            continue
        if name not in RULES:
            raise InvalidInputError(f'Unknown cleanup rule: {name!r}. Available: {", ".join(sorted(RULES))}')
        names.add(name)
    return [name for name in RULES if name not in names]


class Cleaner:
    """Reads a word list and keeps the lines no active rule rejects."""

    def __init__(
        self,
        path: str | Path,
        disabled_rules: Iterable[str] = (),
        *,
        repository: SpecialWordRepository | None = None,
    ):
        self.path = Path(path)
        self.rules = resolve_rules(disabled_rules)
        self.repository = repository if repository is not None else get_repository()
        self.data: list[str] = []

    def rejects(self, word: str) -> str | None:
        """Name of the first rule rejecting word, or None if it is kept."""
        for name in self.rules:
            if RULES[name](word):
                return name
        if self.repository.includes(word):
            return 'reserved'
        return None

    def cleanup(self) -> list[str]:
        """Read the word list and return the kept words in input order."""
        try:
            lines = self.path.read_text(encoding='utf-8').splitlines()
        except OSError as exc:
            raise DataIOError(f'Cannot read {self.path}: {exc.strerror or exc}') from exc

        kept = []
        rejected: dict[str, int] = {}
        for line in lines:
            rule = self.rejects(line)
            if rule is None:
                kept.append(line)
            else:
                rejected[rule] = rejected.get(rule, 0) + 1
        logger.debug('Kept %d of %d words from %s, rejected %s', len(kept), len(lines), self.path, rejected)
        self.data = kept
        return kept
