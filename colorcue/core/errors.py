"""Error taxonomy for colorcue.

Every failure raised by the core derives from ColorcueError so the CLI can
turn it into an error message and exit status without catching bugs.
"""

from __future__ import annotations


class ColorcueError(Exception):
    """Base class for every expected colorcue failure."""


class InvalidInputError(ColorcueError, ValueError):
    """Malformed colour, tuple, word or mode."""


class OutOfRangeError(InvalidInputError):
    """A tuple member or encoded integer is outside the codec's range."""


class InvalidFormatError(InvalidInputError):
    """Unknown colour mode requested for rendering."""


class InvalidColorError(InvalidInputError):
    """Colour is not a valid HSL triple."""


class ReservedWordError(InvalidInputError):
    """A descriptor word was passed where a scored word is required."""


class StructureError(InvalidInputError):
    """A word tuple has zero or two descriptor words."""


class NoWordsError(ColorcueError, LookupError):
    """The database has no word for the requested score."""

    code = 'NOWORDS'

    def __init__(self, score: int | None = None, message: str | None = None):
        self.score = score
        if message is None:
            message = 'No words in database' if score is None else f'No words in database for score {score}'
        super().__init__(message)


class DataIOError(ColorcueError, OSError):
    """Reading or writing a word list or database file failed."""


class SetupError(ColorcueError, RuntimeError):
    """An operation was attempted before its required initialization."""


class RepositoryError(ColorcueError):
    """The special word resource is missing entries or malformed."""
