"""Shared types for colorcue: Command, CoverageReport."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any


class Command:
    """A command-line command; doc is its long help, usually the module docstring.

    Usage in a command module:

        command = Command(name='decode', help='Decode a word tuple', doc=__doc__)

        @command.arguments
        def arguments(parser):
            parser.add_argument('words', nargs='+')

        @command.run
        def run(args, console):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = '', doc: str | None = None):
        self.name = name
        self.help = help
        self.doc = (doc or '').strip()
        self._arguments_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function adding this command's arguments."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: argparse.Namespace, console: Any) -> int:
        """Execute the command's run function and return its exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args, console) or 0


@dataclass
class CoverageReport:
    """Result of checking a database against the score range it must cover."""

    words: int = 0  # record count
    distinct_scores: int = 0  # scores with at least one word
    score_span: int = 0  # highest score + 1
    min_score: int | None = None
    max_score: int | None = None
    min_per_score: int = 0  # fewest words sharing one present score
    max_per_score: int = 0  # most words sharing one score
    required_scores: int = 0
    missing_scores: list[int] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.required_scores > 0 and not self.missing_scores

    def to_dict(self) -> dict[str, Any]:
        obj = asdict(self)
        obj['passed'] = self.passed
        return obj
