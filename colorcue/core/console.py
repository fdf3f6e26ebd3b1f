"""Levelled console output for the command line, rendered with rich.

  ERROR    stderr, red ' ERR. ' badge
  SUCCESS  stdout, green '  OK  ' badge
  INFO     stdout, blue ' INFO ' badge
  NORMAL   stdout, plain
  RETURN   stdout, plain; the command's result, printed even when quiet

Messages are rich markup. Text that comes from the user or from files must
go through em() or escape() so square brackets are not read as markup.
"""

from __future__ import annotations

import enum
import errno
from typing import IO, Any

from rich.console import Console
from rich.markup import escape

__all__ = ['Level', 'Printer', 'escape']


class Level(enum.Enum):
    ERROR = 'error'
    SUCCESS = 'success'
    INFO = 'info'
    NORMAL = 'normal'
    RETURN = 'return'


_BADGES = {
    Level.ERROR: ('[bold white on red] ERR. [/]', ' ERR. '),
    Level.SUCCESS: ('[bold white on green]  OK  [/]', '  OK  '),
    Level.INFO: ('[bold white on blue] INFO [/]', ' INFO '),
}

_SYSTEM_ERRORS = {
    errno.EACCES: 'Permission denied.',
    errno.EEXIST: 'File already exists.',
    errno.EISDIR: 'Expected a file but directory given.',
    errno.ENOENT: 'No such file or directory.',
    errno.ENOTDIR: 'Expected a directory but file given.',
    errno.EPERM: 'Operation not permitted.',
}


class Printer:
    def __init__(
        self,
        quiet: bool = False,
        colors: bool = True,
        *,
        file: IO[str] | None = None,
        err_file: IO[str] | None = None,
    ):
        self.quiet = quiet
        self.colors = colors
        options: dict[str, Any] = {'highlight': False, 'soft_wrap': True}
        if not colors:
            options['color_system'] = None
        self.out = Console(file=file, **options)
        self.err = Console(file=err_file, stderr=True, **options)

    def print(self, message: Any = '', level: Level = Level.NORMAL) -> None:
        if self.quiet and level not in (Level.ERROR, Level.RETURN):
            return
        console = self.err if level is Level.ERROR else self.out
        if level is Level.RETURN:
            console.print(str(message), markup=False)
            return
        badge = _BADGES.get(level)
        if badge is None:
            console.print(str(message))
        else:
            console.print(f'{badge[0] if self.colors else badge[1]} {message}')

    def error(self, message: Any) -> None:
        self.print(message, Level.ERROR)

    def success(self, message: Any) -> None:
        self.print(message, Level.SUCCESS)

    def info(self, message: Any) -> None:
        self.print(message, Level.INFO)

    def normal(self, message: Any = '') -> None:
        self.print(message, Level.NORMAL)

    def ret(self, message: Any) -> None:
        self.print(message, Level.RETURN)

    def em(self, text: Any) -> str:
        """Emphasize a fragment of a message; escapes it either way."""
        text = escape(str(text))
        return f'[bold]{text}[/bold]' if self.colors else text

    def system_error(self, exc: OSError) -> str:
        """'ENOENT: No such file or directory.' style explanation of an OSError."""
        code = errno.errorcode.get(exc.errno) if exc.errno is not None else None
        explanation = _SYSTEM_ERRORS.get(exc.errno)
        if code is None or explanation is None:
            return escape(exc.strerror or str(exc))
        return f'[red]{code}[/red]: {explanation}' if self.colors else f'{code}: {explanation}'
