"""File checks shared by the commands."""

from __future__ import annotations

import errno
import os
from pathlib import Path

from colorcue.core.color import Color
from colorcue.core.console import Printer


def directory_error(path: Path) -> IsADirectoryError:
    return IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))


def preflight_file(path: Path, console: Printer, label: str = 'file') -> bool:
    """True if path is an existing regular file; otherwise prints why it is not."""
    try:
        if path.is_dir():
            raise directory_error(path)
        path.stat()
    except OSError as exc:
        console.error(f'Failed to open {label} `{console.em(path)}`.')
        console.error(console.system_error(exc))
        return False
    return True


def check_format(mode: str, console: Printer) -> bool:
    if mode in Color.MODES:
        return True
    console.error(f'Format `{console.em(mode)}` is not recognized.')
    console.error(f'Available formats: {", ".join(Color.MODES)}')
    return False
