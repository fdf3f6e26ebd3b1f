"""Finds the commands of the command line.

Each public module of colorcue.commands defines one module-level
`command`. Modules are listed with pkgutil; a frozen build lists nothing,
so the names in BUILTIN_COMMANDS are imported instead.
"""

from __future__ import annotations

import functools
import importlib
import logging
import pkgutil

from colorcue import commands as commands_package
from colorcue.core.errors import InvalidInputError
from colorcue.core.types import Command

logger = logging.getLogger(__name__)

BUILTIN_COMMANDS = ('check', 'decode', 'encode', 'gendb', 'replace')


def _module_names() -> list[str]:
    names = [info.name for info in pkgutil.iter_modules(commands_package.__path__) if not info.name.startswith('_')]
    return names or list(BUILTIN_COMMANDS)


@functools.lru_cache(maxsize=None)
def all_commands() -> dict[str, Command]:
    """Import the command modules once; commands keyed and sorted by name."""
    found: dict[str, Command] = {}
    for module_name in _module_names():
        module = importlib.import_module(f'{commands_package.__name__}.{module_name}')
        command = getattr(module, 'command', None)
        if not isinstance(command, Command):
            logger.debug('%s defines no command, skipped', module.__name__)
            continue
        found[command.name] = command
    return dict(sorted(found.items()))


def get(name: str) -> Command:
    commands = all_commands()
    if name not in commands:
        raise InvalidInputError(f'Unknown command: {name!r}. Available: {", ".join(commands)}')
    return commands[name]
