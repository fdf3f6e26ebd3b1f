"""colorcue: encode colours as memorable two-word phrases, and back.

Usage: colorcue [options] <command> [args]

Commands are auto-discovered from colorcue/commands/.
Each command module's docstring is its documentation.
Run `colorcue help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colorcue looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

from __future__ import annotations

import argparse
import logging
import sys

from colorcue import registry
from colorcue.core.console import Printer, escape
from colorcue.core.env import load_env
from colorcue.core.errors import ColorcueError
from colorcue.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  colorcue gendb words.txt\n'
        "  colorcue encode '#70c270'\n"
        "  colorcue encode 'rgb(22, 17, 131)' --all\n"
        '  colorcue decode ryb green --format rgb\n'
        '  colorcue check --json\n'
        '  colorcue replace style.css -o style.out.css\n'
        '  colorcue help encode\n'
        '\n'
        'Configuration env vars (set in .env or environment):\n'
        '  COLORCUE_DB_PATH   database file (default: <data dir>/db.data)\n'
        '  COLORCUE_DATA_DIR  data directory\n'
        '  COLORCUE_LOG_DIR   also write logs to <dir>/colorcue.log\n'
    )
    parser = argparse.ArgumentParser(
        prog='colorcue',
        description='Encode colours as memorable two-word phrases, and back.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before the command
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-q', '--quiet', action='store_true', help='Only print errors and results')
    parser.add_argument('-c', '--no-colors', action='store_true', help='Print without colours')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, command in sorted(commands.items()):
        p = sub.add_parser(
            name,
            help=command.help,
            description=command.doc,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        command.add_arguments(p)

    # `help` subcommand prints the full module docstring of a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', metavar='command', help='Command name')

    return parser


def _print_help(console: Printer, topic: str | None) -> int:
    """Print the full module docstring of a command, or list the commands."""
    commands = registry.all_commands()

    if topic is None:
        console.normal('Available commands:\n')
        for name in sorted(commands):
            console.normal(escape(f'  {name:<10} {commands[name].help}'))
        console.normal('\nRun: colorcue help <command> for full docs.')
        return 0

    if topic not in commands:
        console.error(f'Unknown command: {console.em(topic)}')
        console.error(f'Available: {", ".join(sorted(commands))}')
        return 1

    console.ret(commands[topic].doc or f'(No docs for {topic!r})')
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=args.env_file)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    if env_path:
        logger.info('Loaded %s', env_path)

    console = Printer(quiet=args.quiet, colors=not args.no_colors)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(console, args.topic)

    try:
        return registry.get(args.command).execute(args, console)
    except ColorcueError as exc:
        console.error(escape(str(exc)))
        return 1


if __name__ == '__main__':
    sys.exit(main())
