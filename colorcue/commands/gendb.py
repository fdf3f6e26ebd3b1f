"""Generate a word database from a word list.

Usage: colorcue gendb <file> [-o FILE] [-f] [-d RULES]

The word list is a text file with one word per line. It is cleaned first;
a line is dropped when any of these rules rejects it:

  empty          empty or whitespace-only line
  too_short      fewer than 2 characters
  abbreviation   no lowercase letters (e.g. NASA)
  special_chars  digits, punctuation or letters outside Latin-1/Latin Extended-A
  reserved       one of the special descriptor words (always on)

Disable rules with -d, comma-separated (e.g. -d too_short,abbreviation),
or all optional rules at once with -d ALL.

The kept words are scored and written as `score,word` lines sorted by
score, replacing the whole file. The database defaults to
COLORCUE_DB_PATH, or db.data in the data directory. An existing database
is only overwritten with -f.

Run `colorcue check` afterwards to see whether the word list was rich
enough to encode every colour.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from colorcue.commands._files import directory_error, preflight_file
from colorcue.core.config import resolve_db_path
from colorcue.core.console import Printer
from colorcue.core.types import Command
from colorcue.database.cleaner import Cleaner
from colorcue.database.initializer import Initializer

command = Command(name='gendb', help='Generate a word database from a word list', doc=__doc__)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('file', help='Word list, one word per line')
    parser.add_argument('-o', '--output-file', metavar='FILE', help='Database to write (default: configured database)')
    parser.add_argument('-f', '--force', action='store_true', help='Overwrite an existing database')
    parser.add_argument(
        '-d',
        '--disable-rules',
        default='',
        metavar='RULES',
        help='Comma-separated cleanup rules to disable, or ALL',
    )


@command.run
def run(args: argparse.Namespace, console: Printer) -> int:
    source = Path(args.file)
    output = resolve_db_path(args.output_file)

    if not preflight_file(source, console, 'word list'):
        return 1

    if output.is_dir():
        console.error(f'Failed to write to `{console.em(output)}`.')
        console.error(console.system_error(directory_error(output)))
        return 1
    if output.exists():
        message = f'File `{console.em(output)}` already exists.'
        if not args.force:
            console.error(message)
            console.error(f'Use {console.em("-f")} or {console.em("--force")} to override.')
            return 1
        console.info(message + ' Overriding...')

    disabled = [rule.strip() for rule in args.disable_rules.split(',') if rule.strip()]
    cleaner = Cleaner(source, disabled)

    console.info('Cleaning data before insertion...')
    words = cleaner.cleanup()

    console.info(f'Populating database with {console.em(len(words))} words. This may take a while...')
    initializer = Initializer(output)
    initializer.set_up()
    initializer.populate_with(words)

    console.success(f'Database successfully generated at `{console.em(output)}`.')
    return 0
