"""Check that a database can encode every colour.

Usage: colorcue check [database] [--json]

Every colour maps to one of 5102 scores. The check passes when the
database has at least one word for each of them; the exit status is 1
otherwise. The report lists the number of words and distinct scores,
the range of scores, how many words share a score, and the scores that
have no word at all.
"""

from __future__ import annotations

import argparse

from colorcue.commands._files import preflight_file
from colorcue.core.config import resolve_db_path
from colorcue.core.console import Printer, escape
from colorcue.core.report import format_json, format_text
from colorcue.core.types import Command
from colorcue.database.checker import DataChecker

command = Command(name='check', help='Check that a database can encode every colour', doc=__doc__)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('database', nargs='?', help='Database to check (default: configured database)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace, console: Printer) -> int:
    db = resolve_db_path(args.database)
    if not preflight_file(db, console, 'database'):
        return 1

    report = DataChecker(db).check()

    if args.json:
        console.ret(format_json(report, db))
        return 0 if report.passed else 1

    console.success(f'Tests ran successfully on database `{console.em(db)}`.')
    console.normal(escape(format_text(report)))
    if not report.passed:
        console.info('Not enough words.')
        return 1
    console.info('Enough words. Congrats!')
    return 0
