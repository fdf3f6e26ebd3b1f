"""Replace colour references in a file with their colours.

Usage: colorcue replace <file> [-o FILE] [--format MODE] [-i]

A reference is `cc:` followed by a word tuple joined by '.', ',' or '_',
e.g. `color: cc:ryb.green;` in a stylesheet. Each one is replaced by the
decoded colour in the given format (hex by default).

The result is printed, or written to the file given with -o. An invalid
reference aborts the replacement unless -i is given, in which case it is
left untouched.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from colorcue.commands._files import check_format, preflight_file
from colorcue.core.console import Printer, escape
from colorcue.core.decoder import Decoder
from colorcue.core.errors import ColorcueError, DataIOError
from colorcue.core.references import Reference, replace_references
from colorcue.core.types import Command

command = Command(name='replace', help='Replace colour references in a file', doc=__doc__)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('file', help='File containing cc:word.word references')
    parser.add_argument('-o', '--output', metavar='FILE', help='Write the result here instead of printing it')
    parser.add_argument('--format', metavar='MODE', default='hex', help='Colour format (default: hex)')
    parser.add_argument('-i', '--ignore-invalid', action='store_true', help='Leave invalid references untouched')


@command.run
def run(args: argparse.Namespace, console: Printer) -> int:
    mode = args.format.lower()
    if not check_format(mode, console):
        return 1

    source = Path(args.file)
    if not preflight_file(source, console):
        return 1

    def on_invalid(ref: Reference, exc: ColorcueError) -> None:
        if args.ignore_invalid:
            console.info(f'Ignoring reference `{console.em(ref.text)}`: {escape(str(exc))}')
        else:
            console.error(f'Reference `{console.em(ref.text)}`: {escape(str(exc))}')

    text = source.read_text(encoding='utf-8')
    try:
        result = replace_references(text, Decoder(), mode, args.ignore_invalid, on_invalid)
    except ColorcueError:
        return 1

    if not args.output:
        console.ret(result)
        return 0

    try:
        Path(args.output).write_text(result, encoding='utf-8')
    except OSError as exc:
        raise DataIOError(f'Cannot write {args.output}: {exc.strerror or exc}') from exc
    console.success(f'Successfully written to `{console.em(args.output)}`.')
    return 0
