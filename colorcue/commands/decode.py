"""Decode a two-word tuple into its colour.

Usage: colorcue decode <word> <word> [--format MODE]

The words may also be given as one argument joined by '.', ',' or '_'
(e.g. ryb.green). Exactly one of them must be a descriptor word. The
colour is printed in the given format, hex by default.
"""

from __future__ import annotations

import argparse

from colorcue.commands._files import check_format
from colorcue.core.console import Printer
from colorcue.core.decoder import Decoder
from colorcue.core.errors import InvalidColorError
from colorcue.core.types import Command

command = Command(name='decode', help='Decode a two-word tuple into its colour', doc=__doc__)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('words', nargs='+', help='The word tuple')
    parser.add_argument('--format', metavar='MODE', default='hex', help='Output format (default: hex)')


@command.run
def run(args: argparse.Namespace, console: Printer) -> int:
    mode = args.format.lower()
    if not check_format(mode, console):
        return 1

    text = ' '.join(args.words)
    color = Decoder(text).decode()
    if not color.is_valid():
        raise InvalidColorError(f'Tuple {text!r} does not stand for a valid color: {color.color}')

    console.success(f'Successfully decoded tuple `{console.em(text)}`.')
    console.normal()
    console.ret(color.format(mode))
    return 0
