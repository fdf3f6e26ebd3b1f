"""Encode a colour into a two-word tuple.

Usage: colorcue encode <color> [--format MODE] [-d DB] [-a] [-f]

Without --format the input format is recognized automatically:

  CSS keyword    rebeccapurple
  hex            #70c270 or 70c270
  functional     rgb(22, 17, 131), hsl(120, 40, 60), cmyk(0, 50, 50, 10), ...

With --format, multi-channel modes take comma-separated channels
(e.g. --format rgb '22,17,131').

After encoding, the first tuple is decoded again. When the colour could
not be encoded exactly (every colour is rounded to integral HSL first),
the colour that the tuple actually stands for is reported.

If the database has no word for the colour's score, encoding fails,
unless -f is given: then the word with the nearest score is used, which
may stand for a noticeably different colour.

Options:
  --format MODE   input format (see above)
  -d, --database  database to read (default: configured database)
  -a, --all       print every tuple instead of one picked at random
  -f, --force     fall back to the nearest encodable colour
"""

from __future__ import annotations

import argparse
from typing import Any

from colorcue.commands._files import check_format, preflight_file
from colorcue.core.color import Color, parse_channels, recognize_format
from colorcue.core.config import resolve_db_path
from colorcue.core.console import Printer
from colorcue.core.convert import CHANNEL_MODES
from colorcue.core.decoder import Decoder
from colorcue.core.encoder import Encoder
from colorcue.core.errors import NoWordsError
from colorcue.core.types import Command

DEFAULT_FORMAT = 'hex'

command = Command(name='encode', help='Encode a colour into a two-word tuple', doc=__doc__)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('color', help="Colour to encode, e.g. '#70c270' or 'rgb(22, 17, 131)'")
    parser.add_argument('--format', metavar='MODE', help='Input format (default: recognized from the input)')
    parser.add_argument('-d', '--database', metavar='DB', help='Database to read (default: configured database)')
    parser.add_argument('-a', '--all', dest='all_tuples', action='store_true', help='Print every possible tuple')
    parser.add_argument('-f', '--force', action='store_true', help='Allow a high loss of precision')


def _read_color(text: str, console: Printer, mode: str | None) -> tuple[str, Any] | None:
    """(mode, value) of the colour input, or None after printing why it is unusable."""
    recognized = recognize_format(text)

    if mode is None:
        if recognized is None:
            console.error('Unrecognizable or ambiguous color input.')
            console.error(f'Please specify format with the {console.em("--format")} option.')
            return None
        if recognized[0] != DEFAULT_FORMAT:
            console.info(f'Recognized color format `{console.em(recognized[0])}`.')
        return recognized

    mode = mode.lower()
    if not check_format(mode, console):
        return None
    if recognized and recognized[0] != mode:
        console.info(
            f'Format `{console.em(mode)}` specified but input was detected as `{console.em(recognized[0])}`.'
        )
    elif recognized:
        return recognized

    if mode in CHANNEL_MODES:
        try:
            return mode, parse_channels(text.strip().strip('()'))
        except ValueError:
            console.error(f'Cannot read `{console.em(text)}` as comma-separated {mode} channels.')
            return None
    if mode == 'keyword' and text.lower() not in Color.css_colors():
        console.error(f'Color `{console.em(text)}` is not recognized as a valid CSS keyword.')
        return None
    return mode, text


@command.run
def run(args: argparse.Namespace, console: Printer) -> int:
    db = resolve_db_path(args.database)

    parsed = _read_color(args.color, console, args.format)
    if parsed is None:
        return 1
    mode, value = parsed

    if not preflight_file(db, console, 'database'):
        return 1

    encoder = Encoder(db, value, mode)
    try:
        result = encoder.encode(all_results=args.all_tuples)
    except NoWordsError:
        return _encode_closest(encoder, mode, args.force, console)

    decoded = Decoder(result[0], repository=encoder.repository).decode().format(mode)
    original = Color.pure_format(value, mode)
    if original.upper() != decoded.upper():
        console.info(f'Color {console.em(original)} cannot be losslessly encoded...')
        console.info(f'...rounding to nearest color, {console.em(decoded)}.')

    message = f'Successfully encoded color {console.em(decoded)}'
    if args.all_tuples:
        message += f', {console.em(len(result))} choices available'
    console.success(message + '.')
    console.normal()
    for words in result:
        console.ret(words)
    return 0


def _encode_closest(encoder: Encoder, mode: str, force: bool, console: Printer) -> int:
    message = 'The database does not contain words that can safely encode this color.'
    if not force:
        console.error(message)
        console.error(
            f'Use option {console.em("-f")} or {console.em("--force")} to allow potentially high precision loss.'
        )
        return 1

    console.info(message)
    console.info('Searching for a color that can be encoded with this database...')
    try:
        result = encoder.encode(find_closest=True)
    except NoWordsError:
        console.error('No alternative color found. The database cannot encode this color at all.')
        return 1

    decoded = Decoder(result[0], repository=encoder.repository).decode().format(mode)
    console.info(f'...alternative color {console.em(decoded)} found.')
    console.success(f'Successfully encoded alternative color {console.em(decoded)}.')
    console.normal()
    console.ret(result[0])
    return 0
