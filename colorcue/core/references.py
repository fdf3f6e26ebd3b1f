"""Find and replace colorcue references in text.

A reference is `cc:` followed by two words joined by '.', ',' or '_',
e.g. `cc:ryb.navajo`. Words may contain letters from Latin-1 and Latin
Extended-A and hyphens.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from colorcue.core.decoder import Decoder
from colorcue.core.errors import ColorcueError, InvalidColorError

logger = logging.getLogger(__name__)

REFERENCE_RE = re.compile(r'cc:([A-Za-z\u00c0-\u017f-]+[._,][A-Za-z\u00c0-\u017f-]+)')


@dataclass
class Reference:
    """A reference found in a text."""

    text: str  # the whole match, including 'cc:'
    words: str  # the word tuple after 'cc:'
    start: int
    end: int


def find_references(text: str) -> list[Reference]:
    return [Reference(m.group(0), m.group(1), m.start(), m.end()) for m in REFERENCE_RE.finditer(text)]


def replace_references(
    text: str,
    decoder: Decoder,
    mode: str = 'hex',
    ignore_invalid: bool = False,
    on_invalid: Callable[[Reference, ColorcueError], None] | None = None,
) -> str:
    """Replace every reference with its decoded colour rendered in mode.

    Each invalid reference is reported to on_invalid. It then raises its
    decoding error, unless ignore_invalid is set, in which case the
    reference is left as is.
    """
    parts = []
    last = 0
    for ref in find_references(text):
        try:
            color = decoder.set_input(ref.words).decode()
            if not color.is_valid():
                raise InvalidColorError(f'{ref.words!r} decodes to an invalid color: {color.color}')
            replacement = color.format(mode)
        except ColorcueError as exc:
            if on_invalid is not None:
                on_invalid(ref, exc)
            if not ignore_invalid:
                raise
            logger.debug('Ignoring reference %r: %s', ref.text, exc)
            replacement = ref.text
        parts.append(text[last : ref.start])
        parts.append(replacement)
        last = ref.end
    parts.append(text[last:])
    return ''.join(parts)
