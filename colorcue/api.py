"""Public entry points of colorcue.

    >>> from colorcue import encode, decode
    >>> encode('#70c270', 'hex')  # doctest: +SKIP
    ['ryb green']
    >>> decode('ryb green').format('hex')
    '#70C270'

db_path defaults to the configured database (see colorcue.core.config).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from colorcue.core.color import Color
from colorcue.core.config import resolve_db_path
from colorcue.core.constants import DEFAULT_MODE
from colorcue.core.decoder import Decoder
from colorcue.core.encoder import Encoder
from colorcue.core.types import CoverageReport
from colorcue.database.checker import DataChecker


def encode(
    color: Any,
    mode: str = DEFAULT_MODE,
    *,
    db_path: str | Path | None = None,
    all_results: bool = False,
    find_closest: bool = False,
) -> list[str]:
    """Encode a colour given in mode into word tuples."""
    encoder = Encoder(resolve_db_path(db_path), color, mode)
    return encoder.encode(all_results=all_results, find_closest=find_closest)


def decode(text: str) -> Color:
    """Decode a two-word phrase into its HSL colour."""
    return Decoder(text).decode()


def check_database(db_path: str | Path | None = None) -> CoverageReport:
    """Report whether a database has a word for every required score."""
    return DataChecker(resolve_db_path(db_path)).check()
