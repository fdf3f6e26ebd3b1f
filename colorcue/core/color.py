"""HSL colour model with conversion to and from the other supported modes.

A Color always stores its channels as an HSL list [hue, saturation,
luminosity]. Input in any other mode is converted on construction; input
that cannot be converted leaves the colour unset, which is_valid() reports.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any

from colorcue.core import convert
from colorcue.core.constants import CHANNEL_MAX, DEFAULT_MODE, HUE_MAX, MAX_SL_TUPLE
from colorcue.core.errors import InvalidFormatError

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'^#?[0-9a-f]{6}$', re.IGNORECASE)
_FUNCTIONAL_RE = re.compile(r'^([a-z]{3,5})\((\d+(?:\.\d+)?(?:,\s*\d+(?:\.\d+)?){2,3})\);?$')


class Color:
    """A colour held internally as rounded HSL."""

    MODES = convert.MODES
    MAX_SL_TUPLE = MAX_SL_TUPLE

    def __init__(self, value: Any, mode: str = DEFAULT_MODE):
        self.color: list[Any] | None = None
        if mode == DEFAULT_MODE:
            self.color = list(value) if value is not None else None
            return
        if mode not in self.MODES:
            logger.debug('Unknown colour mode %r', mode)
            return
        if mode == 'keyword' and str(value).lower() not in convert.CSS_KEYWORDS:
            return
        if mode == 'hex' and not _HEX_RE.match(str(value)):
            return
        try:
            self.color = convert.convert(value, mode, DEFAULT_MODE)
        except (TypeError, ValueError, ArithmeticError) as exc:
            logger.debug('Cannot convert %r from %s: %s', value, mode, exc)
            self.color = None

    def __repr__(self) -> str:
        return f'Color({self.color!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.color == other.color

    def is_valid(self) -> bool:
        """True iff the colour holds 3 finite, non-negative, integral channels in range."""
        if not self.color or len(self.color) != 3:
            return False
        for idx, channel in enumerate(self.color):
            if isinstance(channel, bool) or not isinstance(channel, numbers.Real):
                return False
            if not math.isfinite(channel) or channel < 0 or float(channel) != int(channel):
                return False
            if channel > (HUE_MAX if idx == 0 else CHANNEL_MAX):
                return False
        return True

    def to(self, mode: str) -> Any:
        """Convert to the given mode; None if the mode is not recognized."""
        if mode == DEFAULT_MODE:
            return self.color
        if mode in self.MODES:
            return convert.convert(self.color, DEFAULT_MODE, mode)
        return None

    def format(self, mode: str) -> str:
        """Convert to the given mode and render it for display."""
        return Color.pure_format(self.to(mode), mode)

    @staticmethod
    def pure_format(color: Any, mode: str) -> str:
        """Render an already-converted colour value in the given mode.

        Raises InvalidFormatError for an unknown mode.
        """
        mode = mode.lower()
        if mode in convert.CHANNEL_MODES:
            return f'{mode}({", ".join(_render_channel(c) for c in color)})'
        if mode == 'hex':
            color = str(color)
            return color if color.startswith('#') else f'#{color}'
        if mode in ('keyword', 'ansi16', 'ansi256'):
            return str(color)
        raise InvalidFormatError(f'Invalid color format: {mode}')

    @staticmethod
    def css_colors() -> list[str]:
        """Return every known CSS colour keyword."""
        return list(convert.CSS_KEYWORDS)

    @property
    def hue(self) -> Any:
        return self.color[0]

    @property
    def saturation(self) -> Any:
        return self.color[1]

    @property
    def luminosity(self) -> Any:
        return self.color[2]


def _render_channel(channel: Any) -> str:
    if isinstance(channel, float) and channel.is_integer():
        return str(int(channel))
    return str(channel)


def recognize_format(text: str) -> tuple[str, Any] | None:
    """Guess the mode of a colour given on the command line.

    Recognizes CSS keywords, 6-digit hex (with or without '#') and
    functional notation such as 'rgb(22, 17, 131)'. Returns (mode, value)
    or None when the input is unrecognizable or ambiguous.
    """
    text = text.strip().lower()

    if text in convert.CSS_KEYWORDS:
        return 'keyword', text

    if _HEX_RE.match(text):
        return 'hex', text

    m = _FUNCTIONAL_RE.match(text)
    if m and m.group(1) in Color.MODES:
        return m.group(1), parse_channels(m.group(2))

    return None


def parse_channels(text: str) -> list[int | float]:
    """Parse '22, 17, 131' into numbers, keeping integers as int."""
    channels: list[int | float] = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        number = float(part)
        channels.append(int(number) if number.is_integer() else number)
    return channels
