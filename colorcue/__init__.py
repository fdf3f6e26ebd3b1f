"""colorcue: encode HSL colours as memorable two-word phrases and back."""

from colorcue.api import check_database, decode, encode
from colorcue.core.color import Color

__all__ = ['Color', 'check_database', 'decode', 'encode']

__version__ = '0.3.0'
