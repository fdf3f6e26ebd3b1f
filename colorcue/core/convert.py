"""Colour-mode conversions, delegated to scikit-image's skimage.color.

sRGB with channels in [0, 1] is the hub every mode is converted to and
from. skimage does the colour science: sRGB gamma, XYZ, CIE Lab and LCh
under D65, and HSV. HSL comes from the standard library's colorsys. HWB
and HCG are read off HSV, while CMYK, apple, hex and the ANSI codes are
rescalings of the rgb channels.

Results are rounded half-up: integers for numeric modes, an upper-case
6-digit string for hex, a CSS name for keyword and an int for the ANSI
modes. CSS keywords come from Pillow's ImageColor table, and rgb ->
keyword picks the nearest keyword by squared RGB distance.
"""

from __future__ import annotations

import colorsys
import math
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np
from PIL import ImageColor
from skimage import color as skcolor

MODES: tuple[str, ...] = tuple(
    sorted(
        [
            'rgb',
            'hsl',
            'hsv',
            'hwb',
            'cmyk',
            'xyz',
            'lab',
            'lch',
            'hex',
            'keyword',
            'ansi16',
            'ansi256',
            'hcg',
            'apple',
        ]
    )
)

# Modes rendered as mode(c0, c1, ...)
CHANNEL_MODES = frozenset(['rgb', 'hsl', 'hsv', 'hwb', 'cmyk', 'xyz', 'lab', 'lch', 'hcg', 'apple'])

CSS_KEYWORDS: dict[str, tuple[int, int, int]] = {
    name: ImageColor.getrgb(name)[:3] for name in sorted(ImageColor.colormap)
}
_KEYWORD_NAMES = list(CSS_KEYWORDS)
_KEYWORD_RGB = np.array([CSS_KEYWORDS[name] for name in _KEYWORD_NAMES], dtype=float)

APPLE_MAX = 65535

# Unit sRGB, shape (3,)
RGB = np.ndarray


def round_half_up(value: float) -> int:
    """Round like JavaScript's Math.round (ties go up), not banker's rounding."""
    return int(math.floor(value + 0.5))


def _rounded(values: Sequence[float]) -> list[int]:
    return [round_half_up(float(v)) for v in values]


def _pixel(values: Sequence[float]) -> np.ndarray:
    """One colour as the 1x1 image skimage works on."""
    return np.asarray(values, dtype=float).reshape(1, 1, 3)


def _unpixel(image: np.ndarray) -> np.ndarray:
    return image.reshape(3)


def _floats(value: Sequence[Any], count: int = 3) -> list[float]:
    channels = [float(c) for c in value]
    if len(channels) != count:
        raise ValueError(f'Expected {count} channels, got {len(channels)}')
    return channels


# --- to rgb ---------------------------------------------------------------


def _hsl_to_rgb(value: Sequence[Any]) -> RGB:
    h, s, lum = _floats(value)
    return np.array(colorsys.hls_to_rgb(h / 360.0, lum / 100.0, s / 100.0))


def _hsv_to_rgb(value: Sequence[Any]) -> RGB:
    h, s, v = _floats(value)
    return _unpixel(skcolor.hsv2rgb(_pixel([h / 360.0, s / 100.0, v / 100.0])))


def _hwb_to_rgb(value: Sequence[Any]) -> RGB:
    h, w, b = _floats(value)
    w, b = w / 100.0, b / 100.0
    if w + b > 1:
        w, b = w / (w + b), b / (w + b)
    v = 1.0 - b
    s = 1.0 - w / v if v > 0 else 0.0
    return _hsv_to_rgb([h, s * 100.0, v * 100.0])


def _hcg_to_rgb(value: Sequence[Any]) -> RGB:
    h, c, g = _floats(value)
    c, g = c / 100.0, g / 100.0
    v = c + g * (1.0 - c)
    s = c / v if v > 0 else 0.0
    return _hsv_to_rgb([h, s * 100.0, v * 100.0])


def _lch_to_rgb(value: Sequence[Any]) -> RGB:
    lum, c, h = _floats(value)
    lab = skcolor.lch2lab(_pixel([lum, c, math.radians(h)]))
    return _unpixel(skcolor.lab2rgb(lab))


def _cmyk_to_rgb(value: Sequence[Any]) -> RGB:
    c, m, y, k = (ch / 100.0 for ch in _floats(value, 4))
    return np.array([1.0 - min(1.0, ch * (1.0 - k) + k) for ch in (c, m, y)])


def _hex_to_rgb(value: str) -> RGB:
    s = str(value).strip().lstrip('#')
    if len(s) != 6:
        raise ValueError(f'Invalid hex colour: {value!r}')
    return np.array([int(s[i : i + 2], 16) for i in (0, 2, 4)]) / 255.0


def _ansi16_to_rgb(value: Any) -> RGB:
    code = int(value)
    color = code % 10
    if color in (0, 7):
        level = color + 3.5 if code > 50 else float(color)
        return np.full(3, level / 10.5)
    mult = 1.0 if code > 50 else 0.5
    return np.array([(color >> bit) & 1 for bit in range(3)]) * mult


def _ansi256_to_rgb(value: Any) -> RGB:
    code = int(value)
    if code < 8:
        return _ansi16_to_rgb(30 + code)
    if code < 16:
        return _ansi16_to_rgb(90 + code - 8)
    if code >= 232:
        return np.full(3, ((code - 232) * 10 + 8) / 255.0)
    code -= 16
    return np.array([code // 36, code % 36 // 6, code % 6]) / 5.0


_TO_RGB: dict[str, Callable[[Any], RGB]] = {
    'rgb': lambda value: np.array(_floats(value)) / 255.0,
    'hsl': _hsl_to_rgb,
    'hsv': _hsv_to_rgb,
    'hwb': _hwb_to_rgb,
    'hcg': _hcg_to_rgb,
    'xyz': lambda value: _unpixel(skcolor.xyz2rgb(_pixel(np.array(_floats(value)) / 100.0))),
    'lab': lambda value: _unpixel(skcolor.lab2rgb(_pixel(_floats(value)))),
    'lch': _lch_to_rgb,
    'cmyk': _cmyk_to_rgb,
    'apple': lambda value: np.array(_floats(value)) / APPLE_MAX,
    'hex': _hex_to_rgb,
    'keyword': lambda value: np.array(CSS_KEYWORDS[str(value).lower()]) / 255.0,
    'ansi16': _ansi16_to_rgb,
    'ansi256': _ansi256_to_rgb,
}


# --- from rgb -------------------------------------------------------------


def _hsv(rgb: RGB) -> np.ndarray:
    return _unpixel(skcolor.rgb2hsv(_pixel(rgb)))


def _hsv_from_rgb(rgb: RGB) -> list[int]:
    h, s, v = _hsv(rgb)
    return _rounded([h * 360.0, s * 100.0, v * 100.0])


def _hwb_from_rgb(rgb: RGB) -> list[int]:
    h, s, v = _hsv(rgb)
    return _rounded([h * 360.0, (1.0 - s) * v * 100.0, (1.0 - v) * 100.0])


def _hcg_from_rgb(rgb: RGB) -> list[int]:
    h, s, v = _hsv(rgb)
    chroma = s * v
    gray = (v - chroma) / (1.0 - chroma) if chroma < 1 else 0.0
    return _rounded([h * 360.0, chroma * 100.0, gray * 100.0])


def _hsl_from_rgb(rgb: RGB) -> list[int]:
    h, lum, s = colorsys.rgb_to_hls(*rgb.tolist())
    return _rounded([h * 360.0, s * 100.0, lum * 100.0])


def _lch_from_rgb(rgb: RGB) -> list[int]:
    lum, c, h = _unpixel(skcolor.lab2lch(skcolor.rgb2lab(_pixel(rgb))))
    return _rounded([lum, c, math.degrees(h) % 360.0])


def _cmyk_from_rgb(rgb: RGB) -> list[int]:
    k = 1.0 - float(rgb.max())
    if k >= 1.0:
        return [0, 0, 0, 100]
    cmy = (1.0 - rgb - k) / (1.0 - k) * 100.0
    return _rounded([*cmy, k * 100.0])


def _hex_from_rgb(rgb: RGB) -> str:
    r, g, b = (max(0, min(255, c)) for c in _rounded(rgb * 255.0))
    return f'{r:02X}{g:02X}{b:02X}'


def _keyword_from_rgb(rgb: RGB) -> str:
    distances = ((_KEYWORD_RGB - rgb * 255.0) ** 2).sum(axis=1)
    return _KEYWORD_NAMES[int(np.argmin(distances))]


def _ansi16_from_rgb(rgb: RGB) -> int:
    value = round_half_up(_hsv_from_rgb(rgb)[2] / 50)
    if value == 0:
        return 30
    r, g, b = (round_half_up(c) for c in rgb.tolist())
    ansi = 30 + ((b << 2) | (g << 1) | r)
    return ansi + 60 if value == 2 else ansi


def _ansi256_from_rgb(rgb: RGB) -> int:
    r, g, b = _rounded(rgb * 255.0)
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return round_half_up((r - 8) / 247 * 24) + 232
    return 16 + 36 * round_half_up(r / 255 * 5) + 6 * round_half_up(g / 255 * 5) + round_half_up(b / 255 * 5)


_FROM_RGB: dict[str, Callable[[RGB], Any]] = {
    'rgb': lambda rgb: _rounded(rgb * 255.0),
    'hsl': _hsl_from_rgb,
    'hsv': _hsv_from_rgb,
    'hwb': _hwb_from_rgb,
    'hcg': _hcg_from_rgb,
    'xyz': lambda rgb: _rounded(_unpixel(skcolor.rgb2xyz(_pixel(rgb))) * 100.0),
    'lab': lambda rgb: _rounded(_unpixel(skcolor.rgb2lab(_pixel(rgb)))),
    'lch': _lch_from_rgb,
    'cmyk': _cmyk_from_rgb,
    'apple': lambda rgb: _rounded(rgb * APPLE_MAX),
    'hex': _hex_from_rgb,
    'keyword': _keyword_from_rgb,
    'ansi16': _ansi16_from_rgb,
    'ansi256': _ansi256_from_rgb,
}


def to_rgb(value: Any, mode: str) -> RGB:
    """Convert a colour in the given mode to unrounded unit sRGB."""
    try:
        fn = _TO_RGB[mode]
    except KeyError:
        raise KeyError(f'Unknown colour mode: {mode}. Available: {", ".join(MODES)}') from None
    return np.asarray(fn(value), dtype=float)


def from_rgb(rgb: Sequence[float], mode: str) -> Any:
    """Convert unit sRGB to the given mode, rounded."""
    try:
        fn = _FROM_RGB[mode]
    except KeyError:
        raise KeyError(f'Unknown colour mode: {mode}. Available: {", ".join(MODES)}') from None
    return fn(np.asarray(rgb, dtype=float))


def convert(value: Any, source: str, target: str) -> Any:
    """Convert a colour between two supported modes."""
    if source == target:
        return value
    return from_rgb(to_rgb(value, source), target)
