"""Tests for colorcue.core.convert: conversions between colour modes."""

import numpy as np
import pytest
from colorcue.core import convert
from skimage import color


class TestRounding:
    def test_half_up(self) -> None:
        assert convert.round_half_up(0.5) == 1
        assert convert.round_half_up(2.5) == 3
        assert convert.round_half_up(-0.5) == 0
        assert convert.round_half_up(1.49) == 1


class TestFromHsl:
    @pytest.mark.parametrize(
        ('mode', 'expected'),
        [
            ('rgb', [255, 0, 0]),
            ('hex', 'FF0000'),
            ('hsv', [0, 100, 100]),
            ('hwb', [0, 0, 0]),
            ('cmyk', [0, 100, 100, 0]),
            ('keyword', 'red'),
            ('ansi16', 91),
            ('ansi256', 196),
            ('hcg', [0, 100, 0]),
            ('apple', [65535, 0, 0]),
            ('xyz', [41, 21, 2]),
            ('lab', [53, 80, 67]),
            ('lch', [53, 105, 40]),
        ],
    )
    def test_pure_red(self, mode: str, expected: object) -> None:
        assert convert.convert([0, 100, 50], 'hsl', mode) == expected

    def test_identity(self) -> None:
        value = [1, 2, 3]
        assert convert.convert(value, 'hsl', 'hsl') is value

    @pytest.mark.parametrize(
        ('mode', 'expected'),
        [
            ('rgb', [112, 194, 112]),
            ('hsv', [120, 42, 76]),
            ('hwb', [120, 44, 24]),
            ('hcg', [120, 32, 65]),
            ('cmyk', [42, 0, 42, 24]),
        ],
    )
    def test_muted_green(self, mode: str, expected: list[int]) -> None:
        assert convert.convert([120, 40, 60], 'hsl', mode) == expected
        assert convert.convert(expected, mode, 'hsl') == [120, 40, 60]

    def test_black_and_white(self) -> None:
        assert convert.convert([0, 0, 0], 'hsl', 'hex') == '000000'
        assert convert.convert([0, 0, 100], 'hsl', 'hex') == 'FFFFFF'
        assert convert.convert([0, 0, 0], 'hsl', 'cmyk') == [0, 0, 0, 100]


class TestToHsl:
    @pytest.mark.parametrize(
        ('value', 'mode'),
        [
            ([255, 0, 0], 'rgb'),
            ('#ff0000', 'hex'),
            ('red', 'keyword'),
            ([0, 100, 100], 'hsv'),
            ([0, 0, 0], 'hwb'),
            ([0, 100, 100, 0], 'cmyk'),
            ([0, 100, 0], 'hcg'),
            ([65535, 0, 0], 'apple'),
            (91, 'ansi16'),
            (196, 'ansi256'),
        ],
    )
    def test_pure_red(self, value: object, mode: str) -> None:
        assert convert.convert(value, mode, 'hsl') == [0, 100, 50]

    def test_lab_round_trip(self) -> None:
        lab = convert.convert([120, 40, 60], 'hsl', 'lab')
        back = convert.convert(lab, 'lab', 'hsl')
        assert back[0] == pytest.approx(120, abs=2)
        assert back[1] == pytest.approx(40, abs=2)
        assert back[2] == pytest.approx(60, abs=2)


class TestErrors:
    def test_unknown_mode(self) -> None:
        with pytest.raises(KeyError):
            convert.convert([0, 0, 0], 'hsl', 'bogus')

    def test_bad_hex(self) -> None:
        with pytest.raises(ValueError):
            convert.to_rgb('#abc', 'hex')

    @pytest.mark.parametrize(('value', 'mode'), [([1, 2], 'rgb'), ([1, 2, 3, 4], 'hsl'), ([0, 0, 0], 'cmyk')])
    def test_wrong_channel_count(self, value: list[int], mode: str) -> None:
        with pytest.raises(ValueError, match='channels'):
            convert.to_rgb(value, mode)


class TestLibraryBackedModes:
    def test_lab_matches_skimage(self) -> None:
        rgb = np.array([[[112, 194, 112]]]) / 255.0
        expected = [convert.round_half_up(c) for c in color.rgb2lab(rgb).reshape(3)]
        assert convert.convert([112, 194, 112], 'rgb', 'lab') == expected

    def test_lch_hue_in_degrees(self) -> None:
        # skimage reports the hue in radians, in (-pi, pi]
        assert convert.convert([240, 100, 50], 'hsl', 'lch') == [32, 134, 306]
