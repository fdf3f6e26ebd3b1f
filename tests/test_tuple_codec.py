"""Tests for colorcue.core.tuple_codec: pair <-> integer bijection."""

import pytest
from colorcue.core import tuple_codec
from colorcue.core.errors import OutOfRangeError


class TestEncode:
    def test_zero(self) -> None:
        assert tuple_codec.encode([0, 0], 100) == 0

    def test_base_max_plus_one(self) -> None:
        assert tuple_codec.encode([40, 60], 100) == 4100
        assert tuple_codec.encode((1, 0), 9) == 10

    def test_largest_pair(self) -> None:
        assert tuple_codec.encode([100, 100], 100) == 10200

    @pytest.mark.parametrize('pair', [[101, 0], [0, 101]])
    def test_member_above_max(self, pair: list[int]) -> None:
        with pytest.raises(OutOfRangeError):
            tuple_codec.encode(pair, 100)

    def test_out_of_range_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            tuple_codec.encode([200, 0], 100)


class TestDecode:
    def test_decode(self) -> None:
        assert tuple_codec.decode(4100, 100) == [40, 60]
        assert tuple_codec.decode(10200, 100) == [100, 100]

    @pytest.mark.parametrize('number', [-1, 10202])
    def test_out_of_range(self, number: int) -> None:
        with pytest.raises(OutOfRangeError):
            tuple_codec.decode(number, 100)

    def test_upper_bound_inclusive(self) -> None:
        assert tuple_codec.decode(10201, 100) == [101, 0]

    def test_inverse_of_encode(self) -> None:
        for a in range(101):
            for b in range(101):
                assert tuple_codec.decode(tuple_codec.encode([a, b], 100), 100) == [a, b]
