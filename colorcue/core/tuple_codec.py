"""Bijection between a pair of bounded integers and a single integer.

A pair (a, b) with both members in [0, max_value] is read as a two-digit
number in base max_value + 1.
"""

from __future__ import annotations

from collections.abc import Sequence

from colorcue.core.errors import OutOfRangeError


def encode(pair: Sequence[int], max_value: int) -> int:
    """Encode (a, b) into (max_value + 1) * a + b."""
    a, b = pair
    if a > max_value or b > max_value:
        raise OutOfRangeError(f"Tuple members can't exceed {max_value}: {list(pair)}")
    return (max_value + 1) * int(a) + int(b)


def decode(number: int, max_value: int) -> list[int]:
    """Decode a number produced by encode() with the same max_value."""
    base = max_value + 1
    if number < 0 or number > base * base:
        raise OutOfRangeError(f'{number} cannot be decoded into numbers smaller than {max_value}')
    a = number // base
    return [a, number - a * base]
