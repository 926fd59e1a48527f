"""Comparison of 96-bit decimals."""

from __future__ import annotations

from .core import Decimal96, Wide


def compare_magnitude(a: Decimal96, b: Decimal96) -> int:
    """Compare absolute values: 1 if |a| > |b|, -1 if |a| < |b|, 0 if equal."""
    wide_a = Wide.from_decimal(a)
    wide_b = Wide.from_decimal(b)
    while wide_b.scale > wide_a.scale:
        wide_a.point_left()
    while wide_a.scale > wide_b.scale:
        wide_b.point_left()
    if wide_a.value > wide_b.value:
        return 1
    if wide_a.value < wide_b.value:
        return -1
    return 0


def is_less(a: Decimal96, b: Decimal96) -> bool:
    zero_a = a.is_zero()
    zero_b = b.is_zero()
    if zero_a and zero_b:
        return False
    if zero_a:
        return not b.negative
    if zero_b:
        return a.negative
    if a.negative != b.negative:
        return a.negative
    if a.negative:
        return compare_magnitude(a, b) == 1
    return compare_magnitude(a, b) == -1


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    zero_a = a.is_zero()
    zero_b = b.is_zero()
    if zero_a and zero_b:
        return True
    if zero_a or zero_b or a.negative != b.negative:
        return False
    return compare_magnitude(a, b) == 0


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    return is_equal(a, b) or is_less(a, b)


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    return not is_less_or_equal(a, b)


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    return is_greater(a, b) or is_equal(a, b)


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    return not is_equal(a, b)