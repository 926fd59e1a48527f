import pytest

from decimal96.comparison import is_equal
from decimal96.core import Decimal96
from decimal96.rounding import floor, negate, round_half_up, truncate


def test_floor_positive_fraction():
    assert is_equal(floor(Decimal96(3123, 1)), Decimal96(312))


def test_floor_negative_fraction():
    assert is_equal(floor(Decimal96(3123, 1, True)), Decimal96(313, 0, True))


def test_floor_integer_unchanged():
    assert floor(Decimal96(3123, 0, True)) == Decimal96(3123, 0, True)


def test_floor_below_one():
    assert floor(Decimal96(9, 1)) == Decimal96(0)
    assert floor(Decimal96(3, 1, True)) == Decimal96(1, 0, True)


def test_floor_negative_exact_value():
    assert floor(Decimal96(3000, 3, True)) == Decimal96(3, 0, True)


def test_round_down():
    assert is_equal(round_half_up(Decimal96(3123, 1)), Decimal96(312))


def test_round_half_away_from_zero():
    assert is_equal(round_half_up(Decimal96(3125, 1, True)), Decimal96(313, 0, True))


def test_round_integer_unchanged():
    value = Decimal96(90 + (50 << 32) + (111 << 64))
    assert round_half_up(value) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal96(245, 2), Decimal96(2)),
        (Decimal96(255, 2), Decimal96(3)),
        (Decimal96(2499, 3), Decimal96(2)),
        (Decimal96(35, 2, True), Decimal96(0, 0, True)),
    ],
)
def test_round_uses_first_fraction_digit(value, expected):
    assert round_half_up(value) == expected


def test_truncate_fraction():
    assert is_equal(truncate(Decimal96(3723, 3)), Decimal96(3))


def test_truncate_integer_unchanged():
    assert is_equal(truncate(Decimal96(3125, 0, True)), Decimal96(3125, 0, True))


def test_truncate_negative_fraction():
    assert truncate(Decimal96(39, 1, True)) == Decimal96(3, 0, True)


def test_negate_negative():
    assert is_equal(negate(Decimal96(3125, 0, True)), Decimal96(3125))


def test_negate_keeps_scale():
    assert negate(Decimal96(45, 2)) == Decimal96(45, 2, True)


def test_negate_twice_is_identity():
    value = Decimal96(987654321, 4, True)
    assert negate(negate(value)) == value