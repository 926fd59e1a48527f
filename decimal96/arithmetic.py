"""Addition, subtraction, multiplication and division of 96-bit decimals."""

from __future__ import annotations

from .comparison import compare_magnitude
from .core import (
    MAX_MANTISSA,
    DecimalError,
    Decimal96,
    DivisionByZeroError,
    TooLargeError,
    TooSmallError,
    Wide,
)

_LOW_WORD = 0xFFFFFFFF
_DIVISION_SCALE_LIMIT = 30


def _overflow(negative: bool) -> DecimalError:
    if negative:
        return TooSmallError("result is too small or negative infinity")
    return TooLargeError("result is too large or positive infinity")


def _check_max(result: Decimal96) -> Decimal96:
    """Treat an all-ones integer mantissa as out of range."""
    if result.scale == 0 and result.mantissa == MAX_MANTISSA:
        raise _overflow(result.negative)
    return result


def _aligned(a: Decimal96, b: Decimal96) -> tuple[Wide, Wide]:
    wide_a = Wide.from_decimal(a)
    wide_b = Wide.from_decimal(b)
    while wide_b.scale > wide_a.scale:
        wide_a.point_left()
    while wide_a.scale > wide_b.scale:
        wide_b.point_left()
    return wide_a, wide_b


def add(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a + b, raising TooLargeError or TooSmallError on overflow."""
    if a.is_zero():
        result = b.with_sign(False) if b.is_zero() else b
    elif b.is_zero():
        result = a
    elif a.negative == b.negative:
        wide_a, wide_b = _aligned(a, b)
        total = Wide(wide_a.value + wide_b.value, wide_a.scale)
        if total.normalize():
            raise _overflow(a.negative)
        result = total.to_decimal().with_sign(a.negative)
    else:
        order = compare_magnitude(a, b)
        big, small = (a, b) if order == 1 else (b, a)
        negative = big.negative if order != 0 else False
        wide_big, wide_small = _aligned(big, small)
        diff = Wide(wide_big.value - wide_small.value, wide_big.scale)
        diff.normalize()
        result = diff.to_decimal().with_sign(negative)
    return _check_max(result)


def sub(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a - b."""
    return add(a, b.with_sign(not b.negative))


def mul(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a * b, raising TooLargeError or TooSmallError on overflow."""
    if a.is_zero() or b.is_zero():
        return Decimal96()
    negative = a.negative != b.negative
    product = Wide(a.mantissa * b.mantissa, a.scale + b.scale)
    if product.normalize():
        raise _overflow(negative)
    return _check_max(product.to_decimal().with_sign(negative))


def div(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a / b, raising DivisionByZeroError when b is zero."""
    if b.is_zero():
        raise DivisionByZeroError("division by zero")
    negative = a.negative != b.negative
    if a.is_zero():
        return _check_max(Decimal96(0, 0, negative))
    wide_a, wide_b = _aligned(a, b)
    divisor = wide_b.value
    quotient, rest = divmod(wide_a.value, divisor)
    res = Wide(quotient, 0)
    mod = Wide(rest, 0)
    while mod.value & _LOW_WORD and res.scale <= _DIVISION_SCALE_LIMIT:
        mod.point_left()
        res.point_left()
        if mod.value >= divisor:
            digit, remainder = divmod(mod.value, divisor)
            res.value = res.value + digit
            res.__post_init__()
            mod.value = remainder
    if res.normalize():
        raise _overflow(negative)
    return _check_max(res.to_decimal().with_sign(negative))