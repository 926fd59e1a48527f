"""Conversions between 96-bit decimals and Python ints and floats."""

from __future__ import annotations

import math
import struct
from fractions import Fraction

from .core import ConversionError, Decimal96, Wide

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# The largest mantissa, 2**96 - 1, rounded to single precision.
_MAX_DECIMAL_FLOAT = float(2**96)
_SMALLEST_FLOAT = 1e-28
_SIGNIFICANT_DIGITS = 7
_SEVEN_DIGITS = 1e7
_SIX_DIGITS = 1e6


def _single(x: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _digit_after_point(src: float) -> int:
    return int(_single(src * 10)) % 10


def from_int(value: int) -> Decimal96:
    """Convert a 32-bit signed integer to a decimal."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise ConversionError(f"{value} is not a 32-bit integer")
    return Decimal96(abs(value), 0, value < 0)


def to_int(value: Decimal96) -> int:
    """Convert a decimal to a 32-bit integer, truncating toward zero."""
    exact = Fraction(value.mantissa, 10**value.scale)
    if value.negative:
        exact = -exact
    if not INT32_MIN <= exact <= INT32_MAX:
        raise ConversionError(f"{value} does not fit in a 32-bit integer")
    return int(exact)


def to_float(value: Decimal96) -> float:
    """Convert a decimal to the nearest single-precision float."""
    exact = Fraction(value.mantissa, 10**value.scale)
    if value.negative:
        exact = -exact
    return _single(float(exact))


def from_float(value: float) -> Decimal96:
    """Convert a float to a decimal holding about seven significant digits."""
    src = _single(float(value))
    if math.isnan(src):
        raise ConversionError("cannot convert NaN to a decimal")
    negative = src < 0
    src = abs(src)
    if math.isinf(src) or 0 < src < _SMALLEST_FLOAT:
        raise ConversionError(f"{value} is out of the decimal range")
    if src > _MAX_DECIMAL_FLOAT:
        raise ConversionError(f"{value} is too large for a decimal")
    if src == 0:
        return Decimal96()
    if src < 1:
        result = _below_one(src)
    elif src >= _SEVEN_DIGITS:
        result = _above_seven_digits(src)
    elif src >= _SIX_DIGITS:
        result = _seven_digits(src)
    else:
        result = _below_seven_digits(src)
    return result.with_sign(negative)


def _below_one(src: float) -> Decimal96:
    scale = 0
    while src < 1:
        src = _single(src * 10)
        scale += 1
    for _ in range(_SIGNIFICANT_DIGITS - 1):
        src = _single(src * 10)
        scale += 1
    if _digit_after_point(src) > 5:
        src = _single(src + 1)
    return Decimal96(int(src), scale)


def _seven_digits(src: float) -> Decimal96:
    if _digit_after_point(src) >= 5:
        src = _single(src + 1)
    return Decimal96(int(src))


def _below_seven_digits(src: float) -> Decimal96:
    integer_digits = 0
    while src >= 10.0**integer_digits:
        integer_digits += 1
    scale = _SIGNIFICANT_DIGITS - integer_digits
    src = _single(src * 10.0**scale)
    if _digit_after_point(src) >= 5:
        src = _single(src + 1)
    return Decimal96(int(src), scale)


def _above_seven_digits(src: float) -> Decimal96:
    dropped = 0
    count = 0
    while src >= _SEVEN_DIGITS:
        dropped = int(src) % 10
        src = _single(src / 10)
        count += 1
    if dropped >= 5:
        src = _single(src + 1)
    wide = Wide(int(src))
    for _ in range(count):
        wide.point_left()
    wide.normalize()
    wide.scale = 0
    return wide.to_decimal()