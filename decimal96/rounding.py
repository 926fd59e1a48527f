"""Rounding and sign operations on 96-bit decimals."""

from __future__ import annotations

from .core import Decimal96


def floor(value: Decimal96) -> Decimal96:
    """Round toward negative infinity to an integer."""
    if value.scale == 0:
        return value
    whole, fraction = divmod(value.mantissa, 10**value.scale)
    if value.negative and fraction:
        whole += 1
    return Decimal96(whole, 0, value.negative)


def round_half_up(value: Decimal96) -> Decimal96:
    """Round to an integer by the first fractional digit, halves away from zero."""
    if value.scale == 0:
        return value
    whole, fraction = divmod(value.mantissa, 10**value.scale)
    if fraction // 10 ** (value.scale - 1) >= 5:
        whole += 1
    return Decimal96(whole, 0, value.negative)


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits."""
    return Decimal96(value.mantissa // 10**value.scale, 0, value.negative)


def negate(value: Decimal96) -> Decimal96:
    """Flip the sign."""
    return value.with_sign(not value.negative)