"""96-bit scaled decimal values and the wide working form used for arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 0xFF
MAX_NORMAL_SCALE = 28

_WIDE_BITS = 224
_WIDE_MASK = (1 << _WIDE_BITS) - 1


class DecimalError(ArithmeticError):
    """Base class for all decimal errors."""

    code = 0


class TooLargeError(DecimalError):
    """The result is too large or positive infinity."""

    code = 1


class TooSmallError(DecimalError):
    """The result is too small or negative infinity."""

    code = 2


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """Division by zero."""

    code = 3


class ConversionError(DecimalError):
    """A value cannot be converted to or from a decimal."""

    code = 1


class Decimal96:
    """An immutable decimal: 96-bit unsigned mantissa, scale and sign."""

    __slots__ = ("_mantissa", "_scale", "_negative")

    def __init__(self, mantissa: int = 0, scale: int = 0, negative: bool = False) -> None:
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa {mantissa} does not fit in 96 bits")
        if not 0 <= scale <= MAX_SCALE:
            raise ValueError(f"scale {scale} is outside 0..{MAX_SCALE}")
        self._mantissa = mantissa
        self._scale = scale
        self._negative = bool(negative)

    @classmethod
    def from_parts(cls, mantissa: int, scale: int = 0, negative: bool = False) -> Decimal96:
        """Build a decimal worth (-1)**negative * mantissa / 10**scale."""
        return cls(mantissa, scale, negative)

    @property
    def mantissa(self) -> int:
        return self._mantissa

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self._mantissa == 0

    def with_sign(self, negative: bool) -> Decimal96:
        return Decimal96(self._mantissa, self._scale, negative)

    def with_scale(self, scale: int) -> Decimal96:
        return Decimal96(self._mantissa, scale, self._negative)

    def _key(self) -> tuple[int, int, bool]:
        return (self._mantissa, self._scale, self._negative)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal96):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Decimal96(mantissa={self._mantissa}, scale={self._scale}, "
            f"negative={self._negative})"
        )

    def __str__(self) -> str:
        digits = str(self._mantissa).rjust(self._scale + 1, "0")
        if self._scale:
            digits = f"{digits[:-self._scale]}.{digits[-self._scale:]}"
        return f"-{digits}" if self._negative else digits


@dataclass
class Wide:
    """Unsigned 224-bit working value with a scale, used inside calculations."""

    value: int = 0
    scale: int = 0

    def __post_init__(self) -> None:
        self.value &= _WIDE_MASK

    @classmethod
    def from_decimal(cls, value: Decimal96) -> Wide:
        return cls(value.mantissa, value.scale)

    def to_decimal(self) -> Decimal96:
        """Keep the low 96 bits and the low 8 bits of the scale; sign is positive."""
        return Decimal96(self.value & MAX_MANTISSA, self.scale & MAX_SCALE)

    def point_left(self) -> None:
        """Multiply by ten and raise the scale by one."""
        self.value = (self.value * 10) & _WIDE_MASK
        self.scale += 1

    def point_right(self) -> int:
        """Divide by ten, lower the scale by one and return the dropped digit."""
        self.value, remainder = divmod(self.value, 10)
        self.scale -= 1
        return remainder

    def normalize(self) -> bool:
        """Reduce to 96 bits and scale at most 28, rounding half to even.

        Returns True when the value still does not fit in 96 bits.
        """
        flag = 0
        remainder = 0
        while self.scale > 0 and self.value > MAX_MANTISSA:
            remainder = self.point_right()
            if remainder:
                flag += 1
        while self.scale > MAX_NORMAL_SCALE:
            remainder = self.point_right()
            if remainder:
                flag += 1
        self.bank_round(remainder, flag)
        return self.overflows()

    def bank_round(self, remainder: int, flag: int) -> None:
        """Round by the last dropped digit; flag counts nonzero dropped digits."""
        if remainder > 5 or (remainder == 5 and flag > 1):
            self._increment()
        elif remainder == 5 and flag == 1 and self.value % 2:
            self._increment()

    def overflows(self) -> bool:
        return self.value > MAX_MANTISSA

    def _increment(self) -> None:
        self.value = (self.value + 1) & _WIDE_MASK