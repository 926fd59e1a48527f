# decimal96

A decimal number type with a 96-bit unsigned mantissa, a sign and a decimal
scale. Its value is `(-1)^negative * mantissa / 10^scale`. Arithmetic results
that need more than 28 fractional digits, or more than 96 bits of mantissa
while they still have fractional digits, are cut down with banker's rounding
(half to even). Results whose magnitude still does not fit in 96 bits raise
an exception.

The package is plain Python with no dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `decimal96.core`: the `Decimal96` value type, the `Wide` working form used
  inside calculations, and the error classes.
- `decimal96.convert`: `from_int`, `to_int`, `from_float`, `to_float`.
- `decimal96.arithmetic`: `add`, `sub`, `mul`, `div`.
- `decimal96.comparison`: `is_less`, `is_less_or_equal`, `is_greater`,
  `is_greater_or_equal`, `is_equal`, `is_not_equal`, `compare_magnitude`.
- `decimal96.rounding`: `floor`, `round_half_up`, `truncate`, `negate`.

## Building values

```python
from decimal96.core import Decimal96
from decimal96.convert import from_int, from_float, to_int, to_float

price = Decimal96.from_parts(12345, 2, False)   # 123.45
count = from_int(-15)                             # -15
ratio = from_float(0.00234)                       # about 7 significant digits

price.mantissa, price.scale, price.negative       # (12345, 2, False)
str(price)                                        # '123.45'
to_int(price)                                     # 123
to_float(ratio)
```

`Decimal96` is immutable. The constructor takes a mantissa from 0 to
`2**96 - 1` and a scale from 0 to 255 and raises `ValueError` otherwise.
`with_sign` and `with_scale` return changed copies; `is_zero` is true for a
zero mantissa whatever the sign and scale.

`==` on two `Decimal96` objects compares mantissa, scale and sign as stored,
so `1.0` and `1` are different objects there. Use `comparison.is_equal` to
compare numeric values; it also treats `-0` and `0` as equal.

Conversions:

- `from_int` accepts 32-bit signed integers only.
- `to_int` truncates toward zero and requires the result to fit in a 32-bit
  signed integer.
- `from_float` first rounds its argument to single precision and keeps about
  seven significant digits. NaN, infinities, nonzero magnitudes below `1e-28`
  and magnitudes above `2**96` are refused.
- `to_float` returns the value rounded to the nearest single-precision float.

## Arithmetic

```python
from decimal96.arithmetic import add, sub, mul, div

add(price, from_int(1))       # 124.45
sub(price, from_int(123))     # 0.45
mul(price, from_int(-2))      # -246.90
div(from_int(1000001), from_int(1000000))   # 1.000001
```

Operands are aligned to the larger scale before adding or subtracting. The
product's scale is the sum of the operands' scales. Division produces
fractional digits until the remainder is used up or the limit of the scale is
reached, then rounds.

Any result whose scale is 0 and whose mantissa is exactly `2**96 - 1` is
reported as out of range, so, for example, `mul(biggest, from_int(1))` raises
`TooLargeError`.

## Comparison

```python
from decimal96.comparison import is_less, is_equal, is_greater_or_equal

is_less(count, price)         # True
is_equal(from_int(0), Decimal96.from_parts(0, 0, True))   # True: -0 equals 0
```

`compare_magnitude(a, b)` ignores signs and returns `1`, `-1` or `0`.

## Rounding

```python
from decimal96.rounding import floor, round_half_up, truncate, negate

value = Decimal96.from_parts(3123, 1, True)   # -312.3
floor(value)           # -313
round_half_up(value)   # -312
truncate(value)        # -312
negate(value)          # 312.3
```

`round_half_up` looks at the first fractional digit only and rounds away from
zero when it is 5 or more. Values with scale 0 are returned unchanged by
`floor` and `round_half_up`.

## Errors

Every error derives from `decimal96.core.DecimalError`, itself an
`ArithmeticError`:

- `TooLargeError`: the result is too large, or is positive infinity.
- `TooSmallError`: the result is too small, or is negative infinity.
- `DivisionByZeroError`: the divisor is zero; it is also a `ZeroDivisionError`.
- `ConversionError`: a value cannot be converted to or from a `Decimal96`.

```python
from decimal96.core import TooLargeError

biggest = Decimal96.from_parts(2**96 - 1, 0, False)
try:
    add(biggest, from_int(1))
except TooLargeError:
    ...
```

## What it does not do

`Decimal96` has no arithmetic or ordering operators; use the functions in
`decimal96.arithmetic` and `decimal96.comparison`. There is no parsing from
strings and no command-line tool.