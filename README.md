# seriesmath

seriesmath provides small, dependency-free elementary math functions that are computed by hand. Trigonometric values come from power series. Rounding works by integer truncation.

## Installation

```
pip install seriesmath
```

## Rounding: `seriesmath.rounding`

```python
from seriesmath.rounding import ceil, round_toward, int_abs

ceil(33.6)             # 34.0
ceil(-0.559)           # -0.0
round_toward(2.5, 1)   # 3.0  (toward plus infinity)
round_toward(2.5, -1)  # 2.0  (toward minus infinity)
round_toward(-2.5, 0)  # -2.0 (any other mode truncates toward zero)
int_abs(-7)            # 7
```

- `round_toward(x, rounding)` rounds `x` to an integral float:
  - `rounding` of 1 rounds toward plus infinity.
  - `rounding` of -1 rounds toward minus infinity.
  - Any other value truncates toward zero.
- `ceil(x)` is `round_toward(x, 1)`.
- Both functions return NaN and the infinities unchanged.
- Both functions return values whose magnitude is above 999999999999999 as they are.
- `int_abs(x)` returns the absolute value of an integer.

## Trigonometry: `seriesmath.trig`

```python
from seriesmath.trig import atan, asin, acos, sin_cos_series

atan(1.0)                # about pi / 4
asin(0.5)                # about pi / 6
acos(-1.0)               # about pi
sin_cos_series(0.5, 1)   # sine of 0.5
sin_cos_series(0.5, -1)  # cosine of 0.5
```

- `sin_cos_series(x, flag)` sums the Taylor series for sine (`flag` 1) or cosine (`flag` -1).
  - Arguments larger in magnitude than 2π are first reduced with `fmod`.
  - NaN and infinite arguments give NaN.
  - The sum stops once a term falls to 1e-9 or below.
- `atan(x)` sums the arctangent series on [-1, 1] and uses the identity atan(x) = ±π/2 − atan(1/x) outside it.
  - NaN comes back as NaN.
  - The infinities map to ±π/2.
  - The sum stops once a term falls to 1e-7 or below.
- `asin(x)` and `acos(x)` are computed through `atan`.
  - They return NaN outside [-1, 1] rather than raising.

## What is not included

There is no command-line interface. The package has no `floor` function. It also has no standalone `sin` or `cos` functions; use `round_toward(x, -1)` and `sin_cos_series` instead.

## Running the tests

```
pip install -e ".[test]"
pytest
```