"""Trigonometric functions computed from power series."""

import math

_SIN_COS_EPS = 1e-9
_ATAN_EPS = 1e-7
_TWO_PI = 2 * math.pi


def _divide(numerator, denominator):
    """Divide with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def sin_cos_series(x, flag):
    """Compute sine (``flag`` 1) or cosine (``flag`` -1) of ``x`` in radians.

    NaN and infinite arguments give NaN.
    """
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        return math.nan
    if abs(x) > _TWO_PI:
        x = math.fmod(x, _TWO_PI)
    term = x if flag == 1 else 1.0
    total = 0.0
    i = 1
    while abs(term) > _SIN_COS_EPS:
        total += term
        term = -term * (x * x) / ((2 * i + flag) * (2 * i))
        i += 1
    return total


def atan(x):
    """Return the arctangent of ``x`` in radians, in [-pi/2, pi/2]."""
    x = float(x)
    if math.isnan(x):
        return x
    if math.isinf(x):
        return math.pi / 2 if x > 0 else -math.pi / 2
    if x < -1.0 or x > 1.0:
        half_pi = math.pi / 2 if x > 0 else -math.pi / 2
        return half_pi - atan(1 / x)
    total = 0.0
    term = x
    i = 1
    while abs(term) > _ATAN_EPS:
        total += term
        i += 2
        term *= -x * x * (i - 2) / i
    return total


def asin(x):
    """Return the arcsine of ``x`` in radians; NaN outside [-1, 1]."""
    x = float(x)
    if -1 <= x <= 1:
        return atan(_divide(x, math.sqrt(1 - x * x)))
    return math.nan


def acos(x):
    """Return the arccosine of ``x`` in radians; NaN outside [-1, 1]."""
    x = float(x)
    if 0 < x < 1:
        return atan(math.sqrt(1 - x * x) / x)
    if -1 <= x < 0:
        return math.pi + atan(math.sqrt(1 - x * x) / x)
    if x == 1:
        return 0.0
    if x == 0:
        return math.pi / 2
    return math.nan