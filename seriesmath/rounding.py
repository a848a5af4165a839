"""Rounding to integral values and integer absolute value."""

import math

# Above this magnitude a double is treated as already integral.
_EXACT_LIMIT = 999_999_999_999_999.0


def round_toward(x, rounding):
    """Round ``x`` to an integral value in the direction given by ``rounding``.

    ``rounding`` is 1 to round toward plus infinity and -1 to round toward
    minus infinity; any other value truncates toward zero. NaN and the
    infinities come back unchanged, and magnitudes above 999999999999999
    are returned as they are.
    """
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        return x
    negative = x < 0
    magnitude = -x if negative else x
    if magnitude > _EXACT_LIMIT:
        result = magnitude
    else:
        whole = int(magnitude)
        result = float(whole)
        moves_outward = (rounding == 1 and x > 0) or (rounding == -1 and negative)
        if magnitude != whole and moves_outward:
            result += 1.0
    return -result if negative else result


def ceil(x):
    """Return the smallest integral value not less than ``x``, as a float."""
    return round_toward(x, 1)


def int_abs(x):
    """Return the absolute value of the integer ``x``."""
    return -x if x < 0 else x