"""
numeric.py

Scalar helpers shared by the area, distance and containment modules.

Coordinates may be plain ``int``/``float``, numpy scalars,
``fractions.Fraction`` or ``decimal.Decimal``. The formulas only need the
ordered-field operators plus the handful of helpers below, so nothing here
forces a conversion to ``float`` unless a square root is required.

Public functions:
- `zero(like)` -> additive identity in the type of `like`
- `hypot(dx, dy)` -> Euclidean norm of (dx, dy)
- `is_nan(value)` -> True for NaN of any supported type
- `lt`, `le`, `gt`, `ge` -> ordered comparisons that are False for NaN instead of raising
- `fmin(a, b)`, `fmax(a, b)` -> min/max that never return NaN unless both are NaN
- `approx_zero(value, epsilon, dtype)` -> reduced-precision tolerance test
"""
import sys
from decimal import Decimal
from fractions import Fraction

import numpy as np

# Seed for minimum folds over distances.
MAX_VALUE = sys.float_info.max


def zero(like=0.0):
    if isinstance(like, (int, float, Decimal, Fraction, np.generic)):
        return type(like)(0)
    return 0


def hypot(dx, dy):
    """Return sqrt(dx**2 + dy**2) without intermediate overflow where possible.

    Decimal inputs stay Decimal; Fractions are converted to float since they
    have no exact square root. Everything else goes through ``np.hypot``.
    """
    if isinstance(dx, Decimal) or isinstance(dy, Decimal):
        dx = Decimal(dx)
        dy = Decimal(dy)
        return (dx * dx + dy * dy).sqrt()
    if isinstance(dx, Fraction) or isinstance(dy, Fraction):
        dx = float(dx)
        dy = float(dy)
    return np.hypot(dx, dy)


def is_nan(value) -> bool:
    if isinstance(value, Decimal):
        # covers signalling NaN, which cannot be compared at all
        return value.is_nan()
    # NaN is the only value not equal to itself
    return value != value


def lt(a, b) -> bool:
    """a < b, False if either operand is NaN."""
    if is_nan(a) or is_nan(b):
        return False
    return a < b


def le(a, b) -> bool:
    if is_nan(a) or is_nan(b):
        return False
    return a <= b


def gt(a, b) -> bool:
    return lt(b, a)


def ge(a, b) -> bool:
    return le(b, a)


def fmin(a, b):
    """Minimum of a and b, ignoring a NaN operand."""
    if is_nan(a):
        return b
    if is_nan(b):
        return a
    return b if b < a else a


def fmax(a, b):
    """Maximum of a and b, ignoring a NaN operand."""
    if is_nan(a):
        return b
    if is_nan(b):
        return a
    return b if b > a else a


def approx_zero(value, epsilon: float, dtype=np.float32) -> bool:
    """Return True if `value`, cast to `dtype`, is within `epsilon` of zero.

    Non-finite values (NaN, +/-inf, or overflow during the cast) are never
    approximately zero.
    """
    if is_nan(value):
        return False
    with np.errstate(over='ignore', invalid='ignore'):
        v = dtype(float(value))
    if v == 0:
        return True
    if not np.isfinite(v):
        return False
    return bool(abs(v) <= epsilon)
