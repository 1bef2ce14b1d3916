"""
Numeric comparison predicates.

Plain boolean checks that work for both `int` and `float`. Range bounds are
inclusive. Division-based checks return False for a zero divisor instead of
raising.
"""

from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def is_positive(value: Number) -> bool:
    return value > 0


def is_negative(value: Number) -> bool:
    return value < 0


def is_zero(value: Number) -> bool:
    return value == 0


def is_non_zero(value: Number) -> bool:
    return value != 0


def is_even(value: int) -> bool:
    return value % 2 == 0


def is_odd(value: int) -> bool:
    return value % 2 != 0


def is_in_range(value: Number, minimum: Number, maximum: Number) -> bool:
    return minimum <= value <= maximum


def is_less_than(value: Number, maximum: Number) -> bool:
    return value < maximum


def is_less_than_or_equal_to(value: Number, maximum: Number) -> bool:
    return value <= maximum


def is_greater_than(value: Number, minimum: Number) -> bool:
    return value > minimum


def is_greater_than_or_equal_to(value: Number, minimum: Number) -> bool:
    return value >= minimum


def is_multiple_of(value: Number, multiple: Number) -> bool:
    """
    True if `value` is an integer multiple of `multiple`.

    Floats are compared with a tolerance, so 0.3 is a multiple of 0.1.
    """
    if multiple == 0:
        return False
    if isinstance(value, int) and isinstance(multiple, int):
        return value % multiple == 0
    if not (math.isfinite(value) and math.isfinite(multiple)):
        return False
    quotient = value / multiple
    return math.isclose(quotient, round(quotient), rel_tol=1e-9, abs_tol=1e-9)


def is_divisible_by(value: Number, divisor: Number) -> bool:
    """Alias of `is_multiple_of` with the divisor named as such."""
    return is_multiple_of(value, divisor)
