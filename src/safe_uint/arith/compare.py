"""Total comparison and parity helpers. None of these can fail."""

from __future__ import annotations

from safe_uint.types.uint import BaseUint, coerce_operands


def min_uint(a: int, b: int) -> BaseUint:
    """Return the lesser operand."""
    a, b = coerce_operands(a, b)
    return a if a <= b else b


def max_uint(a: int, b: int) -> BaseUint:
    """Return the greater operand."""
    a, b = coerce_operands(a, b)
    return a if a >= b else b


def abs_diff(a: int, b: int) -> BaseUint:
    """Return the distance between `a` and `b`. The larger operand is always the minuend."""
    a, b = coerce_operands(a, b)
    if a >= b:
        return type(a)(int(a) - int(b))
    return type(a)(int(b) - int(a))


def is_even(n: int) -> bool:
    """Return whether `n` is divisible by two."""
    (n,) = coerce_operands(n)
    return int(n) % 2 == 0


def is_odd(n: int) -> bool:
    """Return whether `n` leaves a remainder of one when divided by two."""
    (n,) = coerce_operands(n)
    return int(n) % 2 == 1


def clamp(value: int, min_val: int, max_val: int) -> BaseUint:
    """
    Restrict `value` to the range [min_val, max_val].

    Computed as `max(min_val, min(value, max_val))`.

    The caller must ensure `min_val <= max_val`. When it does not hold, the
    formula is applied as written and the result is `min_val`.
    """
    value, min_val, max_val = coerce_operands(value, min_val, max_val)
    return max_uint(min_val, min_uint(value, max_val))


min = min_uint
"""Alias of `min_uint` under its arithmetic name."""

max = max_uint
"""Alias of `max_uint` under its arithmetic name."""
