"""Checked exponentiation by squaring."""

from __future__ import annotations

from safe_uint.types.uint import BaseUint, coerce_operands

from .outcome import Outcome, Success
from .primitives import safe_mul


def _pow(base: BaseUint, exponent: int) -> Outcome:
    # 0 ** 0 is 1 by convention.
    if exponent == 0:
        return Success(type(base)(1))
    if exponent == 1:
        return Success(base)

    squared = _pow(base, exponent // 2).and_then(lambda half: safe_mul(half, half))
    if exponent % 2 == 0:
        return squared
    return squared.and_then(lambda square: safe_mul(square, base))


def checked_pow(base: int, exponent: int) -> Outcome:
    """
    Raise `base` to the power `exponent`.

    Uses binary exponentiation: the result for `exponent // 2` is squared, and
    multiplied once more by `base` when `exponent` is odd. Recursion depth is
    `O(log2(exponent))`.

    Every multiplication is checked. The first overflow anywhere in the
    recursion is the outcome of the whole computation, so a truncated value is
    never returned.
    """
    base, exponent = coerce_operands(base, exponent)
    return _pow(base, int(exponent))


pow = checked_pow
"""Alias of `checked_pow` under its arithmetic name."""
