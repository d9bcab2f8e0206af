"""
Checked arithmetic primitives.

These are the only operations of the library that can fail on their own.
Each one detects its failure condition before a result value is built and
returns a `Failure` instead of wrapping or raising.

Operands may be uint instances of one width or plain integers, see
`safe_uint.types.uint.coerce_operands`.
"""

from __future__ import annotations

import logging

from safe_uint.types.uint import coerce_operands

from .outcome import Failure, MathError, Outcome, Success

logger = logging.getLogger(__name__)


def safe_add(a: int, b: int) -> Outcome:
    """
    Add two uints.

    Fails with `OVERFLOW` iff the mathematical sum exceeds the maximum of the width.
    """
    a, b = coerce_operands(a, b)
    uint_type = type(a)

    # Both operands are non-negative, so the sum can only leave the range upwards.
    if int(a) > int(uint_type.max_value()) - int(b):
        logger.debug("safe_add overflow: %d + %d", a, b)
        return Failure(MathError.OVERFLOW)

    return Success(uint_type(int(a) + int(b)))


def safe_sub(a: int, b: int) -> Outcome:
    """
    Subtract `b` from `a`.

    Fails with `UNDERFLOW` iff `a < b`.
    """
    a, b = coerce_operands(a, b)

    if a < b:
        logger.debug("safe_sub underflow: %d - %d", a, b)
        return Failure(MathError.UNDERFLOW)

    return Success(type(a)(int(a) - int(b)))


def safe_mul(a: int, b: int) -> Outcome:
    """
    Multiply two uints.

    A zero left operand yields zero without any further check.
    Otherwise fails with `OVERFLOW` iff the product exceeds the maximum of the width.
    """
    a, b = coerce_operands(a, b)
    uint_type = type(a)

    if int(a) == 0:
        return Success(uint_type(0))

    # Equivalent to the round-trip test `(a * b) / a != b` on a wrapping machine.
    if int(b) > int(uint_type.max_value()) // int(a):
        logger.debug("safe_mul overflow: %d * %d", a, b)
        return Failure(MathError.OVERFLOW)

    return Success(uint_type(int(a) * int(b)))


def safe_div(a: int, b: int) -> Outcome:
    """
    Floor-divide `a` by `b`.

    Fails with `DIVIDE_BY_ZERO` iff `b == 0`.
    """
    a, b = coerce_operands(a, b)

    if int(b) == 0:
        logger.debug("safe_div by zero: %d / 0", a)
        return Failure(MathError.DIVIDE_BY_ZERO)

    return Success(type(a)(int(a) // int(b)))


def safe_mod(a: int, b: int) -> Outcome:
    """
    Remainder of `a` divided by `b`.

    Fails with `DIVIDE_BY_ZERO` iff `b == 0`.
    """
    a, b = coerce_operands(a, b)

    if int(b) == 0:
        logger.debug("safe_mod by zero: %d %% 0", a)
        return Failure(MathError.DIVIDE_BY_ZERO)

    return Success(type(a)(int(a) % int(b)))
