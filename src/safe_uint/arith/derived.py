"""
Derived numeric utilities.

Everything here is composed from the checked primitives. A failure of any
step is returned unchanged: there are no partial results and no default
values substituted for a failed step.

Percentages, basis points and arithmetic sums multiply before dividing and
report `OVERFLOW` when the intermediate product does not fit the width, rather
than silently wrapping.
"""

from __future__ import annotations

from safe_uint.types.constants import BASIS_POINT_DENOMINATOR, LERP_MAX_T, PERCENT_DENOMINATOR
from safe_uint.types.uint import BaseUint, coerce_operands

from .outcome import Failure, MathError, Outcome, Success
from .primitives import safe_add, safe_div, safe_mul, safe_sub


def _mul_div(a: BaseUint, b: BaseUint, denominator: int) -> Outcome:
    """Compute `floor(a * b / denominator)` with a checked product."""

    def divide(product: BaseUint) -> Outcome:
        uint_type = type(product)
        # A denominator wider than the type is larger than any product.
        if denominator > int(uint_type.max_value()):
            return Success(uint_type(0))
        return safe_div(product, denominator)

    return safe_mul(a, b).and_then(divide)


def percentage(amount: int, percent: int) -> Outcome:
    """
    Compute `floor(amount * percent / 100)`.

    `percent` is not bounded: 250 yields two and a half times `amount`.
    """
    amount, percent = coerce_operands(amount, percent)
    return _mul_div(amount, percent, PERCENT_DENOMINATOR)


def basis_points(amount: int, bps: int) -> Outcome:
    """Compute `floor(amount * bps / 10000)`."""
    amount, bps = coerce_operands(amount, bps)
    return _mul_div(amount, bps, BASIS_POINT_DENOMINATOR)


def average(a: int, b: int) -> Outcome:
    """
    Compute `floor((a + b) / 2)`.

    Fails with `OVERFLOW` when `a + b` does not fit the width.
    """
    a, b = coerce_operands(a, b)
    return safe_add(a, b).and_then(lambda total: safe_div(total, 2))


def _scale_span(span: BaseUint, t: BaseUint) -> BaseUint:
    """
    Compute `floor(span * t / 100)` for `t <= 100`.

    The result never exceeds `span`, so it fits the width even when the
    product `span * t` would not.
    """
    return type(span)(int(span) * int(t) // PERCENT_DENOMINATOR)


def lerp(a: int, b: int, t: int) -> Outcome:
    """
    Linearly interpolate from `a` towards `b` by `t` percent.

    `t` must lie in [0, 100]; a larger `t` fails with `OVERFLOW`.

    The direction of travel is handled explicitly so that no negative
    intermediate value is ever needed:

    - `b >= a`: `a + floor((b - a) * t / 100)`
    - `b < a`: `a - floor((a - b) * t / 100)`
    """
    a, b, t = coerce_operands(a, b, t)

    if int(t) > LERP_MAX_T:
        return Failure(MathError.OVERFLOW)

    if b >= a:
        return (
            safe_sub(b, a)
            .map(lambda span: _scale_span(span, t))
            .and_then(lambda step: safe_add(a, step))
        )

    return (
        safe_sub(a, b)
        .map(lambda span: _scale_span(span, t))
        .and_then(lambda step: safe_sub(a, step))
    )


def arithmetic_sum(first: int, last: int, n: int) -> Outcome:
    """
    Sum of an `n`-term arithmetic sequence running from `first` to `last`.

    Closed form `floor(n * (first + last) / 2)`. Fails with `OVERFLOW` when
    either `first + last` or the product with `n` does not fit the width.
    """
    first, last, n = coerce_operands(first, last, n)
    return (
        safe_add(first, last)
        .and_then(lambda total: safe_mul(n, total))
        .and_then(lambda product: safe_div(product, 2))
    )
