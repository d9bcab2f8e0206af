"""Tests for the checked arithmetic primitives."""

from typing import Type

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from safe_uint.arith import (
    Failure,
    MathError,
    Success,
    safe_add,
    safe_div,
    safe_mod,
    safe_mul,
    safe_sub,
)
from safe_uint.types import MAX_UINT, BaseUint, Uint, Uint8, Uint16, Uint64, Uint256

MAX = int(MAX_UINT)

uints = st.integers(min_value=0, max_value=MAX)
"""Any value of the native width."""


class TestSafeAdd:
    """Tests for `safe_add`."""

    def test_small_values(self) -> None:
        """Simple sums succeed."""
        assert safe_add(2, 3) == Success(Uint(5))

    def test_sum_at_max_succeeds(self) -> None:
        """A sum exactly at the maximum still fits."""
        assert safe_add(MAX - 1, 1) == Success(MAX_UINT)
        assert safe_add(MAX, 0) == Success(MAX_UINT)

    def test_sum_above_max_overflows(self) -> None:
        """One past the maximum overflows."""
        assert safe_add(MAX, 1) == Failure(MathError.OVERFLOW)
        assert safe_add(MAX, MAX) == Failure(MathError.OVERFLOW)

    @given(a=uints, b=uints)
    def test_matches_mathematical_sum(self, a: int, b: int) -> None:
        """The outcome is the sum iff the sum fits."""
        outcome = safe_add(a, b)
        if a + b <= MAX:
            assert outcome == Success(Uint(a + b))
        else:
            assert outcome == Failure(MathError.OVERFLOW)

    @given(a=uints, b=uints)
    def test_sub_undoes_add(self, a: int, b: int) -> None:
        """Subtracting `b` from a successful `a + b` gives back `a`."""
        outcome = safe_add(a, b)
        assume(outcome.ok)
        assert safe_sub(outcome.value, b) == Success(Uint(a))


class TestSafeSub:
    """Tests for `safe_sub`."""

    def test_small_values(self) -> None:
        """Simple differences succeed."""
        assert safe_sub(7, 3) == Success(Uint(4))

    def test_equal_operands(self) -> None:
        """Equal operands give zero."""
        assert safe_sub(MAX, MAX) == Success(Uint(0))

    def test_negative_result_underflows(self) -> None:
        """A smaller minuend underflows."""
        assert safe_sub(0, 1) == Failure(MathError.UNDERFLOW)
        assert safe_sub(3, 7) == Failure(MathError.UNDERFLOW)

    @given(a=uints, b=uints)
    def test_matches_mathematical_difference(self, a: int, b: int) -> None:
        """The outcome is the difference iff `a >= b`."""
        outcome = safe_sub(a, b)
        if a >= b:
            assert outcome == Success(Uint(a - b))
        else:
            assert outcome == Failure(MathError.UNDERFLOW)


class TestSafeMul:
    """Tests for `safe_mul`."""

    def test_small_values(self) -> None:
        """Simple products succeed."""
        assert safe_mul(6, 7) == Success(Uint(42))

    def test_zero_left_operand_short_circuits(self) -> None:
        """Zero times anything is zero, even times the maximum."""
        assert safe_mul(0, MAX) == Success(Uint(0))
        assert safe_mul(0, 0) == Success(Uint(0))

    def test_zero_right_operand(self) -> None:
        """Anything times zero is zero."""
        assert safe_mul(MAX, 0) == Success(Uint(0))

    def test_max_times_two_overflows(self) -> None:
        """The maximum doubled does not fit."""
        assert safe_mul(MAX, 2) == Failure(MathError.OVERFLOW)
        assert safe_mul(2, MAX) == Failure(MathError.OVERFLOW)

    def test_product_at_max_succeeds(self) -> None:
        """A product exactly at the maximum fits: 2**128 - 1 = (2**64 - 1) * (2**64 + 1)."""
        assert safe_mul(2**64 - 1, 2**64 + 1) == Success(MAX_UINT)

    def test_product_just_above_max_overflows(self) -> None:
        """2**64 squared is one past the maximum."""
        assert safe_mul(2**64, 2**64) == Failure(MathError.OVERFLOW)

    @given(a=uints, b=uints)
    def test_matches_mathematical_product(self, a: int, b: int) -> None:
        """The outcome is the product iff the product fits."""
        outcome = safe_mul(a, b)
        if a * b <= MAX:
            assert outcome == Success(Uint(a * b))
        else:
            assert outcome == Failure(MathError.OVERFLOW)


class TestSafeDiv:
    """Tests for `safe_div`."""

    def test_floor_division(self) -> None:
        """Division truncates towards zero."""
        assert safe_div(10, 3) == Success(Uint(3))
        assert safe_div(2, 3) == Success(Uint(0))

    def test_divide_by_zero(self) -> None:
        """A zero divisor fails for every dividend."""
        assert safe_div(10, 0) == Failure(MathError.DIVIDE_BY_ZERO)
        assert safe_div(0, 0) == Failure(MathError.DIVIDE_BY_ZERO)
        assert safe_div(MAX, 0) == Failure(MathError.DIVIDE_BY_ZERO)

    @given(a=uints, b=st.integers(min_value=1, max_value=MAX))
    def test_matches_floor_division(self, a: int, b: int) -> None:
        """Any non-zero divisor succeeds with the floor quotient."""
        assert safe_div(a, b) == Success(Uint(a // b))


class TestSafeMod:
    """Tests for `safe_mod`."""

    def test_remainder(self) -> None:
        """The remainder of a non-zero divisor."""
        assert safe_mod(10, 3) == Success(Uint(1))
        assert safe_mod(9, 3) == Success(Uint(0))

    def test_modulo_by_zero(self) -> None:
        """A zero divisor fails."""
        assert safe_mod(10, 0) == Failure(MathError.DIVIDE_BY_ZERO)


@pytest.mark.parametrize("uint_class", [Uint8, Uint16, Uint64, Uint256])
def test_primitives_respect_operand_width(uint_class: Type[BaseUint]) -> None:
    """Overflow is detected at the width of the operands, not the native width."""
    max_value = uint_class.max_value()

    assert safe_add(max_value, uint_class(1)) == Failure(MathError.OVERFLOW)
    assert safe_mul(max_value, 2) == Failure(MathError.OVERFLOW)

    outcome = safe_add(uint_class(1), 2)
    assert outcome == Success(uint_class(3))
    assert isinstance(outcome.value, uint_class)


def test_failures_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Detected failures are reported at DEBUG level."""
    with caplog.at_level("DEBUG", logger="safe_uint.arith.primitives"):
        safe_div(10, 0)

    assert "safe_div by zero" in caplog.text
