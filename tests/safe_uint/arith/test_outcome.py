"""Tests for the tagged outcome type."""

import dataclasses

import pytest

from safe_uint.arith import Failure, MathError, Success, safe_add, safe_div, safe_mul, safe_sub
from safe_uint.types import MAX_UINT, Uint, UnwrapError


def test_error_kinds_have_stable_values() -> None:
    """Callers may persist or compare the numeric codes."""
    assert MathError.OVERFLOW == 1
    assert MathError.UNDERFLOW == 2
    assert MathError.DIVIDE_BY_ZERO == 3
    assert MathError["OVERFLOW"] is MathError.OVERFLOW


def test_success_carries_value() -> None:
    """A success exposes its value."""
    outcome = Success(Uint(5))
    assert outcome.ok is True
    assert outcome.unwrap() == Uint(5)


def test_failure_refuses_to_unwrap() -> None:
    """Unwrapping a failure raises with the error kind."""
    outcome = Failure(MathError.UNDERFLOW)
    assert outcome.ok is False

    with pytest.raises(UnwrapError, match="UNDERFLOW") as excinfo:
        outcome.unwrap()
    assert excinfo.value.error is MathError.UNDERFLOW


def test_outcomes_are_immutable() -> None:
    """Outcomes are frozen values."""
    outcome = Success(Uint(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.value = Uint(2)  # type: ignore[misc]


def test_and_then_chains_successes() -> None:
    """Each step receives the previous value."""
    outcome = safe_add(3, 4).and_then(lambda total: safe_div(total, 2))
    assert outcome == Success(Uint(3))


def test_and_then_propagates_first_failure() -> None:
    """A failure short-circuits the chain and is returned unchanged."""
    calls: list[Uint] = []

    def record(value: Uint) -> Success:
        calls.append(value)
        return Success(value)

    outcome = safe_sub(1, 2).and_then(record).and_then(lambda v: safe_mul(v, MAX_UINT))
    assert outcome == Failure(MathError.UNDERFLOW)
    assert calls == []


def test_map_transforms_success_only() -> None:
    """`map` applies a total function to successes and skips failures."""
    assert Success(Uint(4)).map(lambda v: Uint(int(v) // 2)) == Success(Uint(2))
    assert Failure(MathError.OVERFLOW).map(lambda v: Uint(0)) == Failure(MathError.OVERFLOW)
