"""Checked fixed-width unsigned integer arithmetic with explicit outcomes."""

from .arith import (
    Failure,
    MathError,
    Outcome,
    Success,
    abs_diff,
    arithmetic_sum,
    average,
    basis_points,
    checked_pow,
    clamp,
    is_even,
    is_odd,
    lerp,
    max_uint,
    min_uint,
    percentage,
    safe_add,
    safe_div,
    safe_mod,
    safe_mul,
    safe_sub,
)
from .types import (
    MAX_UINT,
    BaseUint,
    SafeUintError,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
    Uint256,
    UnwrapError,
)

__all__ = [
    "MAX_UINT",
    "BaseUint",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Uint128",
    "Uint256",
    "MathError",
    "Outcome",
    "Success",
    "Failure",
    "safe_add",
    "safe_sub",
    "safe_mul",
    "safe_div",
    "safe_mod",
    "percentage",
    "basis_points",
    "average",
    "lerp",
    "arithmetic_sum",
    "min_uint",
    "max_uint",
    "abs_diff",
    "clamp",
    "is_even",
    "is_odd",
    "checked_pow",
    "SafeUintError",
    "UnwrapError",
]
