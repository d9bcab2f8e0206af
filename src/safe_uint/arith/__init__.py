"""
Checked arithmetic over fixed-width unsigned integers.

Operations that can fail return an `Outcome`; total operations return a
uint (or a bool for the parity predicates) directly.
"""

from .compare import abs_diff, clamp, is_even, is_odd, max, max_uint, min, min_uint
from .derived import arithmetic_sum, average, basis_points, lerp, percentage
from .outcome import Failure, MathError, Outcome, Success
from .power import checked_pow, pow
from .primitives import safe_add, safe_div, safe_mod, safe_mul, safe_sub

__all__ = [
    # Outcomes
    "MathError",
    "Outcome",
    "Success",
    "Failure",
    # Checked primitives
    "safe_add",
    "safe_sub",
    "safe_mul",
    "safe_div",
    "safe_mod",
    # Derived utilities
    "percentage",
    "basis_points",
    "average",
    "lerp",
    "arithmetic_sum",
    # Comparison and parity
    "min",
    "max",
    "min_uint",
    "max_uint",
    "abs_diff",
    "clamp",
    "is_even",
    "is_odd",
    # Exponentiation
    "pow",
    "checked_pow",
]
