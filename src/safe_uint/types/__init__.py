"""Reusable type definitions for the safe arithmetic library."""

from .base import CamelModel, StrictBaseModel
from .constants import BASIS_POINT_DENOMINATOR, PERCENT_DENOMINATOR
from .exceptions import (
    SafeUintError,
    SafeUintTypeError,
    UintCoercionError,
    UintMismatchError,
    UintRangeError,
    UnwrapError,
)
from .uint import (
    MAX_UINT,
    UINT_TYPES,
    BaseUint,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
    Uint256,
    coerce_operands,
    resolve_uint_type,
)

__all__ = [
    # Core types
    "BaseUint",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Uint128",
    "Uint256",
    "UINT_TYPES",
    "MAX_UINT",
    "CamelModel",
    "StrictBaseModel",
    "coerce_operands",
    "resolve_uint_type",
    # Constants
    "PERCENT_DENOMINATOR",
    "BASIS_POINT_DENOMINATOR",
    # Exceptions
    "SafeUintError",
    "SafeUintTypeError",
    "UintCoercionError",
    "UintMismatchError",
    "UintRangeError",
    "UnwrapError",
]
