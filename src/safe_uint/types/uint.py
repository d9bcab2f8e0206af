"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import Any, ClassVar, Final, NoReturn

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from safe_uint.config import SAFE_UINT_BITS

from .exceptions import UintCoercionError, UintMismatchError, UintRangeError


class BaseUint(int):
    """
    A base class for fixed-width unsigned integer types that inherits from `int`.

    Instances are always in the range [0, 2**BITS - 1].

    Python's arithmetic operators are disabled: an unchecked `a + b` could leave
    the range of the type, so every computation has to go through the checked
    operations in `safe_uint.arith`, which report failures as outcomes.
    """

    __slots__ = ()

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: int) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            UintCoercionError: If `value` is not an `int` (booleans are rejected).
            UintRangeError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise UintCoercionError("int", type(value).__name__, value)

        int_value = int(value)
        max_int = (1 << cls.BITS) - 1
        if not (0 <= int_value <= max_int):
            raise UintRangeError(int_value, cls.__name__, max_value=max_int)
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> Self:
        """Return the largest representable value of the type (MAX_UINT)."""
        return cls((1 << cls.BITS) - 1)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.plain_validator_function(validate),  # type: ignore[operator]
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def _raise_type_error(self, other: Any, op_symbol: str) -> NoReturn:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def _raise_unchecked_error(self, op_symbol: str) -> NoReturn:
        """Helper to reject unchecked arithmetic."""
        raise TypeError(
            f"Unchecked arithmetic ({op_symbol}) is not supported for {type(self).__name__}; "
            "use the checked operations in safe_uint.arith"
        )

    def __add__(self, other: Any) -> NoReturn:
        """Disable the addition operator (`+`)."""
        self._raise_unchecked_error("+")

    def __radd__(self, other: Any) -> NoReturn:
        """Disable the reverse addition operator (`+`)."""
        self._raise_unchecked_error("+")

    def __sub__(self, other: Any) -> NoReturn:
        """Disable the subtraction operator (`-`)."""
        self._raise_unchecked_error("-")

    def __rsub__(self, other: Any) -> NoReturn:
        """Disable the reverse subtraction operator (`-`)."""
        self._raise_unchecked_error("-")

    def __mul__(self, other: Any) -> NoReturn:
        """Disable the multiplication operator (`*`)."""
        self._raise_unchecked_error("*")

    def __rmul__(self, other: Any) -> NoReturn:
        """Disable the reverse multiplication operator (`*`)."""
        self._raise_unchecked_error("*")

    def __truediv__(self, other: Any) -> NoReturn:
        """Disable the true division operator (`/`)."""
        self._raise_unchecked_error("/")

    def __rtruediv__(self, other: Any) -> NoReturn:
        """Disable the reverse true division operator (`/`)."""
        self._raise_unchecked_error("/")

    def __floordiv__(self, other: Any) -> NoReturn:
        """Disable the floor division operator (`//`)."""
        self._raise_unchecked_error("//")

    def __rfloordiv__(self, other: Any) -> NoReturn:
        """Disable the reverse floor division operator (`//`)."""
        self._raise_unchecked_error("//")

    def __mod__(self, other: Any) -> NoReturn:
        """Disable the modulo operator (`%`)."""
        self._raise_unchecked_error("%")

    def __rmod__(self, other: Any) -> NoReturn:
        """Disable the reverse modulo operator (`%`)."""
        self._raise_unchecked_error("%")

    def __divmod__(self, other: Any) -> NoReturn:
        """Disable `divmod(self, other)`."""
        self._raise_unchecked_error("divmod")

    def __rdivmod__(self, other: Any) -> NoReturn:
        """Disable `divmod(other, self)`."""
        self._raise_unchecked_error("divmod")

    def __pow__(self, exponent: Any, modulo: Any | None = None) -> NoReturn:
        """Disable the exponentiation operator (`**`) and `pow(self, exp, mod)`."""
        self._raise_unchecked_error("**")

    def __rpow__(self, base: Any) -> NoReturn:  # type: ignore[override]
        """Disable the reverse exponentiation operator (`**`)."""
        self._raise_unchecked_error("**")

    def __lshift__(self, other: Any) -> NoReturn:
        """Disable the left bit-shift operator (`<<`), which can leave the range."""
        self._raise_unchecked_error("<<")

    def __rlshift__(self, other: Any) -> NoReturn:
        """Disable the reverse left bit-shift operator (`<<`)."""
        self._raise_unchecked_error("<<")

    def __neg__(self) -> NoReturn:
        """Disable negation, which has no unsigned result."""
        self._raise_unchecked_error("unary -")

    def __invert__(self) -> NoReturn:
        """Disable bitwise inversion, which Python defines on signed integers."""
        self._raise_unchecked_error("~")

    def __and__(self, other: Any) -> Self:
        """Handle the bitwise AND operator (`&`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "&")
        return type(self)(int(self) & int(other))

    def __or__(self, other: Any) -> Self:
        """Handle the bitwise OR operator (`|`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "|")
        return type(self)(int(self) | int(other))

    def __xor__(self, other: Any) -> Self:
        """Handle the bitwise XOR operator (`^`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "^")
        return type(self)(int(self) ^ int(other))

    def __rshift__(self, other: Any) -> Self:
        """Handle the right bit-shift operator (`>>`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">>")
        return type(self)(int(self) >> int(other))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "==")
        return int(self) == int(other)

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "!=")
        return int(self) != int(other)

    def __lt__(self, other: Any) -> bool:
        """Handle the less-than operator (`<`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<")
        return int(self) < int(other)

    def __le__(self, other: Any) -> bool:
        """Handle the less-than-or-equal-to operator (`<=`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<=")
        return int(self) <= int(other)

    def __gt__(self, other: Any) -> bool:
        """Handle the greater-than operator (`>`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">")
        return int(self) > int(other)

    def __ge__(self, other: Any) -> bool:
        """Handle the greater-than-or-equal-to operator (`>=`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">=")
        return int(self) >= int(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a distinct hash for the object."""
        return hash((type(self), int(self)))


class Uint8(BaseUint):
    """A type representing an 8-bit unsigned integer (uint8)."""

    BITS = 8


class Uint16(BaseUint):
    """A type representing a 16-bit unsigned integer (uint16)."""

    BITS = 16


class Uint32(BaseUint):
    """A type representing a 32-bit unsigned integer (uint32)."""

    BITS = 32


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64


class Uint128(BaseUint):
    """A type representing a 128-bit unsigned integer (uint128)."""

    BITS = 128


class Uint256(BaseUint):
    """A type representing a 256-bit unsigned integer (uint256)."""

    BITS = 256


UINT_TYPES: Final[dict[int, type[BaseUint]]] = {
    cls.BITS: cls for cls in (Uint8, Uint16, Uint32, Uint64, Uint128, Uint256)
}
"""All provided uint types, keyed by bit width."""

Uint: Final[type[BaseUint]] = UINT_TYPES[SAFE_UINT_BITS]
"""The native uint type of the environment, selected by `SAFE_UINT_BITS`."""

MAX_UINT: Final[BaseUint] = Uint.max_value()
"""The largest value of the native uint type."""


def resolve_uint_type(*values: Any) -> type[BaseUint]:
    """
    Determine the uint width an operation runs at.

    The width of the uint operands wins; plain integers follow it.
    With no uint operand at all, the native `Uint` is used.

    Raises:
        UintMismatchError: If uint operands of different widths are mixed.
    """
    uint_types = tuple(dict.fromkeys(type(v) for v in values if isinstance(v, BaseUint)))
    if len(uint_types) > 1:
        raise UintMismatchError(tuple(t.__name__ for t in uint_types))
    return uint_types[0] if uint_types else Uint


def coerce_operands(*values: Any) -> tuple[BaseUint, ...]:
    """
    Convert all operands of one operation to a single uint width.

    Raises:
        UintMismatchError: If uint operands of different widths are mixed.
        UintCoercionError: If an operand is not an integer.
        UintRangeError: If a plain integer does not fit the resolved width.
    """
    uint_type = resolve_uint_type(*values)
    return tuple(v if isinstance(v, uint_type) else uint_type(v) for v in values)
