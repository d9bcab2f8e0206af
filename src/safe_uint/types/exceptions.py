"""Exception hierarchy for programming errors in the safe arithmetic library.

Arithmetic failures (overflow, underflow, division by zero) are never raised:
they are returned as `Failure` outcomes. The exceptions below signal misuse of
the API instead, such as passing a float or mixing integer widths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from safe_uint.arith.outcome import MathError


class SafeUintError(Exception):
    """
    Base exception for all library errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class SafeUintTypeError(SafeUintError, TypeError):
    """Base class for type-related errors."""


class UintCoercionError(SafeUintTypeError):
    """
    Raised when a value cannot be coerced to a uint.

    Attributes:
        expected_type: The type that was expected.
        actual_type: The actual type of the value.
        value: The value that couldn't be coerced (may be truncated for display).
    """

    def __init__(
        self,
        expected_type: str,
        actual_type: str,
        value: Any = None,
    ) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        self.value = value

        msg = f"Expected {expected_type}, got {actual_type}"
        if value is not None:
            value_repr = repr(value)
            if len(value_repr) > 50:
                value_repr = value_repr[:47] + "..."
            msg = f"{msg}: {value_repr}"

        super().__init__(msg)


class UintMismatchError(SafeUintTypeError):
    """
    Raised when the operands of one operation have different widths.

    Attributes:
        type_names: The names of the conflicting uint types, in operand order.
    """

    def __init__(self, type_names: tuple[str, ...]) -> None:
        self.type_names = type_names
        super().__init__(f"Operands must share one uint width, got {', '.join(type_names)}")


class UintRangeError(SafeUintError, OverflowError):
    """
    Raised when a value is outside the range of a uint type.

    Attributes:
        value: The value that caused the error.
        type_name: The uint type that couldn't hold the value.
        max_value: The maximum allowed value (inclusive).
    """

    def __init__(self, value: int, type_name: str, *, max_value: int) -> None:
        self.value = value
        self.type_name = type_name
        self.max_value = max_value

        super().__init__(f"{value} is out of range for {type_name} (valid range: [0, {max_value}])")


class UnwrapError(SafeUintError):
    """
    Raised when the value of a failed outcome is requested.

    Attributes:
        error: The error kind carried by the failed outcome.
    """

    def __init__(self, error: MathError) -> None:
        self.error = error
        super().__init__(f"Called unwrap() on a failed outcome: {error.name}")
