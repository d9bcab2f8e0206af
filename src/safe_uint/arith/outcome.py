"""
Tagged outcomes of checked arithmetic.

Every operation that can fail returns either a `Success` carrying a uint or a
`Failure` carrying a `MathError`. Nothing in the library raises on an
arithmetic failure, so a caller always sees the outcome and decides whether to
abort its own operation.

```python
outcome = safe_add(a, b).and_then(lambda total: safe_div(total, 2))
if not outcome.ok:
    return outcome  # propagate the failure unchanged
```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Literal, TypeAlias

from safe_uint.types.exceptions import UnwrapError
from safe_uint.types.uint import BaseUint


class MathError(IntEnum):
    """Error kinds a checked operation can report. The values are stable."""

    OVERFLOW = 1
    """The true mathematical result exceeds the largest value of the width."""

    UNDERFLOW = 2
    """A subtraction's true mathematical result would be negative."""

    DIVIDE_BY_ZERO = 3
    """Division or modulo attempted with a zero divisor."""


@dataclass(frozen=True, slots=True)
class Success:
    """A successful computation carrying its uint result."""

    value: BaseUint

    @property
    def ok(self) -> Literal[True]:
        """Always `True` for a success."""
        return True

    def unwrap(self) -> BaseUint:
        """Return the carried value."""
        return self.value

    def and_then(self, fn: Callable[[BaseUint], Outcome]) -> Outcome:
        """Feed the value into the next checked step."""
        return fn(self.value)

    def map(self, fn: Callable[[BaseUint], BaseUint]) -> Outcome:
        """Transform the value with a total function."""
        return Success(fn(self.value))


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed computation carrying the kind of error."""

    error: MathError

    @property
    def ok(self) -> Literal[False]:
        """Always `False` for a failure."""
        return False

    def unwrap(self) -> BaseUint:
        """
        Refuse to produce a value.

        Raises:
            UnwrapError: Always, carrying the error kind.
        """
        raise UnwrapError(self.error)

    def and_then(self, fn: Callable[[BaseUint], Outcome]) -> Outcome:
        """Propagate the failure unchanged. `fn` is not called."""
        return self

    def map(self, fn: Callable[[BaseUint], BaseUint]) -> Outcome:
        """Propagate the failure unchanged. `fn` is not called."""
        return self


Outcome: TypeAlias = Success | Failure
"""The result of a checked operation."""
