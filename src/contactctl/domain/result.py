"""Ok/Err result values for fallible domain computations.

Domain operations return these instead of raising, so every failure is a
typed alternative to success that the caller must inspect.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful outcome."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map[U](self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))

    def and_then[U, E](self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed outcome carrying its error value."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def map(self, func: Callable[..., object]) -> Err[E]:
        return self

    def and_then(self, func: Callable[..., object]) -> Err[E]:
        return self

    def unwrap(self) -> object:
        msg = f"unwrap() called on Err: {self.error}"
        raise ValueError(msg)


type Result[T, E] = Ok[T] | Err[E]


def from_optional[T, E](value: T | None, on_absent: Callable[[], E]) -> Result[T, E]:
    """Lift a present-or-absent value into a Result.

    *on_absent* is only called when *value* is None.
    """
    if value is None:
        return Err(on_absent())
    return Ok(value)
