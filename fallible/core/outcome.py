"""Outcome[T, E] — what a deferred computation resolves to when run.

Ok[T] carries a success value, Err[E] carries an error. A run yields
exactly one of them. Both variants are frozen and pattern-matchable:

    match computation.run():
        case Ok(value): ...
        case Err(error): ...

Methods mirror each other across the two variants so callers holding an
``Outcome`` never need an isinstance check for the common operations.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant of Outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Return Ok(f(value))."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """No-op on Ok: the error transform is never called."""
        return self

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Feed the value to f, which returns the next Outcome."""
        return f(self.value)

    def fold[R](self, on_err: Callable[[Any], R], on_ok: Callable[[T], R]) -> R:  # noqa: ARG002
        return on_ok(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the value, ignoring the default."""
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error variant of Outcome."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """No-op on Err: the value transform is never called."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Return Err(f(error))."""
        return Err(f(self.error))

    def bind(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Short-circuit: f is never called."""
        return self

    def fold[R](self, on_err: Callable[[E], R], on_ok: Callable[[Any], R]) -> R:  # noqa: ARG002
        return on_err(self.error)

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError: there is no value to return."""
        raise RuntimeError(f"Called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        return default


type Outcome[T, E] = Ok[T] | Err[E]


# --- Free functions ---


def unwrap[T](outcome: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Test/boundary code only."""
    match outcome:
        case Ok(value):
            return value
        case Err(error):
            raise RuntimeError(f"unwrap on Err: {error}")
    raise TypeError(f"Expected Ok or Err, got {type(outcome).__name__}")


def sequence_outcomes[T, E](outcomes: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect Outcomes into an Outcome of list. Stops at the first Err."""
    values: list[T] = []
    for o in outcomes:
        if isinstance(o, Err):
            return o
        values.append(o.value)
    return Ok(values)
