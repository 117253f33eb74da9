"""Bridge from optional references (``T | None``) into Result."""

from __future__ import annotations

from fallible.core.errors import MissingValueError
from fallible.core.outcome import Err, Ok, Outcome
from fallible.core.types import Nilable, Thunk
from fallible.result.computation import Result


def from_nilable[T, E](value: Nilable[T], on_nil: Thunk[E]) -> Result[T, E]:
    """Succeed with value, or fail with on_nil() when value is None.

    on_nil is called at run time and only on the absent path.
    """

    def run() -> Outcome[T, E]:
        if value is None:
            return Err(on_nil())
        return Ok(value)

    return Result(run)


def missing(expected: str, *, source: str = "") -> Thunk[MissingValueError]:
    """Build an on_nil handler reporting which value was absent."""

    def on_nil() -> MissingValueError:
        return MissingValueError(
            message=f"{expected} is missing", source=source, expected=expected,
        )

    return on_nil
