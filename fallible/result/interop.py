"""Adapters between Result and neighbouring abstractions.

from_io wraps an unfailable deferred computation, from_outcome lifts an
already-resolved Outcome (as delivered by event or future layers),
try_catch fences off code that signals failure by raising, and sequence
folds many computations into one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Never

from fallible.core.errors import UnhandledExceptionError
from fallible.core.outcome import Err, Ok, Outcome
from fallible.core.types import Thunk
from fallible.result.computation import Result

log = logging.getLogger(__name__)


def from_io[T](io: Thunk[T]) -> Result[T, Never]:
    """Wrap a computation that cannot fail; io runs each time the Result runs."""
    return Result(lambda: Ok(io()))


def from_outcome[T, E](outcome: Outcome[T, E]) -> Result[T, E]:
    """Lift an already-computed Outcome. Running returns it unchanged."""
    return Result(lambda: outcome)


def try_catch[T, E](
    thunk: Thunk[T],
    on_throw: Callable[[Exception], E] | None = None,
) -> Result[T, E] | Result[T, UnhandledExceptionError]:
    """Run thunk at run time, turning a raised Exception into a failure.

    Without on_throw the failure is an UnhandledExceptionError whose cause
    is the exception itself.
    """

    def run() -> Outcome[T, object]:
        try:
            return Ok(thunk())
        except Exception as exc:
            log.debug("try_catch captured %s: %s", type(exc).__name__, exc)
            if on_throw is None:
                return Err(UnhandledExceptionError.from_exception(
                    exc, source=getattr(thunk, "__qualname__", ""),
                ))
            return Err(on_throw(exc))

    return Result(run)  # type: ignore[arg-type]


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Run each computation in order, collecting values; stop at the first failure.

    The iterable is consumed when the returned Result runs, not before.
    """

    def run() -> Outcome[list[T], E]:
        values: list[T] = []
        for r in results:
            match r.run():
                case Ok(value):
                    values.append(value)
                case Err() as failed:
                    return failed
        return Ok(values)

    return Result(run)
