"""Result[T, E] — a deferred computation that succeeds with T or fails with E.

A Result wraps a zero-argument thunk. Nothing runs while a pipeline is
being composed: every combinator returns a new Result whose thunk calls
into its inputs only when ``run()`` is invoked. Running yields exactly one
Outcome (``Ok`` or ``Err``). There is no memoization, so running the same
Result twice re-runs every captured closure.

Every combinator exists both as a method and as a free function taking the
computation first:

    ok(2).map(double)          == map_result(ok(2), double)
    ok(f).ap(ok(2))            == ap(ok(f), ok(2))

Failures short-circuit. ``ap`` always runs the function side before the
argument side, and never runs the argument side when the function side
fails.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, final

from fallible.core.outcome import Err, Ok, Outcome
from fallible.core.types import Predicate, Thunk


@final
@dataclass(frozen=True, slots=True, eq=False)
class Result[T, E]:
    """Deferred, possibly-failing computation. Immutable; compose, then run."""

    thunk: Thunk[Outcome[T, E]]

    def run(self) -> Outcome[T, E]:
        """Invoke the computation and return its Outcome."""
        return self.thunk()

    # --- Mapping ---

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        def run() -> Outcome[U, E]:
            match self.run():
                case Ok(value):
                    return Ok(f(value))
                case Err() as failed:
                    return failed

        return Result(run)

    def map_error[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error; a success passes through and f is never called."""

        def run() -> Outcome[T, F]:
            match self.run():
                case Err(err):
                    return Err(f(err))
                case Ok() as succeeded:
                    return succeeded

        return Result(run)

    def bimap[U, F](self, f: Callable[[E], F], g: Callable[[T], U]) -> Result[U, F]:
        """Map f over the error or g over the value, whichever the run produces."""

        def run() -> Outcome[U, F]:
            match self.run():
                case Ok(value):
                    return Ok(g(value))
                case Err(err):
                    return Err(f(err))

        return Result(run)

    # --- Sequencing ---

    def ap[A, B](self: Result[Callable[[A], B], E], fa: Result[A, E]) -> Result[B, E]:
        """Apply the function this computation yields to the value fa yields.

        self runs first. If it fails, fa is not run at all.
        """

        def run() -> Outcome[B, E]:
            fn = self.run()
            if isinstance(fn, Err):
                return fn
            arg = fa.run()
            if isinstance(arg, Err):
                return arg
            return Ok(fn.value(arg.value))

        return Result(run)

    def ap_first[B](self, fb: Result[B, E]) -> Result[T, E]:
        """Run self then fb; keep self's value."""
        return self.map(_first).ap(fb)

    def ap_second[B](self, fb: Result[B, E]) -> Result[B, E]:
        """Run self then fb; keep fb's value."""
        return self.map(_second).ap(fb)

    def chain[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Use the value to pick the next computation, then run it."""

        def run() -> Outcome[U, E]:
            match self.run():
                case Ok(value):
                    return f(value).run()
                case Err() as failed:
                    return failed

        return Result(run)

    def chain_first[U](self, f: Callable[[T], Result[U, E]]) -> Result[T, E]:
        """Like chain, but keep this computation's value."""
        return self.chain(lambda a: f(a).map(lambda _: a))

    # --- Branching and recovery ---

    def filter_or_else(
        self, predicate: Predicate[T], on_false: Callable[[T], E],
    ) -> Result[T, E]:
        """Fail with on_false(value) unless predicate(value) holds."""

        def check(value: T) -> Result[T, E]:
            if predicate(value):
                return ok(value)
            return error(on_false(value))

        return self.chain(check)

    def or_else[F](self, on_error: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Switch to on_error(err) on failure.

        A success is returned as produced by the single run of self; self is
        not run a second time and on_error is not called.
        """

        def run() -> Outcome[T, F]:
            match self.run():
                case Err(err):
                    return on_error(err).run()
                case Ok() as succeeded:
                    return succeeded

        return Result(run)

    # --- Eager consumers ---

    def get_or_else(self, on_error: Callable[[E], T]) -> T:
        """Run now; return the value or on_error(err)."""
        match self.run():
            case Ok(value):
                return value
            case Err(err):
                return on_error(err)

    def fold[R](self, on_error: Callable[[E], R], on_success: Callable[[T], R]) -> R:
        """Run now and apply exactly one handler."""
        match self.run():
            case Ok(value):
                return on_success(value)
            case Err(err):
                return on_error(err)

    def fork(self, on_error: Callable[[E], Any], on_success: Callable[[T], Any]) -> None:
        """Run now for side effects only; handler return values are discarded."""
        match self.run():
            case Ok(value):
                on_success(value)
            case Err(err):
                on_error(err)


def _first[A, B](a: A) -> Callable[[B], A]:
    return lambda _b: a


def _second[A, B](_a: A) -> Callable[[B], B]:
    return lambda b: b


# --- Constructors ---


def ok[T](value: T) -> Result[T, Never]:
    """A computation that always succeeds with value."""
    return Result(lambda: Ok(value))


def error[E](err: E) -> Result[Never, E]:
    """A computation that always fails with err."""
    return Result(lambda: Err(err))


def zero[T](factory: Callable[[], T]) -> Result[T, Never]:
    """A computation that always succeeds with the type's empty value.

    factory is the type's no-argument constructor (``int``, ``str``,
    ``list``, ...) and is called each time the computation runs.
    """
    return Result(lambda: Ok(factory()))


# --- Free-function forms ---


def map_result[T, U, E](fa: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    return fa.map(f)


def map_error[T, E, F](fa: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    return fa.map_error(f)


def bimap[T, U, E, F](
    fa: Result[T, E], f: Callable[[E], F], g: Callable[[T], U],
) -> Result[U, F]:
    return fa.bimap(f, g)


def ap[A, B, E](fab: Result[Callable[[A], B], E], fa: Result[A, E]) -> Result[B, E]:
    return fab.ap(fa)


def ap_first[A, B, E](fa: Result[A, E], fb: Result[B, E]) -> Result[A, E]:
    return fa.ap_first(fb)


def ap_second[A, B, E](fa: Result[A, E], fb: Result[B, E]) -> Result[B, E]:
    return fa.ap_second(fb)


def chain[T, U, E](ma: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    return ma.chain(f)


def chain_first[T, U, E](ma: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[T, E]:
    return ma.chain_first(f)


def filter_or_else[T, E](
    ma: Result[T, E], predicate: Predicate[T], on_false: Callable[[T], E],
) -> Result[T, E]:
    return ma.filter_or_else(predicate, on_false)


def or_else[T, E, F](ma: Result[T, E], on_error: Callable[[E], Result[T, F]]) -> Result[T, F]:
    return ma.or_else(on_error)


def get_or_else[T, E](ma: Result[T, E], on_error: Callable[[E], T]) -> T:
    return ma.get_or_else(on_error)


def fold[T, E, R](
    ma: Result[T, E], on_error: Callable[[E], R], on_success: Callable[[T], R],
) -> R:
    return ma.fold(on_error, on_success)


def fork[T, E](
    ma: Result[T, E], on_error: Callable[[E], Any], on_success: Callable[[T], Any],
) -> None:
    ma.fork(on_error, on_success)
