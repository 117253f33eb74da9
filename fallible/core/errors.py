"""Error values that carry a cause chain.

Combinators accept any error type. ResultError is the structured option:
a frozen dataclass value that can be pattern-matched, serialized and
wrapped around a prior error (``cause``) to keep a diagnostic chain as it
passes through map_error, bimap, filter_or_else or from_nilable.
Base class ResultError, two @final subclasses.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from typing import final

WRAPPED = "WRAPPED"
MISSING_VALUE = "MISSING_VALUE"
UNHANDLED_EXCEPTION = "UNHANDLED_EXCEPTION"


@dataclass(frozen=True, slots=True, kw_only=True)
class ResultError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str = WRAPPED
    source: str = ""  # "module.function" that produced this error
    cause: object = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

    def with_context(self, context: str) -> ResultError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def chain(self) -> Iterator[object]:
        """Yield this error, then each cause down to the innermost one."""
        current: object = self
        while current is not None:
            yield current
            current = current.cause if isinstance(current, ResultError) else None

    @property
    def root_cause(self) -> object:
        """The innermost error of the chain (self when there is no cause)."""
        *_, last = self.chain()
        return last

    def to_dict(self) -> dict[str, object]:
        """Serialize to a dict; nested ResultError causes serialize recursively."""
        cause: object
        if isinstance(self.cause, ResultError):
            cause = self.cause.to_dict()
        elif self.cause is None:
            cause = None
        else:
            cause = str(self.cause)
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
            "cause": cause,
        }


@final
@dataclass(frozen=True, slots=True, kw_only=True)
class MissingValueError(ResultError):
    """An optional reference was absent."""

    expected: str  # e.g. "user.email"
    code: str = MISSING_VALUE

    def to_dict(self) -> dict[str, object]:
        return {**ResultError.to_dict(self), "expected": self.expected}


@final
@dataclass(frozen=True, slots=True, kw_only=True)
class UnhandledExceptionError(ResultError):
    """A callable raised instead of returning; the exception is the cause."""

    exception_type: str
    code: str = UNHANDLED_EXCEPTION

    @staticmethod
    def from_exception(exc: Exception, *, source: str = "") -> UnhandledExceptionError:
        return UnhandledExceptionError(
            message=f"{type(exc).__name__} raised",
            source=source,
            cause=exc,
            exception_type=type(exc).__qualname__,
        )

    def to_dict(self) -> dict[str, object]:
        return {**ResultError.to_dict(self), "exception_type": self.exception_type}


# --- Wrapping ---


def wrap(cause: object, message: str, *, code: str = WRAPPED, source: str = "") -> ResultError:
    """Annotate cause with message. ``str()`` renders as "message: cause"."""
    return ResultError(message=message, code=code, source=source, cause=cause)


def wrapper(
    message: str, *, code: str = WRAPPED, source: str = "",
) -> Callable[[object], ResultError]:
    """Return a function that wraps its argument; suits map_error and bimap."""

    def _wrap(cause: object) -> ResultError:
        return wrap(cause, message, code=code, source=source)

    return _wrap
