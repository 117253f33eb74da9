"""Shared type aliases: Thunk, Predicate, Nilable."""

from __future__ import annotations

from collections.abc import Callable

type Thunk[T] = Callable[[], T]
"""A zero-argument callable evaluated on demand."""

type Predicate[T] = Callable[[T], bool]

type Nilable[T] = T | None
"""A reference that may be absent. ``None`` is the absent case."""
