"""
Maybe monad
===========

Optional values: ``Some(value)`` or ``Nothing``.

- bind on Nothing short-circuits, the function is never called
- zero is Nothing
- plus keeps the first Some ("first success wins")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from .definition import MonadDefinition


@dataclass(frozen=True, slots=True)
class Some[T]:
    """Present value."""

    value: T


@dataclass(frozen=True, slots=True)
class Nothing:
    """Absent value. Use the NOTHING singleton."""

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()

type Maybe[T] = Some[T] | Nothing


# Constructors

def maybe_return[T](value: T) -> Maybe[T]:
    """Lift a value into Maybe."""
    return Some(value)


def maybe_zero() -> Maybe[object]:
    """The absent value."""
    return NOTHING


def from_optional[T](value: T | None) -> Maybe[T]:
    """Convert Optional to Maybe. Python ``None`` becomes Nothing."""
    if value is None:
        return NOTHING
    return Some(value)


# Accessors

def is_some(m: Maybe[object]) -> bool:
    return isinstance(m, Some)


def is_none(m: Maybe[object]) -> bool:
    return isinstance(m, Nothing)


def from_maybe[T](m: Maybe[T], default: T) -> T:
    """Value of a Some, or ``default`` for Nothing."""
    match m:
        case Some(value):
            return value
        case Nothing():
            return default
        case _ as unreachable:
            assert_never(unreachable)


# Definition

def _bind[A, B](m: Maybe[A], f: Callable[[A], Maybe[B]]) -> Maybe[B]:
    match m:
        case Some(value):
            return f(value)
        case Nothing():
            return NOTHING
        case _ as unreachable:
            assert_never(unreachable)


def _plus[T](left: Maybe[T], right: Maybe[T]) -> Maybe[T]:
    return left if isinstance(left, Some) else right


MAYBE: MonadDefinition[Maybe] = MonadDefinition(
    name="Maybe",
    accepts=lambda value: isinstance(value, (Some, Nothing)),
    unit=maybe_return,
    flat_map=_bind,
    empty=maybe_zero,
    combine=_plus,
)


__all__ = (
    "MAYBE",
    "NOTHING",
    "Maybe",
    "Nothing",
    "Some",
    "from_maybe",
    "from_optional",
    "is_none",
    "is_some",
    "maybe_return",
    "maybe_zero",
)
