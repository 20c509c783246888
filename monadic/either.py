"""
Either monad
============

Two-track error handling on top of kungfu's Result:

- Left(error)  is ``kungfu.Error(error)``
- Right(value) is ``kungfu.Ok(value)``

bind on an Error short-circuits. An Error is an ordinary result of the
computation, not a library failure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .definition import MonadDefinition

# Constructors

def either_left[E](error: E) -> Result[object, E]:
    """Failure track."""
    return Error(error)


def either_right[T](value: T) -> Result[T, object]:
    """Success track."""
    return Ok(value)


# Accessors

def is_left(m: Result[object, object]) -> bool:
    return isinstance(m, Error)


def is_right(m: Result[object, object]) -> bool:
    return isinstance(m, Ok)


def from_right[T, E](m: Result[T, E]) -> T:
    """Value of a Right. Raises ValueError on a Left."""
    match m:
        case Ok(value):
            return value
        case Error(err):
            raise ValueError(f"from_right() called on Left({err!r})")
        case _ as unreachable:
            assert_never(unreachable)


def from_left[T, E](m: Result[T, E]) -> E:
    """Error of a Left. Raises ValueError on a Right."""
    match m:
        case Error(err):
            return err
        case Ok(value):
            raise ValueError(f"from_left() called on Right({value!r})")
        case _ as unreachable:
            assert_never(unreachable)


def either[T, E, R](
    on_left: Callable[[E], R],
    on_right: Callable[[T], R],
    m: Result[T, E],
) -> R:
    """Fold both tracks into one plain value."""
    match m:
        case Ok(value):
            return on_right(value)
        case Error(err):
            return on_left(err)
        case _ as unreachable:
            assert_never(unreachable)


# Definition

def _bind[T, U, E](m: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    match m:
        case Ok(value):
            return f(value)
        case Error(_):
            return m  # type: ignore[return-value]
        case _ as unreachable:
            assert_never(unreachable)


EITHER: MonadDefinition[Result] = MonadDefinition(
    name="Either",
    accepts=lambda value: isinstance(value, (Ok, Error)),
    unit=either_right,
    flat_map=_bind,
)


__all__ = (
    "EITHER",
    "either",
    "either_left",
    "either_right",
    "from_left",
    "from_right",
    "is_left",
    "is_right",
)
