"""
List monad
==========

Non-deterministic choice. A value is a plain ``list`` holding every possible
outcome, in order. bind runs the function on each outcome and concatenates
the results, so chained binds enumerate the Cartesian product of all choices
(leftmost choice varies slowest).

Results are materialized eagerly.
"""

from __future__ import annotations

from collections.abc import Callable

from .definition import MonadDefinition


def list_return[T](value: T) -> list[T]:
    """Exactly one outcome."""
    return [value]


def list_zero() -> list[object]:
    """No outcome at all."""
    return []


def choose[T](*options: T) -> list[T]:
    """Choice between the given outcomes."""
    return list(options)


def _bind[A, B](m: list[A], f: Callable[[A], list[B]]) -> list[B]:
    result: list[B] = []
    for value in m:
        result.extend(f(value))
    return result


def _plus[T](left: list[T], right: list[T]) -> list[T]:
    return [*left, *right]


LIST: MonadDefinition[list] = MonadDefinition(
    name="List",
    accepts=lambda value: type(value) is list,
    unit=list_return,
    flat_map=_bind,
    empty=list_zero,
    combine=_plus,
)


__all__ = ("LIST", "choose", "list_return", "list_zero")
