"""
Fold combinators
================

Monadic left fold and MonadPlus sum.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..definition import MonadDefinition


def m_reduce[A, T, M](
    definition: MonadDefinition[M],
    f: Callable[[T, A], M],
    initial: T,
    items: Iterable[A],
) -> M:
    """
    Effectful fold: build up an accumulator through sequential binds.

    ``f(acc, item)`` returns the next accumulator inside the monad. Maybe and
    Either stop at the first failure; List folds along every branch.
    """
    result = definition.pure(initial)
    for item in items:
        result = definition.bind(result, lambda acc, item=item: f(acc, item))
    return result


def m_plus_all[M](definition: MonadDefinition[M], values: Iterable[M]) -> M:
    """
    Combine all values with plus, starting from zero.

    Maybe: first Some wins. List: concatenation.
    """
    result = definition.zero()
    for value in values:
        result = definition.plus(result, value)
    return result


__all__ = ("m_plus_all", "m_reduce")
