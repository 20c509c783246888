"""
Lifting plain functions into a monad.

- m_lift(definition, f)  - wrap the result of ``f`` with pure
- m_fmap(definition, f, m) - apply ``f`` to the value inside ``m``
- m_join(definition, mm) - flatten one level of nesting
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._helpers import identity
from .definition import MonadDefinition


def m_lift[M](definition: MonadDefinition[M], f: Callable[..., typing.Any]) -> Callable[..., M]:
    """
    Turn a plain function into a monad-returning one.

    Example:
        add = m_lift(MAYBE, operator.add)
        add(2, 3)  # Some(5)
    """

    def lifted(*args: typing.Any, **kwargs: typing.Any) -> M:
        return definition.pure(f(*args, **kwargs))

    return lifted


def m_fmap[A, B, M](definition: MonadDefinition[M], f: Callable[[A], B], m: M) -> M:
    """Functor map expressed with bind and pure."""
    return definition.bind(m, lambda value: definition.pure(f(value)))


def m_join[M](definition: MonadDefinition[M], mm: M) -> M:
    """Flatten M[M[T]] into M[T]."""
    return definition.bind(mm, identity)


__all__ = ("m_fmap", "m_join", "m_lift")
