"""Kleisli composition"""

from __future__ import annotations

import typing
from collections.abc import Sequence

from .._types import Kleisli
from ..definition import MonadDefinition


def m_comp[A, B, M](
    definition: MonadDefinition[M],
    f: Kleisli[A, M],
    g: Kleisli[B, M],
) -> Kleisli[A, M]:
    """
    Kleisli composition: ``x -> bind(f(x), g)``.

    Associative, with ``definition.pure`` as left and right identity.
    """

    def composed(x: A) -> M:
        return definition.bind(f(x), g)

    return composed


def m_chain[M](
    definition: MonadDefinition[M],
    fns: Sequence[Kleisli[typing.Any, M]],
) -> Kleisli[typing.Any, M]:
    """Compose any number of Kleisli arrows left to right. Empty chain is pure."""
    chained: Kleisli[typing.Any, M] = definition.pure
    for fn in fns:
        chained = m_comp(definition, chained, fn)
    return chained


__all__ = ("m_chain", "m_comp")
