"""Sequence combinators

Structure flipping: [M[T]] -> M[[T]]."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ..definition import MonadDefinition


def _cons[M](definition: MonadDefinition[M], head: M, rest: M) -> M:
    return definition.bind(
        head,
        lambda x: definition.bind(rest, lambda xs: definition.pure([x, *xs])),
    )


def m_sequence[M](definition: MonadDefinition[M], values: Sequence[M]) -> M:
    """
    Flip structure: [M[T]] -> M[[T]], order preserved.

    Right fold with bind/pure. Maybe and Either give the first failure;
    List produces every combination (leftmost value varies slowest).

    Example:
        m_sequence(LIST, [[1, 2], [3, 4]])  # [[1, 3], [1, 4], [2, 3], [2, 4]]
    """
    result = definition.pure([])
    for value in reversed(values):
        result = _cons(definition, value, result)
    return result


def m_map[A, M](
    definition: MonadDefinition[M],
    items: Iterable[A],
    f: Callable[[A], M],
) -> M:
    """Monadic map: apply ``f`` to each item, then sequence the results."""
    return m_sequence(definition, [f(item) for item in items])


__all__ = ("m_map", "m_sequence")
