"""
Guard combinators
=================

Conditional execution.
"""

from __future__ import annotations

from ..definition import MonadDefinition


def m_when[M](definition: MonadDefinition[M], condition: bool, action: M) -> M:
    """Run ``action`` when ``condition`` holds, otherwise do nothing (pure None)."""
    return definition.check(action, "m_when") if condition else definition.pure(None)


def m_unless[M](definition: MonadDefinition[M], condition: bool, action: M) -> M:
    """Dual of m_when: run ``action`` only when ``condition`` is false."""
    return definition.check(action, "m_unless") if not condition else definition.pure(None)


def guard[M](definition: MonadDefinition[M], condition: bool) -> M:
    """
    MonadPlus guard: pure(None) when ``condition`` holds, zero() otherwise.

    Bound inside a chain it prunes the branch:

        LIST.bind(choose(1, 2, 3, 4), lambda x:
            LIST.bind(guard(LIST, x % 2 == 0), lambda _: LIST.pure(x)))  # [2, 4]
    """
    definition.require_plus("guard")
    return definition.pure(None) if condition else definition.zero()


__all__ = ("guard", "m_unless", "m_when")
