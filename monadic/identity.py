"""
Identity monad
==============

No effect at all: bind just applies the function. Useful as the baseline
model when checking generic code.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .definition import MonadDefinition


@dataclass(frozen=True, slots=True)
class Identity[T]:
    """Plain value in a box."""

    value: T


def identity_return[T](value: T) -> Identity[T]:
    """Lift a value into Identity."""
    return Identity(value)


def run_identity[T](m: Identity[T]) -> T:
    """Take the value out of the box."""
    return m.value


def _bind[A, B](m: Identity[A], f: Callable[[A], Identity[B]]) -> Identity[B]:
    return f(m.value)


IDENTITY: MonadDefinition[Identity] = MonadDefinition(
    name="Identity",
    accepts=lambda value: isinstance(value, Identity),
    unit=identity_return,
    flat_map=_bind,
)


__all__ = ("IDENTITY", "Identity", "identity_return", "run_identity")
