"""Internal helpers.

Common functions used across multiple modules.
These are not part of the public API but can be used for creating custom monads."""

from __future__ import annotations

from collections.abc import Iterable

from .writer import Monoid


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


# Log merging helpers
def merge_logs[W: Monoid](logs: Iterable[W], monoid: type[W]) -> W:
    """
    Merge multiple logs into one using monoidal combine.

    Usage:
        merged = merge_logs((w.log for w in writers), Log)
    """
    result = monoid.empty()
    for log in logs:
        result = result.combine(log)
    return result


__all__ = (
    "identity",
    "merge_logs",
)
