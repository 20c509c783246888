"""
Writer - value with accumulated log
===================================
"""

from __future__ import annotations

from dataclasses import dataclass

from .._errors import TypeMismatch
from .log import Monoid


@dataclass(frozen=True, slots=True)
class Writer[T, W: Monoid]:
    """
    Pair of a computed value and the log written while computing it.

    The log must satisfy the Monoid contract; anything else is rejected at
    construction time.
    """

    value: T
    log: W

    def __post_init__(self) -> None:
        if not isinstance(self.log, Monoid):
            raise TypeMismatch("Writer", self.log, "log")


__all__ = ("Writer",)
