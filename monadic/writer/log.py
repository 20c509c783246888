"""
Log - моноидный аккумулятор для Writer
======================================

Writer does not assume anything about its log: the log type has to satisfy
the Monoid contract below explicitly.
"""

from __future__ import annotations

import typing


@typing.runtime_checkable
class Monoid(typing.Protocol):
    """
    Log contract for the Writer monad.

    - empty(): identity element (called on the type)
    - combine(other): associative append, returns a new value

    Laws:
    - Left identity: T.empty().combine(x) == x
    - Right identity: x.combine(T.empty()) == x
    - Associativity: x.combine(y).combine(z) == x.combine(y.combine(z))
    """

    @classmethod
    def empty(cls) -> typing.Self: ...

    def combine(self, other: typing.Self, /) -> typing.Self: ...


class Log[A](list[A]):
    """
    Default Writer log: an append-only list of entries.

    Обёртка над list с моноидными операциями:
    - empty: пустой лог
    - combine: конкатенация логов

    Combining never mutates either operand.
    """

    @classmethod
    def empty(cls) -> Log[A]:
        """Empty log (identity of combine)."""
        return cls()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """
        Append single item.

        Convenience method equivalent to self.combine(Log.of(item))
        """
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def __repr__(self) -> str:
        return f"Log({list.__repr__(self)})"


__all__ = ("Log", "Monoid")
