"""
Monad definitions.

A MonadDefinition is the capability bundle every generic part of the library
works against: the do-notation interpreter and all m_* combinators take one as
their first argument and never look at the concrete value type themselves.

Required capabilities:
- pure (return) - wrap a plain value
- bind          - sequence a computation

Optional (MonadPlus) capabilities:
- zero          - identity element / failed branch
- plus          - associative combine

For custom monads:
1. Pick a value type and write its pure and bind
2. Build MonadDefinition(name, accepts, unit, flat_map)
3. Pass zero/combine as well if the monad is MonadPlus
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._errors import TypeMismatch, UnsupportedOperation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MonadDefinition[M]:
    """
    Typeclass describing one computation model.

    Monadic laws (under the model's own equality):
    - Left identity: bind(pure(a), f) == f(a)
    - Right identity: bind(m, pure) == m
    - Associativity: bind(bind(m, f), g) == bind(m, lambda x: bind(f(x), g))

    NOTE: ``unit``/``flat_map``/``empty``/``combine`` are the raw variant
    functions. Call ``pure``/``bind``/``zero``/``plus`` instead: those check
    that every value belongs to this monad.
    """

    name: str
    accepts: Callable[[object], bool]
    unit: Callable[[typing.Any], M]
    flat_map: Callable[[M, Callable[[typing.Any], M]], M]
    empty: Callable[[], M] | None = None
    combine: Callable[[M, M], M] | None = None

    # Monad operations

    def pure(self, value: typing.Any, /) -> M:
        """Wrap a plain value (``return`` in do-notation terms)."""
        return self.unit(value)

    def bind(self, m: M, f: Callable[[typing.Any], M], /) -> M:
        """
        Monadic bind (>>=).

        Both ``m`` and every value produced by ``f`` must belong to this
        monad. For deferred models (State, Reader) the result of ``f`` is
        checked when the computation runs.
        """
        self.check(m, "bind")

        def checked(value: typing.Any) -> M:
            return self.check(f(value), "bind")

        return self.flat_map(m, checked)

    # MonadPlus operations

    @property
    def supports_plus(self) -> bool:
        """True when the monad has both zero and plus."""
        return self.empty is not None and self.combine is not None

    def require_plus(self, operation: str) -> None:
        """Raise UnsupportedOperation unless the monad is MonadPlus."""
        if not self.supports_plus:
            logger.debug("%s monad has no zero/plus, rejecting %s()", self.name, operation)
            raise UnsupportedOperation(self.name, operation)

    def zero(self) -> M:
        """Identity element of plus."""
        self.require_plus("zero")
        return typing.cast(Callable[[], M], self.empty)()

    def plus(self, left: M, right: M, /) -> M:
        """Associative combine of two values."""
        self.require_plus("plus")
        combine = typing.cast(Callable[[M, M], M], self.combine)
        return combine(self.check(left, "plus"), self.check(right, "plus"))

    # Type checks

    def check(self, value: object, operation: str) -> M:
        """Return ``value`` unchanged, or raise TypeMismatch if it is foreign."""
        if not self.accepts(value):
            raise TypeMismatch(self.name, value, operation)
        return typing.cast(M, value)

    def __repr__(self) -> str:
        plus = ", plus" if self.supports_plus else ""
        return f"MonadDefinition({self.name}{plus})"


__all__ = ("MonadDefinition",)
