"""
Core type definitions.

Aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Kleisli = monad-returning function, the right-hand side of bind
type Kleisli[A, M] = Callable[[A], M]

# Continuation = final step of do-notation, reads the bound names
type Continuation[M] = Callable[[Mapping[str, typing.Any]], M]

# Expr = monadic value, or a function computing one from the bound names
type Expr[M] = M | Callable[[Mapping[str, typing.Any]], M]


__all__ = (
    "Continuation",
    "Expr",
    "Kleisli",
    "Predicate",
)
