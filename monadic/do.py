"""
Do-notation interpreter.

A program is an ordered list of steps run against one MonadDefinition:

    domonad(
        MAYBE,
        [
            Bind("a", safe_divide(10, 2)),
            Bind("b", lambda env: safe_divide(env["a"] * 4, 4)),
        ],
        lambda env: MAYBE.pure(env["a"] + env["b"]),
    )

Steps:
- Bind(name, expr) - bind the value of a monadic expression to ``name``
- Let(name, compute) - bind a plain value, no monadic bind involved
- When(predicate) - MonadPlus guard, prunes the branch with zero()

A plain ``(name, expr)`` tuple is the same as Bind(name, expr).

Every Bind nests one ``definition.bind`` call, so short-circuiting (Maybe,
Either), branching (List) and state/log/environment threading (State, Writer,
Reader) all come from the monad itself. The interpreter only threads the
environment of bound names.

State and Reader binds are deferred and unwound in a loop when run, so their
programs have no length limit. For the eager models each Bind adds a few
Python frames while the program is built, which keeps programs to a few
hundred steps under the default recursion limit.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import assert_never

from ._errors import UnboundName
from ._types import Continuation, Expr, Predicate
from .definition import MonadDefinition

logger = logging.getLogger(__name__)


# ============================================================================
# Environment
# ============================================================================


class Environment(Mapping[str, typing.Any]):
    """
    Immutable mapping of the names bound so far.

    ``extend`` returns a new environment, so sibling branches of a List
    program never see each other's bindings. Looking up a missing name
    raises UnboundName (a KeyError, so ``get`` and ``in`` behave as usual).
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[str, typing.Any] | None = None, /) -> None:
        self._bindings: dict[str, typing.Any] = dict(bindings or {})

    def __getitem__(self, name: str) -> typing.Any:
        try:
            return self._bindings[name]
        except KeyError:
            raise UnboundName(name, self._bindings) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def extend(self, name: str, value: typing.Any) -> Environment:
        """New environment with ``name`` bound (shadowing any earlier binding)."""
        bindings = dict(self._bindings)
        bindings[name] = value
        return Environment(bindings)

    def __repr__(self) -> str:
        return f"Environment({self._bindings!r})"


# ============================================================================
# Steps
# ============================================================================


@dataclass(frozen=True, slots=True)
class Bind[M]:
    """Bind the result of a monadic expression to ``name``."""

    name: str
    expr: Expr[M]


@dataclass(frozen=True, slots=True)
class Let:
    """Bind ``compute(env)`` to ``name`` without going through the monad."""

    name: str
    compute: Callable[[Environment], typing.Any]


@dataclass(frozen=True, slots=True)
class When:
    """Continue only when ``predicate(env)`` holds, otherwise zero()."""

    predicate: Predicate[Environment]


type Step[M] = Bind[M] | Let | When


def _as_step[M](step: Step[M] | tuple[str, Expr[M]]) -> Step[M]:
    match step:
        case Bind() | Let() | When():
            return step
        case (str() as name, expr):
            return Bind(name, expr)
        case _:
            raise TypeError(f"domonad(): not a binding step: {step!r}")


def _evaluate[M](definition: MonadDefinition[M], expr: Expr[M], env: Environment) -> M:
    # Values of the monad itself are used as is: State and Reader hold
    # functions, so "callable" alone cannot tell the two cases apart.
    if definition.accepts(expr):
        return typing.cast(M, expr)
    if callable(expr):
        return definition.check(expr(env), "domonad")
    return definition.check(expr, "domonad")


# ============================================================================
# Interpreter
# ============================================================================


def domonad[M](
    definition: MonadDefinition[M],
    steps: Sequence[Step[M] | tuple[str, Expr[M]]],
    continuation: Continuation[M],
) -> M:
    """
    Run ``steps`` in declared order and finish with ``continuation(env)``.

    Returns one monadic value of the same monad. An empty step list calls
    the continuation directly with an empty environment.
    """
    program = tuple(_as_step(step) for step in steps)
    if any(isinstance(step, When) for step in program):
        definition.require_plus("when")

    logger.debug("domonad[%s]: %d steps", definition.name, len(program))

    def run(index: int, env: Environment) -> M:
        if index == len(program):
            return definition.check(continuation(env), "domonad")

        step = program[index]
        match step:
            case Bind(name, expr):
                value = _evaluate(definition, expr, env)
                return definition.bind(value, lambda bound: run(index + 1, env.extend(name, bound)))
            case Let(name, compute):
                return run(index + 1, env.extend(name, compute(env)))
            case When(predicate):
                if predicate(env):
                    return run(index + 1, env)
                return definition.zero()
            case _ as unreachable:
                assert_never(unreachable)

    return run(0, Environment())


__all__ = ("Bind", "Environment", "Let", "Step", "When", "domonad")
