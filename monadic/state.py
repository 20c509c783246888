"""
State monad
===========

A value is a deferred function ``state -> (value, new_state)``. Nothing runs
until ``run_state`` supplies the initial state; bind threads the state from
one computation to the next. Chains of binds run in a loop, so long programs
do not grow the Python stack.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .definition import MonadDefinition


@dataclass(frozen=True, slots=True)
class State[S, T]:
    """Stateful computation. ``run`` maps a state to ``(value, new_state)``."""

    run: Callable[[S], tuple[T, S]]


# Constructors

def state_return[S, T](value: T) -> State[S, T]:
    """Produce ``value``, leave the state untouched."""
    return State(lambda state: (value, state))


def state_get[S]() -> State[S, S]:
    """Read the current state as the value."""
    return State(lambda state: (state, state))


def state_gets[S, T](f: Callable[[S], T]) -> State[S, T]:
    """Read a projection of the current state."""
    return State(lambda state: (f(state), state))


def state_put[S](new_state: S) -> State[S, None]:
    """Replace the state."""
    return State(lambda _: (None, new_state))


def state_modify[S](f: Callable[[S], S]) -> State[S, None]:
    """Replace the state with ``f(state)``."""
    return State(lambda state: (None, f(state)))


# Running

def run_state[S, T](m: State[S, T], initial: S) -> tuple[T, S]:
    """Run against ``initial``, returning ``(value, final_state)``."""
    return m.run(initial)


def eval_state[S, T](m: State[S, T], initial: S) -> T:
    """Run and keep only the value."""
    value, _ = m.run(initial)
    return value


def exec_state[S, T](m: State[S, T], initial: S) -> S:
    """Run and keep only the final state."""
    _, final = m.run(initial)
    return final


# Definition

@dataclass(frozen=True, slots=True)
class _Chain:
    """Deferred ``bind(source, then)``, itself usable as a ``run`` function."""

    source: State
    then: Callable[[typing.Any], State]

    def __call__(self, state: typing.Any) -> tuple[typing.Any, typing.Any]:
        # Binds are unwound with an explicit stack, so chains of any length
        # run in constant Python stack depth.
        pending: list[Callable[[typing.Any], State]] = []
        run: Callable[[typing.Any], tuple[typing.Any, typing.Any]] = self
        while True:
            if isinstance(run, _Chain):
                pending.append(run.then)
                run = run.source.run
                continue
            value, state = run(state)
            if not pending:
                return value, state
            run = pending.pop()(value).run


def _bind[S, A, B](m: State[S, A], f: Callable[[A], State[S, B]]) -> State[S, B]:
    return State(_Chain(m, f))


STATE: MonadDefinition[State] = MonadDefinition(
    name="State",
    accepts=lambda value: isinstance(value, State),
    unit=state_return,
    flat_map=_bind,
)


__all__ = (
    "STATE",
    "State",
    "eval_state",
    "exec_state",
    "run_state",
    "state_get",
    "state_gets",
    "state_modify",
    "state_put",
    "state_return",
)
