"""
Reader monad
============

A value is a deferred function ``environment -> value``. bind hands the same
environment to every computation in the chain; ``local`` runs a computation
against a modified copy.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .definition import MonadDefinition


@dataclass(frozen=True, slots=True)
class Reader[R, T]:
    """Computation depending on a read-only environment."""

    run: Callable[[R], T]


def reader_return[R, T](value: T) -> Reader[R, T]:
    """Ignore the environment, produce ``value``."""
    return Reader(lambda _: value)


def ask[R]() -> Reader[R, R]:
    """The environment itself."""
    return Reader(lambda env: env)


def asks[R, T](f: Callable[[R], T]) -> Reader[R, T]:
    """A projection of the environment."""
    return Reader(f)


def local[R, T](f: Callable[[R], R], m: Reader[R, T]) -> Reader[R, T]:
    """Run ``m`` against ``f(environment)`` instead of the environment."""
    return Reader(lambda env: m.run(f(env)))


def run_reader[R, T](m: Reader[R, T], env: R) -> T:
    """Supply the environment and get the value."""
    return m.run(env)


@dataclass(frozen=True, slots=True)
class _Chain:
    """Deferred ``bind(source, then)``, itself usable as a ``run`` function."""

    source: Reader
    then: Callable[[typing.Any], Reader]

    def __call__(self, env: typing.Any) -> typing.Any:
        pending: list[Callable[[typing.Any], Reader]] = []
        run: Callable[[typing.Any], typing.Any] = self
        while True:
            if isinstance(run, _Chain):
                pending.append(run.then)
                run = run.source.run
                continue
            value = run(env)
            if not pending:
                return value
            run = pending.pop()(value).run


def _bind[R, A, B](m: Reader[R, A], f: Callable[[A], Reader[R, B]]) -> Reader[R, B]:
    return Reader(_Chain(m, f))


READER: MonadDefinition[Reader] = MonadDefinition(
    name="Reader",
    accepts=lambda value: isinstance(value, Reader),
    unit=reader_return,
    flat_map=_bind,
)


__all__ = ("READER", "Reader", "ask", "asks", "local", "reader_return", "run_reader")
