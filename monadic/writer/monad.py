"""Writer monad

Value + append-only log. bind combines the logs of both sides, left first,
so no entry is ever dropped or reordered.

The log type is a parameter of the definition:

    WRITER                      # Log entries (default)
    writer_monad(MyMonoid)      # any type satisfying Monoid"""

from __future__ import annotations

from collections.abc import Callable

from .._errors import TypeMismatch
from ..definition import MonadDefinition
from .log import Log, Monoid
from .value import Writer


def writer_monad[W: Monoid](monoid: type[W]) -> MonadDefinition[Writer]:
    """
    Build a Writer definition for the given log type.

    ``monoid.empty()`` is used by ``pure``; values whose log is not an
    instance of ``monoid`` are rejected by ``bind``.
    """
    if not isinstance(monoid, type) or not issubclass(monoid, Monoid):
        raise TypeMismatch("Writer", monoid, "writer_monad")

    def unit[T](value: T) -> Writer[T, W]:
        return Writer(value, monoid.empty())

    def flat_map[A, B](m: Writer[A, W], f: Callable[[A], Writer[B, W]]) -> Writer[B, W]:
        following = f(m.value)
        return Writer(following.value, m.log.combine(following.log))

    return MonadDefinition(
        name=f"Writer[{monoid.__name__}]",
        accepts=lambda value: isinstance(value, Writer) and isinstance(value.log, monoid),
        unit=unit,
        flat_map=flat_map,
    )


WRITER: MonadDefinition[Writer] = writer_monad(Log)


# Constructors

def writer[T, W: Monoid](value: T, log: W) -> Writer[T, W]:
    """Value together with an already written log."""
    return Writer(value, log)


def writer_return[T](value: T) -> Writer[T, Log[object]]:
    """Lift a value with an empty Log."""
    return Writer(value, Log.empty())


def writer_tell[A](*entries: A) -> Writer[None, Log[A]]:
    """Write entries to the log without producing a value."""
    return Writer(None, Log.of(*entries))


# Writer operations

def listen[T, W: Monoid](m: Writer[T, W]) -> Writer[tuple[T, W], W]:
    """Get access to the log along with the value."""
    return Writer((m.value, m.log), m.log)


def censor[T, W: Monoid](f: Callable[[W], W], m: Writer[T, W]) -> Writer[T, W]:
    """Modify the log after computation."""
    return Writer(m.value, f(m.log))


# Running

def run_writer[T, W: Monoid](m: Writer[T, W]) -> tuple[T, W]:
    """Split into ``(value, log)``."""
    return (m.value, m.log)


def exec_writer[T, W: Monoid](m: Writer[T, W]) -> W:
    """Only the log."""
    return m.log


__all__ = (
    "WRITER",
    "censor",
    "exec_writer",
    "listen",
    "run_writer",
    "writer",
    "writer_monad",
    "writer_return",
    "writer_tell",
)
