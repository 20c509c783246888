"""
Writer Monad
============

Writer - значение + лог:
- Monoid: контракт для типа лога (empty + combine)
- Log: лог по умолчанию (список записей)
- Writer: пара (value, log)
"""

from .log import Log, Monoid
from .value import Writer
from .monad import (
    WRITER,
    censor,
    exec_writer,
    listen,
    run_writer,
    writer,
    writer_monad,
    writer_return,
    writer_tell,
)

__all__ = (
    "Log",
    "Monoid",
    "Writer",
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
