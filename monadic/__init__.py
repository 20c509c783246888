"""
Monadic computations with do-notation.

One sequencing engine, many computation models. Each model is described by a
MonadDefinition; the do-notation interpreter and every m_* combinator work
against that definition only.

Architecture:
- MonadDefinition - pure + bind, optionally zero + plus (MonadPlus)
- Built-in models - IDENTITY, MAYBE, LIST, STATE, WRITER, READER, EITHER
- domonad - runs an ordered list of named binding steps
- m_* combinators - sequence, map, filter, compose, lift, when/unless
"""

# Core types
from ._types import Continuation, Expr, Kleisli, Predicate
from .definition import MonadDefinition

# Models
from .identity import IDENTITY, Identity, identity_return, run_identity
from .maybe import (
    MAYBE,
    NOTHING,
    Maybe,
    Nothing,
    Some,
    from_maybe,
    from_optional,
    is_none,
    is_some,
    maybe_return,
    maybe_zero,
)
from .many import LIST, choose, list_return, list_zero
from .state import (
    STATE,
    State,
    eval_state,
    exec_state,
    run_state,
    state_get,
    state_gets,
    state_modify,
    state_put,
    state_return,
)
from .writer import (
    WRITER,
    Log,
    Monoid,
    Writer,
    censor,
    exec_writer,
    listen,
    run_writer,
    writer,
    writer_monad,
    writer_return,
    writer_tell,
)
from .reader import READER, Reader, ask, asks, local, reader_return, run_reader
from .either import (
    EITHER,
    either,
    either_left,
    either_right,
    from_left,
    from_right,
    is_left,
    is_right,
)

# Do-notation
from .do import Bind, Environment, Let, Step, When, domonad

# Combinators
from .collection import m_filter, m_map, m_plus_all, m_reduce, m_sequence
from .control import guard, m_chain, m_comp, m_unless, m_when
from .lift import m_fmap, m_join, m_lift

# Errors
from ._errors import MonadError, TypeMismatch, UnboundName, UnsupportedOperation

__all__ = (
    # Types
    "Continuation",
    "Expr",
    "Kleisli",
    "MonadDefinition",
    "Predicate",
    # Identity
    "IDENTITY",
    "Identity",
    "identity_return",
    "run_identity",
    # Maybe
    "MAYBE",
    "NOTHING",
    "Maybe",
    "Nothing",
    "Some",
    "from_maybe",
    "from_optional",
    "is_none",
    "is_some",
    "maybe_return",
    "maybe_zero",
    # List
    "LIST",
    "choose",
    "list_return",
    "list_zero",
    # State
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
    # Writer
    "writer",
    "WRITER",
    "Log",
    "Monoid",
    "Writer",
    "censor",
    "exec_writer",
    "listen",
    "run_writer",
    "writer_monad",
    "writer_return",
    "writer_tell",
    # Reader
    "READER",
    "Reader",
    "ask",
    "asks",
    "local",
    "reader_return",
    "run_reader",
    # Either
    "EITHER",
    "either",
    "either_left",
    "either_right",
    "from_left",
    "from_right",
    "is_left",
    "is_right",
    # Do-notation
    "Bind",
    "Environment",
    "Let",
    "Step",
    "When",
    "domonad",
    # Combinators
    "guard",
    "m_chain",
    "m_comp",
    "m_filter",
    "m_fmap",
    "m_join",
    "m_lift",
    "m_map",
    "m_plus_all",
    "m_reduce",
    "m_sequence",
    "m_unless",
    "m_when",
    # Errors
    "MonadError",
    "TypeMismatch",
    "UnboundName",
    "UnsupportedOperation",
)
