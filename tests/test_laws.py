"""Monad laws for every built-in model."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

from monadic import (
    EITHER,
    IDENTITY,
    LIST,
    MAYBE,
    NOTHING,
    READER,
    STATE,
    WRITER,
    Identity,
    Log,
    MonadDefinition,
    Some,
    State,
    Writer,
    asks,
    either,
    either_left,
    either_right,
    run_reader,
    run_state,
    state_get,
)


@dataclass(frozen=True)
class LawCase:
    definition: MonadDefinition[Any]
    m: Any
    f: Callable[[Any], Any]
    g: Callable[[Any], Any]
    project: Callable[[Any], Any] = lambda value: value


CASES = {
    "identity": LawCase(
        IDENTITY,
        Identity(3),
        lambda x: Identity(x + 1),
        lambda x: Identity(x * 2),
    ),
    "maybe-some": LawCase(
        MAYBE,
        Some(3),
        lambda x: Some(x + 1) if x < 10 else NOTHING,
        lambda x: Some(x * 2),
    ),
    "maybe-nothing": LawCase(
        MAYBE,
        NOTHING,
        lambda x: Some(x + 1),
        lambda x: Some(x * 2),
    ),
    "list": LawCase(
        LIST,
        [1, 2, 3],
        lambda x: [x, x * 10],
        lambda x: [x + 1] if x % 2 else [],
    ),
    "state": LawCase(
        STATE,
        state_get(),
        lambda x: State(lambda s: (x + s, s + 1)),
        lambda x: State(lambda s: (x * s, s * 2)),
        lambda m: run_state(m, 5),
    ),
    "writer": LawCase(
        WRITER,
        Writer(2, Log.of("start")),
        lambda x: Writer(x + 1, Log.of(f"inc {x}")),
        lambda x: Writer(x * 2, Log.of(f"double {x}")),
    ),
    "reader": LawCase(
        READER,
        asks(lambda env: env["base"]),
        lambda x: asks(lambda env: x + env["step"]),
        lambda x: asks(lambda env: x * env["base"]),
        lambda m: run_reader(m, {"base": 3, "step": 4}),
    ),
    "either-right": LawCase(
        EITHER,
        either_right(4),
        lambda x: either_right(x + 1) if x > 0 else either_left("negative"),
        lambda x: either_right(x * 2),
        lambda r: either(lambda e: ("left", e), lambda v: ("right", v), r),
    ),
    "either-left": LawCase(
        EITHER,
        either_left("boom"),
        lambda x: either_right(x + 1),
        lambda x: either_right(x * 2),
        lambda r: either(lambda e: ("left", e), lambda v: ("right", v), r),
    ),
}


@pytest.fixture(params=sorted(CASES), ids=sorted(CASES))
def case(request: pytest.FixtureRequest) -> LawCase:
    return CASES[request.param]


def test_left_identity(case: LawCase):
    d = case.definition
    assert case.project(d.bind(d.pure(7), case.f)) == case.project(case.f(7))


def test_right_identity(case: LawCase):
    d = case.definition
    assert case.project(d.bind(case.m, d.pure)) == case.project(case.m)


def test_associativity(case: LawCase):
    d = case.definition
    left = d.bind(d.bind(case.m, case.f), case.g)
    right = d.bind(case.m, lambda x: d.bind(case.f(x), case.g))
    assert case.project(left) == case.project(right)


def test_definitions_are_immutable():
    with pytest.raises(AttributeError):
        MAYBE.name = "Other"  # type: ignore[misc]


def test_supports_plus_only_for_maybe_and_list():
    capable = {d.name for d in (IDENTITY, MAYBE, LIST, STATE, WRITER, READER, EITHER) if d.supports_plus}
    assert capable == {"Maybe", "List"}
