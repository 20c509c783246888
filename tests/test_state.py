"""Tests for the State model."""

from monadic import (
    STATE,
    Bind,
    State,
    domonad,
    eval_state,
    exec_state,
    run_state,
    state_get,
    state_gets,
    state_modify,
    state_put,
    state_return,
)


def counter_program():
    return domonad(
        STATE,
        [
            Bind("start", state_get()),
            Bind("_", lambda env: state_put(env["start"] + 1)),
            Bind("_", state_modify(lambda s: s * 2)),
            Bind("now", state_get()),
        ],
        lambda env: STATE.pure((env["start"], env["now"])),
    )


def test_primitives():
    assert run_state(state_return("v"), 1) == ("v", 1)
    assert run_state(state_get(), 4) == (4, 4)
    assert run_state(state_gets(len), "abc") == (3, "abc")
    assert run_state(state_put(9), 4) == (None, 9)
    assert run_state(state_modify(lambda s: s + 1), 4) == (None, 5)


def test_counter_program():
    assert run_state(counter_program(), 3) == ((3, 8), 8)


def test_counter_program_is_deterministic():
    program = counter_program()
    first = run_state(program, 10)
    second = run_state(program, 10)
    assert first == second == ((10, 22), 22)


def test_eval_and_exec():
    program = counter_program()
    assert eval_state(program, 0) == (0, 2)
    assert exec_state(program, 0) == 2


def test_nothing_runs_before_run_state():
    calls = []

    def track(s):
        calls.append(s)
        return (s, s)

    program = STATE.bind(State(track), lambda x: state_put(x + 1))
    assert calls == []
    assert run_state(program, 1) == (None, 2)
    assert calls == [1]


def test_state_threads_through_list_of_pushes():
    def push(item):
        return state_modify(lambda stack: [*stack, item])

    program = domonad(
        STATE,
        [Bind("_", push("a")), Bind("_", push("b")), Bind("size", state_gets(len))],
        lambda env: STATE.pure(env["size"]),
    )
    assert run_state(program, []) == (2, ["a", "b"])


def test_long_programs_run_in_bounded_stack():
    steps = [Bind("_", state_modify(lambda s: s + 1)) for _ in range(1000)]
    program = domonad(STATE, steps, lambda env: state_get())
    assert run_state(program, 0) == (1000, 1000)

    left_nested = state_return(0)
    for _ in range(1000):
        left_nested = STATE.bind(left_nested, lambda x: State(lambda s: (x + s, s)))
    assert eval_state(left_nested, 2) == 2000
