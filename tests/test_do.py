"""Tests for the do-notation interpreter."""

import logging

import pytest

from monadic import (
    LIST,
    MAYBE,
    NOTHING,
    STATE,
    Bind,
    Environment,
    Let,
    Some,
    TypeMismatch,
    UnboundName,
    UnsupportedOperation,
    When,
    domonad,
    run_state,
    state_get,
)


class TestEnvironment:
    def test_lookup_and_extend(self):
        env = Environment().extend("a", 1)
        extended = env.extend("b", 2)
        assert env["a"] == 1
        assert "b" not in env
        assert dict(extended) == {"a": 1, "b": 2}
        assert len(extended) == 2

    def test_missing_name_raises_unbound_name(self):
        env = Environment({"a": 1})
        with pytest.raises(UnboundName) as exc_info:
            env["b"]
        assert exc_info.value.name == "b"
        assert exc_info.value.available == ("a",)
        assert "'b' is not bound" in str(exc_info.value)

    def test_unbound_name_is_a_key_error(self):
        env = Environment()
        assert env.get("missing", "fallback") == "fallback"
        with pytest.raises(KeyError):
            env["missing"]


class TestDomonad:
    def test_empty_steps_call_continuation_directly(self):
        seen = []

        def continuation(env):
            seen.append(dict(env))
            return Some("done")

        assert domonad(MAYBE, [], continuation) == Some("done")
        assert seen == [{}]

    def test_later_binding_shadows_earlier(self):
        result = domonad(
            MAYBE,
            [Bind("x", Some(1)), Bind("x", lambda env: Some(env["x"] + 10))],
            lambda env: MAYBE.pure(env["x"]),
        )
        assert result == Some(11)

    def test_tuple_steps_are_bind_steps(self):
        result = domonad(MAYBE, [("a", Some(2)), ("b", Some(3))], lambda env: Some(env["a"] * env["b"]))
        assert result == Some(6)

    def test_unbound_name_surfaces_from_expression(self):
        with pytest.raises(UnboundName):
            domonad(
                MAYBE,
                [Bind("a", Some(1)), Bind("b", lambda env: Some(env["missing"]))],
                lambda env: MAYBE.pure(env["b"]),
            )

    def test_let_binds_plain_value(self):
        result = domonad(
            MAYBE,
            [Bind("a", Some(4)), Let("square", lambda env: env["a"] ** 2)],
            lambda env: MAYBE.pure(env["square"]),
        )
        assert result == Some(16)

    def test_when_prunes_with_zero(self):
        program = [Bind("x", Some(3)), When(lambda env: env["x"] > 5)]
        assert domonad(MAYBE, program, lambda env: Some(env["x"])) is NOTHING

    def test_when_requires_monad_plus_before_running(self):
        evaluated = []

        def first(env):
            evaluated.append("first")
            return state_get()

        with pytest.raises(UnsupportedOperation):
            domonad(STATE, [Bind("s", first), When(lambda env: True)], lambda env: STATE.pure(env["s"]))
        assert evaluated == []

    def test_continuation_must_return_same_monad(self):
        with pytest.raises(TypeMismatch):
            domonad(MAYBE, [Bind("a", Some(1))], lambda env: env["a"])

    def test_step_expression_must_return_same_monad(self):
        with pytest.raises(TypeMismatch):
            domonad(MAYBE, [Bind("a", lambda env: [1])], lambda env: Some(env["a"]))

    def test_rejects_malformed_step(self):
        with pytest.raises(TypeError):
            domonad(MAYBE, ["not a step"], lambda env: Some(1))

    def test_state_values_are_not_called_as_expressions(self):
        program = domonad(STATE, [Bind("s", state_get())], lambda env: STATE.pure(env["s"] + 1))
        assert run_state(program, 1) == (2, 1)

    def test_independent_runs_do_not_share_environment(self):
        steps = [Bind("x", [1, 2])]
        first = domonad(LIST, steps, lambda env: [sorted(env)])
        second = domonad(LIST, steps, lambda env: [sorted(env)])
        assert first == second == [["x"], ["x"]]

    def test_logs_program_size(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="monadic.do"):
            domonad(MAYBE, [Bind("a", Some(1))], lambda env: Some(env["a"]))
        assert "domonad[Maybe]: 1 steps" in caplog.text
