"""Tests for clause and expression evaluation."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from criteria import Criteria, FixedClock, MappingEnvLookup
from criteria.exceptions import (
    ArgumentError,
    InvalidClauseError,
    MissingKeyError,
    UnknownPredicateError,
)

from .conftest import SATURDAY, WEDNESDAY


def test_always_and_never(make_criteria) -> None:
    criteria = make_criteria()
    assert criteria.evaluate_clause("always") is True
    assert criteria.evaluate_clause("never") is False


@pytest.mark.parametrize("clause", ["random", "sometimes"])
def test_random_clauses_return_bool(make_criteria, clause: str) -> None:
    criteria = make_criteria()
    for _ in range(20):
        assert isinstance(criteria.evaluate_clause(clause), bool)


def test_seeded_rng_is_reproducible(make_criteria) -> None:
    first = [make_criteria(seed=7).evaluate("random") for _ in range(5)]
    second = [make_criteria(seed=7).evaluate("random") for _ in range(5)]
    assert first == second


@pytest.mark.parametrize(
    ("clause", "expected"),
    [
        ("eq:x,10", True),
        ("eq:x,20", False),
        ("neq:x,9", True),
        ("lt:x,20", True),
        ("lte:x,10", True),
        ("gt:x,5", True),
        ("gte:x,11", False),
        ("exists:x", True),
        ("exists:z", False),
    ],
)
def test_context_clauses(make_criteria, clause: str, expected: bool) -> None:
    assert make_criteria({"x": 10, "y": 20}).evaluate_clause(clause) is expected


@pytest.mark.parametrize(
    ("clause", "expected"),
    [
        ("days:3", True),
        ("days:wednesday", True),
        ("days:monday,tuesday,wednesday", True),
        ("days:friday", False),
        ("months:3", True),
        ("months:march", True),
        ("months:mar,apr,may", True),
        ("months:dec", False),
        ("weekday", True),
        ("weekend", False),
    ],
)
def test_date_clauses_on_wednesday(make_criteria, clause: str, expected: bool) -> None:
    assert make_criteria(today=WEDNESDAY).evaluate_clause(clause) is expected


def test_weekend_clauses_on_saturday(make_criteria) -> None:
    criteria = make_criteria(today=SATURDAY)
    assert criteria.evaluate_clause("weekend") is True
    assert criteria.evaluate_clause("weekday") is False


def test_unknown_predicate(make_criteria) -> None:
    with pytest.raises(InvalidClauseError) as exc_info:
        make_criteria().evaluate_clause("foo:bar")
    assert isinstance(exc_info.value.cause, UnknownPredicateError)
    assert exc_info.value.cause.name == "foo"
    assert exc_info.value.clause == "foo:bar"


@pytest.mark.parametrize("clause", ["Always", "", "ALWAYS", "eq "])
def test_unknown_or_empty_names(make_criteria, clause: str) -> None:
    with pytest.raises(InvalidClauseError) as exc_info:
        make_criteria().evaluate_clause(clause)
    assert isinstance(exc_info.value.cause, (UnknownPredicateError, ArgumentError))


def test_missing_key_is_wrapped(make_criteria) -> None:
    with pytest.raises(InvalidClauseError, match="Key 'z' not provided") as exc_info:
        make_criteria({"x": 10, "y": 20}).evaluate_clause("eq:z,1")
    assert isinstance(exc_info.value.cause, MissingKeyError)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_argument_error_is_wrapped(make_criteria) -> None:
    with pytest.raises(InvalidClauseError) as exc_info:
        make_criteria().evaluate_clause("always:1")
    assert isinstance(exc_info.value.cause, ArgumentError)


def test_empty_argument_list_means_no_arguments(make_criteria) -> None:
    assert make_criteria().evaluate_clause("always:") is True


def test_arguments_are_trimmed(make_criteria) -> None:
    assert make_criteria({"x": 10}).evaluate_clause("eq: x , 10 ") is True


def test_and_combinator(make_criteria) -> None:
    criteria = make_criteria({"x": 12, "y": 10})
    assert criteria.evaluate("days:monday,tuesday,wednesday&&gte:x,10") is True
    assert criteria.evaluate("days:monday,tuesday,wednesday&&gte:y,20") is False


def test_or_combinator(make_criteria) -> None:
    criteria = make_criteria({"x": 12, "y": 10})
    assert criteria.evaluate("days:monday,tuesday,wednesday||gte:x,10") is True
    assert criteria.evaluate("days:monday,tuesday,wednesday||gte:y,20") is True
    assert criteria.evaluate("days:thursday,friday||gte:x,20") is False
    assert criteria.evaluate("days:thursday,friday||gte:x,10") is True


def test_and_short_circuits_on_false(make_criteria) -> None:
    assert make_criteria({"x": 10}).evaluate("never&&eq:z,1") is False


def test_or_short_circuits_on_true(make_criteria) -> None:
    assert make_criteria({"x": 10}).evaluate("always||eq:z,1") is True


def test_right_side_errors_when_reached(make_criteria) -> None:
    with pytest.raises(InvalidClauseError, match="eq:z,1"):
        make_criteria({"x": 10}).evaluate("always&&eq:z,1")


def test_left_error_propagates_for_or(make_criteria) -> None:
    with pytest.raises(InvalidClauseError) as exc_info:
        make_criteria().evaluate("eq:z,1||always")
    assert isinstance(exc_info.value.cause, MissingKeyError)


def test_short_circuit_skips_random_side_effects(make_criteria) -> None:
    criteria = make_criteria(seed=3)
    state = criteria.context.rng.getstate()
    criteria.evaluate("never&&random")
    criteria.evaluate("always||random")
    assert criteria.context.rng.getstate() == state


def test_second_combinator_is_not_chained(make_criteria) -> None:
    with pytest.raises(InvalidClauseError):
        make_criteria().evaluate("always&&always&&always")


def test_first_combinator_wins(make_criteria) -> None:
    # Splits at '||'; the right operand 'never&&always' is not a valid clause.
    criteria = make_criteria()
    assert criteria.evaluate("always||never&&always") is True
    with pytest.raises(InvalidClauseError):
        criteria.evaluate("never||never&&always")


@pytest.mark.parametrize("clause", ["always", "never", "eq:x,10", "gte:x,11", "days:wed", "exists:nope"])
def test_evaluate_matches_evaluate_clause_without_combinator(make_criteria, clause: str) -> None:
    criteria = make_criteria({"x": 10})
    assert criteria.evaluate(clause) == criteria.evaluate_clause(clause)


@pytest.mark.parametrize(
    ("clause", "expected"),
    [
        ("env:APP_ENV,production", True),
        ("env:APP_ENV,staging,production", True),
        ("env:APP_ENV,staging", False),
        ("env:APP_ENV", False),
    ],
)
def test_env_clauses(make_criteria, clause: str, expected: bool) -> None:
    assert make_criteria(env={"APP_ENV": "production"}).evaluate_clause(clause) is expected


def test_env_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRITERIATESTENV", "foobar")
    assert Criteria().evaluate_clause("env:CRITERIATESTENV,foobar") is True


def test_call_invokes_predicate_directly(make_criteria) -> None:
    criteria = make_criteria({"x": 10})
    assert criteria.call("days", "wednesday", "thursday") is True
    assert criteria.call("gte", "x", "10") is True
    with pytest.raises(UnknownPredicateError):
        criteria.call("nope")
    with pytest.raises(MissingKeyError):
        criteria.call("eq", "z", "1")


def test_context_snapshot_ignores_later_mutation(make_criteria) -> None:
    data = {"x": 10}
    criteria = make_criteria(data)
    data["x"] = 99
    data["z"] = 1
    assert criteria.evaluate("eq:x,10") is True
    assert criteria.evaluate("exists:z") is False


class SteppingClock:
    """Clock that advances one day each time it is queried."""

    def __init__(self, start: date) -> None:
        self.current = start
        self.calls = 0

    def today(self) -> date:
        value = self.current
        self.current += timedelta(days=1)
        self.calls += 1
        return value


def test_clock_is_read_once_per_evaluator() -> None:
    clock = SteppingClock(WEDNESDAY)
    first = Criteria(clock=clock, env=MappingEnvLookup({}))
    second = Criteria(clock=clock, env=MappingEnvLookup({}))

    assert clock.calls == 2
    for _ in range(3):
        assert first.evaluate("days:wednesday&&weekday") is True
        assert first.evaluate("days:thursday") is False
        assert second.evaluate("days:thursday&&weekday") is True
        assert second.evaluate("days:wednesday") is False
    assert clock.calls == 2


def test_fixed_clock_pins_today() -> None:
    criteria = Criteria(clock=FixedClock(SATURDAY))
    assert criteria.context.today == SATURDAY
    assert criteria.evaluate("weekend&&months:april") is True
