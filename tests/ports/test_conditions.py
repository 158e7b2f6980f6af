from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

import pytest

from dataport.errors import MalformedConditionError
from dataport.ports.conditions import (
    MalformedCondition,
    PatternCondition,
    PredicateCondition,
    to_condition,
)
from dataport.ports.port import Port


def test_callable_becomes_predicate() -> None:
    cond = to_condition(lambda d: d > 1)
    assert isinstance(cond, PredicateCondition)
    assert cond.kind == "predicate"
    assert cond.matches(2)
    assert not cond.matches(1)


def test_mapping_becomes_pattern() -> None:
    cond = to_condition(MappingProxyType({"a": 1}))
    assert isinstance(cond, PatternCondition)
    assert cond.pattern == {"a": 1}


@pytest.mark.parametrize("raw", [None, 3, "type", ["a"], ("a", 1)])
def test_other_shapes_become_malformed(raw) -> None:
    cond = to_condition(raw)
    assert isinstance(cond, MalformedCondition)
    assert cond.raw == raw


def test_built_conditions_pass_through() -> None:
    cond = PatternCondition(pattern={"a": 1})
    assert to_condition(cond) is cond


def test_pattern_ignores_extra_fields() -> None:
    cond = to_condition({"a": 1, "b": "x"})
    assert cond.matches({"a": 1, "b": "x", "c": 99})
    assert not cond.matches({"a": 1, "b": "y"})


def test_pattern_uses_loose_equality() -> None:
    cond = to_condition({"a": "1"})
    assert cond.matches({"a": 1})
    assert not cond.matches({"a": 2})


def test_empty_pattern_always_passes() -> None:
    cond = to_condition({})
    assert cond.matches({"anything": True})
    assert cond.matches(None)


def test_pattern_none_matches_missing_field() -> None:
    cond = to_condition({"a": None})
    assert cond.matches({"b": 1})
    assert not cond.matches({"a": 0})


def test_pattern_reads_object_attributes() -> None:
    @dataclass
    class Message:
        kind: str
        size: int

    cond = to_condition({"kind": "ping", "size": "3"})
    assert cond.matches(Message(kind="ping", size=3))
    assert not cond.matches(Message(kind="pong", size=3))


def test_predicate_truthiness() -> None:
    assert not to_condition(lambda d: "").matches({})
    assert not to_condition(lambda d: 0).matches({})
    assert to_condition(lambda d: []).matches({})
    assert to_condition(lambda d: "yes").matches({})


def test_malformed_condition_never_passes_by_default(
    caplog: pytest.LogCaptureFixture,
) -> None:
    port = Port(name="lenient")
    port.set(42, lambda d: "changed")
    port.create_route("r", lambda data, ctx: data)

    with caplog.at_level("WARNING", logger="dataport.ports.conditions"):
        assert port.route("r", "same") == "same"

    assert "malformed condition" in caplog.text


def test_malformed_condition_raises_in_strict_mode() -> None:
    port = Port(name="strict", strict_conditions=True)
    port.set("not-a-condition", lambda d: "changed")
    port.create_route("r", lambda data, ctx: data)

    with pytest.raises(MalformedConditionError) as excinfo:
        port.route("r", {})

    assert excinfo.value.raw == "not-a-condition"


def test_pattern_with_non_string_key_against_object() -> None:
    @dataclass
    class Message:
        a: int

    cond = to_condition({0: "x"})
    assert not cond.matches(Message(a=1))
    assert cond.matches({0: "x"})
