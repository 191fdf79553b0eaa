import re
from types import SimpleNamespace
from typing import Protocol, runtime_checkable

import pytest

from guarded_handlers.core.exceptions import InvalidGuardError
from guarded_handlers.guards import (
    ALWAYS,
    AllOfGuard,
    AlternativesGuard,
    CallableGuard,
    FieldMapGuard,
    PredicateGuard,
    TypeGuard,
    build_guard,
    combine_guards,
)


@runtime_checkable
class HasBody(Protocol):
    body: str


class Message:
    def __init__(self, body: str = "", chat: bool = False) -> None:
        self.body = body
        self._chat = chat

    def is_chat(self) -> bool:
        return self._chat

    @property
    def urgent(self) -> bool:
        return self.body.endswith("!")


@pytest.mark.parametrize(
    ("spec", "expected_type"),
    [
        (None, type(ALWAYS)),
        (Message, TypeGuard),
        ("is_chat", PredicateGuard),
        ({"body": "hi"}, FieldMapGuard),
        ([{"body": "hi"}, "is_chat"], AlternativesGuard),
        ((Message, "is_chat"), AlternativesGuard),
        (lambda event: True, CallableGuard),
    ],
)
def test_build_guard_classifies_shapes(spec, expected_type) -> None:
    assert isinstance(build_guard(spec), expected_type)


def test_build_guard_returns_guard_objects_unchanged() -> None:
    guard = PredicateGuard("is_chat")
    assert build_guard(guard) is guard


@pytest.mark.parametrize("spec", [0, 1.5, True, {"a", "b"}, b"bytes", "", re.compile("x"), object()])
def test_build_guard_rejects_unknown_shapes(spec) -> None:
    with pytest.raises(InvalidGuardError) as excinfo:
        build_guard(spec)
    assert excinfo.value.error_code == "INVALID_GUARD"


def test_nested_alternatives_are_validated_at_build_time() -> None:
    with pytest.raises(InvalidGuardError) as excinfo:
        build_guard([{"body": "hi"}, 42])
    assert excinfo.value.guard == 42


@pytest.mark.parametrize("key", [1, (), ("",), (1, "foo"), ""])
def test_field_map_rejects_bad_keys(key) -> None:
    with pytest.raises(InvalidGuardError):
        build_guard({key: "value"})


def test_type_guard_accepts_runtime_protocols() -> None:
    guard = build_guard(HasBody)

    assert guard.matches(Message("hello"))
    assert guard.matches(SimpleNamespace(body="x"))
    assert not guard.matches(object())


def test_predicate_guard_calls_methods_and_reads_properties() -> None:
    assert build_guard("is_chat").matches(Message(chat=True))
    assert not build_guard("is_chat").matches(Message(chat=False))
    assert build_guard("urgent").matches(Message("now!"))
    assert not build_guard("urgent").matches(Message("later"))


def test_predicate_guard_missing_attribute_does_not_match() -> None:
    assert not build_guard("is_chat").matches(object())


def test_empty_alternatives_match_nothing() -> None:
    assert not build_guard([]).matches(Message())


def test_combine_guards() -> None:
    assert combine_guards() is ALWAYS
    assert isinstance(combine_guards("is_chat"), PredicateGuard)

    combined = combine_guards(Message, "is_chat")
    assert isinstance(combined, AllOfGuard)
    assert combined.matches(Message(chat=True))
    assert not combined.matches(Message(chat=False))
    assert not combined.matches(SimpleNamespace(is_chat=lambda: True))


def test_callable_guard_uses_truthiness() -> None:
    guard = build_guard(lambda event: event.body)

    assert guard.matches(Message("text"))
    assert not guard.matches(Message(""))
