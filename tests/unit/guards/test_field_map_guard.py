import re
from types import SimpleNamespace

import pytest

from guarded_handlers.guards import MISSING, FieldMapGuard, FieldQuery, expected_matches


class Stanza:
    def __init__(self, attrs: dict) -> None:
        self.attrs = attrs
        self.lookups = []

    def attribute(self, name: str):
        self.lookups.append(name)
        return self.attrs.get(name)

    def __getitem__(self, key):
        return self.attrs[key]


@pytest.mark.parametrize(
    ("expected", "value", "result"),
    [
        (re.compile("exit"), "please exit now", True),
        (re.compile("^exit"), "please exit now", False),
        (re.compile("exit"), None, False),
        (re.compile("42"), 1420, True),
        (["result", "error"], "error", True),
        (("result", "error"), "get", False),
        (frozenset({"a", "b"}), "a", True),
        ([{"nested": 1}], {"nested": 1}, True),
        ("exit", "exit", True),
        (0, 0, True),
        (0, 1, False),
        (None, None, True),
        (None, MISSING, False),
        ("exit", MISSING, False),
    ],
)
def test_expected_matches(expected, value, result) -> None:
    assert expected_matches(expected, value) is result


def test_pattern_type_mismatch_is_not_a_match() -> None:
    assert expected_matches(re.compile("abc"), b"abc") is False


def test_parameterized_accessor_is_called_with_arguments() -> None:
    stanza = Stanza({"type": "chat", "to": "room"})
    guard = FieldMapGuard({("attribute", "type"): "chat", ("attribute", "to"): re.compile("^room")})

    assert guard.matches(stanza)
    assert stanza.lookups == ["type", "to"]


def test_parameterized_accessor_lookup_error_is_absent() -> None:
    guard = FieldMapGuard({("__getitem__", "missing"): None})

    assert not guard.matches(Stanza({}))


def test_parameterized_accessor_missing_method_is_absent() -> None:
    guard = FieldMapGuard({("attribute", "type"): "chat"})

    assert not guard.matches(SimpleNamespace())


def test_missing_field_does_not_match_none() -> None:
    guard = FieldMapGuard({"body": None})

    assert guard.matches(SimpleNamespace(body=None))
    assert not guard.matches(SimpleNamespace())


def test_pairs_are_evaluated_in_declaration_order(query_event) -> None:
    guard = FieldMapGuard({"c": 3, "a": 1, "b": 2})
    event = query_event(a=1, b=2, c=3)

    assert guard.matches(event)
    assert event.queried == ["c", "a", "b"]


def test_first_failing_pair_stops_evaluation(query_event) -> None:
    guard = FieldMapGuard({"a": 1, "b": 2, "c": 3})
    event = query_event(a=1, b=0, c=3)

    assert not guard.matches(event)
    assert event.queried == ["a", "b"]


def test_field_query_repr_and_parameterization() -> None:
    plain = FieldQuery.from_key("body")
    indexed = FieldQuery.from_key(("__getitem__", "foo"))

    assert not plain.parameterized
    assert indexed.parameterized
    assert indexed.args == ("foo",)
    assert repr(indexed) == "FieldQuery('__getitem__', ('foo',))"
