import json
import re

import pytest

from guarded_handlers.config import Settings
from guarded_handlers.core.exceptions import ConfigurationError, InvalidEventError, RouteDefinitionError
from guarded_handlers.routing import RecordEvent, RouteTable, Router, compile_guard_spec

ROUTES_YAML = """
routes:
  - name: shutdown
    category: message
    guard: {body: {pattern: "^exit"}}
    priority: 10
    halt: true
  - name: first-chat
    category: message
    guard: {type: chat}
    once: true
  - name: errors
    category: message
    guard: {type: [error, fault]}
  - name: tagged
    category: message
    guard: {"[tag]": urgent}
  - name: audit
"""


@pytest.fixture
def router(tmp_path) -> Router:
    path = tmp_path / "routes.yaml"
    path.write_text(ROUTES_YAML, encoding="utf-8")
    return Router(RouteTable.from_file(path), Settings())


def test_compile_guard_spec_translates_notation() -> None:
    compiled = compile_guard_spec(
        "r",
        [{"body": {"pattern": "exit"}, "[id]": 3}, {"type": {"any_of": ["a", "b"]}}, "is_chat", None],
    )

    first, second, predicate, nothing = compiled
    assert isinstance(first["body"], re.Pattern)
    assert first[("__getitem__", "id")] == 3
    assert second == {"type": ("a", "b")}
    assert predicate == "is_chat"
    assert nothing is None


@pytest.mark.parametrize(
    "spec",
    [
        42,
        "",
        {"body": {"pattern": "("}},
        {"body": {"regex": "x"}},
        {"body": object()},
        {"[]": "x"},
        {1: "x"},
    ],
)
def test_compile_guard_spec_rejects_bad_notation(spec) -> None:
    with pytest.raises(RouteDefinitionError):
        compile_guard_spec("bad", spec)


def test_record_event_exposes_keys_as_attributes() -> None:
    event = RecordEvent({"body": "hi", "tag": "x"})

    assert event.body == "hi"
    assert event["tag"] == "x"
    assert event.get("missing") is None
    assert "body" in event
    with pytest.raises(AttributeError):
        event.missing
    with pytest.raises(AttributeError):
        event.body = "changed"


def test_halting_route_stops_dispatch(router) -> None:
    result = router.route({"category": "message", "body": "exit now", "type": "chat"})

    assert result.fired == ["shutdown"]
    assert result.handled


def test_one_shot_route_fires_once(router) -> None:
    first = router.route({"category": "message", "type": "chat"})
    second = router.route({"category": "message", "type": "chat"})

    assert first.fired == ["first-chat", "audit"]
    assert second.fired == ["audit"]


def test_alternatives_and_item_access(router) -> None:
    result = router.route({"category": "message", "type": "fault", "tag": "urgent"})

    assert result.fired == ["errors", "tagged", "audit"]


def test_global_route_sees_other_categories(router) -> None:
    result = router.route({"category": "presence"})

    assert result.category == "presence"
    assert result.fired == ["audit"]


def test_category_field_from_settings(tmp_path) -> None:
    path = tmp_path / "routes.json"
    path.write_text('{"routes": [{"name": "only", "category": "ping"}]}', encoding="utf-8")
    router = Router(RouteTable.from_file(path), Settings(category_field="kind"))

    assert router.route({"kind": "ping"}).fired == ["only"]
    assert router.route({"category": "ping"}).fired == []
    assert router.route({}, category="ping").fired == ["only"]


def test_default_halt_from_settings() -> None:
    table = RouteTable.model_validate({"routes": [{"name": "a"}, {"name": "b"}, {"name": "c", "halt": False}]})

    results = Router(table, Settings(halt_on_first_match=True)).route_many([{"category": "x"}])
    assert results[0].fired == ["a"]


@pytest.mark.parametrize(
    "data",
    [
        {"routes": [{"name": "a"}, {"name": "a"}]},
        {"routes": [{"name": "a", "once": True, "priority": 5}]},
        {"routes": [{"name": ""}]},
        {"routes": [{"name": "a", "unknown": 1}]},
        {"routes": "not-a-list"},
    ],
)
def test_invalid_tables_are_rejected(tmp_path, data) -> None:
    path = tmp_path / "routes.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        RouteTable.from_file(path)


def test_bad_guard_surfaces_route_name() -> None:
    table = RouteTable.model_validate({"routes": [{"name": "broken", "guard": 7}]})

    with pytest.raises(RouteDefinitionError, match="broken"):
        Router(table, Settings())


@pytest.mark.parametrize("category", [["a", "b"], {"x": 1}])
def test_non_scalar_category_is_rejected(router, category) -> None:
    with pytest.raises(InvalidEventError, match="category"):
        router.route({"category": category})


def test_numeric_category_is_accepted() -> None:
    table = RouteTable.model_validate({"routes": [{"name": "audit"}]})

    assert Router(table, Settings()).route({"category": 7}).fired == ["audit"]


def test_route_halts_falls_back_to_default() -> None:
    table = RouteTable.model_validate({"routes": [{"name": "a"}, {"name": "b", "halt": False}]})
    first, second = table.routes

    assert first.halts(True) is True
    assert first.halts(False) is False
    assert second.halts(True) is False
