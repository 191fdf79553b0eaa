"""Guard calling a named query on the event."""

from __future__ import annotations

from typing import Any

from .field_query import MISSING, query_attribute
from .guard import Guard


class PredicateGuard(Guard):
    """Matches when the event's zero-argument query ``name`` is truthy.

    ``PredicateGuard("is_chat")`` accepts events where ``event.is_chat()``
    (or the ``is_chat`` attribute or property) is truthy. Events without the
    attribute do not match.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def matches(self, event: Any) -> bool:
        value = query_attribute(event, self.name)
        if value is MISSING:
            return False
        return bool(value)

    def __repr__(self) -> str:
        return f"PredicateGuard({self.name!r})"


__all__ = ["PredicateGuard"]
