"""Guard matching events by runtime type."""

from __future__ import annotations

from typing import Any

from .guard import Guard


class TypeGuard(Guard):
    """Matches events that are instances of a class.

    Abstract base classes and ``typing.runtime_checkable`` protocols work as
    capability tags: an event matches when ``isinstance`` accepts it, whether
    through inheritance, ABC registration or structural conformance.
    """

    def __init__(self, event_type: type) -> None:
        self.event_type = event_type

    def matches(self, event: Any) -> bool:
        return isinstance(event, self.event_type)

    def __repr__(self) -> str:
        return f"TypeGuard({self.event_type.__qualname__})"


__all__ = ["TypeGuard"]
