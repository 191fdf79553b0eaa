"""Guard delegating to an arbitrary predicate."""

from __future__ import annotations

from typing import Any, Callable

from .guard import Guard


class CallableGuard(Guard):
    """Matches when ``predicate(event)`` is truthy."""

    def __init__(self, predicate: Callable[[Any], Any]) -> None:
        self.predicate = predicate

    def matches(self, event: Any) -> bool:
        return bool(self.predicate(event))

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__qualname__", repr(self.predicate))
        return f"CallableGuard({name})"


__all__ = ["CallableGuard"]
