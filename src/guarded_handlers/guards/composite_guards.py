"""Guards combining other guards."""

from __future__ import annotations

from typing import Any, Iterable

from .guard import Guard


class AlternativesGuard(Guard):
    """ORs sub-guards left to right, stopping at the first that matches.

    An empty set of alternatives matches nothing.
    """

    def __init__(self, guards: Iterable[Guard]) -> None:
        self.guards = tuple(guards)

    def matches(self, event: Any) -> bool:
        return any(guard.matches(event) for guard in self.guards)

    def __repr__(self) -> str:
        return f"AlternativesGuard({list(self.guards)!r})"


class AllOfGuard(Guard):
    """ANDs sub-guards left to right, stopping at the first that fails."""

    def __init__(self, guards: Iterable[Guard]) -> None:
        self.guards = tuple(guards)

    def matches(self, event: Any) -> bool:
        return all(guard.matches(event) for guard in self.guards)

    def __repr__(self) -> str:
        return f"AllOfGuard({list(self.guards)!r})"


__all__ = ["AllOfGuard", "AlternativesGuard"]
