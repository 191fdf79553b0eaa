"""Registry record describing one registered handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional

from guarded_handlers.guards import Guard

# Category under which handlers for every category are registered.
GLOBAL_CATEGORY: Optional[Hashable] = None


@dataclass(frozen=True)
class HandlerEntry:
    """A handler registered under a category.

    Attributes:
        id: Identifier returned to the caller for later removal.
        category: Category the entry belongs to, or :data:`GLOBAL_CATEGORY`.
        guard: Classified guard restricting the accepted events.
        priority: Signed priority; higher runs earlier.
        sequence: Registration counter breaking priority ties.
        body: Callable invoked with the event.
        one_shot: Whether the entry is removed once it fires.
        name: Label used in log messages.
    """

    id: int
    category: Optional[Hashable]
    guard: Guard
    priority: int
    sequence: int
    body: Callable[[Any], Any] = field(repr=False)
    one_shot: bool = False
    name: str = ""

    @property
    def is_global(self) -> bool:
        return self.category is GLOBAL_CATEGORY

    @property
    def sort_key(self) -> tuple[int, int]:
        return (-self.priority, self.sequence)


__all__ = ["GLOBAL_CATEGORY", "HandlerEntry"]
