"""Per-category storage of registered handlers."""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Any, Callable, Hashable, Optional

from guarded_handlers.core.exceptions import HandlerRegistrationError
from guarded_handlers.guards import ALWAYS, Guard

from .handler_entry import GLOBAL_CATEGORY, HandlerEntry

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Ordered handler buckets keyed by category plus one global bucket.

    Every mutation and every candidate snapshot runs under a single lock. The
    lock is never held while guards or handler bodies execute, so bodies may
    register and unregister handlers themselves.
    """

    def __init__(self) -> None:
        self._buckets: dict[Optional[Hashable], list[HandlerEntry]] = {}
        self._entries: dict[int, HandlerEntry] = {}
        self._ids = itertools.count(1)
        self._sequence = itertools.count()
        self._lock = threading.RLock()

    def register(
        self,
        category: Optional[Hashable],
        body: Callable[[Any], Any],
        guard: Guard = ALWAYS,
        *,
        priority: int = 0,
        one_shot: bool = False,
    ) -> HandlerEntry:
        """Append a handler to the bucket of ``category``.

        Args:
            category: Category to register under; :data:`GLOBAL_CATEGORY` for
                every category.
            body: Callable invoked with matching events.
            guard: Guard already classified by
                :func:`~guarded_handlers.guards.build_guard`.
            priority: Signed priority, higher runs earlier.
            one_shot: Remove the entry after it fires once.

        Returns:
            The stored entry.

        Raises:
            HandlerRegistrationError: Raised when ``body`` is not callable or
                the priority is not an integer.
        """

        if not callable(body):
            raise HandlerRegistrationError(f"Handler must be callable, got {type(body)}")
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise HandlerRegistrationError(f"Handler priority must be an int, got {priority!r}")

        with self._lock:
            entry = HandlerEntry(
                id=next(self._ids),
                category=category,
                guard=guard,
                priority=int(priority),
                sequence=next(self._sequence),
                body=body,
                one_shot=one_shot,
                name=getattr(body, "__qualname__", type(body).__name__),
            )
            self._buckets.setdefault(category, []).append(entry)
            self._entries[entry.id] = entry

        logger.debug(
            "Registered handler %s (id=%d) for category %r with priority %d%s",
            entry.name,
            entry.id,
            category,
            entry.priority,
            " [one-shot]" if one_shot else "",
        )
        return entry

    def unregister(self, category: Optional[Hashable], handler_id: int) -> bool:
        """Remove the handler ``handler_id`` from the bucket of ``category``.

        Returns:
            Whether an entry was removed. Unknown ids are not an error.
        """

        with self._lock:
            entry = self._entries.get(handler_id)
            if entry is None or entry.category != category:
                return False
            self._remove(entry)

        logger.debug("Unregistered handler %s (id=%d) from category %r", entry.name, handler_id, category)
        return True

    def claim(self, entry: HandlerEntry) -> bool:
        """Remove ``entry`` if it is still registered.

        Only one caller can claim a given entry; one-shot handlers are claimed
        before they fire so that concurrent dispatches never run them twice.
        """

        with self._lock:
            if self._entries.get(entry.id) is not entry:
                return False
            self._remove(entry)
        return True

    def clear(self, category: Optional[Hashable] = GLOBAL_CATEGORY) -> int:
        """Drop every handler registered under ``category``.

        Returns:
            The number of entries removed.
        """

        with self._lock:
            bucket = self._buckets.pop(category, [])
            for entry in bucket:
                del self._entries[entry.id]

        if bucket:
            logger.debug("Cleared %d handlers from category %r", len(bucket), category)
        return len(bucket)

    def clear_all(self) -> int:
        with self._lock:
            removed = len(self._entries)
            self._buckets.clear()
            self._entries.clear()
        return removed

    def ordered_candidates(self, category: Optional[Hashable]) -> list[HandlerEntry]:
        """Return the handlers to consider for an event of ``category``.

        The category bucket and the global bucket are merged and sorted by
        ``(priority desc, sequence asc)``. The list is a snapshot; later
        registry changes do not affect it.
        """

        with self._lock:
            candidates = list(self._buckets.get(category, ()))
            if category is not GLOBAL_CATEGORY:
                candidates.extend(self._buckets.get(GLOBAL_CATEGORY, ()))
        return sorted(candidates, key=lambda entry: entry.sort_key)

    def get(self, handler_id: int) -> Optional[HandlerEntry]:
        with self._lock:
            return self._entries.get(handler_id)

    def handler_count(self, category: Optional[Hashable] = GLOBAL_CATEGORY) -> int:
        """Count the handlers registered directly under ``category``."""

        with self._lock:
            return len(self._buckets.get(category, ()))

    def categories(self) -> frozenset:
        """Return the categories that currently hold handlers."""

        with self._lock:
            return frozenset(self._buckets)

    def _remove(self, entry: HandlerEntry) -> None:
        del self._entries[entry.id]
        bucket = self._buckets[entry.category]
        bucket.remove(entry)
        if not bucket:
            del self._buckets[entry.category]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, handler_id: object) -> bool:
        with self._lock:
            return handler_id in self._entries


__all__ = ["HandlerRegistry"]
