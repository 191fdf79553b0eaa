"""Dispatch loop running guarded handlers in priority order."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Optional

from .dispatch_signal import DispatchSignal
from .handler_registry import HandlerRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """Walks the candidates of a category and runs the matching handlers.

    Each candidate's guard is evaluated in turn. A matching handler's body
    runs and its return value decides what happens next: ``HALT`` ends the
    dispatch, ``PASS`` or anything else moves on to the next candidate.
    Exceptions raised by a body are not caught and end the dispatch.
    """

    def __init__(self, registry: HandlerRegistry) -> None:
        self.registry = registry

    def trigger(self, category: Optional[Hashable], event: Any) -> bool:
        """Dispatch ``event`` to the handlers of ``category``.

        The candidates are a snapshot taken when the dispatch starts, so a
        handler unregistered by an earlier body still runs in this dispatch.
        One-shot handlers are the exception: they are claimed before running,
        and one that has already been removed is skipped.

        Args:
            category: Category of the event.
            event: Event passed to guards and handler bodies.

        Returns:
            ``True`` if at least one handler body ran, ``False`` otherwise.
        """

        candidates = self.registry.ordered_candidates(category)
        if not candidates:
            logger.debug("No handlers registered for category %r", category)
            return False

        handled = False
        for entry in candidates:
            if not entry.guard.matches(event):
                continue

            if entry.one_shot and not self.registry.claim(entry):
                logger.debug("One-shot handler %s (id=%d) already fired", entry.name, entry.id)
                continue

            handled = True
            signal = DispatchSignal.from_result(entry.body(event))

            if signal is DispatchSignal.HALT:
                logger.debug("Handler %s (id=%d) halted dispatch of %r", entry.name, entry.id, category)
                break
            if signal is DispatchSignal.PASS:
                logger.debug("Handler %s (id=%d) passed on %r", entry.name, entry.id, category)

        return handled


__all__ = ["Dispatcher"]
