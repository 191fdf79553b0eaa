"""Host-facing component bundling the handler registry and the dispatcher."""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Optional, TypeVar

from guarded_handlers.guards import combine_guards

from .dispatcher import Dispatcher
from .handler_entry import GLOBAL_CATEGORY
from .handler_registry import HandlerRegistry

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class GuardedHandlers:
    """Guarded event routing for a host object.

    Hosts hold an instance and forward events to :meth:`trigger_handler`::

        class Connection:
            def __init__(self) -> None:
                self.handlers = GuardedHandlers()

            def receive(self, message):
                return self.handlers.trigger_handler("message", message)

    Guards may be passed positionally to every ``register_*`` method; several
    guards must all match. See :mod:`guarded_handlers.guards.factory` for the
    accepted shapes. An invalid guard raises
    :class:`~guarded_handlers.core.exceptions.InvalidGuardError` and nothing
    is registered.
    """

    def __init__(self, registry: Optional[HandlerRegistry] = None) -> None:
        self.registry = registry if registry is not None else HandlerRegistry()
        self.dispatcher = Dispatcher(self.registry)

    def register_handler(self, category: Optional[Hashable], handler: Callable[[Any], Any], *guards: Any) -> int:
        """Register ``handler`` for ``category`` at the default priority.

        Args:
            category: Event category, or ``None`` for every category.
            handler: Callable receiving the event. It may return
                :data:`~guarded_handlers.handlers.dispatch_signal.HALT` or
                :data:`~guarded_handlers.handlers.dispatch_signal.PASS`.
            *guards: Guard specifications restricting accepted events.

        Returns:
            Identifier for :meth:`unregister_handler`.
        """

        return self._register(category, handler, guards)

    def register_global_handler(self, handler: Callable[[Any], Any], *guards: Any) -> int:
        """Register ``handler`` for events of every category."""

        return self._register(GLOBAL_CATEGORY, handler, guards)

    def register_handler_with_priority(
        self,
        category: Optional[Hashable],
        priority: int,
        handler: Callable[[Any], Any],
        *guards: Any,
    ) -> int:
        """Register ``handler`` with an explicit priority; higher runs earlier."""

        return self._register(category, handler, guards, priority=priority)

    def register_tmp_handler(self, category: Optional[Hashable], handler: Callable[[Any], Any], *guards: Any) -> int:
        """Register a one-shot handler.

        The handler is removed as soon as it fires. Events its guards reject
        leave it registered.
        """

        return self._register(category, handler, guards, one_shot=True)

    def on(self, category: Optional[Hashable], *guards: Any, priority: int = 0) -> Callable[[F], F]:
        """Decorator form of :meth:`register_handler_with_priority`.

        The registered id is stored on the function as ``handler_id``.
        """

        def decorator(func: F) -> F:
            func.handler_id = self._register(category, func, guards, priority=priority)  # type: ignore[attr-defined]
            return func

        return decorator

    def once(self, category: Optional[Hashable], *guards: Any) -> Callable[[F], F]:
        """Decorator form of :meth:`register_tmp_handler`."""

        def decorator(func: F) -> F:
            func.handler_id = self._register(category, func, guards, one_shot=True)  # type: ignore[attr-defined]
            return func

        return decorator

    def unregister_handler(self, category: Optional[Hashable], handler_id: int) -> bool:
        """Remove a handler; unknown ids are ignored."""

        return self.registry.unregister(category, handler_id)

    def clear_handlers(self, category: Optional[Hashable] = GLOBAL_CATEGORY) -> int:
        """Remove all handlers registered under ``category``.

        Handlers registered for every category are only removed when
        ``category`` is omitted.
        """

        return self.registry.clear(category)

    def clear_all_handlers(self) -> int:
        return self.registry.clear_all()

    def trigger_handler(self, category: Optional[Hashable], event: Any) -> bool:
        """Dispatch ``event`` and report whether any handler ran."""

        return self.dispatcher.trigger(category, event)

    def handler_count(self, category: Optional[Hashable] = GLOBAL_CATEGORY) -> int:
        return self.registry.handler_count(category)

    def _register(
        self,
        category: Optional[Hashable],
        handler: Callable[[Any], Any],
        guards: tuple,
        *,
        priority: int = 0,
        one_shot: bool = False,
    ) -> int:
        guard = combine_guards(*guards)
        entry = self.registry.register(category, handler, guard, priority=priority, one_shot=one_shot)
        return entry.id


__all__ = ["GuardedHandlers"]
