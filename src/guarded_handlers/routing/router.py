"""Router turning a route table into guarded handlers."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Optional

from guarded_handlers.config.settings import Settings, get_settings
from guarded_handlers.core.exceptions import InvalidEventError, InvalidGuardError, RouteDefinitionError
from guarded_handlers.handlers import HALT, GuardedHandlers

from .guard_spec import compile_guard_spec
from .record_event import RecordEvent
from .route_table import RouteSpec, RouteTable

logger = logging.getLogger(__name__)

# Routes fired by the dispatch running on the current thread.
ROUTE_STATE = threading.local()

# JSON scalars usable as a category.
_CATEGORY_TYPES = (str, int, float, bool)


@dataclass
class RouteResult:
    """Outcome of routing one event."""

    category: Optional[str]
    event: RecordEvent
    fired: List[str] = field(default_factory=list)

    @property
    def handled(self) -> bool:
        return bool(self.fired)


class Router:
    """Registers every route of a table on a :class:`GuardedHandlers`.

    Args:
        table: Validated route table.
        settings: Settings supplying the category field and the default halt
            behaviour; the process settings when omitted.
    """

    def __init__(self, table: RouteTable, settings: Optional[Settings] = None) -> None:
        self.table = table
        self.settings = settings or get_settings()
        self.handlers = GuardedHandlers()
        self.route_ids: dict[str, int] = {}

        for route in table.routes:
            self.route_ids[route.name] = self._register(route)

        logger.debug("Router ready with %d routes", len(self.route_ids))

    def _register(self, route: RouteSpec) -> int:
        guard = compile_guard_spec(route.name, route.guard)
        body = self._make_body(route.name, route.halts(self.settings.halt_on_first_match))
        try:
            if route.once:
                return self.handlers.register_tmp_handler(route.category, body, guard)
            return self.handlers.register_handler_with_priority(route.category, route.priority, body, guard)
        except InvalidGuardError as error:
            raise RouteDefinitionError(route.name, error.message) from error

    @staticmethod
    def _make_body(name: str, halt: bool) -> Callable[[Any], Any]:
        def fire(event: Any) -> Any:
            ROUTE_STATE.fired.append(name)
            return HALT if halt else None

        fire.__qualname__ = f"route[{name}]"
        return fire

    def route(self, record: Mapping[str, Any], category: Optional[str] = None) -> RouteResult:
        """Dispatch one decoded event.

        Args:
            record: Decoded JSON object.
            category: Category override; read from the settings'
                ``category_field`` when omitted.

        Raises:
            InvalidEventError: Raised when the category is not a string or
                number.
        """

        event = RecordEvent(record)
        if category is None:
            category = event.get(self.settings.category_field)
        if category is not None and not isinstance(category, _CATEGORY_TYPES):
            raise InvalidEventError(
                f"Event category must be a string or number, got {type(category).__name__}",
                context={"category": repr(category)},
            )

        result = RouteResult(category=category, event=event)
        previous = getattr(ROUTE_STATE, "fired", None)
        ROUTE_STATE.fired = result.fired
        try:
            self.handlers.trigger_handler(category, event)
        finally:
            ROUTE_STATE.fired = previous

        logger.debug("Routed %r event through %s", category, result.fired or "no routes")
        return result

    def route_many(self, records: Iterable[Mapping[str, Any]]) -> List[RouteResult]:
        return [self.route(record) for record in records]


__all__ = ["ROUTE_STATE", "RouteResult", "Router"]
