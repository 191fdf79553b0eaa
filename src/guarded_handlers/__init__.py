"""Guarded, priority-ordered event dispatch.

Handlers are registered per event category with an optional guard and are
invoked in ``(priority desc, registration order)`` order until one of them
halts the dispatch.
"""

from guarded_handlers.core.exceptions import (
    ConfigurationError,
    GuardedHandlersError,
    HandlerRegistrationError,
    InvalidEventError,
    InvalidGuardError,
    RouteDefinitionError,
)
from guarded_handlers.guards import Guard, build_guard
from guarded_handlers.handlers import (
    GLOBAL_CATEGORY,
    HALT,
    PASS,
    DispatchSignal,
    Dispatcher,
    GuardedHandlers,
    HandlerEntry,
    HandlerPriority,
    HandlerRegistry,
)

__version__ = "0.3.0"

__all__ = [
    "ConfigurationError",
    "DispatchSignal",
    "Dispatcher",
    "GLOBAL_CATEGORY",
    "Guard",
    "GuardedHandlers",
    "GuardedHandlersError",
    "HALT",
    "HandlerEntry",
    "HandlerPriority",
    "HandlerRegistrationError",
    "HandlerRegistry",
    "InvalidEventError",
    "InvalidGuardError",
    "PASS",
    "RouteDefinitionError",
    "__version__",
    "build_guard",
]
