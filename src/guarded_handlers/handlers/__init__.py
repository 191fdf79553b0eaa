"""Handler registry, dispatcher and the component composing them."""

from .dispatch_signal import HALT, PASS, DispatchSignal
from .dispatcher import Dispatcher
from .guarded_handlers import GuardedHandlers
from .handler_entry import GLOBAL_CATEGORY, HandlerEntry
from .handler_priority import HandlerPriority
from .handler_registry import HandlerRegistry

__all__ = [
    "DispatchSignal",
    "Dispatcher",
    "GLOBAL_CATEGORY",
    "GuardedHandlers",
    "HALT",
    "HandlerEntry",
    "HandlerPriority",
    "HandlerRegistry",
    "PASS",
]
