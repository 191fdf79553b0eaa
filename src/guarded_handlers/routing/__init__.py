"""Declarative route tables built on guarded handlers."""

from .guard_spec import compile_guard_spec
from .record_event import RecordEvent
from .route_table import RouteSpec, RouteTable
from .router import RouteResult, Router

__all__ = [
    "RecordEvent",
    "RouteResult",
    "RouteSpec",
    "RouteTable",
    "Router",
    "compile_guard_spec",
]
