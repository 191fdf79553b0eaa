"""Guard sublanguage restricting which events a handler accepts."""

from .always_guard import ALWAYS, AlwaysGuard
from .callable_guard import CallableGuard
from .composite_guards import AllOfGuard, AlternativesGuard
from .factory import build_guard, combine_guards
from .field_map_guard import FieldMapGuard, expected_matches
from .field_query import MISSING, FieldQuery, query_attribute
from .guard import Guard
from .predicate_guard import PredicateGuard
from .type_guard import TypeGuard

__all__ = [
    "ALWAYS",
    "AllOfGuard",
    "AlternativesGuard",
    "AlwaysGuard",
    "CallableGuard",
    "FieldMapGuard",
    "FieldQuery",
    "Guard",
    "MISSING",
    "PredicateGuard",
    "TypeGuard",
    "build_guard",
    "combine_guards",
    "expected_matches",
    "query_attribute",
]
