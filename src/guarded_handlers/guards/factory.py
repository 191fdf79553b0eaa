"""Classification of guard specifications into :class:`Guard` objects.

Handlers accept guards in several shapes. They are classified exactly once,
when the handler is registered, so an unusable guard is rejected before any
event is seen and dispatch never re-inspects the specification.

=====================  ==========================================
Specification          Guard
=====================  ==========================================
``None``               :class:`AlwaysGuard`
a class                :class:`TypeGuard`
``str``                :class:`PredicateGuard`
mapping                :class:`FieldMapGuard`
``list`` / ``tuple``   :class:`AlternativesGuard` (recursively)
other callable         :class:`CallableGuard`
a :class:`Guard`       used as given
=====================  ==========================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from guarded_handlers.core.exceptions import InvalidGuardError

from .always_guard import ALWAYS
from .callable_guard import CallableGuard
from .composite_guards import AllOfGuard, AlternativesGuard
from .field_map_guard import FieldMapGuard
from .guard import Guard
from .predicate_guard import PredicateGuard
from .type_guard import TypeGuard

logger = logging.getLogger(__name__)


def build_guard(spec: Any) -> Guard:
    """Classify a single guard specification.

    Args:
        spec: Guard specification supplied at registration.

    Returns:
        The guard object evaluated during dispatch.

    Raises:
        InvalidGuardError: Raised when ``spec`` (or any nested alternative or
            field-mapping key) is not a recognized shape.
    """

    if isinstance(spec, Guard):
        return spec
    if spec is None:
        return ALWAYS
    if isinstance(spec, type):
        return TypeGuard(spec)
    if isinstance(spec, str):
        if not spec:
            raise InvalidGuardError(spec, "Predicate guard name must not be empty")
        return PredicateGuard(spec)
    if isinstance(spec, Mapping):
        return FieldMapGuard(spec)
    if isinstance(spec, (list, tuple)):
        return AlternativesGuard(build_guard(item) for item in spec)
    if callable(spec):
        return CallableGuard(spec)
    raise InvalidGuardError(spec)


def combine_guards(*specs: Any) -> Guard:
    """Classify the positional guards of one registration.

    No guards match every event; several guards must all match.
    """

    if not specs:
        return ALWAYS
    if len(specs) == 1:
        return build_guard(specs[0])
    guard = AllOfGuard(build_guard(spec) for spec in specs)
    logger.debug("Combined %d guards into %r", len(specs), guard)
    return guard


__all__ = ["build_guard", "combine_guards"]
