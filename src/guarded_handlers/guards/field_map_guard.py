"""Guard comparing event fields against expected values."""

from __future__ import annotations

import re
from typing import Any, Mapping

from .field_query import MISSING, FieldQuery
from .guard import Guard

ALTERNATIVE_TYPES = (list, tuple, set, frozenset)


def expected_matches(expected: Any, value: Any) -> bool:
    """Compare an event value with the expected value of a field-mapping pair.

    Args:
        expected: Compiled regular expression, collection of alternatives, or a
            plain value compared with ``==``.
        value: The value read from the event, possibly ``MISSING``.

    Returns:
        Whether the pair is satisfied. ``MISSING`` never satisfies a pair and
        ``None`` never matches a pattern.
    """

    if value is MISSING:
        return False
    if isinstance(expected, re.Pattern):
        if value is None:
            return False
        subject = value if isinstance(value, (str, bytes)) else str(value)
        try:
            return expected.search(subject) is not None
        except TypeError:
            # str pattern against bytes, or the reverse
            return False
    if isinstance(expected, ALTERNATIVE_TYPES):
        return any(value == option for option in expected)
    return value == expected


class FieldMapGuard(Guard):
    """ANDs ``field -> expected`` pairs in declaration order.

    Evaluation stops at the first pair that fails, so queries for later
    fields are never made on that event.
    """

    def __init__(self, pairs: Mapping[Any, Any]) -> None:
        self.pairs: tuple[tuple[FieldQuery, Any], ...] = tuple(
            (FieldQuery.from_key(key), expected) for key, expected in pairs.items()
        )

    def matches(self, event: Any) -> bool:
        for query, expected in self.pairs:
            if not expected_matches(expected, query.resolve(event)):
                return False
        return True

    def __repr__(self) -> str:
        inner = ", ".join(f"{query!r}: {expected!r}" for query, expected in self.pairs)
        return f"FieldMapGuard({{{inner}}})"


__all__ = ["ALTERNATIVE_TYPES", "FieldMapGuard", "expected_matches"]
