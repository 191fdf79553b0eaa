"""Control signals a handler body returns to the dispatch loop."""

from __future__ import annotations

import enum
from typing import Any


class DispatchSignal(enum.Enum):
    """Outcome of a handler body as seen by the dispatcher.

    Attributes:
        CONTINUE: Fall through to the next candidate. Implied when a body
            returns ``None`` or any value that is not a signal.
        PASS: Explicitly leave the event to the next candidate.
        HALT: Stop the dispatch; no further candidates are evaluated.
    """

    CONTINUE = "continue"
    PASS = "pass"
    HALT = "halt"

    @classmethod
    def from_result(cls, result: Any) -> "DispatchSignal":
        """Interpret the return value of a handler body."""

        if isinstance(result, cls):
            return result
        return cls.CONTINUE


HALT = DispatchSignal.HALT
PASS = DispatchSignal.PASS

__all__ = ["DispatchSignal", "HALT", "PASS"]
