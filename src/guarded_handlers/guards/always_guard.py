"""Guard used when a handler is registered without one."""

from __future__ import annotations

from typing import Any

from .guard import Guard


class AlwaysGuard(Guard):
    """Accepts every event of the handler's category."""

    def matches(self, event: Any) -> bool:
        return True

    def __repr__(self) -> str:
        return "AlwaysGuard()"


ALWAYS = AlwaysGuard()

__all__ = ["ALWAYS", "AlwaysGuard"]
