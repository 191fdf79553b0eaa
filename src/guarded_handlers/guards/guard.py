"""Abstract base class for handler guards."""

from __future__ import annotations

import abc
from typing import Any


class Guard(abc.ABC):
    """Predicate deciding whether a handler accepts an event.

    Guards are built once, at registration time, by
    :func:`~guarded_handlers.guards.factory.build_guard`; dispatch only calls
    :meth:`matches`.
    """

    @abc.abstractmethod
    def matches(self, event: Any) -> bool:
        """Return whether the guard accepts ``event``.

        Args:
            event: The event being dispatched.

        Returns:
            ``True`` when the handler owning this guard should run.
        """

    def __call__(self, event: Any) -> bool:
        return self.matches(event)


__all__ = ["Guard"]
