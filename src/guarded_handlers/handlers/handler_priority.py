"""Priority definitions for registered handlers.

This module exposes :class:`HandlerPriority`, a set of named levels for the
signed integer priority carried by every handler entry. Higher values run
earlier; any ``int`` is accepted where a priority is expected.
"""

from enum import IntEnum


class HandlerPriority(IntEnum):
    """Named execution priority levels for handlers.

    Attributes:
        HIGHEST: Runs before all conventionally prioritised handlers.
        HIGH: Elevated priority for handlers that must see events first.
        NORMAL: Default priority applied when none is specified.
        LOW: Handlers that should yield to more specific ones.
        LOWEST: Catch-all handlers that run last.
    """

    HIGHEST = 100
    HIGH = 10
    NORMAL = 0
    LOW = -10
    LOWEST = -100


__all__ = ["HandlerPriority"]
