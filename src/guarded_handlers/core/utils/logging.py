"""Logging helpers for guarded handler components.

Purpose:
    Translate configured level names into numeric levels for the CLI's
    logging setup.
External Dependencies:
    Uses only the Python standard library `logging` module.
Fallback Semantics:
    Unknown level names resolve to ``logging.INFO``.
"""

from __future__ import annotations

import logging


def resolve_level(level: int | str | None) -> int:
    """Summary: Translate a level name or number into a logging level.
    Parameters:
        level: ``"DEBUG"``-style name (case-insensitive), numeric level, or
            ``None``.
    Returns:
        int: Numeric logging level, ``logging.INFO`` when unresolvable.
    """

    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


__all__ = ["resolve_level"]
