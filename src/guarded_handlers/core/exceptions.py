"""
Core Exceptions for guarded handler dispatch.

This module defines the exception classes raised by the handler registry,
the guard evaluator and the declarative routing layer. Control flow inside a
dispatch (halting or passing to the next handler) is never expressed through
these types; they are reserved for genuine failures.

The exceptions are organized into categories:
- Registration Exceptions
- Configuration Exceptions
- Routing Exceptions

Each exception includes a descriptive message and context to aid in
troubleshooting.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class GuardedHandlersError(Exception):
    """Base exception class for all guarded handler errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize a guarded handler error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

        logger.debug("%s: %s", type(self).__name__, message, extra={
            "error_code": error_code,
            "context": context,
        })


# Registration Exceptions

class HandlerRegistrationError(GuardedHandlersError):
    """Raised when a handler cannot be added to the registry."""

    def __init__(self, message: str, error_code: str = "HANDLER_REGISTRATION_FAILED", context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code=error_code, context=context)


class InvalidGuardError(HandlerRegistrationError):
    """Raised when a guard specification is not one of the recognized shapes."""

    def __init__(self, guard: Any, message: Optional[str] = None):
        """
        Initialize an invalid guard error.

        Args:
            guard: The rejected guard specification
            message: Optional custom message
        """
        self.guard = guard
        default_message = f"Bad guard: {guard!r} ({type(guard).__name__})"
        super().__init__(
            message or default_message,
            error_code="INVALID_GUARD",
            context={"guard": repr(guard)},
        )


# Configuration Exceptions

class ConfigurationError(GuardedHandlersError):
    """Raised when settings or a configuration file cannot be used."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """
        Initialize a configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key or file that caused the error
        """
        super().__init__(
            message,
            error_code="CONFIGURATION_ERROR",
            context={"config_key": config_key} if config_key else None,
        )
        self.config_key = config_key


class RouteDefinitionError(ConfigurationError):
    """Raised when a route table entry cannot be compiled into a handler."""

    def __init__(self, route: str, message: str):
        self.route = route
        super().__init__(f"Route '{route}': {message}", config_key=route)


# Routing Exceptions

class InvalidEventError(GuardedHandlersError):
    """Raised when a routed event cannot be dispatched as given."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="INVALID_EVENT", context=context)


__all__ = [
    "ConfigurationError",
    "GuardedHandlersError",
    "HandlerRegistrationError",
    "InvalidEventError",
    "InvalidGuardError",
    "RouteDefinitionError",
]
