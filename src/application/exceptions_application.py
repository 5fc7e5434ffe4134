"""
Application-level exception hierarchy for employee administration.

This module provides exceptions for application-layer errors such as
command dispatch failures.
"""

from typing import Any


class ApplicationException(Exception):
    """Base exception for all application-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


# ============================================================================
# Command Bus Exceptions
# ============================================================================


class CommandBusError(ApplicationException):
    """Base exception for command bus errors."""

    def __init__(self, command_type: str, message: str, **kwargs: Any) -> None:
        details = {"command_type": command_type, **kwargs}
        super().__init__(message, details)
        self.command_type = command_type


class CommandHandlerNotFoundError(CommandBusError):
    """Raised when no handler is registered for a command type."""

    def __init__(self, command_type: str) -> None:
        super().__init__(command_type, f"No handler registered for command '{command_type}'")


class CommandHandlerAlreadyRegisteredError(CommandBusError):
    """Raised when a second handler is registered for the same command type."""

    def __init__(self, command_type: str) -> None:
        super().__init__(
            command_type, f"A handler is already registered for command '{command_type}'"
        )
