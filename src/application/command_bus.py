"""
Command Bus

Routes write-side commands to the handler registered for their type and
returns whatever the handler returns. Dispatch is an in-process, blocking
call; handler errors propagate to the caller unchanged.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from .exceptions_application import (
    CommandHandlerAlreadyRegisteredError,
    CommandHandlerNotFoundError,
)

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any], Any]


class CommandBus(Protocol):
    """Protocol for command bus."""

    def handle(self, command: Any) -> Any:
        """Dispatch a command to its handler and return the handler's result."""
        ...


class SimpleCommandBus:
    """
    Command bus backed by a registry of handlers keyed by command type.

    Lookup is by exact type, so a subclass of a registered command needs its
    own registration.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, CommandHandler] = {}

    def register_handler(self, command_type: type, handler: CommandHandler) -> None:
        """
        Register the handler for a command type.

        Args:
            command_type: Command class to route
            handler: Callable receiving the command

        Raises:
            CommandHandlerAlreadyRegisteredError: If the type already has a handler
        """
        if command_type in self._handlers:
            raise CommandHandlerAlreadyRegisteredError(command_type.__name__)

        self._handlers[command_type] = handler
        logger.debug(f"Registered handler for {command_type.__name__}")

    def has_handler(self, command_type: type) -> bool:
        return command_type in self._handlers

    def handle(self, command: Any) -> Any:
        """
        Dispatch a command.

        Args:
            command: The command instance

        Returns:
            The handler's result

        Raises:
            CommandHandlerNotFoundError: If no handler is registered
        """
        command_name = type(command).__name__
        handler = self._handlers.get(type(command))
        if handler is None:
            raise CommandHandlerNotFoundError(command_name)

        logger.info(f"Dispatching {command_name}", extra={"command": command_name})

        try:
            result = handler(command)
        except Exception as e:
            logger.warning(
                f"{command_name} failed: {e}",
                extra={"command": command_name, "error_type": type(e).__name__},
            )
            raise

        logger.debug(f"{command_name} handled", extra={"command": command_name})
        return result
