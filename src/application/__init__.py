"""
Application Layer - Commands and Orchestration

This layer contains:
- Commands: Actions that change state
- Handlers: Apply commands to the domain
- Forms: Translate submitted back-office forms into commands
- Interfaces: Capability contracts implemented by infrastructure

Depends on domain layer, orchestrates business logic.
Defines interfaces that infrastructure layer must implement.
"""

from .command_bus import CommandBus, SimpleCommandBus
from .exceptions_application import (
    ApplicationException,
    CommandBusError,
    CommandHandlerAlreadyRegisteredError,
    CommandHandlerNotFoundError,
)
from .interfaces import (
    IContextEmployeeProvider,
    IEmployeeDataProvider,
    IEmployeeFormAccessChecker,
    IEmployeeRepository,
    IHashing,
)

__all__ = [
    # Command bus
    "CommandBus",
    "SimpleCommandBus",
    # Interfaces
    "IEmployeeRepository",
    "IHashing",
    "IEmployeeDataProvider",
    "IContextEmployeeProvider",
    "IEmployeeFormAccessChecker",
    # Exceptions
    "ApplicationException",
    "CommandBusError",
    "CommandHandlerNotFoundError",
    "CommandHandlerAlreadyRegisteredError",
]
