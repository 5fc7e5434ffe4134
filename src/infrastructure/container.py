"""
Dependency Injection Container - Central container for application dependencies.

This module wires the employee write path: repository, hashing, command bus
with its handlers, and the request-scoped employee form data handler.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar, cast

from src.application.command_bus import CommandBus, SimpleCommandBus
from src.application.commands.employee import AddEmployeeCommand, EditEmployeeCommand
from src.application.config import ApplicationConfig, get_config
from src.application.forms.employee_form_data_handler import EmployeeFormDataHandler
from src.application.handlers.employee import AddEmployeeHandler, EditEmployeeHandler
from src.application.interfaces.employee import (
    IEmployeeDataProvider,
    IEmployeeRepository,
    IHashing,
)
from src.infrastructure.auth.context import ContextEmployee, ContextEmployeeProvider
from src.infrastructure.auth.hashing import Hashing
from src.infrastructure.employee.access_checker import EmployeeFormAccessChecker
from src.infrastructure.employee.data_provider import EmployeeDataProvider
from src.infrastructure.repositories.employee_repository import InMemoryEmployeeRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DIContainer:
    """
    Dependency Injection Container for the back office.

    Long-lived components are singletons; the employee form data handler is
    built per request because its access policy depends on the acting
    employee.
    """

    def __init__(self, config: ApplicationConfig | None = None) -> None:
        """Initialize the container with configuration."""
        self.config = config or get_config()
        self.config.validate()

        self._singletons: dict[type[Any], Any] = {}
        self._factories: dict[type[Any], Callable[[], Any]] = {}

        self._register_infrastructure()
        self._register_command_bus()

        logger.info("Dependency injection container initialized")

    def _register_infrastructure(self) -> None:
        """Register infrastructure components."""
        self._register_singleton(
            IEmployeeRepository,  # type: ignore[type-abstract]
            lambda: InMemoryEmployeeRepository(),
        )
        self._register_singleton(
            IHashing,  # type: ignore[type-abstract]
            lambda: Hashing(rounds=self.config.security.bcrypt_rounds),
        )
        self._register_singleton(
            IEmployeeDataProvider,  # type: ignore[type-abstract]
            lambda: EmployeeDataProvider(
                self.get(IEmployeeRepository)  # type: ignore[type-abstract]
            ),
        )

    def _register_command_bus(self) -> None:
        """Register the command bus and route every command to its handler."""
        self._register_singleton(CommandBus, self._build_command_bus)  # type: ignore[type-abstract]

    def _build_command_bus(self) -> SimpleCommandBus:
        repository = self.get(IEmployeeRepository)  # type: ignore[type-abstract]
        hashing = self.get(IHashing)  # type: ignore[type-abstract]

        bus = SimpleCommandBus()
        bus.register_handler(AddEmployeeCommand, AddEmployeeHandler(repository, hashing).handle)
        bus.register_handler(
            EditEmployeeCommand,
            EditEmployeeHandler(
                repository, hashing, self.config.employee.super_admin_profile_id
            ).handle,
        )
        return bus

    def _register_singleton(self, cls: type[T], factory: Callable[[], Any]) -> None:
        """Register a singleton component."""
        self._factories[cls] = factory

    def get(self, cls: type[T]) -> T:
        """
        Get an instance of a registered component.

        Args:
            cls: The class type to retrieve

        Returns:
            Instance of the requested class

        Raises:
            KeyError: If the class is not registered
        """
        if cls in self._singletons:
            return cast(T, self._singletons[cls])

        if cls not in self._factories:
            raise KeyError(f"No registration found for {cls.__name__}")

        instance = self._factories[cls]()
        self._singletons[cls] = instance
        return cast(T, instance)

    def employee_form_data_handler(
        self, acting_employee: ContextEmployee
    ) -> EmployeeFormDataHandler:
        """
        Build the employee form data handler for one request.

        Args:
            acting_employee: The employee submitting the form

        Returns:
            A handler bound to the acting employee's access policy
        """
        employee_config = self.config.employee
        context_provider = ContextEmployeeProvider(
            acting_employee, employee_config.super_admin_profile_id
        )

        return EmployeeFormDataHandler(
            bus=self.get(CommandBus),  # type: ignore[type-abstract]
            default_shop_association=employee_config.default_shop_association,
            super_admin_profile_id=employee_config.super_admin_profile_id,
            employee_form_access_checker=EmployeeFormAccessChecker(context_provider),
            employee_data_provider=self.get(IEmployeeDataProvider),  # type: ignore[type-abstract]
            hashing=self.get(IHashing),  # type: ignore[type-abstract]
        )
