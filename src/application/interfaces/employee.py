"""
Employee Interface Definitions

Defines the capabilities the employee write path consumes. The
infrastructure layer must implement these interfaces.
"""

# Standard library imports
from abc import abstractmethod
from typing import Protocol

# Local imports
from src.domain.entities.employee import Employee
from src.domain.value_objects import Email, EmployeeId


class IEmployeeRepository(Protocol):
    """
    Employee repository interface.

    Defines operations for persisting and retrieving Employee entities.
    """

    @abstractmethod
    def next_id(self) -> EmployeeId:
        """Reserve the identifier for a new employee."""
        ...

    @abstractmethod
    def add(self, employee: Employee) -> None:
        """
        Store a new employee.

        Args:
            employee: The employee entity to store

        Raises:
            EmailAlreadyUsedException: If the email belongs to another employee
        """
        ...

    @abstractmethod
    def save(self, employee: Employee) -> None:
        """
        Persist changes to an existing employee.

        Raises:
            EmployeeNotFoundException: If the employee does not exist
        """
        ...

    @abstractmethod
    def get(self, employee_id: EmployeeId) -> Employee:
        """
        Retrieve an employee by its ID.

        Args:
            employee_id: The employee identifier

        Returns:
            The employee entity

        Raises:
            EmployeeNotFoundException: If the employee does not exist
        """
        ...

    @abstractmethod
    def find_by_email(self, email: Email) -> Employee | None:
        """Retrieve the employee owning an email address, if any."""
        ...

    @abstractmethod
    def count_active_super_admins(self, super_admin_profile_id: int) -> int:
        """Count enabled employees holding the super admin profile."""
        ...


class IHashing(Protocol):
    """Password hashing capability."""

    @abstractmethod
    def hash(self, plain_text: str) -> str:
        """Hash a plain text password."""
        ...

    @abstractmethod
    def check_hash(self, plain_text: str, stored_hash: str) -> bool:
        """Check a plain text password against a stored hash."""
        ...


class IEmployeeDataProvider(Protocol):
    """Read-only access to employee data needed by forms."""

    @abstractmethod
    def get_hashed_password_by_id(self, employee_id: int) -> str:
        """
        Get the stored password hash of an employee.

        Raises:
            EmployeeNotFoundException: If the employee does not exist
        """
        ...


class IContextEmployeeProvider(Protocol):
    """Describes the employee performing the current request."""

    @abstractmethod
    def get_id(self) -> int:
        ...

    @abstractmethod
    def get_profile_id(self) -> int:
        ...

    @abstractmethod
    def is_super_admin(self) -> bool:
        ...

    @abstractmethod
    def has_permission(self, permission: str) -> bool:
        ...


class IEmployeeFormAccessChecker(Protocol):
    """Access policy for the employee form."""

    @abstractmethod
    def is_restricted_access(self, employee_id: int) -> bool:
        """
        Check whether the acting employee has restricted access to an employee.

        Under restricted access the current password must be proven before it
        can be changed, and privileged fields are hidden from the form.
        """
        ...
