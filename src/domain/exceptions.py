"""
Domain-level exceptions for employee administration.

This module defines exceptions that are specific to domain logic and business rules.
These exceptions are raised within value objects, entities and command handlers.
"""

from enum import IntEnum
from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class EmployeeException(DomainException):
    """Base exception for employee related errors."""


class EmployeeConstraintCode(IntEnum):
    """Reasons an employee constraint can be violated."""

    INVALID_EMAIL = 1
    INVALID_FIRST_NAME = 2
    INVALID_LAST_NAME = 3
    INVALID_PASSWORD = 4
    INCORRECT_PASSWORD = 5


class EmployeeConstraintException(EmployeeException):
    """
    Raised when employee data violates a business constraint.

    The ``code`` tells the form layer which field to attach the error to.
    """

    INVALID_EMAIL = EmployeeConstraintCode.INVALID_EMAIL
    INVALID_FIRST_NAME = EmployeeConstraintCode.INVALID_FIRST_NAME
    INVALID_LAST_NAME = EmployeeConstraintCode.INVALID_LAST_NAME
    INVALID_PASSWORD = EmployeeConstraintCode.INVALID_PASSWORD
    INCORRECT_PASSWORD = EmployeeConstraintCode.INCORRECT_PASSWORD

    def __init__(
        self,
        message: str,
        code: EmployeeConstraintCode,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        details: dict[str, Any] = {"code": int(code)}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value

        super().__init__(message, details)
        self.code = code
        self.field = field
        self.value = value


class InvalidEmployeeIdException(EmployeeException):
    """Raised when an employee identifier is not a positive integer."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Employee id must be a positive integer, got {value!r}",
            details={"value": value},
        )
        self.value = value


class EmployeeNotFoundException(EmployeeException):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: int) -> None:
        super().__init__(
            f"Employee with id '{employee_id}' was not found",
            details={"employee_id": employee_id},
        )
        self.employee_id = employee_id


class EmailAlreadyUsedException(EmployeeException):
    """Raised when an email address already belongs to another employee."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Email '{email}' is already used by another employee",
            details={"email": email},
        )
        self.email = email


class CannotChangeLastSuperAdminException(EmployeeException):
    """
    Raised when an edit would leave the shop without an active super admin.

    Disabling the last super admin or moving it to another profile locks
    everybody out of the administration panel.
    """

    def __init__(self, employee_id: int, reason: str) -> None:
        super().__init__(
            f"Cannot change employee {employee_id}: {reason}",
            details={"employee_id": employee_id, "reason": reason},
        )
        self.employee_id = employee_id
        self.reason = reason
