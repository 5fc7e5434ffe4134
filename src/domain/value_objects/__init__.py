"""Immutable value objects for type safety."""

from .employee import Email, EmployeeId, FirstName, LastName, Password

__all__ = ["EmployeeId", "FirstName", "LastName", "Email", "Password"]
