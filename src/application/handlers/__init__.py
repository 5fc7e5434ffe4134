"""Command handlers: apply commands to the domain."""

from .employee import AddEmployeeHandler, EditEmployeeHandler

__all__ = ["AddEmployeeHandler", "EditEmployeeHandler"]
