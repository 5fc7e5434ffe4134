"""Commands: actions that change state."""

from .employee import AddEmployeeCommand, EditEmployeeCommand

__all__ = ["AddEmployeeCommand", "EditEmployeeCommand"]
