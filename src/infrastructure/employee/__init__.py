"""Employee data access and form policy."""

from .access_checker import EmployeeFormAccessChecker
from .data_provider import EmployeeDataProvider

__all__ = ["EmployeeDataProvider", "EmployeeFormAccessChecker"]
