"""
Authentication and authorization for the back office.

This module provides:
- Bcrypt password hashing
- Stock profile permissions
- The context (acting) employee of a request
"""

from .context import ContextEmployee, ContextEmployeeProvider
from .hashing import Hashing
from .permissions import MANAGE_EMPLOYEES, PermissionMatrix

__all__ = [
    "Hashing",
    "ContextEmployee",
    "ContextEmployeeProvider",
    "PermissionMatrix",
    "MANAGE_EMPLOYEES",
]
