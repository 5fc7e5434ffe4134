"""
Application Interfaces - Capability Contracts

This module defines the interface contracts that the infrastructure layer
must implement. Following the dependency inversion principle, the application
layer defines what it needs, and the infrastructure layer provides it.
"""

from .employee import (
    IContextEmployeeProvider,
    IEmployeeDataProvider,
    IEmployeeFormAccessChecker,
    IEmployeeRepository,
    IHashing,
)

__all__ = [
    "IEmployeeRepository",
    "IHashing",
    "IEmployeeDataProvider",
    "IContextEmployeeProvider",
    "IEmployeeFormAccessChecker",
]
