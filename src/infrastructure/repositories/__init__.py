"""
Repository Infrastructure Module

This module provides concrete implementations of the repository interfaces.
"""

from .employee_repository import InMemoryEmployeeRepository

__all__ = ["InMemoryEmployeeRepository"]
