"""Domain entities with business logic."""

from .employee import Employee

__all__ = ["Employee"]
