"""Base class for value objects."""

# Standard library imports
from abc import ABC, abstractmethod
from typing import Any


class ValueObject(ABC):
    """Abstract base class for all value objects.

    Provides common functionality for value objects including:
    - Immutability enforcement
    - Equality comparison
    - Hashability
    """

    __slots__ = ()  # Subclasses should define their own __slots__

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Check equality with another value object."""
        pass

    @abstractmethod
    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        pass

    @abstractmethod
    def __repr__(self) -> str:
        """Get string representation for debugging."""
        pass

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, name):
            raise AttributeError(f"Cannot modify immutable value object attribute '{name}'")
        super().__setattr__(name, value)


class StringValueObject(ValueObject):
    """Value object wrapping a single validated string."""

    __slots__ = ("_value",)

    _value: str

    @property
    def value(self) -> str:
        """Get the wrapped string."""
        return self._value

    def __eq__(self, other: object) -> bool:
        """Check equality with a value object of the same type."""
        if not isinstance(other, self.__class__):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        """Get string representation for debugging."""
        return f"{self.__class__.__name__}('{self._value}')"

    def __str__(self) -> str:
        """Get string representation."""
        return self._value
