"""
Form Data Handler Base

Form data handlers sit between submitted back-office forms and the command
bus: they turn raw form data into commands and return the identifier of the
written object.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class FormDataHandler(ABC):
    """Abstract base class for identifiable object form data handlers."""

    @abstractmethod
    def create(self, data: Mapping[str, Any]) -> Any:
        """
        Create a new object from submitted form data.

        Args:
            data: Raw form data

        Returns:
            Identifier of the created object
        """
        pass

    @abstractmethod
    def update(self, id: Any, data: Mapping[str, Any]) -> Any:
        """
        Update an existing object from submitted form data.

        Args:
            id: Identifier of the object being edited
            data: Raw form data

        Returns:
            Identifier of the updated object
        """
        pass
