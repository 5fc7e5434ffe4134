"""Read-only employee data used by the employee form."""

import logging

from src.application.interfaces.employee import IEmployeeRepository
from src.domain.value_objects import EmployeeId

logger = logging.getLogger(__name__)


class EmployeeDataProvider:
    """Provides employee data straight from the repository."""

    def __init__(self, repository: IEmployeeRepository) -> None:
        self.repository = repository

    def get_hashed_password_by_id(self, employee_id: int) -> str:
        """
        Get the stored password hash of an employee.

        Args:
            employee_id: Id of the employee

        Returns:
            The bcrypt hash

        Raises:
            EmployeeNotFoundException: If the employee does not exist
        """
        return self.repository.get(EmployeeId(employee_id)).password_hash
