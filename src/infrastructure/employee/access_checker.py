"""
Employee form access policy.

An employee editing their own account without the right to manage
employees gets restricted access: the current password must be proven
before it is changed.
"""

import logging

from src.application.interfaces.employee import IContextEmployeeProvider

from ..auth.permissions import MANAGE_EMPLOYEES

logger = logging.getLogger(__name__)


class EmployeeFormAccessChecker:
    """Decides how much of the employee form the acting employee may use."""

    def __init__(self, context_employee_provider: IContextEmployeeProvider) -> None:
        self.context_employee_provider = context_employee_provider

    def is_restricted_access(self, employee_id: int) -> bool:
        """
        Check whether the acting employee has restricted access to an employee.

        Args:
            employee_id: Id of the employee being edited

        Returns:
            True when editing one's own account without employee management rights

        Raises:
            TypeError: If employee_id is not an integer
        """
        if isinstance(employee_id, bool) or not isinstance(employee_id, int):
            raise TypeError(
                f"Employee id must be an integer, got {type(employee_id).__name__}"
            )

        provider = self.context_employee_provider
        restricted = employee_id == provider.get_id() and not provider.has_permission(
            MANAGE_EMPLOYEES
        )

        logger.debug(
            f"Employee form access for {employee_id}: "
            f"{'restricted' if restricted else 'unrestricted'}",
            extra={"employee_id": employee_id},
        )
        return restricted
