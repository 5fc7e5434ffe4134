"""
Employee Command Handlers

Apply AddEmployeeCommand and EditEmployeeCommand to the employee repository.
"""

import logging

from src.domain.entities.employee import Employee
from src.domain.exceptions import CannotChangeLastSuperAdminException, EmailAlreadyUsedException
from src.domain.value_objects import Email, EmployeeId

from ..commands.employee import AddEmployeeCommand, EditEmployeeCommand
from ..interfaces.employee import IEmployeeRepository, IHashing

logger = logging.getLogger(__name__)


def _assert_email_is_free(
    repository: IEmployeeRepository, email: Email, owner_id: EmployeeId | None = None
) -> None:
    existing = repository.find_by_email(email)
    if existing is not None and existing.id != owner_id:
        raise EmailAlreadyUsedException(email.value)


class AddEmployeeHandler:
    """Handles AddEmployeeCommand."""

    def __init__(self, repository: IEmployeeRepository, hashing: IHashing) -> None:
        self.repository = repository
        self.hashing = hashing

    def handle(self, command: AddEmployeeCommand) -> EmployeeId:
        """
        Create the employee described by the command.

        Returns:
            Identifier of the new employee

        Raises:
            EmailAlreadyUsedException: If the email belongs to another employee
        """
        _assert_email_is_free(self.repository, command.email)

        employee = Employee(
            id=self.repository.next_id(),
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            password_hash=self.hashing.hash(command.plain_password.value),
            newsletter=command.is_subscribed_to_newsletter,
            default_page_id=command.default_page_id,
            language_id=command.language_id,
            active=command.active,
            profile_id=command.profile_id,
            shop_association=list(command.shop_association),
        )
        self.repository.add(employee)

        logger.info(
            f"Created employee {employee.id.value}",
            extra={"employee_id": employee.id.value, "profile_id": employee.profile_id},
        )
        return employee.id


class EditEmployeeHandler:
    """Handles EditEmployeeCommand."""

    def __init__(
        self,
        repository: IEmployeeRepository,
        hashing: IHashing,
        super_admin_profile_id: int,
    ) -> None:
        self.repository = repository
        self.hashing = hashing
        self.super_admin_profile_id = super_admin_profile_id

    def handle(self, command: EditEmployeeCommand) -> EmployeeId:
        """
        Apply every field set on the command to the stored employee.

        Returns:
            Identifier of the edited employee

        Raises:
            EmployeeNotFoundException: If the employee does not exist
            EmailAlreadyUsedException: If the new email belongs to another employee
            CannotChangeLastSuperAdminException: If the edit would lock out the back office
        """
        employee = self.repository.get(command.employee_id)

        if command.email is not None and command.email != employee.email:
            _assert_email_is_free(self.repository, command.email, employee.id)

        self._assert_last_super_admin_is_kept(employee, command)

        if command.first_name is not None:
            employee.first_name = command.first_name
        if command.last_name is not None:
            employee.last_name = command.last_name
        if command.email is not None:
            employee.email = command.email
        if command.is_subscribed_to_newsletter is not None:
            employee.newsletter = command.is_subscribed_to_newsletter
        if command.default_page_id is not None:
            employee.default_page_id = command.default_page_id
        if command.language_id is not None:
            employee.language_id = command.language_id
        if command.active is not None:
            employee.active = command.active
        if command.profile_id is not None:
            employee.profile_id = command.profile_id
        if command.shop_association is not None:
            employee.shop_association = list(command.shop_association)
        if command.plain_password is not None:
            employee.password_hash = self.hashing.hash(command.plain_password.value)

        self.repository.save(employee)

        logger.info(
            f"Updated employee {employee.id.value}",
            extra={
                "employee_id": employee.id.value,
                "password_changed": command.plain_password is not None,
            },
        )
        return employee.id

    def _assert_last_super_admin_is_kept(
        self, employee: Employee, command: EditEmployeeCommand
    ) -> None:
        if not employee.is_active_super_admin(self.super_admin_profile_id):
            return
        if self.repository.count_active_super_admins(self.super_admin_profile_id) > 1:
            return

        if command.active is False:
            raise CannotChangeLastSuperAdminException(
                employee.id.value, "the last super admin cannot be disabled"
            )
        if command.profile_id is not None and command.profile_id != self.super_admin_profile_id:
            raise CannotChangeLastSuperAdminException(
                employee.id.value, "the last super admin must keep the super admin profile"
            )
