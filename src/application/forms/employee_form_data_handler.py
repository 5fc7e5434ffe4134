"""
Employee Form Data Handler

Handles submitted employee form data: builds the add/edit employee command,
dispatches it through the command bus and returns the employee id.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from src.domain.exceptions import EmployeeConstraintCode, EmployeeConstraintException
from src.domain.value_objects import Email, EmployeeId, FirstName, LastName, Password

from ..command_bus import CommandBus
from ..commands.employee import AddEmployeeCommand, EditEmployeeCommand
from ..interfaces.employee import IEmployeeDataProvider, IEmployeeFormAccessChecker, IHashing
from .base import FormDataHandler

logger = logging.getLogger(__name__)


class EmployeeFormDataHandler(FormDataHandler):
    """Handles submitted employee form's data."""

    def __init__(
        self,
        bus: CommandBus,
        default_shop_association: Iterable[int],
        super_admin_profile_id: int,
        employee_form_access_checker: IEmployeeFormAccessChecker,
        employee_data_provider: IEmployeeDataProvider,
        hashing: IHashing,
    ) -> None:
        self.bus = bus
        self.default_shop_association = tuple(default_shop_association)
        self.super_admin_profile_id = super_admin_profile_id
        self.employee_form_access_checker = employee_form_access_checker
        self.employee_data_provider = employee_data_provider
        self.hashing = hashing

    def create(self, data: Mapping[str, Any]) -> int:
        """
        Create an employee.

        Args:
            data: Submitted employee form data

        Returns:
            Id of the created employee
        """
        data = dict(data)

        # Super admins have access to all shops and that cannot be changed by the user.
        # Form values arrive as strings, so compare as integers.
        if int(data["profile"]) == int(self.super_admin_profile_id):
            data["shop_association"] = list(self.default_shop_association)

        shop_association = data.get("shop_association")
        if shop_association is None:
            shop_association = list(self.default_shop_association)
        else:
            shop_association = shop_association or []

        employee_id: EmployeeId = self.bus.handle(
            AddEmployeeCommand(
                data["firstname"],
                data["lastname"],
                data["email"],
                data["password"],
                data["optin"],
                data["default_page"],
                data["language"],
                data["active"],
                data["profile"],
                shop_association,
            )
        )

        return employee_id.value

    def update(self, id: int, data: Mapping[str, Any]) -> int:
        """
        Update an employee.

        Args:
            id: Id of the employee being edited
            data: Submitted employee form data

        Returns:
            Id of the updated employee

        Raises:
            EmployeeConstraintException: If the old password does not match
        """
        command = (
            EditEmployeeCommand(id)
            .set_first_name(FirstName(data["firstname"]))
            .set_last_name(LastName(data["lastname"]))
            .set_email(Email(data["email"]))
            .set_is_subscribed_to_newsletter(bool(data["optin"]))
            .set_default_page_id(int(data["default_page"]))
            .set_language_id(int(data["language"]))
            .set_active(bool(data["active"]))
            .set_profile_id(int(data["profile"]))
        )

        if self.employee_form_access_checker.is_restricted_access(int(id)):
            if self._should_change_password(data):
                self._assert_password_is_same_as_old_password(
                    data["change_password"]["old_password"], id
                )

                command.set_plain_password(Password(data["change_password"]["new_password"]))
        elif data.get("password") is not None:
            command.set_plain_password(Password(data["password"]))

        if data.get("shop_association") is not None:
            shop_association = data["shop_association"] or []
            command.set_shop_association([int(shop_id) for shop_id in shop_association])

        employee_id: EmployeeId = self.bus.handle(command)

        return employee_id.value

    def _assert_password_is_same_as_old_password(
        self, plain_password: str, employee_id: int
    ) -> None:
        """
        Assert the given password is the employee's current password.

        Raises:
            EmployeeConstraintException: With code INCORRECT_PASSWORD
        """
        old_password = self.employee_data_provider.get_hashed_password_by_id(employee_id)

        if not self.hashing.check_hash(plain_password, old_password):
            logger.warning(
                f"Rejected password change for employee {employee_id}: old password is invalid",
                extra={"employee_id": employee_id},
            )
            raise EmployeeConstraintException(
                "Old password is invalid.",
                EmployeeConstraintCode.INCORRECT_PASSWORD,
                field="change_password",
            )

    @staticmethod
    def _should_change_password(form_data: Mapping[str, Any]) -> bool:
        """Check if all fields required for changing the password are present."""
        change_password = form_data.get("change_password")
        if change_password is None:
            return False

        return (
            change_password.get("old_password") is not None
            and change_password.get("new_password") is not None
        )
