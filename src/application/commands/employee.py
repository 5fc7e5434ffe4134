"""
Employee Commands

Write-side intent objects for creating and editing employees. Raw form
values are wrapped into domain value objects when the command is built, so
an invalid value fails before anything is dispatched.
"""

# Standard library imports
from collections.abc import Iterable
from typing import Any

# Local imports
from src.domain.value_objects import Email, EmployeeId, FirstName, LastName, Password


class AddEmployeeCommand:
    """Adds a new employee."""

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str,
        plain_password: str,
        is_subscribed_to_newsletter: Any,
        default_page_id: Any,
        language_id: Any,
        active: Any,
        profile_id: Any,
        shop_association: Iterable[Any],
    ) -> None:
        self.first_name = FirstName(first_name)
        self.last_name = LastName(last_name)
        self.email = Email(email)
        self.plain_password = Password(plain_password)
        self.is_subscribed_to_newsletter = bool(is_subscribed_to_newsletter)
        self.default_page_id = int(default_page_id)
        self.language_id = int(language_id)
        self.active = bool(active)
        self.profile_id = int(profile_id)
        self.shop_association = [int(shop_id) for shop_id in shop_association]

    def __repr__(self) -> str:
        return (
            f"AddEmployeeCommand(email={self.email!r}, profile_id={self.profile_id}, "
            f"shop_association={self.shop_association})"
        )


class EditEmployeeCommand:
    """
    Edits an existing employee.

    Built incrementally: every setter returns the command so calls can be
    chained. Fields left at ``None`` are not changed by the handler.
    """

    def __init__(self, employee_id: int) -> None:
        self.employee_id = EmployeeId(employee_id)

        self.first_name: FirstName | None = None
        self.last_name: LastName | None = None
        self.email: Email | None = None
        self.plain_password: Password | None = None
        self.is_subscribed_to_newsletter: bool | None = None
        self.default_page_id: int | None = None
        self.language_id: int | None = None
        self.active: bool | None = None
        self.profile_id: int | None = None
        self.shop_association: list[int] | None = None

    def set_first_name(self, first_name: FirstName) -> "EditEmployeeCommand":
        self.first_name = first_name
        return self

    def set_last_name(self, last_name: LastName) -> "EditEmployeeCommand":
        self.last_name = last_name
        return self

    def set_email(self, email: Email) -> "EditEmployeeCommand":
        self.email = email
        return self

    def set_plain_password(self, password: Password) -> "EditEmployeeCommand":
        self.plain_password = password
        return self

    def set_is_subscribed_to_newsletter(self, subscribed: bool) -> "EditEmployeeCommand":
        self.is_subscribed_to_newsletter = subscribed
        return self

    def set_default_page_id(self, default_page_id: int) -> "EditEmployeeCommand":
        self.default_page_id = default_page_id
        return self

    def set_language_id(self, language_id: int) -> "EditEmployeeCommand":
        self.language_id = language_id
        return self

    def set_active(self, active: bool) -> "EditEmployeeCommand":
        self.active = active
        return self

    def set_profile_id(self, profile_id: int) -> "EditEmployeeCommand":
        self.profile_id = profile_id
        return self

    def set_shop_association(self, shop_association: list[int]) -> "EditEmployeeCommand":
        self.shop_association = shop_association
        return self

    def __repr__(self) -> str:
        return (
            f"EditEmployeeCommand(employee_id={self.employee_id.value}, "
            f"password_changed={self.plain_password is not None})"
        )
