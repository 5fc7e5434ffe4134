"""
Unit tests for the employee form data handler.

Covers command construction on create and update, the super admin shop
association override and the restricted-access password change check.
"""

from unittest.mock import Mock

import pytest

from src.application.commands.employee import AddEmployeeCommand, EditEmployeeCommand
from src.application.forms.employee_form_data_handler import EmployeeFormDataHandler
from src.domain.exceptions import (
    EmployeeConstraintCode,
    EmployeeConstraintException,
    InvalidEmployeeIdException,
)
from src.domain.value_objects import Email, FirstName, LastName

SUPER_ADMIN_PROFILE_ID = 1
DEFAULT_SHOP_ASSOCIATION = [1]


def dispatched_command(bus: Mock):
    """Return the single command sent to the bus."""
    bus.handle.assert_called_once()
    return bus.handle.call_args.args[0]


class TestEmployeeFormDataHandler:
    """Shared fixtures for the handler tests."""

    @pytest.fixture
    def access_checker(self):
        checker = Mock()
        checker.is_restricted_access.return_value = False
        return checker

    @pytest.fixture
    def data_provider(self):
        provider = Mock()
        provider.get_hashed_password_by_id.return_value = "$2b$04$stored-hash"
        return provider

    @pytest.fixture
    def mock_hashing(self):
        hashing = Mock()
        hashing.check_hash.return_value = True
        return hashing

    @pytest.fixture
    def handler(self, mock_bus, access_checker, data_provider, mock_hashing):
        return EmployeeFormDataHandler(
            bus=mock_bus,
            default_shop_association=DEFAULT_SHOP_ASSOCIATION,
            super_admin_profile_id=SUPER_ADMIN_PROFILE_ID,
            employee_form_access_checker=access_checker,
            employee_data_provider=data_provider,
            hashing=mock_hashing,
        )


class TestCreate(TestEmployeeFormDataHandler):
    """Test creating employees."""

    def test_create_returns_scalar_id(self, handler, mock_bus, employee_form_data):
        """Test the bus result is unwrapped to an int."""
        assert handler.create(employee_form_data) == 42
        assert isinstance(dispatched_command(mock_bus), AddEmployeeCommand)

    def test_create_builds_command_from_form(self, handler, mock_bus, employee_form_data):
        """Test every form field reaches the command."""
        employee_form_data["shop_association"] = ["2", 3]

        handler.create(employee_form_data)

        command = dispatched_command(mock_bus)
        assert command.first_name == FirstName("Ada")
        assert command.last_name == LastName("Lovelace")
        assert command.email == Email("ada@example.com")
        assert command.plain_password.value == "analytical-engine"
        assert command.is_subscribed_to_newsletter is True
        assert command.default_page_id == 3
        assert command.language_id == 2
        assert command.active is True
        assert command.profile_id == 4
        assert command.shop_association == [2, 3]

    def test_super_admin_always_gets_default_shops(self, handler, mock_bus, employee_form_data):
        """Test a supplied association is ignored for super admins."""
        employee_form_data["profile"] = SUPER_ADMIN_PROFILE_ID
        employee_form_data["shop_association"] = [2, 3]

        handler.create(employee_form_data)

        assert dispatched_command(mock_bus).shop_association == DEFAULT_SHOP_ASSOCIATION

    def test_super_admin_empty_association_replaced(self, handler, mock_bus, employee_form_data):
        """Test super admins cannot be stripped of their shops on create."""
        employee_form_data["profile"] = 1
        employee_form_data["shop_association"] = []

        handler.create(employee_form_data)

        assert dispatched_command(mock_bus).shop_association == DEFAULT_SHOP_ASSOCIATION

    def test_super_admin_submitted_as_string(self, handler, mock_bus, employee_form_data):
        """Test a raw string profile id still triggers the super admin override."""
        employee_form_data["profile"] = "1"
        employee_form_data["shop_association"] = ["2", "3"]

        handler.create(employee_form_data)

        command = dispatched_command(mock_bus)
        assert command.profile_id == SUPER_ADMIN_PROFILE_ID
        assert command.shop_association == DEFAULT_SHOP_ASSOCIATION

    @pytest.mark.parametrize("empty", [[], "", False, 0])
    def test_falsy_association_becomes_empty(
        self, handler, mock_bus, employee_form_data, empty
    ):
        """Test a present but falsy association means no shops, as on update."""
        employee_form_data["shop_association"] = empty

        handler.create(employee_form_data)

        assert dispatched_command(mock_bus).shop_association == []

    def test_missing_association_uses_default(self, handler, mock_bus, employee_form_data):
        """Test the default association is used when the field is omitted."""
        handler.create(employee_form_data)

        assert dispatched_command(mock_bus).shop_association == DEFAULT_SHOP_ASSOCIATION

    def test_null_association_uses_default(self, handler, mock_bus, employee_form_data):
        """Test a null association counts as omitted."""
        employee_form_data["shop_association"] = None

        handler.create(employee_form_data)

        assert dispatched_command(mock_bus).shop_association == DEFAULT_SHOP_ASSOCIATION

    def test_create_does_not_mutate_form_data(self, handler, employee_form_data):
        """Test the override does not leak into the caller's mapping."""
        employee_form_data["profile"] = SUPER_ADMIN_PROFILE_ID
        employee_form_data["shop_association"] = [2, 3]

        handler.create(employee_form_data)

        assert employee_form_data["shop_association"] == [2, 3]

    def test_invalid_value_fails_before_dispatch(self, handler, mock_bus, employee_form_data):
        """Test value object errors propagate and nothing is dispatched."""
        employee_form_data["email"] = "not-an-email"

        with pytest.raises(EmployeeConstraintException) as exc_info:
            handler.create(employee_form_data)

        assert exc_info.value.code == EmployeeConstraintCode.INVALID_EMAIL
        mock_bus.handle.assert_not_called()

    def test_bus_errors_propagate(self, handler, mock_bus, employee_form_data):
        """Test dispatch-time errors are not caught."""
        mock_bus.handle.side_effect = RuntimeError("domain failure")

        with pytest.raises(RuntimeError, match="domain failure"):
            handler.create(employee_form_data)


class TestUpdate(TestEmployeeFormDataHandler):
    """Test updating employees."""

    def test_update_builds_edit_command(self, handler, mock_bus, employee_form_data):
        """Test the edit command carries every coerced field."""
        assert handler.update(5, employee_form_data) == 42

        command = dispatched_command(mock_bus)
        assert isinstance(command, EditEmployeeCommand)
        assert command.employee_id.value == 5
        assert command.first_name == FirstName("Ada")
        assert command.last_name == LastName("Lovelace")
        assert command.email == Email("ada@example.com")
        assert command.is_subscribed_to_newsletter is True
        assert command.default_page_id == 3
        assert command.language_id == 2
        assert command.active is True
        assert command.profile_id == 4

    def test_falsy_flags_are_coerced(self, handler, mock_bus, employee_form_data):
        """Test opt-in and active flags become booleans."""
        employee_form_data["optin"] = 0
        employee_form_data["active"] = ""

        handler.update(5, employee_form_data)

        command = dispatched_command(mock_bus)
        assert command.is_subscribed_to_newsletter is False
        assert command.active is False

    def test_unrestricted_sets_password_without_check(
        self, handler, mock_bus, mock_hashing, data_provider, employee_form_data
    ):
        """Test a privileged edit sets the password directly."""
        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).plain_password.value == "analytical-engine"
        mock_hashing.check_hash.assert_not_called()
        data_provider.get_hashed_password_by_id.assert_not_called()

    def test_unrestricted_without_password_keeps_it(self, handler, mock_bus, employee_form_data):
        """Test no password field means no password change."""
        del employee_form_data["password"]

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).plain_password is None

    def test_unrestricted_null_password_keeps_it(self, handler, mock_bus, employee_form_data):
        """Test a null password means no password change."""
        employee_form_data["password"] = None

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).plain_password is None

    def test_unrestricted_ignores_change_password_block(
        self, handler, mock_bus, mock_hashing, employee_form_data
    ):
        """Test the old/new password block only matters under restricted access."""
        del employee_form_data["password"]
        employee_form_data["change_password"] = {
            "old_password": "whatever",
            "new_password": "brand-new-secret",
        }

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).plain_password is None
        mock_hashing.check_hash.assert_not_called()

    def test_restricted_checks_old_password(
        self, handler, mock_bus, access_checker, data_provider, mock_hashing, employee_form_data
    ):
        """Test a restricted edit verifies the old password before changing it."""
        access_checker.is_restricted_access.return_value = True
        employee_form_data["change_password"] = {
            "old_password": "analytical-engine",
            "new_password": "difference-engine",
        }

        handler.update(5, employee_form_data)

        access_checker.is_restricted_access.assert_called_once_with(5)
        data_provider.get_hashed_password_by_id.assert_called_once_with(5)
        mock_hashing.check_hash.assert_called_once_with(
            "analytical-engine", "$2b$04$stored-hash"
        )
        assert dispatched_command(mock_bus).plain_password.value == "difference-engine"

    def test_restricted_wrong_old_password_aborts(
        self, handler, mock_bus, access_checker, mock_hashing, employee_form_data
    ):
        """Test a wrong old password fails with INCORRECT_PASSWORD and dispatches nothing."""
        access_checker.is_restricted_access.return_value = True
        mock_hashing.check_hash.return_value = False
        employee_form_data["change_password"] = {
            "old_password": "wrong",
            "new_password": "new-secret",
        }

        with pytest.raises(EmployeeConstraintException) as exc_info:
            handler.update(5, employee_form_data)

        assert exc_info.value.code == EmployeeConstraintException.INCORRECT_PASSWORD
        mock_bus.handle.assert_not_called()

    def test_restricted_ignores_plain_password_field(
        self, handler, mock_bus, access_checker, mock_hashing, employee_form_data
    ):
        """Test the plain password field cannot bypass the old password check."""
        access_checker.is_restricted_access.return_value = True

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).plain_password is None
        mock_hashing.check_hash.assert_not_called()

    @pytest.mark.parametrize(
        "change_password",
        [
            {"old_password": None, "new_password": "new-secret"},
            {"old_password": "old-secret", "new_password": None},
            {"old_password": None, "new_password": None},
            None,
        ],
    )
    def test_restricted_incomplete_change_is_skipped(
        self, handler, mock_bus, access_checker, mock_hashing, employee_form_data, change_password
    ):
        """Test a password change needs both the old and the new password."""
        access_checker.is_restricted_access.return_value = True
        employee_form_data["change_password"] = change_password

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).plain_password is None
        mock_hashing.check_hash.assert_not_called()

    def test_shop_association_converted_to_ints(self, handler, mock_bus, employee_form_data):
        """Test shop ids from the form are converted to integers."""
        employee_form_data["shop_association"] = ["1", "2", 3]

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).shop_association == [1, 2, 3]

    @pytest.mark.parametrize("empty", [[], "", 0, False])
    def test_falsy_shop_association_becomes_empty(
        self, handler, mock_bus, employee_form_data, empty
    ):
        """Test a present but falsy association clears all shops."""
        employee_form_data["shop_association"] = empty

        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).shop_association == []

    def test_missing_shop_association_is_unchanged(self, handler, mock_bus, employee_form_data):
        """Test an omitted association leaves the stored one alone."""
        handler.update(5, employee_form_data)

        assert dispatched_command(mock_bus).shop_association is None

    def test_invalid_employee_id(self, handler, mock_bus, employee_form_data):
        """Test an invalid id fails before dispatch."""
        with pytest.raises(InvalidEmployeeIdException):
            handler.update(0, employee_form_data)

        mock_bus.handle.assert_not_called()
