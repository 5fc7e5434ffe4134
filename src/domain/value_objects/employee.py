"""Value objects for employee data submitted through the back office."""

# Standard library imports
import re
from typing import Any, ClassVar

# Local imports
from ..exceptions import (
    EmployeeConstraintCode,
    EmployeeConstraintException,
    InvalidEmployeeIdException,
)
from .base import StringValueObject, ValueObject


class EmployeeId(ValueObject):
    """Immutable identifier of a stored employee."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        """Initialize EmployeeId with validation.

        Args:
            value: Positive integer identifier

        Raises:
            InvalidEmployeeIdException: If value is not a positive integer
        """
        # bool is an int subclass but never a valid identifier
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidEmployeeIdException(value)

        self._value = value

    @property
    def value(self) -> int:
        """Get the scalar identifier."""
        return self._value

    def __eq__(self, other: object) -> bool:
        """Check equality with another EmployeeId."""
        if not isinstance(other, EmployeeId):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        return hash(self._value)

    def __repr__(self) -> str:
        """Get string representation for debugging."""
        return f"EmployeeId({self._value})"

    def __int__(self) -> int:
        return self._value


class _PersonName(StringValueObject):
    """Shared validation for first and last names."""

    __slots__ = ()

    MAX_LENGTH: ClassVar[int] = 255
    # Characters the storefront refuses in customer and employee names
    _FORBIDDEN: ClassVar[re.Pattern[str]] = re.compile(r'[0-9!<>,;?=+()@#"°{}_$%:¤|]')

    _CODE: ClassVar[EmployeeConstraintCode]
    _FIELD: ClassVar[str]

    def __init__(self, value: str) -> None:
        normalized = value.strip() if isinstance(value, str) else ""

        if not normalized:
            self._fail(value, "cannot be empty")
        if len(normalized) > self.MAX_LENGTH:
            self._fail(value, f"cannot exceed {self.MAX_LENGTH} characters")
        if self._FORBIDDEN.search(normalized):
            self._fail(value, "contains forbidden characters")

        self._value = normalized

    def _fail(self, value: Any, reason: str) -> None:
        label = self._FIELD.replace("_", " ").capitalize()
        raise EmployeeConstraintException(
            f"{label} {reason}: {value!r}",
            self._CODE,
            field=self._FIELD,
            value=value,
        )


class FirstName(_PersonName):
    """Employee first name."""

    __slots__ = ()

    _CODE = EmployeeConstraintCode.INVALID_FIRST_NAME
    _FIELD = "first_name"


class LastName(_PersonName):
    """Employee last name."""

    __slots__ = ()

    _CODE = EmployeeConstraintCode.INVALID_LAST_NAME
    _FIELD = "last_name"


class Email(StringValueObject):
    """Employee email address, used as the login."""

    __slots__ = ()

    MAX_LENGTH: ClassVar[int] = 255
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __init__(self, value: str) -> None:
        """Initialize Email with validation.

        Args:
            value: The email address

        Raises:
            EmployeeConstraintException: With code INVALID_EMAIL
        """
        normalized = value.strip() if isinstance(value, str) else ""

        if len(normalized) > self.MAX_LENGTH or not self._PATTERN.match(normalized):
            raise EmployeeConstraintException(
                f"Invalid email: {value!r}",
                EmployeeConstraintCode.INVALID_EMAIL,
                field="email",
                value=value,
            )

        self._value = normalized


class Password(StringValueObject):
    """Plain text password on its way to the hashing service."""

    __slots__ = ()

    MIN_LENGTH: ClassVar[int] = 5
    # bcrypt ignores everything past 72 bytes
    MAX_BYTES: ClassVar[int] = 72

    def __init__(self, value: str) -> None:
        """Initialize Password with validation.

        Args:
            value: The plain text password, kept as typed

        Raises:
            EmployeeConstraintException: With code INVALID_PASSWORD
        """
        if not isinstance(value, str) or len(value) < self.MIN_LENGTH:
            raise EmployeeConstraintException(
                f"Password must be at least {self.MIN_LENGTH} characters long",
                EmployeeConstraintCode.INVALID_PASSWORD,
                field="password",
            )
        if len(value.encode("utf-8")) > self.MAX_BYTES:
            raise EmployeeConstraintException(
                f"Password must not exceed {self.MAX_BYTES} bytes",
                EmployeeConstraintCode.INVALID_PASSWORD,
                field="password",
            )

        self._value = value

    def __repr__(self) -> str:
        """Never leak the password into logs or tracebacks."""
        return "Password('***')"

    def __str__(self) -> str:
        return "***"
