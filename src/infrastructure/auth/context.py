"""
Context employee.

Describes the employee performing the current back-office request.
"""

from dataclasses import dataclass, field

from .permissions import PermissionMatrix


@dataclass(frozen=True)
class ContextEmployee:
    """The authenticated employee behind a request."""

    id: int
    profile_id: int
    permissions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def for_profile(cls, employee_id: int, profile_id: int, profile_name: str) -> "ContextEmployee":
        """Build a context employee holding the stock permissions of a profile."""
        return cls(
            id=employee_id,
            profile_id=profile_id,
            permissions=frozenset(PermissionMatrix.get_profile_permissions(profile_name)),
        )


class ContextEmployeeProvider:
    """Answers questions about the acting employee."""

    def __init__(self, employee: ContextEmployee, super_admin_profile_id: int) -> None:
        self.employee = employee
        self.super_admin_profile_id = super_admin_profile_id

    def get_id(self) -> int:
        return self.employee.id

    def get_profile_id(self) -> int:
        return self.employee.profile_id

    def is_super_admin(self) -> bool:
        return self.employee.profile_id == self.super_admin_profile_id

    def has_permission(self, permission: str) -> bool:
        """Check a permission; super admins hold every permission."""
        if self.is_super_admin():
            return True
        return permission in self.employee.permissions
