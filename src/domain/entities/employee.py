"""
Employee Entity - An administrative user of the back office
"""

# Standard library imports
from dataclasses import dataclass, field

# Local imports
from ..value_objects import Email, EmployeeId, FirstName, LastName


@dataclass
class Employee:
    """
    Employee entity.

    Holds the hashed password only; plain passwords never reach the entity.
    """

    # Identity
    id: EmployeeId
    first_name: FirstName
    last_name: LastName
    email: Email
    password_hash: str

    # Preferences
    newsletter: bool = False
    default_page_id: int = 0
    language_id: int = 0

    # Access
    active: bool = True
    profile_id: int = 0
    shop_association: list[int] = field(default_factory=list)

    def is_super_admin(self, super_admin_profile_id: int) -> bool:
        """Check if the employee holds the super admin profile."""
        return self.profile_id == super_admin_profile_id

    def is_active_super_admin(self, super_admin_profile_id: int) -> bool:
        """Check if the employee is an enabled super admin."""
        return self.active and self.is_super_admin(super_admin_profile_id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
