"""
Permission matrix for the back office.

Permissions are "<resource>:<action>" strings. This module lists them and
the permissions granted to the stock employee profiles.
"""

from typing import ClassVar

# Permission the employee form checks to allow managing other accounts
MANAGE_EMPLOYEES = "employees:update"


class PermissionMatrix:
    """
    Centralized permission matrix for the stock employee profiles.
    """

    PERMISSIONS: ClassVar[frozenset[str]] = frozenset(
        {
            # Administration
            "employees:read",
            "employees:create",
            MANAGE_EMPLOYEES,
            "employees:delete",
            "profiles:read",
            "profiles:update",
            "shops:read",
            # Catalog and sales
            "products:read",
            "products:update",
            "orders:read",
            "orders:update",
            "customers:read",
            "customers:update",
            "translations:update",
        }
    )

    PROFILE_PERMISSIONS: ClassVar[dict[str, list[str]]] = {
        "LOGISTICIAN": [
            "orders:read",
            "orders:update",
            "products:read",
            "customers:read",
        ],
        "TRANSLATOR": [
            "products:read",
            "translations:update",
        ],
        "SALESMAN": [
            "orders:read",
            "orders:update",
            "products:read",
            "products:update",
            "customers:read",
            "customers:update",
        ],
    }

    @classmethod
    def get_profile_permissions(cls, profile: str) -> list[str]:
        """Get all permissions for a profile name."""
        profile_upper = profile.upper()
        if profile_upper == "SUPER_ADMIN":
            # Super admin has all permissions
            return sorted(cls.PERMISSIONS)
        return cls.PROFILE_PERMISSIONS.get(profile_upper, [])
