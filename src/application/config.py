"""
Application Configuration - Central configuration management.

This module provides configuration management for the application,
including environment variables and runtime settings of the employee
administration panel.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


def _parse_shop_ids(raw: str) -> tuple[int, ...]:
    """Parse a comma separated list of shop ids."""
    return tuple(int(part) for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class EmployeeConfig:
    """Employee administration configuration."""

    # Shops a new employee is associated with, and every super admin always
    default_shop_association: tuple[int, ...] = (1,)
    super_admin_profile_id: int = 1

    @classmethod
    def from_env(cls) -> "EmployeeConfig":
        """Create configuration from environment variables."""
        return cls(
            default_shop_association=_parse_shop_ids(
                os.getenv("EMPLOYEE_DEFAULT_SHOP_ASSOCIATION", "1")
            ),
            super_admin_profile_id=int(os.getenv("EMPLOYEE_SUPER_ADMIN_PROFILE_ID", "1")),
        )


@dataclass(frozen=True)
class SecurityConfig:
    """Password hashing configuration."""

    bcrypt_rounds: int = 12

    @classmethod
    def from_env(cls) -> "SecurityConfig":
        """Create configuration from environment variables."""
        return cls(bcrypt_rounds=int(os.getenv("SECURITY_BCRYPT_ROUNDS", "12")))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    file: str | None = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "json"),
            file=file_path if file_path else None,
        )


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    employee: EmployeeConfig = field(default_factory=EmployeeConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "employee": {
                "default_shop_association": list(self.employee.default_shop_association),
                "super_admin_profile_id": self.employee.super_admin_profile_id,
            },
            "security": {
                "bcrypt_rounds": self.security.bcrypt_rounds,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file": self.logging.file,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises exception otherwise
        """
        if not self.employee.default_shop_association:
            raise ValueError("Default shop association cannot be empty")
        if any(shop_id <= 0 for shop_id in self.employee.default_shop_association):
            raise ValueError("Shop ids must be positive integers")
        if self.employee.super_admin_profile_id <= 0:
            raise ValueError("Super admin profile id must be a positive integer")

        # bcrypt accepts cost factors 4..31
        if not 4 <= self.security.bcrypt_rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        if self.environment == Environment.PRODUCTION and self.security.bcrypt_rounds < 10:
            raise ValueError("bcrypt rounds below 10 are not allowed in production")

        if self.logging.format not in ("json", "text"):
            raise ValueError(f"Unknown log format: {self.logging.format}")

        return True


# Global configuration singleton
_config: ApplicationConfig | None = None


def get_config() -> ApplicationConfig:
    """
    Get the application configuration singleton.

    Returns:
        ApplicationConfig: The application configuration
    """
    global _config
    if _config is None:
        # Imported here, config_loader depends on this module
        from src.application import config_loader

        _config = config_loader.ConfigLoader.from_env()
    return _config


def set_config(config: ApplicationConfig) -> None:
    """
    Set the application configuration.

    Args:
        config: The new configuration
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the configuration singleton."""
    global _config
    _config = None
