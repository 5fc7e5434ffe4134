"""
Configuration Loader - Handles IO operations for configuration management.

This module is responsible for loading and saving configuration from/to
various sources (YAML files, environment variables) while keeping the
ApplicationConfig class focused on data representation and validation.
"""

import os

import yaml

from src.application.config import (
    ApplicationConfig,
    EmployeeConfig,
    Environment,
    LoggingConfig,
    SecurityConfig,
)


class ConfigLoader:
    """Handles loading and saving of configuration from various sources."""

    @classmethod
    def from_env(cls) -> ApplicationConfig:
        """
        Create configuration from environment variables.

        Returns:
            ApplicationConfig: Configuration loaded from environment
        """
        env_str = os.getenv("ENVIRONMENT", "development")
        try:
            environment = Environment(env_str)
        except ValueError:
            raise ValueError(f"Invalid environment: {env_str}")

        return ApplicationConfig(
            environment=environment,
            employee=EmployeeConfig.from_env(),
            security=SecurityConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_yaml(cls, path: str) -> ApplicationConfig:
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ApplicationConfig: Configuration loaded from YAML file
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        config = ApplicationConfig()

        # Handle empty or null YAML files
        if not data:
            return config

        if "environment" in data:
            config.environment = Environment(data["environment"])

        if "employee" in data:
            employee_data = data["employee"]
            config.employee = EmployeeConfig(
                default_shop_association=tuple(
                    int(shop_id)
                    for shop_id in employee_data.get(
                        "default_shop_association", config.employee.default_shop_association
                    )
                ),
                super_admin_profile_id=int(
                    employee_data.get(
                        "super_admin_profile_id", config.employee.super_admin_profile_id
                    )
                ),
            )

        if "security" in data:
            security_data = data["security"]
            config.security = SecurityConfig(
                bcrypt_rounds=int(
                    security_data.get("bcrypt_rounds", config.security.bcrypt_rounds)
                ),
            )

        if "logging" in data:
            log_data = data["logging"]
            config.logging = LoggingConfig(
                level=log_data.get("level", config.logging.level),
                format=log_data.get("format", config.logging.format),
                file=log_data.get("file", config.logging.file),
            )

        return config

    @classmethod
    def to_yaml(cls, config: ApplicationConfig) -> str:
        """
        Convert configuration to YAML string.

        Args:
            config: ApplicationConfig instance to convert

        Returns:
            str: YAML representation of the configuration
        """
        return yaml.dump(config.to_dict(), default_flow_style=False)

    @classmethod
    def save_to_yaml(cls, config: ApplicationConfig, path: str) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: ApplicationConfig instance to save
            path: Path to save YAML file
        """
        with open(path, "w") as f:
            f.write(cls.to_yaml(config))
