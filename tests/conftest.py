"""Global pytest configuration and fixtures."""

# Standard library imports
import sys
from pathlib import Path
from typing import Any
from unittest.mock import Mock

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Make the repository root importable so `src.*` resolves
sys.path.insert(0, str(Path(__file__).parent.parent))

# Local imports
from src.application.config import reset_config
from src.domain.entities.employee import Employee
from src.domain.value_objects import Email, EmployeeId, FirstName, LastName
from src.infrastructure.auth.hashing import Hashing
from src.infrastructure.repositories.employee_repository import InMemoryEmployeeRepository

SALESMAN_PROFILE_ID = 4


@pytest.fixture
def hashing() -> Hashing:
    """Bcrypt hashing with the minimum cost factor to keep tests fast."""
    return Hashing(rounds=4)


@pytest.fixture
def repository() -> InMemoryEmployeeRepository:
    """Provides an empty in-memory employee repository."""
    return InMemoryEmployeeRepository()


@pytest.fixture
def mock_bus() -> Mock:
    """Provides a mock command bus returning employee 42."""
    bus = Mock()
    bus.handle.return_value = EmployeeId(42)
    return bus


@pytest.fixture
def employee_form_data() -> dict[str, Any]:
    """Provides a submitted employee form."""
    return {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "email": "ada@example.com",
        "password": "analytical-engine",
        "optin": "1",
        "default_page": "3",
        "language": "2",
        "active": True,
        "profile": str(SALESMAN_PROFILE_ID),
    }


@pytest.fixture
def make_employee(hashing):
    """Factory creating stored-shape employees."""

    def _make(
        employee_id: int = 1,
        email: str = "ada@example.com",
        password: str = "analytical-engine",
        profile_id: int = SALESMAN_PROFILE_ID,
        active: bool = True,
    ) -> Employee:
        return Employee(
            id=EmployeeId(employee_id),
            first_name=FirstName("Ada"),
            last_name=LastName("Lovelace"),
            email=Email(email),
            password_hash=hashing.hash(password),
            newsletter=False,
            default_page_id=1,
            language_id=1,
            active=active,
            profile_id=profile_id,
            shop_association=[1],
        )

    return _make


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the configuration singleton between tests."""
    reset_config()
    yield
    reset_config()


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
