"""
In-memory Employee Repository

Stores employees in process memory. Reads and writes go through a
re-entrant lock and entities are copied at the boundary, so callers never
share mutable state with the store.
"""

# Standard library imports
import logging
import threading
from dataclasses import replace

# Local imports
from src.domain.entities.employee import Employee
from src.domain.exceptions import EmailAlreadyUsedException, EmployeeNotFoundException
from src.domain.value_objects import Email, EmployeeId

logger = logging.getLogger(__name__)


def _copy(employee: Employee) -> Employee:
    return replace(employee, shop_association=list(employee.shop_association))


class InMemoryEmployeeRepository:
    """Employee repository kept in a dictionary keyed by employee id."""

    def __init__(self) -> None:
        self._employees: dict[int, Employee] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    def next_id(self) -> EmployeeId:
        with self._lock:
            self._last_id += 1
            return EmployeeId(self._last_id)

    def add(self, employee: Employee) -> None:
        with self._lock:
            if self._find_by_email(employee.email) is not None:
                raise EmailAlreadyUsedException(employee.email.value)

            self._employees[employee.id.value] = _copy(employee)
            self._last_id = max(self._last_id, employee.id.value)

        logger.debug(f"Stored employee {employee.id.value}")

    def save(self, employee: Employee) -> None:
        with self._lock:
            if employee.id.value not in self._employees:
                raise EmployeeNotFoundException(employee.id.value)

            owner = self._find_by_email(employee.email)
            if owner is not None and owner.id != employee.id:
                raise EmailAlreadyUsedException(employee.email.value)

            self._employees[employee.id.value] = _copy(employee)

    def get(self, employee_id: EmployeeId) -> Employee:
        with self._lock:
            employee = self._employees.get(employee_id.value)
            if employee is None:
                raise EmployeeNotFoundException(employee_id.value)
            return _copy(employee)

    def find_by_email(self, email: Email) -> Employee | None:
        with self._lock:
            employee = self._find_by_email(email)
            return _copy(employee) if employee is not None else None

    def count_active_super_admins(self, super_admin_profile_id: int) -> int:
        with self._lock:
            return sum(
                1
                for employee in self._employees.values()
                if employee.is_active_super_admin(super_admin_profile_id)
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def _find_by_email(self, email: Email) -> Employee | None:
        # Logins are case insensitive
        wanted = email.value.lower()
        for employee in self._employees.values():
            if employee.email.value.lower() == wanted:
                return employee
        return None
