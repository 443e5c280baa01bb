from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

import pytest

from src.time_clock.time_clock.common.validators import parse_employee_id
from src.time_clock.time_clock.container import build_container
from src.time_clock.time_clock.core.exceptions import StaleRecordError, StorageError
from src.time_clock.time_clock.employees.model import Employee
from src.time_clock.time_clock.employees.repository import NO_GUARD


class InMemoryEmployees:
    """Employee store double honoring the same contract as the MySQL repository."""

    def __init__(self):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1
        self.unreachable = False

    def _ensure_reachable(self) -> None:
        if self.unreachable:
            raise StorageError("Store is unreachable")

    def create(self, *, last_name: str, first_name: str, department: str, date_created: datetime) -> Employee:
        self._ensure_reachable()
        employee = Employee(
            employee_id=self._next_id,
            last_name=last_name,
            first_name=first_name,
            department=department,
            date_created=date_created,
        )
        self._rows[employee.employee_id] = employee
        self._next_id += 1
        return employee

    def get_by_id(self, employee_id: Any) -> Optional[Employee]:
        self._ensure_reachable()
        parsed = parse_employee_id(employee_id)
        if parsed is None:
            return None
        return self._rows.get(parsed)

    def list_all(self, *, date_created: Optional[date] = None):
        self._ensure_reachable()
        rows = sorted(self._rows.values(), key=lambda e: e.employee_id)
        if date_created is None:
            return rows
        return [e for e in rows if e.date_created.date() == date_created]

    def update(self, employee: Employee, *, expected_check_in: Any = NO_GUARD) -> Employee:
        self._ensure_reachable()
        current = self._rows.get(employee.employee_id)
        if current is None:
            raise StorageError(f"Employee {employee.employee_id} no longer exists")
        if expected_check_in is not NO_GUARD and current.check_in != expected_check_in:
            raise StaleRecordError(f"Employee {employee.employee_id} was modified concurrently")
        self._rows[employee.employee_id] = employee
        return employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 0, 0)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def container(employees_repo):
    return build_container(employees_repo=employees_repo)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.time_clock.time_clock.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
