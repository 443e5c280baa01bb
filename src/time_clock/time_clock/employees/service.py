from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import MSG_EMPLOYEE_NOT_FOUND
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: create, fetch and list employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def create_employee(
        self,
        *,
        last_name: Optional[str],
        first_name: Optional[str],
        department: Optional[str],
        now: datetime | None = None,
    ) -> Employee:
        last_name = require_non_empty(last_name, "lastName")
        first_name = require_non_empty(first_name, "firstName")
        department = require_non_empty(department, "department")

        employee = self._employees.create(
            last_name=last_name,
            first_name=first_name,
            department=department,
            date_created=now or now_local(),
        )
        logger.info("Created employee id=%s department=%s", employee.employee_id, employee.department)
        return employee

    def get_employee(self, employee_id: Any) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(MSG_EMPLOYEE_NOT_FOUND)
        return employee

    def list_employees(self, *, date_created: Optional[str] = None) -> list[Employee]:
        """All employees, or only those created on the given YYYY-MM-DD day."""

        if not date_created:
            return list(self._employees.list_all())

        try:
            day = parse_iso_date(date_created.strip())
        except ValueError:
            raise ValidationError("dateCreated must be formatted as YYYY-MM-DD")
        return list(self._employees.list_all(date_created=day))
