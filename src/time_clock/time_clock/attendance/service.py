from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from ..common.datetime_utils import elapsed_millis, now_local
from ..core.constants import MSG_ALREADY_CHECKED_IN, MSG_EMPLOYEE_NOT_FOUND, MSG_NOT_CHECKED_IN
from ..core.enums import AttendanceState
from ..core.exceptions import AlreadyCheckedInError, NotCheckedInError, NotFoundError, StaleRecordError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckOutResult:
    employee: Employee
    time_elapsed: int


class AttendanceService:
    """Check-in/check-out state machine over a single employee record.

    The state is derived from ``Employee.check_in``: OUT when it is None, IN
    otherwise. Each transition writes with a compare-and-set on the check_in
    value that was read, so two racing requests cannot both succeed.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _load(self, employee_id: Any) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(MSG_EMPLOYEE_NOT_FOUND)
        return employee

    def check_in(self, employee_id: Any, *, now: datetime | None = None) -> Employee:
        now = now or now_local()
        employee = self._load(employee_id)

        if employee.state is AttendanceState.IN:
            raise AlreadyCheckedInError(MSG_ALREADY_CHECKED_IN)

        # time_elapsed keeps the previous session's duration until the next check-out.
        updated = replace(employee, check_in=now, check_out=None)
        try:
            self._employees.update(updated, expected_check_in=None)
        except StaleRecordError:
            raise AlreadyCheckedInError(MSG_ALREADY_CHECKED_IN)

        logger.info("Employee id=%s checked in at %s", updated.employee_id, now.isoformat())
        return updated

    def check_out(self, employee_id: Any, *, now: datetime | None = None) -> CheckOutResult:
        now = now or now_local()
        employee = self._load(employee_id)

        if employee.state is AttendanceState.OUT:
            raise NotCheckedInError(MSG_NOT_CHECKED_IN)

        time_elapsed = elapsed_millis(employee.check_in, now)
        updated = replace(employee, check_in=None, check_out=now, time_elapsed=time_elapsed)
        try:
            self._employees.update(updated, expected_check_in=employee.check_in)
        except StaleRecordError:
            raise NotCheckedInError(MSG_NOT_CHECKED_IN)

        logger.info("Employee id=%s checked out after %sms", updated.employee_id, time_elapsed)
        return CheckOutResult(employee=updated, time_elapsed=time_elapsed)
