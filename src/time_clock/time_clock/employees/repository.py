from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Protocol, Sequence

from .model import Employee

# Sentinel for EmployeeRepository.update: no compare-and-set on check_in.
NO_GUARD: Any = object()


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def create(
        self,
        *,
        last_name: str,
        first_name: str,
        department: str,
        date_created: datetime,
    ) -> Employee:
        raise NotImplementedError

    def get_by_id(self, employee_id: Any) -> Optional[Employee]:
        """Exact lookup; malformed ids return None instead of raising."""

        raise NotImplementedError

    def list_all(self, *, date_created: Optional[date] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def update(self, employee: Employee, *, expected_check_in: Any = NO_GUARD) -> Employee:
        """Persist check_in/check_out/time_elapsed of an existing record.

        When ``expected_check_in`` is given the write only applies if the stored
        check_in still equals it, otherwise StaleRecordError is raised.
        StorageError is raised when the record no longer exists.
        """

        raise NotImplementedError
