from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import to_iso
from ..core.enums import AttendanceState


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee and their current attendance timestamps.

    Note: Plain data object (no DB access). Mutations produce a new instance
    via ``dataclasses.replace``.
    """

    employee_id: int
    last_name: str
    first_name: str
    department: str
    date_created: datetime
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    time_elapsed: Optional[int] = None

    @property
    def state(self) -> AttendanceState:
        return AttendanceState.IN if self.check_in is not None else AttendanceState.OUT

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape returned by the HTTP API."""

        return {
            "id": self.employee_id,
            "lastName": self.last_name,
            "firstName": self.first_name,
            "department": self.department,
            "dateCreated": to_iso(self.date_created),
            "checkIn": to_iso(self.check_in),
            "checkOut": to_iso(self.check_out),
            "timeElapsed": self.time_elapsed,
        }
