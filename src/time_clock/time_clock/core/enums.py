from __future__ import annotations

from enum import Enum


class AttendanceState(str, Enum):
    """Attendance state derived from the presence of an open check-in."""

    IN = "IN"
    OUT = "OUT"
