from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import DATE_FILTER_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FILTER_FORMAT).date()


def now_local() -> datetime:
    """Current local time, truncated to milliseconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    now = datetime.now()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def elapsed_millis(start: datetime, end: datetime) -> int:
    """Whole milliseconds between two datetimes, floored and never negative."""
    return max(0, (end - start) // timedelta(milliseconds=1))


def to_iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat(timespec="milliseconds")
