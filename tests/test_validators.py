from datetime import datetime

import pytest

from src.time_clock.time_clock.common.datetime_utils import elapsed_millis, now_local, parse_iso_date
from src.time_clock.time_clock.common.validators import parse_employee_id, require_non_empty
from src.time_clock.time_clock.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "raw, expected",
    [(5, 5), ("5", 5), (" 12 ", 12), (0, None), ("abc", None), (True, None), (None, None), ("-3", None)],
)
def test_parse_employee_id(raw, expected):
    assert parse_employee_id(raw) == expected


def test_require_non_empty_strips_and_rejects_blank():
    assert require_non_empty("  HR ", "department") == "HR"
    with pytest.raises(ValidationError, match="department is required"):
        require_non_empty(" ", "department")


def test_elapsed_millis_floors():
    start = datetime(2026, 2, 1, 8, 0, 0)

    assert elapsed_millis(start, datetime(2026, 2, 1, 8, 0, 1, 999)) == 1000


def test_parse_iso_date_rejects_other_formats():
    assert parse_iso_date("2021-01-05").isoformat() == "2021-01-05"
    with pytest.raises(ValueError):
        parse_iso_date("01/05/2021")


def test_now_local_has_millisecond_precision():
    # Stored DATETIME(3) values must round-trip unchanged for the check_in guard.
    assert now_local().microsecond % 1000 == 0
