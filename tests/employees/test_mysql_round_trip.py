from __future__ import annotations

import importlib
import os
from dataclasses import replace
from datetime import timedelta

import pytest

from src.time_clock.time_clock.common.datetime_utils import now_local
from src.time_clock.time_clock.core.exceptions import StaleRecordError
from src.time_clock.time_clock.database.bootstrap import apply_schema
from src.time_clock.time_clock.database.connection import DBConfig, DatabaseConnection
from src.time_clock.time_clock.employees.mysql_employee_repository import MySQLEmployeeRepository

pytestmark = [
    pytest.mark.mysql,
    pytest.mark.skipif(os.getenv("TIME_CLOCK_MYSQL_TESTS") != "1", reason="needs a live MySQL server"),
]


@pytest.fixture
def repo():
    db_config = importlib.import_module("config.testing").DB_CONFIG
    apply_schema(db_config)
    return MySQLEmployeeRepository(DatabaseConnection(DBConfig.from_dict(db_config)))


def test_check_in_read_back_from_datetime3_satisfies_the_guard(repo):
    created = repo.create(last_name="Doe", first_name="John", department="HR", date_created=now_local())
    checked_in = replace(created, check_in=now_local())
    repo.update(checked_in, expected_check_in=None)

    stored = repo.get_by_id(created.employee_id)
    assert stored.check_in == checked_in.check_in

    out = now_local() + timedelta(seconds=1)
    checked_out = replace(stored, check_in=None, check_out=out, time_elapsed=1000)
    assert repo.update(checked_out, expected_check_in=stored.check_in) == checked_out


def test_guard_on_a_different_timestamp_is_stale(repo):
    created = repo.create(last_name="Roe", first_name="Jane", department="IT", date_created=now_local())
    checked_in = replace(created, check_in=now_local())
    repo.update(checked_in, expected_check_in=None)

    with pytest.raises(StaleRecordError):
        repo.update(
            replace(checked_in, check_in=None, check_out=now_local()),
            expected_check_in=checked_in.check_in + timedelta(milliseconds=1),
        )
