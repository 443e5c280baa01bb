from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService


def build_container(*, db_config: Optional[dict] = None, employees_repo: Optional[EmployeeRepository] = None) -> Container:
    """Wire repositories and services.

    Pass ``employees_repo`` to run against another store (tests use an
    in-memory one); otherwise a MySQL repository is built from ``db_config``.
    """

    conn = None
    if employees_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no employees_repo is given")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        employees_repo = MySQLEmployeeRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(employees_repo),
    )
