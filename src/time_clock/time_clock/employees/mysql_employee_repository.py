from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Optional, Sequence

from ..common.validators import parse_employee_id
from ..core.exceptions import StaleRecordError, StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import NO_GUARD, EmployeeRepository

_COLUMNS = "employee_id, last_name, first_name, department, date_created, check_in, check_out, time_elapsed"


def _to_employee(row: Dict[str, Any]) -> Employee:
    elapsed = row.get("time_elapsed")
    return Employee(
        employee_id=int(row["employee_id"]),
        last_name=row["last_name"],
        first_name=row["first_name"],
        department=row["department"],
        date_created=row["date_created"],
        check_in=row.get("check_in"),
        check_out=row.get("check_out"),
        time_elapsed=int(elapsed) if elapsed is not None else None,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        last_name: str,
        first_name: str,
        department: str,
        date_created: datetime,
    ) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(last_name, first_name, department, date_created)
                VALUES(%s,%s,%s,%s)
                """,
                (last_name, first_name, department, date_created),
            )
            employee_id = int(cur.lastrowid)

        return Employee(
            employee_id=employee_id,
            last_name=last_name,
            first_name=first_name,
            department=department,
            date_created=date_created,
        )

    def get_by_id(self, employee_id: Any) -> Optional[Employee]:
        parsed = parse_employee_id(employee_id)
        if parsed is None:
            return None

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (parsed,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self, *, date_created: Optional[date] = None) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if date_created is None:
                cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            else:
                # Half-open range on the raw column keeps idx_employees_date_created usable.
                start = datetime.combine(date_created, time.min)
                cur.execute(
                    f"SELECT {_COLUMNS} FROM employees"
                    " WHERE date_created >= %s AND date_created < %s ORDER BY employee_id",
                    (start, start + timedelta(days=1)),
                )
            return [_to_employee(r) for r in fetchall(cur)]

    def update(self, employee: Employee, *, expected_check_in: Any = NO_GUARD) -> Employee:
        sql = "UPDATE employees SET check_in=%s, check_out=%s, time_elapsed=%s WHERE employee_id=%s"
        params: list[Any] = [employee.check_in, employee.check_out, employee.time_elapsed, employee.employee_id]
        guarded = expected_check_in is not NO_GUARD
        if guarded:
            # <=> is MySQL's NULL-safe equality, so a NULL guard matches "not checked in".
            # A non-NULL guard is a DATETIME(3) value read back earlier; it only compares
            # equal because now_local() truncates to milliseconds before the first write.
            sql += " AND check_in <=> %s"
            params.append(expected_check_in)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            if cur.rowcount > 0:
                return employee

            # rowcount is 0 both for a missing row and for a guard mismatch.
            cur.execute("SELECT employee_id FROM employees WHERE employee_id=%s", (employee.employee_id,))
            if fetchone(cur) is None:
                raise StorageError(f"Employee {employee.employee_id} no longer exists")
            if guarded:
                raise StaleRecordError(f"Employee {employee.employee_id} was modified concurrently")
            return employee
