"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the check-in/check-out rules live in services.
"""

import importlib

from config import get_settings_module

from src.time_clock.time_clock.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    employee = container.employee_service.create_employee(last_name="Doe", first_name="John", department="HR")
    container.attendance_service.check_in(employee.employee_id)
    result = container.attendance_service.check_out(employee.employee_id)
    print(result.employee.to_dict())


if __name__ == "__main__":
    main()
