"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3000
DATE_FILTER_FORMAT = "%Y-%m-%d"

MSG_EMPLOYEE_NOT_FOUND = "Employee not found"
MSG_ALREADY_CHECKED_IN = "Employee is already checked in"
MSG_NOT_CHECKED_IN = "Employee has not checked in"

API_TITLE = "Biometric Time Clock API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API for managing biometric time clock"
OPENAPI_VERSION = "3.0.2"
