import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_clock_test"),
}

PORT = 3000
LOG_LEVEL = "WARNING"

API_CONTACT_NAME = "Time Clock Team"
API_CONTACT_EMAIL = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
