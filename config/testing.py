import os

SECRET_KEY = "test-secret-key-with-at-least-32-bytes"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ems_test"),
}

JWT_ISSUER = "EMS.API"
JWT_AUDIENCE = "EMS.Client"
JWT_EXPIRY_MINUTES = 60

REPORT_CACHE_TTL_SECONDS = 1800

SEED_EMPLOYEE_COUNT = 20
SEED_ATTENDANCE_DAYS = 10

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
