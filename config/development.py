import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me-32-bytes-long")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ems_db"),
}

JWT_ISSUER = os.getenv("JWT_ISSUER", "EMS.API")
JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "EMS.Client")
JWT_EXPIRY_MINUTES = int(os.getenv("JWT_EXPIRY_MINUTES", "60"))

REPORT_CACHE_TTL_SECONDS = int(os.getenv("REPORT_CACHE_TTL_SECONDS", "1800"))

SEED_EMPLOYEE_COUNT = int(os.getenv("SEED_EMPLOYEE_COUNT", "200"))
SEED_ATTENDANCE_DAYS = int(os.getenv("SEED_ATTENDANCE_DAYS", "90"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
