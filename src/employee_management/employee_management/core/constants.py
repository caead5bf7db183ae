"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

REPORT_CACHE_TTL_SECONDS = 30 * 60
HIRING_TREND_MONTHS = 12
ATTENDANCE_PATTERN_DAYS = 30

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

JWT_ALGORITHM = "HS256"
DEFAULT_JWT_EXPIRY_MINUTES = 60
JWT_LEEWAY_SECONDS = 60
MIN_PASSWORD_LENGTH = 6

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
ADDRESS_MAX_LENGTH = 500
DESCRIPTION_MAX_LENGTH = 500
NOTES_MAX_LENGTH = 500
PERFORMANCE_TEXT_MAX_LENGTH = 1000

DEFAULT_SEED_EMPLOYEE_COUNT = 200
DEFAULT_SEED_ATTENDANCE_DAYS = 90
