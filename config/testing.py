import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "daycare_test"),
}

MEAL_WINDOWS = {
    "breakfast_start": "09:00",
    "breakfast_end": "09:30",
    "am_snack": "11:00",
    "lunch": "13:00",
    "pm_snack": "15:00",
}

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
EXPORT_FILENAME = "daycare.xlsx"

RATE_YEAR_MIN = 2000
RATE_YEAR_MAX = 2100

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
