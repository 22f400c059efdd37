import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "daycare_db"),
}

# Meal slots as local wall-clock times (HH:MM)
MEAL_WINDOWS = {
    "breakfast_start": os.getenv("MEAL_BREAKFAST_START", "09:00"),
    "breakfast_end": os.getenv("MEAL_BREAKFAST_END", "09:30"),
    "am_snack": os.getenv("MEAL_AM_SNACK", "11:00"),
    "lunch": os.getenv("MEAL_LUNCH", "13:00"),
    "pm_snack": os.getenv("MEAL_PM_SNACK", "15:00"),
}

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "daycare.xlsx")

RATE_YEAR_MIN = int(os.getenv("RATE_YEAR_MIN", "2000"))
RATE_YEAR_MAX = int(os.getenv("RATE_YEAR_MAX", "2100"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create the demo account on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
