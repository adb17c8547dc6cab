import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_tracker"),
}

# Daily rate = MONTHLY_BASE_SALARY / SALARY_DIVISOR
MONTHLY_BASE_SALARY = os.getenv("MONTHLY_BASE_SALARY", "8500")
SALARY_DIVISOR = os.getenv("SALARY_DIVISOR", "26")
CURRENCY = os.getenv("CURRENCY", "RMB")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed sample holidays on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
