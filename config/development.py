import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "office_db"),
}

# Full SQLAlchemy URL; when set it replaces the MySQL URL built from DB_CONFIG.
DATABASE_URL = os.getenv("DATABASE_URL") or None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
SQL_ECHO = bool(int(os.getenv("SQL_ECHO", "0")))

# If enabled, app will create missing tables on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the default roles on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
