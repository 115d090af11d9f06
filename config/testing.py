import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "office_test_db"),
}

# Each app instance gets its own in-memory database.
DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
SQL_ECHO = False

AUTO_INIT_DB = True
AUTO_SEED_DB = True
