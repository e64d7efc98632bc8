import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "siopamb_test"),
}

DEBUG = False
TESTING = True

PASSWORD_MIN_LENGTH = 4
ADMIN_DEFAULT_PASSWORD = "adm"
SESSION_DAYS = 1

AUTO_INIT_DB = False
