import os

from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_app_test"),
    "pool_size": 4,
    "acquire_timeout": 2.0,
    "connection_timeout": 5,
}

DEFAULT_LECTURE_ID = "CS101_L1"
REQUIRE_PROFILE_IMAGE = False
LECTURER_PASSWORD = "test-password"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
