import os

from . import env_bool
from .base import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

LECTURER_PASSWORD = os.getenv("LECTURER_PASSWORD", "dev-lecturer-password")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the app applies database/schema.sql on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_bool("AUTO_INIT_DB", True)
# Optional: also seed the demo lecture on startup
AUTO_SEED_DB = env_bool("AUTO_SEED_DB", True)
