"""Settings shared by every environment."""
import os

from . import env_bool, env_csv

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_app"),
    # Requests beyond pool_size wait up to acquire_timeout seconds, then get 503.
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
    "acquire_timeout": float(os.getenv("DB_ACQUIRE_TIMEOUT", "10")),
    "connection_timeout": int(os.getenv("DB_CONNECTION_TIMEOUT", "10")),
}

# Single-section mode: roster requests without a session act on this lecture.
# Set to an empty string to require a login for every roster request.
DEFAULT_LECTURE_ID = os.getenv("DEFAULT_LECTURE_ID", "CS101_L1")

# One enrollment client sends a profile image, the other does not.
REQUIRE_PROFILE_IMAGE = env_bool("REQUIRE_PROFILE_IMAGE", False)

LECTURER_PASSWORD = os.getenv("LECTURER_PASSWORD", "")

MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(5 * 1024 * 1024)))
CORS_ORIGINS = env_csv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
