"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SESSION_HEADER = "X-Session-Id"

DEFAULT_POOL_NAME = "lecture_attendance"
DEFAULT_POOL_SIZE = 10
DEFAULT_ACQUIRE_TIMEOUT_SECONDS = 10.0
DEFAULT_CONNECTION_TIMEOUT_SECONDS = 10

# mysql.connector.pooling refuses pools larger than this.
MAX_POOL_SIZE = 32

MAX_REQUEST_BYTES = 5 * 1024 * 1024
