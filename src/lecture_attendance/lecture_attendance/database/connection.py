from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import (
    DEFAULT_ACQUIRE_TIMEOUT_SECONDS,
    DEFAULT_CONNECTION_TIMEOUT_SECONDS,
    DEFAULT_POOL_NAME,
    DEFAULT_POOL_SIZE,
    MAX_POOL_SIZE,
)
from ..core.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    acquire_timeout: float = DEFAULT_ACQUIRE_TIMEOUT_SECONDS
    connection_timeout: int = DEFAULT_CONNECTION_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_app")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
            acquire_timeout=float(db_config.get("acquire_timeout", DEFAULT_ACQUIRE_TIMEOUT_SECONDS)),
            connection_timeout=int(db_config.get("connection_timeout", DEFAULT_CONNECTION_TIMEOUT_SECONDS)),
        )

    def connect_args(self) -> dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "database": self.database,
            "connection_timeout": self.connection_timeout,
        }


def _mysql_pool_factory(config: DBConfig):
    return pooling.MySQLConnectionPool(
        pool_name=DEFAULT_POOL_NAME,
        pool_size=config.pool_size,
        pool_reset_session=True,
        **config.connect_args(),
    )


class ConnectionPool:
    """Bounded pool of MySQL connections shared by every repository.

    mysql-connector's own pool raises ``PoolError`` as soon as it is exhausted.
    A semaphore sized to the pool makes extra callers wait for a free
    connection instead, up to ``acquire_timeout`` seconds, after which they get
    ``ServiceUnavailableError``.

    The underlying pool opens all of its connections when it is built, so it is
    created on first use rather than at application start.
    """

    def __init__(self, config: DBConfig, *, pool_factory: Optional[Callable[[DBConfig], Any]] = None):
        if not 1 <= config.pool_size <= MAX_POOL_SIZE:
            raise ValueError(f"pool_size must be between 1 and {MAX_POOL_SIZE}")
        self._config = config
        self._pool_factory = pool_factory or _mysql_pool_factory
        self._pool = None
        self._pool_lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(config.pool_size)

    def _get_pool(self):
        with self._pool_lock:
            if self._pool is None:
                self._pool = self._pool_factory(self._config)
                logger.info(
                    "MySQL pool created (size=%s, db=%s@%s:%s/%s)",
                    self._config.pool_size,
                    self._config.user,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                )
            return self._pool

    @contextmanager
    def acquire(self, timeout: Optional[float] = None) -> Iterator[Any]:
        wait = self._config.acquire_timeout if timeout is None else timeout
        if not self._slots.acquire(timeout=wait):
            logger.warning("No database connection free after %.1fs", wait)
            raise ServiceUnavailableError("Database is busy, please retry.")
        try:
            try:
                conn = self._get_pool().get_connection()
            except mysql.connector.Error as exc:
                logger.error("Database connection failed: %s", exc)
                raise ServiceUnavailableError("Database is unavailable, please retry.") from exc
            try:
                yield conn
            finally:
                self._release(conn)
        finally:
            self._slots.release()

    @staticmethod
    def _release(conn) -> None:
        # Returns the connection to the pool. With pool_reset_session the
        # driver resets the session here, which fails once the server is gone.
        try:
            conn.close()
        except mysql.connector.Error as exc:
            logger.warning("Releasing database connection failed: %s", exc)
