from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode, errors

from ..core.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    QueryFailedError,
    ServiceUnavailableError,
)
from .connection import ConnectionPool

logger = logging.getLogger(__name__)

_CONNECTIVITY_ERRORS = (errors.InterfaceError, errors.OperationalError, errors.PoolError)


def translate_error(exc: mysql.connector.Error) -> DomainError:
    """Map a driver error onto the service's error kinds."""

    if isinstance(exc, errors.IntegrityError):
        if exc.errno == errorcode.ER_DUP_ENTRY:
            return ConflictError("Record already exists.")
        if exc.errno == errorcode.ER_NO_REFERENCED_ROW_2:
            return NotFoundError("Referenced record does not exist.")
    if isinstance(exc, _CONNECTIVITY_ERRORS):
        return ServiceUnavailableError("Database is unavailable, please retry.")
    return QueryFailedError("Database query failed.")


def _raise_translated(exc: mysql.connector.Error):
    translated = translate_error(exc)
    if isinstance(translated, QueryFailedError):
        logger.error("Query failed: errno=%s %s", exc.errno, exc)
    else:
        logger.warning("Database error mapped to %s: errno=%s %s", translated.category.value, exc.errno, exc)
    raise translated from exc


@contextmanager
def db_cursor(pool: ConnectionPool, *, dictionary: bool = True):
    """Single-statement unit of work: commit on success, rollback on error, always release."""

    with pool.acquire() as conn:
        try:
            cur = conn.cursor(dictionary=dictionary)
            try:
                yield conn, cur
                conn.commit()
            finally:
                cur.close()
        except mysql.connector.Error as exc:
            _rollback_quietly(conn)
            _raise_translated(exc)
        except Exception:
            _rollback_quietly(conn)
            raise


@contextmanager
def db_transaction(pool: ConnectionPool, *, dictionary: bool = True):
    """Explicit multi-statement transaction.

    Any exception raised inside the block, a DomainError included, rolls the
    transaction back before the connection goes back to the pool.
    """

    with pool.acquire() as conn:
        try:
            conn.start_transaction()
            cur = conn.cursor(dictionary=dictionary)
            try:
                yield conn, cur
                conn.commit()
            finally:
                cur.close()
        except mysql.connector.Error as exc:
            _rollback_quietly(conn)
            _raise_translated(exc)
        except Exception:
            _rollback_quietly(conn)
            raise


def _rollback_quietly(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error as exc:
        # The connection is probably gone; the pool resets it on return.
        logger.warning("Rollback failed: %s", exc)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def as_float(value: Any) -> Optional[float]:
    """DECIMAL columns come back as Decimal; the API speaks floats."""

    if value is None:
        return None
    return float(value)
