"""
db/connection.py
----------------
Opens and closes PostgreSQL connections.
Every caller gets a fresh psycopg2 connection and must hand it back
through `release_connection()`; connections are never pooled or shared.
"""

import psycopg2

from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)


def get_connection(dsn: str | None = None):
    """
    Open a new database connection.

    Args:
        dsn: Optional connection string; defaults to ``config.DATABASE_URL``.

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        return psycopg2.connect(dsn or DATABASE_URL)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to database: {e}")
        raise


def release_connection(conn) -> None:
    """
    Close a connection obtained from `get_connection()`.

    Args:
        conn: The psycopg2 connection to close. ``None`` is ignored.
    """
    if conn is not None and not conn.closed:
        conn.close()
