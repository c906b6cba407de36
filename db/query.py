"""
db/query.py
-----------
Read-only query execution.
Runs one SQL statement on its own connection and decodes every raw
result row through a caller-supplied mapper.
"""

from typing import Any, Callable, Optional, Sequence

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

RowMapper = Callable[[tuple], Any]


def fetch_rows(
    sql: str,
    params: Optional[Sequence[Any]] = None,
    row_mapper: Optional[RowMapper] = None,
) -> list:
    """
    Execute a SELECT and return the decoded rows in result order.

    Args:
        sql: The query text.
        params: Optional positional parameters for ``%s`` placeholders.
        row_mapper: Converts one raw DB tuple into the caller's row shape.
            When omitted the raw tuples are returned unchanged.

    Returns:
        A list with one decoded entry per result row.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            raw = cur.fetchall()
        logger.debug(f"Fetched {len(raw)} rows")
        if row_mapper is None:
            return list(raw)
        return [row_mapper(r) for r in raw]
    except Exception as e:
        logger.error(f"Query failed: {e}")
        raise
    finally:
        release_connection(conn)
