"""
Database connection factory for the Solr indexer.

Each job opens one dedicated PostgreSQL connection and closes it before the
job finishes; pooling and reconnection are left to the host worker, so this
module only composes connection arguments and applies session timeouts.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import psycopg
from psycopg import Connection
from psycopg.rows import dict_row

DEFAULT_CONNECT_TIMEOUT_SECONDS = 10


def connect(
    dsn: str,
    user: Optional[str] = None,
    password: Optional[str] = None,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_SECONDS,
) -> Connection[Dict[str, Any]]:
    """
    Open a dedicated connection whose cursors return rows as dictionaries.

    Parameters
    ----------
    dsn : str
        libpq conninfo string or `postgresql://` URL.
    user, password : str | None
        Credentials; when given they override any present in `dsn`.
    connect_timeout : int
        Seconds to wait for the server before giving up.

    Raises
    ------
    psycopg.OperationalError
        If the server cannot be reached or rejects the credentials.
    """
    kwargs: Dict[str, Any] = {"connect_timeout": connect_timeout}
    if user:
        kwargs["user"] = user
    if password:
        kwargs["password"] = password
    return psycopg.connect(dsn, row_factory=dict_row, **kwargs)


def apply_statement_timeout(cur: psycopg.Cursor[Any], timeout_ms: Optional[int]) -> None:
    """Bound every statement of the current session to `timeout_ms` milliseconds."""
    if not timeout_ms:
        return
    cur.execute("SELECT set_config('statement_timeout', %s, false)", (str(int(timeout_ms)),))


@contextmanager
def scoped_connection(
    dsn: str,
    user: Optional[str] = None,
    password: Optional[str] = None,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_SECONDS,
) -> Generator[Connection[Dict[str, Any]], None, None]:
    """
    Context manager yielding a connection that is always closed on exit.

    Example
    -------
        with scoped_connection(dsn, "indexer", "secret") as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
    """
    conn = connect(dsn, user=user, password=password, connect_timeout=connect_timeout)
    try:
        yield conn
    finally:
        conn.close()


__all__ = [
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "apply_statement_timeout",
    "connect",
    "scoped_connection",
]
