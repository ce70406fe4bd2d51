"""
Record fetcher: runs the lookup query for one id against the source database.

One connection per call, closed before returning; failures are raised once as
`IndexerError(ErrorKind.DATA_SOURCE)` and never retried here.
"""

from __future__ import annotations

from typing import Any, Optional

import psycopg

from solr_indexer.domain.errors import IndexerError
from solr_indexer.domain.models import ErrorKind, Record
from solr_indexer.infrastructure.db_factory import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    apply_statement_timeout,
    connect,
)
from solr_indexer.pipeline.query import FORMAT
from solr_indexer.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_STATEMENT_TIMEOUT_MS = 30_000


class RecordFetcher:
    """
    Fetch a single row with a plain psycopg connection.

    `placeholder` is the parameter marker psycopg expects in query text; pass
    it to `build_query` when generating SQL for this fetcher.
    """

    placeholder: str = FORMAT

    def __init__(
        self,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_SECONDS,
        statement_timeout_ms: Optional[int] = DEFAULT_STATEMENT_TIMEOUT_MS,
    ) -> None:
        self._connect_timeout = connect_timeout
        self._statement_timeout_ms = statement_timeout_ms

    def fetch(
        self,
        dsn: str,
        user: Optional[str],
        password: Optional[str],
        query: str,
        record_id: Any,
    ) -> Record:
        """
        Execute `query` with `record_id` as its only parameter and return the
        first row as a column-to-value mapping.

        Raises
        ------
        IndexerError
            With kind DATA_SOURCE when the connection or the query fails, or
            when no row matches `record_id`.
        """
        try:
            conn = connect(dsn, user=user, password=password, connect_timeout=self._connect_timeout)
        except psycopg.Error as exc:
            raise IndexerError(
                ErrorKind.DATA_SOURCE, f"Could not connect to source database: {exc}"
            ) from exc

        try:
            with conn.cursor() as cur:
                apply_statement_timeout(cur, self._statement_timeout_ms)
                cur.execute(query, (record_id,))
                row = cur.fetchone()
        except psycopg.Error as exc:
            raise IndexerError(ErrorKind.DATA_SOURCE, f"Query failed: {exc}") from exc
        finally:
            conn.close()

        if row is None:
            raise IndexerError(ErrorKind.DATA_SOURCE, f"No record found for id {record_id}")

        log.debug("Fetched record", extra={"record_id": record_id, "columns": len(row)})
        return dict(row)


__all__ = ["DEFAULT_STATEMENT_TIMEOUT_MS", "RecordFetcher"]
