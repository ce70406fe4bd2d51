"""
Infrastructure package for the Solr indexer.

Centralizes database connectivity concerns (connection factory, session
timeouts). Keep this layer focused on I/O and resource management, decoupled
from pipeline/driver logic.
"""

from solr_indexer.infrastructure.db_factory import (
    apply_statement_timeout,
    connect,
    scoped_connection,
)

__all__ = [
    "apply_statement_timeout",
    "connect",
    "scoped_connection",
]
