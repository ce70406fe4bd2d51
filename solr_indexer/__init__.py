"""
Solr Indexer - job handler that indexes one database record into Apache Solr.

Given a record id, the handler:

- builds a single-row SELECT from the configured table, fields and id column
- fetches the row from the source PostgreSQL database
- encodes it as a Solr XML `<add><doc>` document (UTF-8)
- POSTs the document to the Solr core's `/update` handler

Queuing, retries and worker lifecycle belong to the host job framework, which
drives the handler through `HostJobService` or calls `SolrIndexJob.run`
directly.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from solr_indexer.config import Settings, get_settings
from solr_indexer.domain import ErrorKind, IndexerError, JobArgs, Outcome, ServiceConfig
from solr_indexer.driver import SolrIndexJob
from solr_indexer.host import HostFramework, HostJobService, parse_job_args
from solr_indexer.pipeline import (
    AbstractJobHandler,
    IndexSubmitter,
    JobHandler,
    RecordFetcher,
    build_query,
    encode_document,
)
from solr_indexer.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ErrorKind",
    "IndexerError",
    "JobArgs",
    "Outcome",
    "ServiceConfig",
    # Job handling
    "AbstractJobHandler",
    "JobHandler",
    "SolrIndexJob",
    "HostFramework",
    "HostJobService",
    "parse_job_args",
    # Pipeline stages
    "IndexSubmitter",
    "RecordFetcher",
    "build_query",
    "encode_document",
    # Logging
    "configure_logging",
    "get_logger",
]
