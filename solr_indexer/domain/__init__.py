"""
Domain package for the Solr indexer.

Exports the job inputs, the outcome value and the error type shared by the
pipeline stages, the driver and the host integration.
Keep this package focused on data definitions and validation concerns.
"""

from solr_indexer.domain.errors import IndexerError
from solr_indexer.domain.models import ErrorKind, JobArgs, Outcome, Record, ServiceConfig

__all__ = [
    "ErrorKind",
    "IndexerError",
    "JobArgs",
    "Outcome",
    "Record",
    "ServiceConfig",
]
