"""
Pipeline package for the Solr indexer.

Re-exports the job handler interfaces and the four stages (query builder,
record fetcher, document encoder, index submitter) so downstream code can
import from `solr_indexer.pipeline` directly.
"""

from solr_indexer.pipeline.abstract import AbstractJobHandler, JobHandler
from solr_indexer.pipeline.encoder import encode_document
from solr_indexer.pipeline.fetcher import RecordFetcher
from solr_indexer.pipeline.query import build_query
from solr_indexer.pipeline.submitter import IndexSubmitter

__all__ = [
    # Abstracts
    "AbstractJobHandler",
    "JobHandler",
    # Stages
    "IndexSubmitter",
    "RecordFetcher",
    "build_query",
    "encode_document",
]
