"""
Exception raised by the pipeline stages.

Every stage signals failure with a single `IndexerError` tagged with an
`ErrorKind`; the job driver inspects the kind once and turns it into an
`Outcome`.
"""
from __future__ import annotations

from solr_indexer.domain.models import ErrorKind, Outcome


class IndexerError(Exception):
    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    def to_outcome(self) -> Outcome:
        return Outcome.failure(self.kind, self.message)


__all__ = ["IndexerError"]
