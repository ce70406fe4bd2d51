"""
Domain models for the Solr indexer.

Defines the per-job inputs (job arguments and service configuration), the
record shape handed between pipeline stages, and the `Outcome` value every
job run produces.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

Record = Dict[str, Any]


class ErrorKind(str, Enum):
    """
    Origin of a job failure. Decides the failure message prefix and whether
    the host framework may retry the job later.
    """

    CONFIGURATION = "configuration"
    DATA_SOURCE = "data_source"
    INDEX_SUBMISSION = "index_submission"
    UNEXPECTED = "unexpected"

    @property
    def retryable(self) -> bool:
        return self is not ErrorKind.CONFIGURATION

    @property
    def log_prefix(self) -> str:
        if self is ErrorKind.CONFIGURATION:
            return "Error (permanent):"
        if self is ErrorKind.UNEXPECTED:
            return "Unexpected error:"
        return "Error:"


class JobArgs(BaseModel):
    """
    Arguments of a single indexing job.
    """

    id: str = Field(..., min_length=1, description="Primary key of the record to index.")

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "str_strip_whitespace": True,
        "coerce_numbers_to_str": True,
    }


class ServiceConfig(BaseModel):
    """
    Service configuration supplied by the host for each job.
    """

    index_endpoint: str = Field(..., min_length=1, description="Base URL of the Solr core.")
    source_dsn: str = Field(..., min_length=1, description="Source database DSN.")
    source_user: str = Field(..., min_length=1, description="Source database user.")
    source_password: str = Field(..., min_length=1, repr=False)
    source_tb: str = Field(..., min_length=1, description="Table to index.")
    source_fields: str = Field(..., min_length=1, description="Comma-delimited column list.")
    source_id_field: str = Field(..., min_length=1, description="Primary key column.")

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "str_strip_whitespace": True,
    }

    @property
    def field_names(self) -> List[str]:
        return [name.strip() for name in self.source_fields.split(",") if name.strip()]


@dataclass(frozen=True)
class Outcome:
    """
    Result of one job run or one index submission.

    `message` is the status line on success and the human-readable failure
    text otherwise; it is what the host receives through `failed_job`.
    """

    success: bool
    message: str
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, message: str, status_code: Optional[int] = None) -> "Outcome":
        return cls(success=True, message=message, status_code=status_code)

    @classmethod
    def failure(
        cls, kind: ErrorKind, message: str, status_code: Optional[int] = None
    ) -> "Outcome":
        return cls(success=False, message=message, kind=kind, status_code=status_code)

    @property
    def retryable(self) -> bool:
        return self.kind is not None and self.kind.retryable


__all__ = ["ErrorKind", "JobArgs", "Outcome", "Record", "ServiceConfig"]
