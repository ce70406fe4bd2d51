"""
Job driver: sequences the pipeline stages for one indexing job.

Usage (example from a host integration):
    from solr_indexer.driver import SolrIndexJob

    outcome = SolrIndexJob().run({"id": "42"}, config)
    if not outcome.success:
        print(outcome.kind, outcome.message)

Every failure is caught here exactly once and returned as an `Outcome`;
nothing raised by a stage escapes `run`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from solr_indexer.domain.errors import IndexerError
from solr_indexer.domain.models import ErrorKind, JobArgs, Outcome, ServiceConfig
from solr_indexer.pipeline.abstract import AbstractJobHandler
from solr_indexer.pipeline.encoder import encode_document
from solr_indexer.pipeline.fetcher import RecordFetcher
from solr_indexer.pipeline.query import build_query
from solr_indexer.pipeline.submitter import IndexSubmitter
from solr_indexer.utils.logging import get_logger

log = get_logger(__name__)


def _describe_validation_error(prefix: str, exc: ValidationError) -> str:
    """Condense a pydantic error into `prefix: field (reason), ...`."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "input"
        problems.append(f"{location} ({error.get('msg', 'invalid')})")
    return f"{prefix}: {', '.join(problems)}"


def _validate_inputs(
    job_args: Mapping[str, Any], config: Mapping[str, Any]
) -> tuple[JobArgs, ServiceConfig]:
    try:
        service_config = ServiceConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise IndexerError(
            ErrorKind.CONFIGURATION,
            _describe_validation_error("Invalid service configuration", exc),
        ) from exc
    try:
        args = JobArgs.model_validate(dict(job_args))
    except ValidationError as exc:
        raise IndexerError(
            ErrorKind.CONFIGURATION, _describe_validation_error("Invalid job arguments", exc)
        ) from exc
    return args, service_config


class SolrIndexJob(AbstractJobHandler):
    """
    Index one database record into Solr.

    Parameters
    ----------
    fetcher : RecordFetcher | None
        Record fetcher; defaults to a RecordFetcher with default timeouts.
    submitter : IndexSubmitter | None
        Index submitter; defaults to an IndexSubmitter with the default timeout.
    debug : bool
        When True, the generated SQL and XML are logged at DEBUG level.
    """

    name: str = "solr_index"

    def __init__(
        self,
        fetcher: Optional[RecordFetcher] = None,
        submitter: Optional[IndexSubmitter] = None,
        debug: bool = False,
    ) -> None:
        self._fetcher = fetcher or RecordFetcher()
        self._submitter = submitter or IndexSubmitter()
        self._debug = debug

    def run(self, job_args: Mapping[str, Any], config: Mapping[str, Any]) -> Outcome:
        try:
            return self._index(job_args, config)
        except IndexerError as exc:
            log.error(
                f"{exc.kind.log_prefix} {exc.message}",
                extra={"kind": exc.kind.value, "retryable": exc.retryable},
            )
            return exc.to_outcome()
        except Exception as exc:  # noqa: BLE001 - a job failure must never crash the worker
            message = str(exc) or type(exc).__name__
            log.exception(
                f"{ErrorKind.UNEXPECTED.log_prefix} {message}",
                extra={"kind": ErrorKind.UNEXPECTED.value, "retryable": True},
            )
            return Outcome.failure(ErrorKind.UNEXPECTED, message)

    def _index(self, job_args: Mapping[str, Any], config: Mapping[str, Any]) -> Outcome:
        args, service = _validate_inputs(job_args, config)
        context = {"record_id": args.id, "table": service.source_tb}
        log.info(f"Adding {service.source_id_field} {args.id} to the index", extra=context)

        sql = build_query(
            service.source_tb,
            service.source_fields,
            service.source_id_field,
            placeholder=self._fetcher.placeholder,
        )
        if self._debug:
            log.debug(f"SQL: {sql}", extra=context)

        record = self._fetcher.fetch(
            service.source_dsn, service.source_user, service.source_password, sql, args.id
        )

        document = encode_document(record)
        if self._debug:
            log.debug(f"XML: {document.decode('utf-8')}", extra=context)

        outcome = self._submitter.submit(service.index_endpoint, document)
        if not outcome.success:
            log.error(
                f"{ErrorKind.INDEX_SUBMISSION.log_prefix} {outcome.message}",
                extra={**context, "kind": ErrorKind.INDEX_SUBMISSION.value, "retryable": True},
            )
            return outcome

        log.info(
            f"{service.source_id_field} {args.id} successfully added to the index",
            extra={**context, "status": outcome.message},
        )
        return outcome


__all__ = ["SolrIndexJob"]
