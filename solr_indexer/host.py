"""
Host framework integration.

The job framework that queues and dispatches indexing jobs is an external
collaborator. `HostJobService` adapts a `JobHandler` to it: it pulls the
configuration and job arguments from the host, runs the handler, forwards the
handler's log records to the host's job log, and reports the outcome through
`completed_job` / `failed_job`.
"""

from __future__ import annotations

import logging
import threading
import xml.etree.ElementTree as ElementTree
from contextlib import contextmanager
from typing import Any, Dict, Generator, Mapping, Optional, Protocol, runtime_checkable

from solr_indexer.domain.errors import IndexerError
from solr_indexer.domain.models import ErrorKind, Outcome
from solr_indexer.driver import SolrIndexJob
from solr_indexer.pipeline.abstract import JobHandler
from solr_indexer.utils.logging import get_logger

log = get_logger(__name__)

PACKAGE_LOGGER = "solr_indexer"


@runtime_checkable
class HostFramework(Protocol):
    """Calls the host job framework exposes to a service."""

    def get_config(self) -> Mapping[str, Any]: ...

    def get_job_args(self, job: Any) -> Mapping[str, Any]: ...

    def completed_job(self, job: Any) -> None: ...

    def failed_job(self, job: Any, message: str) -> None: ...

    def log_msg(self, job: Any, level: int, message: str) -> None: ...


def parse_job_args(xml: str | bytes) -> Dict[str, str]:
    """
    Parse a job argument document such as `<params><id>1234</id></params>`.

    Returns one entry per child element of the root, with surrounding
    whitespace removed from the text.
    """
    try:
        root = ElementTree.fromstring(xml)  # noqa: S314 - job args come from the host queue
    except ElementTree.ParseError as exc:
        raise IndexerError(ErrorKind.CONFIGURATION, f"Malformed job arguments: {exc}") from exc
    return {child.tag: (child.text or "").strip() for child in root}


class HostLogHandler(logging.Handler):
    """
    Forward log records emitted on the current thread to the host's job log.
    """

    def __init__(self, host: HostFramework, job: Any, level: int = logging.INFO) -> None:
        super().__init__(level=level)
        self._host = host
        self._job = job
        self._thread_id = threading.get_ident()

    def emit(self, record: logging.LogRecord) -> None:
        if record.thread != self._thread_id:
            return
        try:
            self._host.log_msg(self._job, record.levelno, record.getMessage())
        except Exception:  # noqa: BLE001 - logging must not fail the job
            self.handleError(record)


def _enable_host_log_level() -> None:
    """The host job log always receives INFO, whatever the local verbosity."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)


@contextmanager
def forward_logs(host: HostFramework, job: Any) -> Generator[None, None, None]:
    """Attach a HostLogHandler to the package logger for the duration of a job."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = HostLogHandler(host, job)
    logger.addHandler(handler)
    try:
        yield
    finally:
        logger.removeHandler(handler)


class HostJobService:
    """
    Run jobs handed over by a host framework.

    Parameters
    ----------
    host : HostFramework
        The framework's service facade.
    handler : JobHandler | None
        Handler invoked per job; defaults to `SolrIndexJob()`.
    """

    def __init__(self, host: HostFramework, handler: Optional[JobHandler] = None) -> None:
        self._host = host
        self._handler = handler or SolrIndexJob()
        _enable_host_log_level()

    def run(self, job: Any) -> Outcome:
        with forward_logs(self._host, job):
            outcome = self._run(job)
            return self._report(job, outcome)

    def _run(self, job: Any) -> Outcome:
        try:
            config = self._host.get_config()
            job_args = self._host.get_job_args(job)
            return self._handler.run(job_args, config)
        except IndexerError as exc:
            log.error(f"{exc.kind.log_prefix} {exc.message}", extra={"kind": exc.kind.value})
            return exc.to_outcome()
        except Exception as exc:  # noqa: BLE001 - reported as a failed job
            message = str(exc) or type(exc).__name__
            log.exception(f"{ErrorKind.UNEXPECTED.log_prefix} {message}")
            return Outcome.failure(ErrorKind.UNEXPECTED, message)

    def _report(self, job: Any, outcome: Outcome) -> Outcome:
        try:
            if outcome.success:
                self._host.completed_job(job)
            else:
                self._host.failed_job(job, outcome.message)
        except Exception as exc:  # noqa: BLE001 - a host callback must not crash the worker
            message = f"Could not report job outcome: {str(exc) or type(exc).__name__}"
            log.exception(f"{ErrorKind.UNEXPECTED.log_prefix} {message}")
            return Outcome.failure(ErrorKind.UNEXPECTED, message)
        return outcome


__all__ = [
    "HostFramework",
    "HostJobService",
    "HostLogHandler",
    "forward_logs",
    "parse_job_args",
]
