"""
Index submitter: POSTs an encoded document to the Solr update handler.

The response is classified rather than raised: 2xx is a success carrying the
status line, anything else (non-2xx or a transport error) is an
INDEX_SUBMISSION failure carrying the status line or the error text.
"""

from __future__ import annotations

from typing import Optional

import httpx

from solr_indexer.domain.models import ErrorKind, Outcome
from solr_indexer.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
UPDATE_PATH = "/update"
CONTENT_TYPE = "text/xml; charset=utf-8"


def update_url(endpoint: str) -> str:
    """Solr update handler URL for a core's base `endpoint`."""
    # solr doesn't like //
    return endpoint.rstrip("/") + UPDATE_PATH


def status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


class IndexSubmitter:
    """
    Synchronous Solr XML update client.

    Parameters
    ----------
    timeout : float
        Connect/read/write timeout in seconds for each request.
    transport : httpx.BaseTransport | None
        Optional transport override, e.g. `httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def submit(self, endpoint: str, document: bytes) -> Outcome:
        url = update_url(endpoint)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(
                    url, content=document, headers={"Content-Type": CONTENT_TYPE}
                )
        except httpx.HTTPError as exc:
            message = f"{type(exc).__name__}: {exc}"
            log.warning("Index update request failed", extra={"url": url, "error": message})
            return Outcome.failure(ErrorKind.INDEX_SUBMISSION, message)

        status = status_line(response)
        if response.is_success:
            return Outcome.ok(status, status_code=response.status_code)

        log.warning(
            "Index update rejected",
            extra={"url": url, "status_code": response.status_code, "body": response.text[:500]},
        )
        return Outcome.failure(
            ErrorKind.INDEX_SUBMISSION, status, status_code=response.status_code
        )


__all__ = ["CONTENT_TYPE", "DEFAULT_TIMEOUT_SECONDS", "IndexSubmitter", "status_line", "update_url"]
