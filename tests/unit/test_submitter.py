from __future__ import annotations

import httpx
import pytest
import respx

from solr_indexer.domain.models import ErrorKind
from solr_indexer.pipeline.submitter import IndexSubmitter, update_url

ENDPOINT = "http://localhost:8983/solr"
UPDATE_URL = "http://localhost:8983/solr/update"
DOCUMENT = b'<add><doc><field name="sku">A1</field></doc></add>'
HTTP_OK = 200
HTTP_SERVER_ERROR = 500


@pytest.mark.parametrize(
    "endpoint",
    ["http://localhost:8983/solr", "http://localhost:8983/solr/"],
)
def test_update_url_appends_update_handler(endpoint: str):
    assert update_url(endpoint) == UPDATE_URL


def test_submit_success_returns_status_line():
    with respx.mock:
        route = respx.post(UPDATE_URL).mock(return_value=httpx.Response(HTTP_OK))

        outcome = IndexSubmitter().submit(ENDPOINT, DOCUMENT)

    assert outcome.success is True
    assert outcome.message == "200 OK"
    assert outcome.status_code == HTTP_OK
    assert outcome.kind is None

    request = route.calls.last.request
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "text/xml; charset=utf-8"
    assert request.content == DOCUMENT


def test_submit_server_error_is_a_failure():
    with respx.mock:
        respx.post(UPDATE_URL).mock(
            return_value=httpx.Response(HTTP_SERVER_ERROR, text="undefined field price")
        )

        outcome = IndexSubmitter().submit(ENDPOINT, DOCUMENT)

    assert outcome.success is False
    assert outcome.kind is ErrorKind.INDEX_SUBMISSION
    assert outcome.message == "500 Internal Server Error"
    assert outcome.status_code == HTTP_SERVER_ERROR
    assert outcome.retryable is True


def test_submit_connection_refused_is_a_failure():
    with respx.mock:
        respx.post(UPDATE_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

        outcome = IndexSubmitter().submit(ENDPOINT, DOCUMENT)

    assert outcome.success is False
    assert outcome.kind is ErrorKind.INDEX_SUBMISSION
    assert outcome.message == "ConnectError: Connection refused"
    assert outcome.status_code is None


def test_submit_timeout_is_a_failure():
    with respx.mock:
        respx.post(UPDATE_URL).mock(side_effect=httpx.ReadTimeout("timed out"))

        outcome = IndexSubmitter(timeout=0.5).submit(ENDPOINT, DOCUMENT)

    assert outcome.success is False
    assert outcome.message == "ReadTimeout: timed out"


def test_submit_uses_injected_transport():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(HTTP_OK)

    submitter = IndexSubmitter(transport=httpx.MockTransport(handler))
    outcome = submitter.submit(ENDPOINT + "/", DOCUMENT)

    assert outcome.success is True
    assert [str(request.url) for request in seen] == [UPDATE_URL]
