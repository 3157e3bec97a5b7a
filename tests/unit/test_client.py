"""Tests for client-level behaviour: transport failures, concurrency, logging, lifecycle."""

from __future__ import annotations

import asyncio

import httpx
import pytest
import structlog
from pydantic import ValidationError
from structlog.testing import capture_logs

from qiita_client import QiitaClient, Settings
from qiita_client.core.exceptions import (
    InvalidRequestError,
    NotFoundError,
    QiitaClientError,
    TransportFailure,
)
from qiita_client.core.types import ErrorKind
from tests.doubles import StubTransport, json_response, recorded, status_only, unreachable
from tests.factories import TagPayloadFactory


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _time_out(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("handler", [_refuse, _time_out])
async def test_transport_errors_are_wrapped(make_client, handler):
    client, _ = make_client(handler)

    with pytest.raises(TransportFailure) as exc_info:
        await client.tags.get("python")

    err = exc_info.value
    assert err.kind is ErrorKind.TRANSPORT_FAILURE
    assert isinstance(err.__cause__, httpx.TransportError)
    assert "https://qiita.test/api/v2/tags/python" in str(err)


async def test_every_error_is_a_client_error(make_client):
    client, _ = make_client(_refuse)

    with pytest.raises(QiitaClientError):
        await client.users.list()


async def test_caller_deadline_cancels_the_exchange(make_client):
    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(10)
        return httpx.Response(200, json={})

    client, _ = make_client(slow)

    with pytest.raises(TimeoutError):
        async with asyncio.timeout(0.01):
            await client.tags.get("python")


# ---------------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------------


async def test_default_headers(make_client, settings):
    client, transport = make_client(json_response(TagPayloadFactory()))

    await client.tags.get("python")

    request = transport.requests[0]
    assert request.headers["User-Agent"] == settings.user_agent
    assert request.headers["Accept"] == "application/json"
    assert "Authorization" not in request.headers


async def test_invalid_base_url_never_reaches_transport(make_client):
    client, transport = make_client(
        unreachable, settings_override=Settings(base_url="qiita.com/api/v2")
    )

    with pytest.raises(InvalidRequestError):
        await client.tags.get("python")

    assert transport.call_count == 0


async def test_base_url_with_trailing_slash(make_client):
    client, transport = make_client(
        json_response(TagPayloadFactory()),
        settings_override=Settings(base_url="https://qiita.test/api/v2/"),
    )

    await client.tags.get("python")

    assert transport.requests[0].url.path == "/api/v2/tags/python"


# ---------------------------------------------------------------------------
# Idempotence and concurrency
# ---------------------------------------------------------------------------


async def test_repeated_calls_give_equal_results(make_client):
    client, transport = make_client(
        recorded("tags/GetTags", "success", path="/api/v2/tags", raw_query="page=3&per_page=2&sort=count")
    )

    first = await client.tags.list(page=3, per_page=2)
    second = await client.tags.list(page=3, per_page=2)

    assert first == second
    assert transport.call_count == 2


async def test_concurrent_calls_share_one_client(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        tag_id = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, json=TagPayloadFactory(id=tag_id))

    client, transport = make_client(handler)
    names = [f"tag{i}" for i in range(10)]

    tags = await asyncio.gather(*(client.tags.get(name) for name in names))

    assert [t.id for t in tags] == names
    assert transport.call_count == 10


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


async def test_logger_receives_request_events(make_client):
    with capture_logs() as logs:
        client, _ = make_client(
            status_only(404), logger=structlog.get_logger("test_client.events")
        )
        with pytest.raises(NotFoundError):
            await client.tags.get("missing")

    events = [entry["event"] for entry in logs]
    assert events == ["send_request", "request_rejected"]
    assert logs[0]["url"] == "https://qiita.test/api/v2/tags/missing"
    assert logs[1]["status"] == 404
    assert logs[1]["error_kind"] == "not-found"


async def test_no_logger_means_silence(make_client):
    with capture_logs() as logs:
        client, _ = make_client(_refuse)
        with pytest.raises(TransportFailure):
            await client.tags.get("python")

    assert logs == []


# ---------------------------------------------------------------------------
# Lifecycle and configuration
# ---------------------------------------------------------------------------


async def test_context_manager_closes_client(settings):
    async with QiitaClient(settings, transport=StubTransport(unreachable)) as client:
        assert not client.is_closed

    assert client.is_closed


async def test_settings_are_frozen(settings):
    async with QiitaClient(settings, transport=StubTransport(unreachable)) as client:
        with pytest.raises(ValidationError):
            client.settings.base_url = "https://elsewhere.test"

        assert client.settings.base_url == "https://qiita.test/api/v2"
