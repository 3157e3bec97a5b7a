"""The generic request -> classify -> decode -> paginate pipeline shared by every endpoint."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from qiita_client.config import Settings
from qiita_client.core.exceptions import DecodeError, QiitaClientError, TransportFailure
from qiita_client.core.types import ResourceRef, StatusOutcome
from qiita_client.pipeline.classifier import classify_status
from qiita_client.pipeline.decoder import decode_body, response_scope
from qiita_client.pipeline.pagination import extract_pagination_info
from qiita_client.pipeline.request import RequestDescriptor, build_request
from qiita_client.schemas.common import CollectionResponse

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class Executor:
    """Runs one request/response exchange per call.

    Holds no per-call state, so a single instance serves any number of
    concurrent calls.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._log = logger

    # ── Public API ───────────────────────────────────────────────────

    async def fetch(
        self,
        descriptor: RequestDescriptor,
        target: type[T] | Any,
        *,
        resource: ResourceRef | None = None,
    ) -> T:
        """Fetch a single JSON document and decode it into *target*."""
        async with self._exchange(descriptor) as response:
            self._expect_body(response, resource)
            return await decode_body(response, target)

    async def fetch_page(
        self,
        descriptor: RequestDescriptor,
        item_type: type[M],
        *,
        page: int,
        per_page: int,
        resource: ResourceRef | None = None,
    ) -> CollectionResponse[M]:
        """Fetch one page of a collection together with its pagination headers."""
        async with self._exchange(descriptor) as response:
            self._expect_body(response, resource)
            entries = await decode_body(response, tuple[item_type, ...])
            pagination = extract_pagination_info(response.headers, page, per_page)

            if len(entries) > per_page:
                raise DecodeError(
                    f"response holds {len(entries)} entries, more than per_page={per_page}",
                    status_code=response.status_code,
                    resource=resource,
                )

        return CollectionResponse(entries=entries, pagination=pagination)

    async def probe(
        self,
        descriptor: RequestDescriptor,
        *,
        resource: ResourceRef | None = None,
    ) -> bool:
        """Answer a yes/no endpoint: 204 means yes, 404 means no."""
        async with self._exchange(descriptor) as response:
            if response.status_code == HTTPStatus.NOT_FOUND:
                return False
            return classify_status(response.status_code, resource) is StatusOutcome.NO_CONTENT

    # ── Private helpers ──────────────────────────────────────────────

    @asynccontextmanager
    async def _exchange(self, descriptor: RequestDescriptor) -> AsyncIterator[httpx.Response]:
        request = build_request(
            self._http,
            self._settings.base_url,
            descriptor,
            user_agent=self._settings.user_agent,
            access_token=self._settings.access_token or None,
        )
        if self._log is not None:
            self._log.debug("send_request", method=request.method, url=str(request.url))

        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as exc:
            self._warn("request_failed", request, error=str(exc))
            raise TransportFailure(f"{request.method} {request.url} failed: {exc}") from exc

        try:
            async with response_scope(response):
                yield response
        except QiitaClientError as exc:
            self._warn(
                "request_rejected",
                request,
                status=response.status_code,
                error_kind=str(exc.kind),
            )
            raise

    @staticmethod
    def _expect_body(response: httpx.Response, resource: ResourceRef | None) -> None:
        if classify_status(response.status_code, resource) is StatusOutcome.NO_CONTENT:
            raise DecodeError(
                "expected a JSON body but the server answered 204 No Content",
                status_code=response.status_code,
                resource=resource,
            )

    def _warn(self, event: str, request: httpx.Request, **fields: Any) -> None:
        if self._log is not None:
            self._log.warning(event, method=request.method, url=str(request.url), **fields)
