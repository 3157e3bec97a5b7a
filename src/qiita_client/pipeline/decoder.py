"""JSON response decoding with scoped release of the response body."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from qiita_client.core.exceptions import DecodeError, TransportFailure

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


@asynccontextmanager
async def response_scope(response: httpx.Response) -> AsyncIterator[httpx.Response]:
    """Hold a streamed response open for the block and release it on every exit path."""
    try:
        yield response
    finally:
        await response.aclose()


async def decode_body(response: httpx.Response, target: type[T] | Any) -> T:
    """Read the body of *response* and validate it as JSON against *target*.

    The status code is not interpreted here; classify it first.
    """
    try:
        content = await response.aread()
    except httpx.HTTPError as exc:
        raise TransportFailure(
            f"reading response body failed: {exc}",
            status_code=response.status_code,
        ) from exc

    try:
        return _adapter(target).validate_json(content)
    except ValidationError as exc:
        raise DecodeError(
            f"cannot decode response body as {getattr(target, '__name__', target)}: {exc}",
            status_code=response.status_code,
        ) from exc
