"""Request construction: URL composition, query encoding and identifying headers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from qiita_client.core.exceptions import InvalidRequestError

QueryValue = str | int | bool | Enum


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """A single outgoing call: method, path relative to the base URL, query and body."""

    method: str
    path: str
    params: Mapping[str, QueryValue] = field(default_factory=dict)
    body: BaseModel | Mapping[str, Any] | None = None


def resource_path(*segments: str) -> str:
    """Join path segments, percent-encoding each one as a single segment.

    Empty, ``.`` and ``..`` segments would silently address a different
    endpoint (``users/`` instead of ``users/<id>``, or a parent path once
    dot segments are resolved), so they are rejected.
    """
    encoded = []
    for segment in segments:
        if not isinstance(segment, str) or not segment.strip():
            raise InvalidRequestError(f"path segment must be a non-empty string, got {segment!r}")
        if segment in (".", ".."):
            raise InvalidRequestError(f"path segment must not be a dot segment, got {segment!r}")
        encoded.append(quote(segment, safe=""))
    return "/".join(encoded)


def join_url(base_url: str | httpx.URL, relative_path: str) -> httpx.URL:
    """Compose *base_url* and *relative_path* with exactly one separator between them."""
    try:
        base = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidRequestError(f"invalid base URL {base_url!r}: {exc}") from exc

    if base.scheme not in ("http", "https") or not base.host:
        raise InvalidRequestError(f"base URL {str(base_url)!r} is not an absolute http(s) URL")
    if base.query or base.fragment:
        raise InvalidRequestError(f"base URL {str(base_url)!r} must not carry a query or fragment")

    if not relative_path or not relative_path.strip("/"):
        raise InvalidRequestError("relative path must not be empty")
    if any(ch in relative_path for ch in "?#") or "://" in relative_path:
        raise InvalidRequestError(f"relative path {relative_path!r} must be a plain path")

    path = base.path.rstrip("/") + "/" + relative_path.lstrip("/")
    try:
        return base.copy_with(path=path)
    except httpx.InvalidURL as exc:
        raise InvalidRequestError(f"cannot compose URL from {relative_path!r}: {exc}") from exc


def _query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_query(params: Mapping[str, QueryValue]) -> list[tuple[str, str]]:
    """Query pairs in lexicographic key order so the encoded string is reproducible."""
    return [(key, _query_value(params[key])) for key in sorted(params)]


def build_request(
    client: httpx.AsyncClient,
    base_url: str | httpx.URL,
    descriptor: RequestDescriptor,
    *,
    user_agent: str,
    access_token: str | None = None,
) -> httpx.Request:
    url = join_url(base_url, descriptor.path)

    headers = {
        "User-Agent": user_agent,
        "Accept": "application/json",
    }
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    body: Any = descriptor.body
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")

    return client.build_request(
        descriptor.method.upper(),
        url,
        params=encode_query(descriptor.params),
        headers=headers,
        json=body,
    )
