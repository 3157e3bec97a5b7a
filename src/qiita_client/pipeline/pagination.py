"""Pagination metadata from the Total-Count and Link response headers.

A Link header looks like::

    <https://qiita.com/api/v2/tags?page=1&per_page=2>; rel="first",
    <https://qiita.com/api/v2/tags?page=2&per_page=2>; rel="prev",
    <https://qiita.com/api/v2/tags?page=4&per_page=2>; rel="next",
    <https://qiita.com/api/v2/tags?page=100&per_page=2>; rel="last"
"""

from __future__ import annotations

import re
from collections.abc import Mapping

import httpx

from qiita_client.core.exceptions import InvalidParameterError, MalformedPaginationError
from qiita_client.schemas.common import PaginationInfo

TOTAL_COUNT_HEADER = "Total-Count"
LINK_HEADER = "Link"

PAGE_MIN, PAGE_MAX = 1, 100
PER_PAGE_MIN, PER_PAGE_MAX = 1, 100

# Split only on commas that open a new <url>, so commas inside URLs survive.
_ENTRY_SEPARATOR = re.compile(r",\s*(?=<)")
_ENTRY = re.compile(r"^\s*<(?P<url>[^>]*)>(?P<params>.*)$", re.DOTALL)


def parse_link_header(value: str) -> dict[str, str]:
    """Map each ``rel`` of a Link header to its target URL."""
    links: dict[str, str] = {}
    for raw_entry in _ENTRY_SEPARATOR.split(value.strip()):
        if not raw_entry.strip():
            continue
        match = _ENTRY.match(raw_entry)
        if match is None:
            raise MalformedPaginationError(f"malformed Link entry: {raw_entry.strip()!r}")

        rels: list[str] = []
        for param in match.group("params").split(";"):
            key, sep, param_value = param.partition("=")
            if sep and key.strip().lower() == "rel":
                rels.extend(param_value.strip().strip('"').split())
        if not rels:
            raise MalformedPaginationError(f"Link entry has no rel: {raw_entry.strip()!r}")

        for rel in rels:
            links[rel.lower()] = match.group("url")
    return links


def page_from_url(url: str, rel: str) -> int:
    """Extract the ``page`` query parameter of a Link target."""
    try:
        raw_page = httpx.URL(url).params.get("page")
    except httpx.InvalidURL as exc:
        raise MalformedPaginationError(f'rel="{rel}" link has an invalid URL: {url!r}') from exc

    if raw_page is None or not raw_page.isascii() or not raw_page.isdigit():
        raise MalformedPaginationError(
            f'rel="{rel}" link has no parseable page parameter: {url!r}'
        )
    return int(raw_page)


def parse_total_count(value: str) -> int:
    stripped = value.strip()
    if not stripped.isascii() or not stripped.isdigit():
        raise MalformedPaginationError(
            f"{TOTAL_COUNT_HEADER} header is not a non-negative integer: {value!r}"
        )
    return int(stripped)


def extract_pagination_info(
    headers: httpx.Headers | Mapping[str, str],
    page: int,
    per_page: int,
) -> PaginationInfo:
    """Build PaginationInfo from response headers and the requested page/per_page.

    ``page`` and ``per_page`` echo the request. Without a ``last`` link the
    collection fits on the requested page, so ``last_page`` is that page and
    ``first_page`` is 1 unless a ``first`` link says otherwise.
    """
    headers = httpx.Headers(headers)

    total_count = 0
    raw_total = headers.get(TOTAL_COUNT_HEADER)
    if raw_total is not None:
        total_count = parse_total_count(raw_total)

    raw_link = headers.get(LINK_HEADER)
    links = parse_link_header(raw_link) if raw_link else {}

    first_page = page_from_url(links["first"], "first") if "first" in links else 1
    last_page = page_from_url(links["last"], "last") if "last" in links else page

    return PaginationInfo(
        per_page=per_page,
        page=page,
        first_page=first_page,
        last_page=last_page,
        total_count=total_count,
    )


def validate_pagination_limit(
    page: int,
    per_page: int,
    *,
    page_range: tuple[int, int] = (PAGE_MIN, PAGE_MAX),
    per_page_range: tuple[int, int] = (PER_PAGE_MIN, PER_PAGE_MAX),
) -> None:
    """Fail fast when page or per_page fall outside the documented bounds."""
    for name, value, (low, high) in (
        ("page", page, page_range),
        ("per_page", per_page, per_page_range),
    ):
        if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
            raise InvalidParameterError(
                f"{name} parameter should be between {low} and {high} (got {value!r})"
            )
