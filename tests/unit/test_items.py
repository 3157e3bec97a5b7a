"""Tests for the items accessor."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from qiita_client.core.exceptions import DecodeError, NotFoundError, UnknownStatusError
from qiita_client.schemas.item import ItemTag
from tests.doubles import json_response, recorded, status_only
from tests.factories import ItemPayloadFactory

JST = timezone(timedelta(hours=9))


# ---------------------------------------------------------------------------
# get
# ---------------------------------------------------------------------------


async def test_get_item(make_client):
    client, _ = make_client(
        recorded("items/GetItem", "success", path="/api/v2/items/c686397e4a0f4f11683d")
    )

    item = await client.items.get("c686397e4a0f4f11683d")

    assert item.title == "React Hooks 入門"
    assert item.tags == (
        ItemTag(name="React", versions=("16.2",)),
        ItemTag(name="JavaScript"),
    )
    assert item.user.id == "muiscript"
    assert item.created_at == datetime(2018, 1, 28, 21, 57, 42, tzinfo=JST)
    assert item.page_views_count is None


async def test_get_item_not_found_with_html_body(make_client):
    """A 404 is classified before the (non-JSON) body is ever decoded."""
    client, _ = make_client(
        recorded("items/GetItem", "not_exist", path="/api/v2/items/0000000000")
    )

    with pytest.raises(NotFoundError, match="item with id '0000000000' not found"):
        await client.items.get("0000000000")


async def test_get_item_server_error(make_client):
    client, _ = make_client(
        lambda request: httpx.Response(502, text="<html>Bad Gateway</html>")
    )

    with pytest.raises(UnknownStatusError, match=r"unknown error \(status = 502\)"):
        await client.items.get("c686397e4a0f4f11683d")


async def test_get_item_no_content_is_decode_error(make_client):
    client, _ = make_client(status_only(204))

    with pytest.raises(DecodeError, match="204"):
        await client.items.get("c686397e4a0f4f11683d")


# ---------------------------------------------------------------------------
# collections
# ---------------------------------------------------------------------------


async def test_list_items_with_query(make_client):
    client, transport = make_client(
        json_response(ItemPayloadFactory.create_batch(2), headers={"Total-Count": "2"})
    )

    response = await client.items.list(page=2, per_page=10, query="python")

    assert transport.requests[0].url.query == b"page=2&per_page=10&query=python"
    assert len(response) == 2
    assert response.entries[0].tags[0].name == "Python"


async def test_list_items_without_query(make_client):
    client, transport = make_client(json_response([]))

    await client.items.list()

    assert transport.requests[0].url.query == b"page=1&per_page=20"


async def test_user_items(make_client):
    client, transport = make_client(json_response(ItemPayloadFactory.create_batch(1)))

    response = await client.items.by_user("muiscript", per_page=5)

    assert transport.requests[0].url.path == "/api/v2/users/muiscript/items"
    assert response.per_page == 5


async def test_user_items_unknown_user(make_client):
    client, _ = make_client(status_only(404))

    with pytest.raises(NotFoundError, match="user with id 'ghost' not found"):
        await client.items.by_user("ghost")


async def test_user_stocks(make_client):
    client, transport = make_client(json_response(ItemPayloadFactory.create_batch(2)))

    response = await client.items.stocked_by("muiscript")

    assert transport.requests[0].url.path == "/api/v2/users/muiscript/stocks"
    assert len(response) == 2


async def test_page_larger_than_per_page(make_client):
    client, _ = make_client(json_response(ItemPayloadFactory.create_batch(3)))

    with pytest.raises(DecodeError, match="more than per_page=2"):
        await client.items.list(per_page=2)


async def test_object_where_array_expected(make_client):
    client, _ = make_client(json_response(ItemPayloadFactory()))

    with pytest.raises(DecodeError):
        await client.items.list()
