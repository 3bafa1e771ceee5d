from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pinlog.contracts.exceptions import RemoteApiError
from pinlog.contracts.items import Member
from pinlog.providers.slack.client import SlackClient
from tests.fakes.items import message_item


def make_client(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> SlackClient:
    return SlackClient(token="xoxb-test", max_retries=0, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_list_pinned_items_calls_pins_list() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True, "items": [message_item("1.0")]})

    async with make_client(handler) as client:
        items = await client.list_pinned_items("C42")

    assert items == [message_item("1.0")]
    assert seen[0].url.path == "/api/pins.list"
    assert seen[0].url.params["channel"] == "C42"
    assert seen[0].headers["Authorization"] == "Bearer xoxb-test"


@pytest.mark.asyncio
async def test_pins_list_without_items_is_empty() -> None:
    async with make_client(lambda request: httpx.Response(200, json={"ok": True})) as client:
        assert await client.list_pinned_items("C1") == []


@pytest.mark.asyncio
async def test_error_payload_raises_remote_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": False, "error": "channel_not_found"})

    async with make_client(handler) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.list_pinned_items("C404")

    assert exc_info.value.method == "pins.list"
    assert exc_info.value.error == "channel_not_found"


@pytest.mark.asyncio
async def test_ok_false_without_error_text() -> None:
    async with make_client(lambda request: httpx.Response(200, json={"ok": False})) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.call("pins.list")

    assert exc_info.value.error == "unknown_error"


@pytest.mark.asyncio
async def test_http_error_status_raises() -> None:
    async with make_client(lambda request: httpx.Response(500, text="boom")) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.call("pins.list")

    assert exc_info.value.error == "http_500"


@pytest.mark.asyncio
async def test_non_json_body_raises() -> None:
    async with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.call("pins.list")

    assert exc_info.value.error == "invalid_json"


@pytest.mark.asyncio
async def test_non_object_payload_raises() -> None:
    async with make_client(lambda request: httpx.Response(200, json=[1, 2])) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.call("pins.list")

    assert exc_info.value.error == "invalid_payload"


@pytest.mark.asyncio
async def test_transport_failure_raises_remote_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.call("users.list")

    assert exc_info.value.error == "ConnectError"


@pytest.mark.asyncio
async def test_list_members_follows_cursor() -> None:
    pages = {
        "": {"ok": True, "members": [{"id": "U1", "name": "alice"}], "response_metadata": {"next_cursor": "abc"}},
        "abc": {"ok": True, "members": [{"id": "U2", "name": "bob"}], "response_metadata": {"next_cursor": ""}},
    }
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=pages[request.url.params.get("cursor", "")])

    async with make_client(handler, page_size=1) as client:
        members = await client.list_members()

    assert members == [Member(id="U1", name="alice"), Member(id="U2", name="bob")]
    assert [request.url.params.get("cursor") for request in seen] == [None, "abc"]
    assert seen[0].url.params["limit"] == "1"


@pytest.mark.asyncio
async def test_malformed_member_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True, "members": [{"id": "U1"}]})

    async with make_client(handler) as client:
        with pytest.raises(RemoteApiError) as exc_info:
            await client.list_members()

    assert exc_info.value.error == "invalid_member"


@pytest.mark.asyncio
async def test_custom_api_url_is_used() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True, "items": []})

    async with make_client(handler, api_url="https://slack.internal/api/") as client:
        await client.list_pinned_items("C1")

    assert str(seen[0].url).startswith("https://slack.internal/api/pins.list")


@pytest.mark.asyncio
async def test_call_outside_context_manager_raises() -> None:
    client = SlackClient(token="xoxb-test")

    with pytest.raises(RuntimeError, match="async context manager"):
        await client.call("pins.list")
