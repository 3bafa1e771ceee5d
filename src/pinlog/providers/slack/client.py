"""Slack Web API client for pinned items and members."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from pinlog.contracts.config import DEFAULT_API_URL
from pinlog.contracts.exceptions import RemoteApiError
from pinlog.contracts.fetcher import ItemFetcher
from pinlog.contracts.items import Member
from pinlog.transport import RetryingTransport

logger = logging.getLogger(__name__)


class SlackClient(ItemFetcher):
    """Fetches pins and members over the Slack Web API.

    Use as an async context manager so the HTTP client is opened and closed::

        async with SlackClient(token=token) as client:
            items = await client.list_pinned_items("C123")
    """

    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_API_URL,
        max_retries: int = 3,
        page_size: int = 200,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url
        self._max_retries = max_retries
        self._page_size = page_size
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> SlackClient:
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            headers={"Authorization": f"Bearer {self._token}"},
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            timeout=httpx.Timeout(30.0),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def call(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Invoke a Web API *method* and return its payload.

        Raises:
            RemoteApiError: On HTTP failure, a non-JSON body, or a payload
                whose ``error`` field is set.
        """
        if self._client is None:
            raise RuntimeError("SlackClient must be used as an async context manager")

        logger.debug("GET %s %s", method, params or {})
        try:
            response = await self._client.get(method, params=params)
        except httpx.HTTPError as exc:
            raise RemoteApiError(f"GET {method}: {exc}", method=method, error=type(exc).__name__) from exc

        if response.is_error:
            raise RemoteApiError(
                f"GET {method}: HTTP {response.status_code}",
                method=method,
                error=f"http_{response.status_code}",
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteApiError(f"GET {method}: response is not JSON", method=method, error="invalid_json") from exc
        if not isinstance(payload, dict):
            raise RemoteApiError(f"GET {method}: unexpected payload", method=method, error="invalid_payload")

        error = payload.get("error")
        if error or payload.get("ok") is False:
            error_text = str(error or "unknown_error")
            raise RemoteApiError(f"GET {method}: {error_text}", method=method, error=error_text)
        return payload

    async def list_pinned_items(self, channel_id: str) -> list[dict[str, Any]]:
        payload = await self.call("pins.list", {"channel": channel_id})
        return list(payload.get("items") or [])

    async def list_members(self) -> list[Member]:
        members: list[Member] = []
        cursor = ""
        while True:
            params: dict[str, Any] = {"limit": self._page_size}
            if cursor:
                params["cursor"] = cursor
            payload = await self.call("users.list", params)
            try:
                members.extend(Member.model_validate(raw) for raw in payload.get("members") or [])
            except ValidationError as exc:
                raise RemoteApiError(
                    "GET users.list: malformed member",
                    method="users.list",
                    error="invalid_member",
                ) from exc

            cursor = (payload.get("response_metadata") or {}).get("next_cursor") or ""
            if not cursor:
                return members
