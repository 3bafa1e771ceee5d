"""Google Sheets tabular store (Sheets API v4)."""

from __future__ import annotations

import datetime as dt
import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from pinlog.contracts.exceptions import StoreError
from pinlog.contracts.row import (
    COLUMNS,
    Row,
    RowHandle,
    StoredRow,
    epoch_to_datetime,
    is_link_cell,
    pinned_from_marker,
)
from pinlog.contracts.store import TabularStore
from pinlog.transport import RetryingTransport

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets/"
_SERIAL_EPOCH = dt.datetime(1899, 12, 30, tzinfo=dt.UTC)


def _literal(value: str) -> str:
    # A leading apostrophe keeps USER_ENTERED input as text.
    return f"'{value}"


def encode_cells(row: Row) -> list[str]:
    text = row.text if row.link else _literal(row.text)
    when = row.datetime.astimezone(dt.UTC).strftime("%Y-%m-%d %H:%M:%S")
    return [_literal(row.timestamp), row.pinned_marker, when, _literal(row.user), text]


def serial_to_datetime(serial: float) -> dt.datetime:
    return _SERIAL_EPOCH + dt.timedelta(days=serial)


def decode_cells(cells: list[Any]) -> Row:
    padded = [*cells, *([""] * (len(COLUMNS) - len(cells)))]
    timestamp, marker, raw_datetime, user, text = padded[: len(COLUMNS)]
    timestamp = str(timestamp)
    if not timestamp:
        raise StoreError("stored row has an empty timestamp")

    if isinstance(raw_datetime, (int, float)):
        when = serial_to_datetime(float(raw_datetime))
    else:
        try:
            when = dt.datetime.fromisoformat(str(raw_datetime)) if raw_datetime else epoch_to_datetime(timestamp)
        except ValueError as exc:
            raise StoreError(f"stored row {timestamp!r} has no readable datetime") from exc

    return Row(
        timestamp=timestamp,
        datetime=when,
        user=str(user),
        text=str(text),
        pinned=pinned_from_marker(str(marker)),
        link=is_link_cell(timestamp, str(text)),
    )


class GoogleSheetsStore(TabularStore):
    """Rows live on one tab of a spreadsheet; handles are 1-based sheet row numbers.

    A missing tab reads as empty and is created by the first write, so a run
    that never writes leaves the spreadsheet untouched.
    """

    def __init__(
        self,
        *,
        spreadsheet_id: str,
        token: str,
        sheet_name: str = "Slack Logs",
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._token = token
        self._sheet_name = sheet_name
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._has_sheet: bool | None = None

    async def __aenter__(self) -> GoogleSheetsStore:
        self._client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self._token}"},
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            timeout=httpx.Timeout(30.0),
        )
        self._has_sheet = None
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

    async def read_all(self) -> list[StoredRow]:
        if not await self._sheet_exists():
            logger.debug("Sheet %r does not exist yet; no stored rows", self._sheet_name)
            return []
        payload = await self._request(
            "GET",
            self._values_path(self._range("A", "E")),
            params={
                "majorDimension": "ROWS",
                "valueRenderOption": "FORMULA",
                "dateTimeRenderOption": "SERIAL_NUMBER",
            },
        )
        stored: list[StoredRow] = []
        for index, cells in enumerate(payload.get("values") or []):
            if not cells or (index == 0 and tuple(str(cell) for cell in cells) == COLUMNS):
                continue
            stored.append(StoredRow(handle=RowHandle(position=index + 1), row=decode_cells(cells)))
        return stored

    async def append(self, row: Row) -> None:
        await self._ensure_sheet()
        await self._request(
            "POST",
            f"{self._values_path(self._range('A', 'E'))}:append",
            params={"valueInputOption": "USER_ENTERED", "insertDataOption": "INSERT_ROWS"},
            json={"majorDimension": "ROWS", "values": [encode_cells(row)]},
        )

    async def rewrite(self, handle: RowHandle, row: Row) -> None:
        if handle.position < 1:
            raise StoreError(f"invalid sheet row number {handle.position}")
        await self._ensure_sheet()
        cell_range = self._range(f"A{handle.position}", f"E{handle.position}")
        await self._request(
            "PUT",
            self._values_path(cell_range),
            params={"valueInputOption": "USER_ENTERED"},
            json={"range": cell_range, "majorDimension": "ROWS", "values": [encode_cells(row)]},
        )

    async def _sheet_exists(self) -> bool:
        if self._has_sheet is None:
            payload = await self._request(
                "GET",
                quote(self._spreadsheet_id, safe=""),
                params={"fields": "sheets.properties.title"},
            )
            titles = {sheet.get("properties", {}).get("title") for sheet in payload.get("sheets") or []}
            self._has_sheet = self._sheet_name in titles
        return self._has_sheet

    async def _ensure_sheet(self) -> None:
        if await self._sheet_exists():
            return
        logger.info("Creating sheet %r in spreadsheet %s", self._sheet_name, self._spreadsheet_id)
        await self._request(
            "POST",
            f"{quote(self._spreadsheet_id, safe='')}:batchUpdate",
            json={"requests": [{"addSheet": {"properties": {"title": self._sheet_name}}}]},
        )
        self._has_sheet = True

    def _range(self, start: str, end: str) -> str:
        escaped = self._sheet_name.replace("'", "''")
        return f"'{escaped}'!{start}:{end}"

    def _values_path(self, cell_range: str) -> str:
        return f"{quote(self._spreadsheet_id, safe='')}/values/{quote(cell_range, safe='')}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        if self._client is None:
            raise RuntimeError("GoogleSheetsStore must be used as an async context manager")
        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, f"{SHEETS_API_URL}{path}", **kwargs)
        except httpx.HTTPError as exc:
            raise StoreError(f"{method} {path}: {exc}") from exc
        if response.is_error:
            raise StoreError(f"{method} {path}: HTTP {response.status_code} {response.text[:200]}")
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise StoreError(f"{method} {path}: response is not JSON") from exc
        return payload if isinstance(payload, dict) else {}
