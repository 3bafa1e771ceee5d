"""CSV file tabular store."""

from __future__ import annotations

import csv
import datetime as dt
import logging
import os
import tempfile
from pathlib import Path
from types import TracebackType

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

logger = logging.getLogger(__name__)


def encode_row(row: Row) -> list[str]:
    return [row.timestamp, row.pinned_marker, row.datetime.isoformat(), row.user, row.text]


def decode_row(cells: list[str]) -> Row:
    padded = [*cells, *([""] * (len(COLUMNS) - len(cells)))]
    timestamp, marker, raw_datetime, user, text = padded[: len(COLUMNS)]
    if not timestamp:
        raise StoreError("stored row has an empty timestamp")
    try:
        when = dt.datetime.fromisoformat(raw_datetime) if raw_datetime else epoch_to_datetime(timestamp)
    except ValueError as exc:
        raise StoreError(f"stored row {timestamp!r} has an unreadable datetime {raw_datetime!r}") from exc
    return Row(
        timestamp=timestamp,
        datetime=when,
        user=user,
        text=text,
        pinned=pinned_from_marker(marker),
        link=is_link_cell(timestamp, text),
    )


class CsvTabularStore(TabularStore):
    """Store rows in a UTF-8 CSV file with a header line.

    Handles are zero-based data-row indexes. A missing file reads as empty and
    is created on the first append.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def __aenter__(self) -> CsvTabularStore:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    @property
    def path(self) -> Path:
        return self._path

    async def read_all(self) -> list[StoredRow]:
        records = self._read_records()
        data, _ = self._split_header(records)
        return [StoredRow(handle=RowHandle(position=index), row=decode_row(cells)) for index, cells in enumerate(data)]

    async def append(self, row: Row) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            needs_header = not self._path.exists() or self._path.stat().st_size == 0
            with self._path.open("a", newline="", encoding="utf-8") as handle:
                writer = csv.writer(handle)
                if needs_header:
                    writer.writerow(COLUMNS)
                writer.writerow(encode_row(row))
        except OSError as exc:
            raise StoreError(f"failed appending to {self._path}") from exc

    async def rewrite(self, handle: RowHandle, row: Row) -> None:
        records = self._read_records()
        data, offset = self._split_header(records)
        if not 0 <= handle.position < len(data):
            raise StoreError(f"no row at position {handle.position} in {self._path}")

        existing = data[handle.position][0] if data[handle.position] else ""
        if existing != row.timestamp:
            raise StoreError(
                f"row at position {handle.position} holds {existing!r}, refusing to overwrite with {row.timestamp!r}"
            )

        records[offset + handle.position] = encode_row(row)
        self._write_records(records)
        logger.debug("Rewrote %s row %d", self._path, handle.position)

    def _read_records(self) -> list[list[str]]:
        if not self._path.exists():
            return []
        try:
            with self._path.open(newline="", encoding="utf-8") as handle:
                return [record for record in csv.reader(handle) if record]
        except (OSError, csv.Error) as exc:
            raise StoreError(f"failed reading {self._path}") from exc

    def _write_records(self, records: list[list[str]]) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as handle:
                csv.writer(handle).writerows(records)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"failed rewriting {self._path}") from exc

    @staticmethod
    def _split_header(records: list[list[str]]) -> tuple[list[list[str]], int]:
        if records and tuple(records[0]) == COLUMNS:
            return records[1:], 1
        return records, 0
