"""Keyed set difference between fetched and stored rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from pinlog.contracts.exceptions import DuplicateKeyError
from pinlog.contracts.row import Row, StoredRow
from pinlog.contracts.sync import RowDiff

T = TypeVar("T", Row, StoredRow)


def index_by_timestamp(rows: Sequence[T], *, source: str) -> dict[str, T]:
    """Index *rows* by timestamp, refusing duplicate keys."""
    index: dict[str, T] = {}
    for row in rows:
        key = row.timestamp
        if key in index:
            raise DuplicateKeyError(f"duplicate timestamp {key!r} in {source} rows", key=key, source=source)
        index[key] = row
    return index


def compute_diff(current: Sequence[Row], previous: Sequence[StoredRow]) -> RowDiff:
    """Return rows to append and stored rows to unpin.

    Only timestamps are compared; a row whose user or text changed upstream
    under the same timestamp counts as unchanged.
    """
    previous_index = index_by_timestamp(previous, source="previous")
    current_index = index_by_timestamp(current, source="current")

    added = [row for row in current if row.timestamp not in previous_index]
    removed = [stored for stored in previous if stored.timestamp not in current_index]
    return RowDiff(added=added, removed=removed)
