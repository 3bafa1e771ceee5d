"""Canonical row contracts."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel

UNPINNED_MARKER = "unpinned"
COLUMNS = ("timestamp", "unpinned", "datetime", "user", "text")
HYPERLINK_PREFIX = "=HYPERLINK("


class Row(BaseModel):
    """One pinned item as recorded in the log.

    ``timestamp`` is the identity key and is kept as the exact text the
    remote API returned. ``link`` marks a file row whose ``text`` is a
    spreadsheet formula rather than plain text.
    """

    timestamp: str
    datetime: dt.datetime
    user: str = ""
    text: str = ""
    pinned: bool = True
    link: bool = False

    model_config = {"frozen": True}

    def unpinned(self) -> Row:
        return self.model_copy(update={"pinned": False})

    @property
    def pinned_marker(self) -> str:
        return "" if self.pinned else UNPINNED_MARKER


class RowHandle(BaseModel):
    """Storage address of a persisted row, as handed out by ``read_all``."""

    position: int

    model_config = {"frozen": True}


class StoredRow(BaseModel):
    handle: RowHandle
    row: Row

    model_config = {"frozen": True}

    @property
    def timestamp(self) -> str:
        return self.row.timestamp


def epoch_to_datetime(seconds: str | float) -> dt.datetime:
    """Convert epoch seconds (possibly fractional, possibly text) to a UTC datetime."""
    return dt.datetime.fromtimestamp(float(seconds), tz=dt.UTC)


def pinned_from_marker(marker: str | None) -> bool:
    return (marker or "").strip() != UNPINNED_MARKER


def hyperlink_literal(url: str, label: str) -> str:
    """Render a spreadsheet ``HYPERLINK`` formula for *url* showing *label*."""

    def _quote(value: str) -> str:
        return '"' + value.replace('"', '""') + '"'

    return f"=HYPERLINK({_quote(url)},{_quote(label)})"


def is_link_cell(timestamp: str, text: str) -> bool:
    """Whether stored *text* is the hyperlink formula of a file row.

    Message rows are keyed by epoch timestamps and file rows by file id, so a
    message whose text happens to start with ``=HYPERLINK(`` stays plain text.
    """
    if not text.startswith(HYPERLINK_PREFIX):
        return False
    try:
        float(timestamp)
    except ValueError:
        return True
    return False
