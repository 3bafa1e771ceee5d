from __future__ import annotations

import pytest

from pinlog.contracts.exceptions import StoreError
from pinlog.contracts.row import Row, RowHandle, epoch_to_datetime
from pinlog.stores.memory import InMemoryTabularStore


def make_row(ts: str) -> Row:
    return Row(timestamp=ts, datetime=epoch_to_datetime(ts))


@pytest.mark.asyncio
async def test_read_all_hands_out_positions() -> None:
    store = InMemoryTabularStore([make_row("1"), make_row("2")])

    stored = await store.read_all()

    assert [(entry.handle.position, entry.timestamp) for entry in stored] == [(0, "1"), (1, "2")]


@pytest.mark.asyncio
async def test_append_and_rewrite() -> None:
    async with InMemoryTabularStore() as store:
        await store.append(make_row("1"))
        await store.append(make_row("2"))
        await store.rewrite(RowHandle(position=0), make_row("1").unpinned())

    assert [row.pinned for row in store.rows] == [False, True]


@pytest.mark.asyncio
async def test_rewrite_out_of_range_raises() -> None:
    store = InMemoryTabularStore()

    with pytest.raises(StoreError):
        await store.rewrite(RowHandle(position=0), make_row("1"))
