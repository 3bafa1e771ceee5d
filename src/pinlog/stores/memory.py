"""In-memory tabular store."""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType

from pinlog.contracts.exceptions import StoreError
from pinlog.contracts.row import Row, RowHandle, StoredRow
from pinlog.contracts.store import TabularStore


class InMemoryTabularStore(TabularStore):
    """List-backed store; handles are list positions."""

    def __init__(self, rows: Iterable[Row] = ()) -> None:
        self._rows: list[Row] = list(rows)

    async def __aenter__(self) -> InMemoryTabularStore:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    async def read_all(self) -> list[StoredRow]:
        return [StoredRow(handle=RowHandle(position=index), row=row) for index, row in enumerate(self._rows)]

    async def append(self, row: Row) -> None:
        self._rows.append(row)

    async def rewrite(self, handle: RowHandle, row: Row) -> None:
        if not 0 <= handle.position < len(self._rows):
            raise StoreError(f"no row at position {handle.position}")
        self._rows[handle.position] = row
