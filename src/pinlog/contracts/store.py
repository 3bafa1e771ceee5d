"""Tabular store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from pinlog.contracts.row import Row, RowHandle, StoredRow


class TabularStore(ABC):
    """Append/rewrite-only row log.

    Rows are never deleted. ``rewrite`` addresses a row by the handle that
    ``read_all`` returned for it, never by its timestamp.
    """

    @abstractmethod
    async def __aenter__(self) -> TabularStore: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def read_all(self) -> list[StoredRow]: ...  # pragma: no cover

    @abstractmethod
    async def append(self, row: Row) -> None: ...  # pragma: no cover

    @abstractmethod
    async def rewrite(self, handle: RowHandle, row: Row) -> None: ...  # pragma: no cover
