"""Remote item fetcher contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any

from pinlog.contracts.items import Member


class ItemFetcher(ABC):
    @abstractmethod
    async def __aenter__(self) -> ItemFetcher: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_pinned_items(self, channel_id: str) -> list[dict[str, Any]]: ...  # pragma: no cover

    @abstractmethod
    async def list_members(self) -> list[Member]: ...  # pragma: no cover
