"""Member directory snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pinlog.contracts.fetcher import ItemFetcher
from pinlog.contracts.items import Member

logger = logging.getLogger(__name__)


class MemberDirectory(Mapping[str, str]):
    """Read-only user id to display name mapping, built once per run."""

    def __init__(self, names: Mapping[str, str] | None = None) -> None:
        self._names: Mapping[str, str] = MappingProxyType(dict(names or {}))

    @classmethod
    def from_members(cls, members: Iterable[Member]) -> MemberDirectory:
        return cls({member.id: member.name for member in members})

    @classmethod
    async def load(cls, fetcher: ItemFetcher) -> MemberDirectory:
        members = await fetcher.list_members()
        directory = cls.from_members(members)
        logger.debug("Loaded member directory with %d entries", len(directory))
        return directory

    def resolve(self, user_id: str) -> str:
        """Return the display name for *user_id*, or the id itself when unknown."""
        name = self._names.get(user_id)
        return name if name else user_id

    def __getitem__(self, user_id: str) -> str:
        return self._names[user_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)
