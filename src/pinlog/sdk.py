"""SDK composition root for pinlog."""

from __future__ import annotations

from pinlog.auth import create_store_token_resolver, create_token_resolver
from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.fetcher import ItemFetcher
from pinlog.contracts.store import TabularStore
from pinlog.contracts.sync import SyncResult
from pinlog.engine import SyncEngine
from pinlog.engine.progress import SyncProgress
from pinlog.providers import create_fetcher
from pinlog.stores import create_store


class PinLog:
    """pinlog SDK public API.

    Fetcher and store may be injected; when omitted they are built from the
    config on each :meth:`sync` call.
    """

    def __init__(
        self,
        *,
        config: PinLogConfig,
        fetcher: ItemFetcher | None = None,
        store: TabularStore | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._config = config
        self._fetcher = fetcher
        self._store = store
        self._progress = progress

    @classmethod
    async def from_config(cls, config: PinLogConfig, *, progress: SyncProgress | None = None) -> PinLog:
        return cls(config=config, progress=progress)

    @property
    def config(self) -> PinLogConfig:
        return self._config

    async def sync(self, *, dry_run: bool = False) -> SyncResult:
        """Reconcile the configured channel's pins into the configured store."""
        fetcher = self._fetcher if self._fetcher is not None else await self._build_fetcher()
        store = self._store if self._store is not None else await self._build_store()

        async with fetcher, store:
            engine = SyncEngine(
                fetcher,
                store,
                channel_id=self._config.channel_id,
                dry_run=dry_run,
                progress=self._progress,
            )
            return await engine.sync()

    async def _build_fetcher(self) -> ItemFetcher:
        token = await create_token_resolver(self._config).resolve()
        return create_fetcher(self._config, token=token)

    async def _build_store(self) -> TabularStore:
        token: str | None = None
        if self._config.store == "google-sheets":
            token = await create_store_token_resolver(self._config).resolve()
        return create_store(self._config, token=token)
