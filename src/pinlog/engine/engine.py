"""Core reconciliation pipeline engine."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pinlog.contracts.fetcher import ItemFetcher
from pinlog.contracts.row import Row, StoredRow
from pinlog.contracts.store import TabularStore
from pinlog.contracts.sync import RowDiff, SyncPhase, SyncResult
from pinlog.engine.diff import compute_diff
from pinlog.engine.progress import NullSyncProgress, SyncProgress
from pinlog.formatting.directory import MemberDirectory
from pinlog.formatting.formatter import ItemFormatter

logger = logging.getLogger(__name__)


class SyncEngine:
    """Runs one reconciliation of a channel's pins against a tabular store.

    Phases run strictly in order; the first error moves the engine to
    ``SyncPhase.FAILED`` and propagates. Nothing is written before the
    apply phase, and writes already made during it are not rolled back.
    """

    def __init__(
        self,
        fetcher: ItemFetcher,
        store: TabularStore,
        *,
        channel_id: str,
        dry_run: bool = False,
        progress: SyncProgress | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._channel_id = channel_id
        self._dry_run = dry_run
        self._progress: SyncProgress = progress or NullSyncProgress()
        self.phase = SyncPhase.IDLE

    async def sync(self) -> SyncResult:
        if self.phase is not SyncPhase.IDLE:
            raise RuntimeError(f"SyncEngine already ran (phase={self.phase})")
        try:
            directory, raw_items = await self._fetch()
            current = self._format(directory, raw_items)
            stored = await self._load()
            diff = self._diff(current, stored)
            if self._dry_run:
                logger.info("[dry-run] would append %d and unpin %d rows", len(diff.added), len(diff.removed))
            else:
                await self._apply(diff)
        except BaseException:
            self.phase = SyncPhase.FAILED
            raise

        self.phase = SyncPhase.DONE
        return SyncResult(
            diff=diff,
            current_count=len(current),
            stored_count=len(stored),
            dry_run=self._dry_run,
            phase=self.phase,
        )

    @contextmanager
    def _entering(self, phase: SyncPhase, total: int | None = None) -> Iterator[None]:
        self.phase = phase
        self._progress.phase_start(phase, total)
        try:
            yield
        except BaseException as exc:
            self._progress.phase_failed(phase, exc)
            raise
        self._progress.phase_done(phase)

    async def _fetch(self) -> tuple[MemberDirectory, list[dict[str, Any]]]:
        with self._entering(SyncPhase.FETCHING):
            directory = await MemberDirectory.load(self._fetcher)
            raw_items = await self._fetcher.list_pinned_items(self._channel_id)
            logger.debug("Fetched %d pinned items from %s", len(raw_items), self._channel_id)
        return directory, raw_items

    def _format(self, directory: MemberDirectory, raw_items: list[dict[str, Any]]) -> list[Row]:
        with self._entering(SyncPhase.FORMATTING):
            return ItemFormatter(directory).format_items(raw_items)

    async def _load(self) -> list[StoredRow]:
        with self._entering(SyncPhase.LOADING):
            stored = await self._store.read_all()
            logger.debug("Loaded %d stored rows", len(stored))
        return stored

    def _diff(self, current: list[Row], stored: list[StoredRow]) -> RowDiff:
        with self._entering(SyncPhase.DIFFING):
            diff = compute_diff(current, stored)
        # Rows already marked unpinned by an earlier run need no rewrite.
        return RowDiff(added=diff.added, removed=[s for s in diff.removed if s.row.pinned])

    async def _apply(self, diff: RowDiff) -> None:
        with self._entering(SyncPhase.APPLYING, total=len(diff.added) + len(diff.removed)):
            for row in diff.added:
                await self._store.append(row)
                logger.info("Appended row %s", row.timestamp)
                self._progress.row_written(row, appended=True)
            for stored in diff.removed:
                unpinned = stored.row.unpinned()
                await self._store.rewrite(stored.handle, unpinned)
                logger.info("Marked row %s as unpinned", stored.timestamp)
                self._progress.row_written(unpinned, appended=False)
