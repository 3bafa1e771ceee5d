"""Progress observers for a sync run.

The engine reports each :class:`SyncPhase` it enters and every row it writes
while applying a diff. Observers must not raise; an observer error aborts the
run like any other failure.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pinlog.contracts.row import Row
from pinlog.contracts.sync import SyncPhase

logger = logging.getLogger(__name__)


class SyncProgress(ABC):
    """Observer interface for sync run progress events."""

    @abstractmethod
    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        """*phase* began; *total* is the number of rows it will write, if known."""

    @abstractmethod
    def row_written(self, row: Row, *, appended: bool) -> None:
        """*row* was appended, or rewritten in place when *appended* is false."""

    @abstractmethod
    def phase_done(self, phase: SyncPhase) -> None: ...

    @abstractmethod
    def phase_failed(self, phase: SyncPhase, error: BaseException) -> None: ...


class NullSyncProgress(SyncProgress):
    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        pass

    def row_written(self, row: Row, *, appended: bool) -> None:
        pass

    def phase_done(self, phase: SyncPhase) -> None:
        pass

    def phase_failed(self, phase: SyncPhase, error: BaseException) -> None:
        pass


class LoggingSyncProgress(SyncProgress):
    """Reports progress through the ``pinlog.engine.progress`` logger.

    Used in place of a live display when debug logging is on, so progress
    lines interleave with request logs instead of fighting them for the
    terminal.
    """

    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        if total is None:
            logger.debug("Phase %s started", phase)
        else:
            logger.debug("Phase %s started (%d rows)", phase, total)

    def row_written(self, row: Row, *, appended: bool) -> None:
        logger.debug("%s %s", "appended" if appended else "rewrote", row.timestamp)

    def phase_done(self, phase: SyncPhase) -> None:
        logger.debug("Phase %s done", phase)

    def phase_failed(self, phase: SyncPhase, error: BaseException) -> None:
        logger.debug("Phase %s failed: %s", phase, error)
