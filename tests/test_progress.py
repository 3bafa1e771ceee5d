"""Tests for the sync progress observers."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from pinlog.cli.progress.rich import RichSyncProgress
from pinlog.contracts.row import Row, epoch_to_datetime
from pinlog.contracts.sync import SyncPhase
from pinlog.engine.progress import LoggingSyncProgress, NullSyncProgress, SyncProgress


def quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)


def make_row(timestamp: str = "1700000000.000100") -> Row:
    return Row(timestamp=timestamp, datetime=epoch_to_datetime(timestamp))


def test_null_progress_accepts_full_lifecycle() -> None:
    progress = NullSyncProgress()

    progress.phase_start(SyncPhase.APPLYING, total=1)
    progress.row_written(make_row(), appended=True)
    progress.phase_done(SyncPhase.APPLYING)
    progress.phase_failed(SyncPhase.LOADING, RuntimeError("boom"))

    assert isinstance(progress, SyncProgress)


def test_logging_progress_reports_each_event(caplog: pytest.LogCaptureFixture) -> None:
    progress = LoggingSyncProgress()

    with caplog.at_level(logging.DEBUG, logger="pinlog.engine.progress"):
        progress.phase_start(SyncPhase.APPLYING, total=2)
        progress.row_written(make_row("1.0"), appended=True)
        progress.row_written(make_row("2.0").unpinned(), appended=False)
        progress.phase_done(SyncPhase.APPLYING)
        progress.phase_failed(SyncPhase.LOADING, RuntimeError("disk gone"))

    assert caplog.messages == [
        "Phase applying started (2 rows)",
        "appended 1.0",
        "rewrote 2.0",
        "Phase applying done",
        "Phase loading failed: disk gone",
    ]


class TestRichSyncProgress:
    def test_context_manager_returns_self(self) -> None:
        progress = RichSyncProgress(console=quiet_console())
        with progress as entered:
            assert entered is progress

    def test_apply_phase_counts_appended_and_unpinned_rows(self) -> None:
        with RichSyncProgress(console=quiet_console()) as progress:
            progress.phase_start(SyncPhase.APPLYING, total=3)
            progress.row_written(make_row("1.0"), appended=True)
            progress.row_written(make_row("2.0"), appended=True)
            progress.row_written(make_row("3.0").unpinned(), appended=False)
            progress.phase_done(SyncPhase.APPLYING)

            task = progress._progress.tasks[progress._tasks[SyncPhase.APPLYING]]
            assert task.completed == 3
            assert "+2 / unpinned 1" in task.description

    def test_phase_without_total_finishes_as_one_step(self) -> None:
        with RichSyncProgress(console=quiet_console()) as progress:
            progress.phase_start(SyncPhase.FETCHING)
            progress.phase_done(SyncPhase.FETCHING)

            task = progress._progress.tasks[progress._tasks[SyncPhase.FETCHING]]
            assert task.total == 1
            assert task.completed == 1

    def test_events_for_unstarted_phases_are_ignored(self) -> None:
        with RichSyncProgress(console=quiet_console()) as progress:
            progress.row_written(make_row(), appended=True)
            progress.phase_done(SyncPhase.DIFFING)
            progress.phase_failed(SyncPhase.DIFFING, RuntimeError("boom"))

            assert progress._progress.tasks == []

    def test_failed_phase_names_the_error(self) -> None:
        with RichSyncProgress(console=quiet_console()) as progress:
            progress.phase_start(SyncPhase.LOADING)
            progress.phase_failed(SyncPhase.LOADING, RuntimeError("boom"))

            task = progress._progress.tasks[progress._tasks[SyncPhase.LOADING]]
            assert "Load: RuntimeError" in task.description
