"""Live sync progress on the terminal, drawn with Rich."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from pinlog.contracts.row import Row
from pinlog.contracts.sync import SyncPhase
from pinlog.engine.progress import SyncProgress

PHASE_STYLES: dict[SyncPhase, tuple[str, str]] = {
    SyncPhase.FETCHING: ("Fetch", "cyan"),
    SyncPhase.FORMATTING: ("Format", "blue"),
    SyncPhase.LOADING: ("Load", "yellow"),
    SyncPhase.DIFFING: ("Diff", "magenta"),
    SyncPhase.APPLYING: ("Apply", "green"),
}


class RichSyncProgress(SyncProgress):
    """One progress line per phase; the apply line counts appended and unpinned rows.

    Use as a context manager so the live display is started and stopped::

        with RichSyncProgress() as progress:
            result = await PinLog(config=config, progress=progress).sync()
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
        )
        self._tasks: dict[SyncPhase, RichTaskID] = {}
        self._appended = 0
        self._unpinned = 0

    def __enter__(self) -> RichSyncProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        self._tasks[phase] = self._progress.add_task(self._describe(phase), total=total)

    def row_written(self, row: Row, *, appended: bool) -> None:
        task_id = self._tasks.get(SyncPhase.APPLYING)
        if task_id is None:
            return
        if appended:
            self._appended += 1
        else:
            self._unpinned += 1
        self._progress.update(task_id, advance=1, description=self._describe(SyncPhase.APPLYING))

    def phase_done(self, phase: SyncPhase) -> None:
        task_id = self._tasks.get(phase)
        if task_id is None:
            return
        # Phases without a row count render as a single finished step.
        total = self._progress.tasks[task_id].total or 1
        self._progress.update(task_id, total=total, completed=total)

    def phase_failed(self, phase: SyncPhase, error: BaseException) -> None:
        task_id = self._tasks.get(phase)
        if task_id is None:
            return
        label, _ = PHASE_STYLES.get(phase, (str(phase), "white"))
        self._progress.update(task_id, description=f"[red]✗ {label}: {type(error).__name__}[/red]")
        self._progress.stop_task(task_id)

    def _describe(self, phase: SyncPhase) -> str:
        label, color = PHASE_STYLES.get(phase, (str(phase), "white"))
        description = f"[{color}]{label:>6}[/]"
        if phase is SyncPhase.APPLYING:
            description += f" +{self._appended} / unpinned {self._unpinned}"
        return description
