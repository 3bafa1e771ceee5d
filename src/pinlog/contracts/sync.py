"""Sync result contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from pinlog.contracts.row import Row, StoredRow


class SyncPhase(StrEnum):
    IDLE = "idle"
    FETCHING = "fetching"
    FORMATTING = "formatting"
    LOADING = "loading"
    DIFFING = "diffing"
    APPLYING = "applying"
    DONE = "done"
    FAILED = "failed"


class RowDiff(BaseModel):
    added: list[Row] = Field(default_factory=list)
    removed: list[StoredRow] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


class SyncResult(BaseModel):
    diff: RowDiff
    current_count: int = 0
    stored_count: int = 0
    dry_run: bool = False
    phase: SyncPhase = SyncPhase.DONE

    @property
    def added(self) -> list[Row]:
        return self.diff.added

    @property
    def removed(self) -> list[StoredRow]:
        return self.diff.removed
