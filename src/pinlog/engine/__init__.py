"""Sync engine exports."""

from pinlog.engine.diff import compute_diff, index_by_timestamp
from pinlog.engine.engine import SyncEngine
from pinlog.engine.progress import LoggingSyncProgress, NullSyncProgress, SyncProgress

__all__ = [
    "LoggingSyncProgress",
    "NullSyncProgress",
    "SyncEngine",
    "SyncProgress",
    "compute_diff",
    "index_by_timestamp",
]
