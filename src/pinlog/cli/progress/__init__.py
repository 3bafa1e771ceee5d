"""CLI progress displays."""

from pinlog.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
