"""Sync command formatting."""

from __future__ import annotations

import argparse

from pinlog import PinLogConfig, SyncResult
from pinlog.cli.common import format_count
from pinlog.cli.progress.rich import RichSyncProgress
from pinlog.engine.progress import LoggingSyncProgress


def format_sync_summary(result: SyncResult, config: PinLogConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    verb_added = "To append" if result.dry_run else "Appended"
    verb_removed = "To unpin" if result.dry_run else "Unpinned"

    lines = [
        "",
        f"pinlog - sync complete ({mode})",
        "",
        f"  Channel:   {config.channel_id}",
        f"  Store:     {config.store} {config.store_id}",
        "",
        f"  Pinned:    {format_count(result.current_count, 'item')}",
        f"  Stored:    {format_count(result.stored_count, 'row')}",
    ]

    if result.added:
        lines.append(f"  {verb_added + ':':<10} {format_count(len(result.added), 'row')}")
    if result.removed:
        lines.append(f"  {verb_removed + ':':<10} {format_count(len(result.removed), 'row')}")
    if result.diff.is_empty:
        lines.append("  Status:    log up to date")

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> SyncResult:
    import pinlog.cli as cli

    config = cli.load_config(args.config)

    if args.verbose:
        pl = await cli.PinLog.from_config(config, progress=LoggingSyncProgress())
        result = await pl.sync(dry_run=args.dry_run)
    else:
        with RichSyncProgress() as progress:
            pl = await cli.PinLog.from_config(config, progress=progress)
            result = await pl.sync(dry_run=args.dry_run)

    print(cli._format_summary(result, config))
    return result


__all__ = ["format_sync_summary", "run_sync"]
