"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from pinlog import (
    AuthenticationError,
    ConfigError,
    DuplicateKeyError,
    FormatError,
    RemoteApiError,
    StoreError,
    SyncError,
)


def main(argv: list[str] | None = None) -> int:
    import pinlog.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "sync":
            cli.asyncio.run(cli._run_sync(args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, RemoteApiError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (FormatError, DuplicateKeyError, StoreError, SyncError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
