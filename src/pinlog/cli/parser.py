"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("pinlog")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pinlog")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Reconcile pinned items into the row log")
    sync_parser.add_argument("--config", default="./pinlog.json", help="Path to pinlog.json")
    mode = sync_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Compute the diff without writing")
    mode.add_argument("--apply", action="store_true", help="Apply the diff to the store")
    sync_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
