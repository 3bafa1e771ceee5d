"""Command-line interface for pinlog."""

from __future__ import annotations

import asyncio
import logging as logging

from pinlog import PinLog as PinLog
from pinlog import load_config as load_config
from pinlog.cli.app import main as main
from pinlog.cli.commands import sync as sync_command
from pinlog.cli.parser import build_parser as build_parser

_format_summary = sync_command.format_sync_summary
_run_sync = sync_command.run_sync

__all__ = ["asyncio", "build_parser", "load_config", "logging", "main"]
