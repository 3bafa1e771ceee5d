"""Shared CLI formatting helpers."""

from __future__ import annotations


def format_count(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"
