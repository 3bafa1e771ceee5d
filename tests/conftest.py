"""Shared test fixtures for pinlog tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.items import Member
from tests.fakes.fetcher import FakeFetcher
from tests.fakes.items import file_item, message_item
from tests.fakes.store import RecordingStore


@pytest.fixture
def members() -> list[Member]:
    return [Member(id="U1", name="alice"), Member(id="U2", name="bob")]


@pytest.fixture
def fetcher(members: list[Member]) -> FakeFetcher:
    return FakeFetcher(
        items=[message_item("1700000000.000100"), file_item("F1")],
        members=members,
    )


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def sample_config(tmp_path: Path) -> PinLogConfig:
    """A minimal valid PinLogConfig backed by a CSV file."""
    return PinLogConfig(channel_id="C1", store_id=str(tmp_path / "pins.csv"))
