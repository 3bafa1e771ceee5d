from __future__ import annotations

import pytest

from pinlog.contracts.exceptions import DuplicateKeyError
from pinlog.contracts.row import Row, RowHandle, StoredRow, epoch_to_datetime
from pinlog.engine.diff import compute_diff, index_by_timestamp


def make_row(ts: str, **updates: object) -> Row:
    return Row(timestamp=ts, datetime=epoch_to_datetime(ts), user="alice", text=f"text {ts}").model_copy(
        update=updates
    )


def stored(rows: list[Row]) -> list[StoredRow]:
    return [StoredRow(handle=RowHandle(position=index), row=row) for index, row in enumerate(rows)]


def test_identical_inputs_produce_empty_diff() -> None:
    rows = [make_row("1"), make_row("2"), make_row("3")]

    diff = compute_diff(rows, stored(rows))

    assert diff.added == []
    assert diff.removed == []
    assert diff.is_empty


def test_empty_inputs_produce_empty_diff() -> None:
    assert compute_diff([], []).is_empty


def test_new_current_row_is_added() -> None:
    a, b = make_row("1"), make_row("2")

    diff = compute_diff([a, b], stored([a]))

    assert diff.added == [b]
    assert diff.removed == []


def test_missing_current_row_is_removed_with_its_handle() -> None:
    a, b = make_row("1"), make_row("2")
    previous = stored([a, b])

    diff = compute_diff([a], previous)

    assert diff.added == []
    assert diff.removed == [previous[1]]
    assert diff.removed[0].handle == RowHandle(position=1)


def test_order_is_preserved_from_each_input() -> None:
    previous = stored([make_row("5"), make_row("1"), make_row("4")])
    current = [make_row("3"), make_row("1"), make_row("2")]

    diff = compute_diff(current, previous)

    assert [row.timestamp for row in diff.added] == ["3", "2"]
    assert [entry.timestamp for entry in diff.removed] == ["5", "4"]


def test_content_changes_under_same_timestamp_are_ignored() -> None:
    previous = stored([make_row("1")])
    current = [make_row("1", text="edited upstream", user="bob")]

    assert compute_diff(current, previous).is_empty


def test_unpinned_previous_row_still_matches_by_key() -> None:
    previous = stored([make_row("1", pinned=False)])

    assert compute_diff([make_row("1")], previous).is_empty


@pytest.mark.parametrize("side", ["current", "previous"])
def test_duplicate_keys_raise(side: str) -> None:
    duplicated = [make_row("1"), make_row("1")]
    current = duplicated if side == "current" else [make_row("1")]
    previous = stored(duplicated if side == "previous" else [make_row("1")])

    with pytest.raises(DuplicateKeyError) as exc_info:
        compute_diff(current, previous)

    assert exc_info.value.key == "1"
    assert exc_info.value.source == side


def test_index_by_timestamp() -> None:
    a, b = make_row("1.000100"), make_row("1.0001")

    index = index_by_timestamp([a, b], source="current")

    assert index == {"1.000100": a, "1.0001": b}
