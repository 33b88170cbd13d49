"""Tests for records views."""

from cloud3d_tlbx.data import ABSENT, Number, RecordsView, TabularDataset


def test_view_values_in_row_order(color_records) -> None:
    """Column values come back in row order."""
    view = RecordsView(records=color_records, columns=["a", "b", "c"])
    assert len(view) == 3
    assert view.values("a") == [Number(1), Number(2), Number(3)]


def test_view_missing_key_is_absent() -> None:
    """Rows lacking a column yield ABSENT."""
    ds = TabularDataset.from_records([{"a": 1, "b": 2}, {"a": 3}])
    assert ds.view().values("b") == [Number(2), ABSENT]
