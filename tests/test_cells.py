"""Tests for the tagged cell model."""

import math

import numpy as np
import pandas as pd
import pytest

from cloud3d_tlbx.data.cells import (
    ABSENT,
    Number,
    Text,
    as_float,
    is_numeric_compatible,
    is_present,
    parse_float,
    to_cell,
    type_field,
)


class TestParseFloat:
    """Full-string float parsing."""

    @pytest.mark.parametrize(("text", "expected"), [("3", 3.0), ("-2.5", -2.5), ("1e3", 1000.0), (" 4 ", 4.0)])
    def test_parses_finite_numbers(self, text: str, expected: float) -> None:
        """Plain, signed, exponent and padded numbers parse."""
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "3abc", "1_000", "inf", "-Infinity", "nan", "1,5"])
    def test_rejects_partial_and_non_finite(self, text: str) -> None:
        """Partial parses, digit-group underscores and non-finite spellings are rejected."""
        assert parse_float(text) is None


class TestToCell:
    """Conversion of raw parser values."""

    def test_missing_values_are_absent(self) -> None:
        """None, empty strings, NaN and pandas NA are absent."""
        for raw in (None, "", float("nan"), np.nan, pd.NA, pd.NaT):
            assert to_cell(raw) is ABSENT

    def test_numbers_and_text(self) -> None:
        """Numbers become Number, strings stay verbatim Text without coercion."""
        assert to_cell(3) == Number(3.0)
        assert to_cell(np.int64(7)) == Number(7)
        assert to_cell("3") == Text("3")
        assert to_cell("red") == Text("red")

    def test_booleans_are_labels(self) -> None:
        """Booleans are categorical labels, not quantities."""
        assert to_cell(True) == Text("true")
        assert to_cell(False) == Text("false")

    def test_cells_pass_through(self) -> None:
        """Existing cells are returned unchanged."""
        cell = Text("x")
        assert to_cell(cell) is cell
        assert to_cell(ABSENT) is ABSENT

    def test_number_and_text_are_distinct(self) -> None:
        """Number 3 and text "3" are different values."""
        assert Number(3) != Text("3")
        assert len({Number(3), Text("3"), Number(3.0)}) == 2


class TestTypeField:
    """Per-field typing of delimited text."""

    def test_type_field(self) -> None:
        """Empty fields are absent, numeric fields numbers, the rest text."""
        assert type_field("") is ABSENT
        assert type_field("12.5") == Number(12.5)
        assert type_field("n/a") == Text("n/a")


class TestPredicates:
    """Presence and numeric compatibility."""

    def test_is_present(self) -> None:
        """Absent cells and empty text are not present."""
        assert not is_present(ABSENT)
        assert not is_present(Text(""))
        assert is_present(Text(" "))
        assert is_present(Number(0))

    def test_is_numeric_compatible(self) -> None:
        """Numbers and fully numeric text are numeric-compatible."""
        assert is_numeric_compatible(Number(1.5))
        assert is_numeric_compatible(Text("1.5"))
        assert not is_numeric_compatible(Text("1.5 kg"))
        assert not is_numeric_compatible(ABSENT)

    def test_as_float(self) -> None:
        """Unparseable and absent cells yield NaN."""
        assert as_float(Number(2)) == 2.0
        assert as_float(Text("2.5")) == 2.5
        assert math.isnan(as_float(Text("abc")))
        assert math.isnan(as_float(ABSENT))

    def test_raw_values(self) -> None:
        """Cells expose their native Python value."""
        assert Number(2).raw == 2.0
        assert Text("a").raw == "a"
        assert ABSENT.raw is None
