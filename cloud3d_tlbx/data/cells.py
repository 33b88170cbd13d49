"""Tagged cell values for records of unknown column types.

A parsed tabular file delivers cells that may be numbers, text or nothing at all.
Instead of carrying duck-typed raw values around, every cell is one of three
variants:

- :class:`Number` wraps a float,
- :class:`Text` wraps a string,
- :data:`ABSENT` marks a missing or empty value.

Equality is by variant and value, so ``Number(3)`` and ``Text("3")`` are distinct
cells even though the text parses to the same number.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Final

import pandas as pd


@dataclass(frozen=True)
class Number:
    """A native numeric cell."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @property
    def raw(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class Text:
    """A textual cell, kept verbatim."""

    value: str

    @property
    def raw(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Absent:
    """A missing cell (null, missing key or empty string)."""

    @property
    def raw(self) -> None:
        return None

    def __str__(self) -> str:
        return ""


ABSENT: Final = Absent()

Cell = Number | Text | Absent


def parse_float(text: str) -> float | None:
    """Parse ``text`` as a finite float, requiring the whole string to be consumed.

    Surrounding whitespace is tolerated. Digit-group underscores (``"1_000"``), which
    Python's ``float`` would accept, as well as ``inf`` and ``nan`` spellings are rejected.

    Returns:
        The parsed value, or None when ``text`` is not a finite number.
    """
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def to_cell(raw: object) -> Cell:
    """Convert a raw value delivered by a parser into a :data:`Cell`.

    - Cells are returned unchanged.
    - ``None``, NaN, pandas missing markers and empty strings become :data:`ABSENT`.
    - Booleans become ``Text("true")`` / ``Text("false")``: they label rows rather than measure them.
    - Any other real number (including numpy scalars) becomes :class:`Number`.
    - Strings become :class:`Text` verbatim, without numeric coercion.
    - Everything else is stringified into :class:`Text`.
    """
    if isinstance(raw, Number | Text | Absent):
        return raw
    if raw is None:
        return ABSENT
    if isinstance(raw, str):
        return Text(raw) if raw else ABSENT
    if isinstance(raw, bool):
        return Text(str(raw).lower())
    if isinstance(raw, numbers.Real):
        return ABSENT if math.isnan(raw) else Number(raw)
    if pd.api.types.is_scalar(raw) and pd.isna(raw):
        return ABSENT
    return Text(str(raw))


def type_field(field: str) -> Cell:
    """Type a single text field read from a delimited file.

    Empty fields are absent, fields that parse fully to a finite float are numbers,
    and everything else is kept as text.
    """
    if field == "":
        return ABSENT
    value = parse_float(field)
    return Text(field) if value is None else Number(value)


def is_present(cell: Cell) -> bool:
    """Return True unless the cell is absent or an empty string."""
    if isinstance(cell, Absent):
        return False
    if isinstance(cell, Text):
        return cell.value != ""
    return True


def is_numeric_compatible(cell: Cell) -> bool:
    """Return True for native numbers and for text that parses fully to a finite float."""
    if isinstance(cell, Number):
        return True
    if isinstance(cell, Text):
        return parse_float(cell.value) is not None
    return False


def as_float(cell: Cell) -> float:
    """Return the numeric value of a cell, NaN when it has none."""
    if isinstance(cell, Number):
        return cell.value
    if isinstance(cell, Text):
        value = parse_float(cell.value)
        return math.nan if value is None else value
    return math.nan


__all__ = [
    "ABSENT",
    "Absent",
    "Cell",
    "Number",
    "Text",
    "as_float",
    "is_numeric_compatible",
    "is_present",
    "parse_float",
    "to_cell",
    "type_field",
]
