"""Task-specific views over dataset content."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .cells import ABSENT, Cell


Record = Mapping[str, Cell]


@dataclass(frozen=True)
class RecordsView:
    """Immutable snapshot of records and the column schema they are analyzed under.

    Attributes:
        records: Records in row order; each maps column name to a cell.
        columns: Column names in declared order (the first record's keys).
    """

    records: Sequence[Record]
    columns: list[str]

    def __len__(self) -> int:
        return len(self.records)

    def values(self, column: str) -> list[Cell]:
        """Return the column's cells in row order; rows without the key yield ``ABSENT``."""
        return [record.get(column, ABSENT) for record in self.records]
