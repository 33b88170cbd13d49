"""Data module for cells, records and dataset loading."""

from .cells import ABSENT, Absent, Cell, Number, Text, to_cell
from .tabular_dataset import TabularDataset
from .views import Record, RecordsView


__all__ = ["ABSENT", "Absent", "Cell", "Number", "Record", "RecordsView", "TabularDataset", "Text", "to_cell"]
