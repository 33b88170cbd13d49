"""Dataset class holding the parsed records of one tabular file."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

import pandas as pd

from cloud3d_tlbx.errors import EmptyDatasetError
from cloud3d_tlbx.utils.mapping_config import DEFAULT_MAPPING_CFG, MappingConfig

from .cells import Cell, to_cell, type_field
from .views import Record, RecordsView


if TYPE_CHECKING:
    from cloud3d_tlbx.analysis.column_analyzer import ColumnAnalyzer


logger = logging.getLogger(__name__)


class TabularDataset:
    """Ordered records of an arbitrary tabular dataset.

    Every record maps a column name to a :data:`~cloud3d_tlbx.data.cells.Cell`. The first
    record's keys define the schema; records without any key are dropped on construction.

    **Example workflow**:
    >>> from cloud3d_tlbx.data import TabularDataset
    >>> ds = TabularDataset.from_records(
    ...     [{"a": 1, "b": "red", "c": 10}, {"a": 2, "b": "blue", "c": 20}, {"a": 3, "b": "red", "c": 30}],
    ... )
    >>> result = ds.make_column_analyzer().fit().result()
    >>> result.numeric_columns, result.categorical_columns
    (['a', 'c'], ['b'])
    """

    def __init__(self, records: Iterable[Mapping[str, Cell]]) -> None:
        """Initialize the dataset.

        Args:
            records: Records whose values are already cells (see :meth:`from_records` for raw values)

        Raises:
            EmptyDatasetError: If no record with at least one column remains
        """
        kept = [MappingProxyType(dict(record)) for record in records if len(record) > 0]
        if not kept:
            raise EmptyDatasetError
        self._records: tuple[Record, ...] = tuple(kept)
        self._columns: list[str] = list(kept[0].keys())

    @classmethod
    def from_records(cls, rows: Iterable[Mapping[str, object]]) -> "TabularDataset":
        """Build a dataset from raw parser output.

        Args:
            rows: Mappings from column name to a raw value (number, string, None or a cell)

        Returns:
            TabularDataset instance
        """
        records = [{str(key): to_cell(value) for key, value in row.items()} for row in rows]
        dropped = sum(1 for record in records if not record)
        if dropped:
            logger.debug("Dropped %d records without columns", dropped)
        return cls(records)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "TabularDataset":
        """Build a dataset from an already typed DataFrame.

        Values are converted cell by cell; NaN and other pandas missing markers become absent.

        Args:
            df: DataFrame with one column per dataset column

        Returns:
            TabularDataset instance
        """
        typed = df.map(to_cell)
        typed.columns = typed.columns.map(str)
        return cls(typed.to_dict(orient="records"))

    @classmethod
    def from_csv(cls, csv_path: str | Path, **read_csv_kwargs: object) -> "TabularDataset":
        """Load a dataset from a CSV file with a header row.

        Fields are typed one by one rather than per column: an empty field is absent, a field that
        parses fully to a finite float is a number, and anything else is kept as text. A column with
        a few stray labels therefore still carries numbers in its other rows.

        Args:
            csv_path: Path to the CSV file
            **read_csv_kwargs: Additional keyword arguments forwarded to :func:`pandas.read_csv`

        Returns:
            TabularDataset instance with loaded records

        Raises:
            EmptyDatasetError: If the file has no data rows
        """
        try:
            raw_df = pd.read_csv(
                csv_path,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                **read_csv_kwargs,
            )
        except pd.errors.EmptyDataError as exc:
            raise EmptyDatasetError(f"CSV file is empty or invalid: {csv_path}") from exc
        logger.info("Read %d rows and %d columns from %s", len(raw_df), raw_df.shape[1], csv_path)
        return cls(raw_df.pipe(cls._type_fields).to_dict(orient="records"))

    @staticmethod
    def _type_fields(df: pd.DataFrame) -> pd.DataFrame:
        """Convert every text field into a cell; short rows padded by pandas become absent."""
        return df.map(lambda value: type_field(value) if isinstance(value, str) else to_cell(value)).set_axis(
            df.columns.map(str),
            axis=1,
        )

    @property
    def records(self) -> tuple[Record, ...]:
        """Get the records in row order."""
        return self._records

    @property
    def columns(self) -> list[str]:
        """Get column names in declared order."""
        return list(self._columns)

    @property
    def n_rows(self) -> int:
        return len(self._records)

    @property
    def df(self) -> pd.DataFrame:
        """Get the records as a DataFrame of raw Python values (None for absent cells).

        Returns:
            DataFrame with one row per record, intended for display
        """
        return pd.DataFrame(
            [{col: record[col].raw for col in record} for record in self._records],
            columns=self._columns,
        )

    def __len__(self) -> int:
        return len(self._records)

    def view(self, columns: Sequence[str] | None = None) -> RecordsView:
        """Build an immutable records view for analyzers.

        Args:
            columns: Columns the view is analyzed under (defaults to the schema)

        Returns:
            RecordsView over all records
        """
        return RecordsView(records=self._records, columns=list(columns or self._columns))

    def make_column_analyzer(
        self,
        columns: Sequence[str] | None = None,
        config: MappingConfig = DEFAULT_MAPPING_CFG,
    ) -> "ColumnAnalyzer":
        """Instantiate a column analyzer configured for this dataset."""
        from cloud3d_tlbx.analysis.column_analyzer import ColumnAnalyzer

        return ColumnAnalyzer(self.view(columns), config=config)
