"""Column type classification for arbitrary tabular data."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

import pandas as pd

from cloud3d_tlbx.data.cells import ABSENT, Cell, is_numeric_compatible, is_present
from cloud3d_tlbx.data.views import Record, RecordsView
from cloud3d_tlbx.errors import EmptyDatasetError
from cloud3d_tlbx.utils.mapping_config import DEFAULT_MAPPING_CFG, MappingConfig

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class ColumnProfile:
    """Type classification and summary statistics of one column.

    Attributes:
        name: Column name.
        is_numeric: Whether the column is mapped as a continuous quantity.
        unique_count: Number of distinct present values (exact representation, no coercion).
        sample_values: Leading present values in row order, for display only.
        n_present: Number of present (non-absent, non-empty) values.
        n_numeric_compatible: Number of present values that are numbers or parse as finite floats.
    """

    name: str
    is_numeric: bool
    unique_count: int
    sample_values: tuple[Cell, ...]
    n_present: int = 0
    n_numeric_compatible: int = 0

    @property
    def is_categorical(self) -> bool:
        return not self.is_numeric

    @property
    def option_label(self) -> str:
        """Label used when offering the column as an axis choice."""
        return f"{self.name} {'(#)' if self.is_numeric else '(cat)'}"


def analyze_column(
    records: Sequence[Record],
    column: str,
    config: MappingConfig = DEFAULT_MAPPING_CFG,
) -> ColumnProfile:
    """Classify one column as numeric or categorical.

    A column is numeric when strictly more than ``config.numeric_ratio_threshold`` of its present
    values are numeric-compatible. A column that is missing from every record has no present values
    and is therefore categorical with ``unique_count == 0``.

    Args:
        records: Records to inspect (must not be empty)
        column: Column name; records lacking the key count as absent
        config: Mapping constants

    Returns:
        ColumnProfile of the column

    Raises:
        EmptyDatasetError: If ``records`` is empty
    """
    if not records:
        raise EmptyDatasetError
    present = [cell for cell in (record.get(column, ABSENT) for record in records) if is_present(cell)]
    n_numeric = sum(1 for cell in present if is_numeric_compatible(cell))

    return ColumnProfile(
        name=column,
        is_numeric=n_numeric > len(present) * config.numeric_ratio_threshold,
        unique_count=len(set(present)),
        sample_values=tuple(present[: config.sample_size]),
        n_present=len(present),
        n_numeric_compatible=n_numeric,
    )


@dataclass(frozen=True)
class ColumnAnalysisResult:
    """Profiles of every analyzed column, in column order.

    Attributes:
        profiles: Mapping from column name to its profile (insertion order = column order).
        n_rows: Number of records analyzed.
        numeric_columns: Numeric column names in column order.
        categorical_columns: Categorical column names in column order.
        summary: One row per column with ``column``, ``type``, ``unique_count``,
            ``n_present``, ``numeric_ratio`` and ``samples``.
    """

    profiles: dict[str, ColumnProfile]
    n_rows: int
    numeric_columns: list[str]
    categorical_columns: list[str]
    summary: pd.DataFrame

    @property
    def n_columns(self) -> int:
        return len(self.profiles)

    @property
    def n_numeric(self) -> int:
        return len(self.numeric_columns)

    @property
    def n_categorical(self) -> int:
        return len(self.categorical_columns)

    def plot_profiles(self, **kwargs: object):
        """Plot unique counts per column using the plotting helper."""
        from cloud3d_tlbx.plotting.profile_plots import plot_column_profiles  # noqa: PLC0415

        return plot_column_profiles(self, **kwargs)


class ColumnAnalyzer(BaseAnalyser):
    """Analyzer classifying every column of a records view.

    Example:
        >>> from cloud3d_tlbx.data import TabularDataset
        >>> from cloud3d_tlbx.utils import get_dataset_path
        >>> ds = TabularDataset.from_csv(get_dataset_path("sample_points"))
        >>> result = ds.make_column_analyzer().fit().result()
        >>> result.n_numeric, result.n_categorical
        >>> [profile.option_label for profile in result.profiles.values()]
    """

    def __init__(self, view: RecordsView, config: MappingConfig = DEFAULT_MAPPING_CFG) -> None:
        """Initialize the analyzer.

        Args:
            view: Immutable records view to analyze
            config: Mapping constants (numeric ratio threshold, sample size)
        """
        self._view = view
        self.config = config
        self._profiles: dict[str, ColumnProfile] | None = None

    def fit(self) -> Self:
        """Profile every column of the view.

        Returns:
            Self for method chaining.

        Raises:
            EmptyDatasetError: If the view has no records
        """
        self._profiles = {col: analyze_column(self._view.records, col, self.config) for col in self._view.columns}
        return self

    def result(self) -> ColumnAnalysisResult:
        """Return column profiles.

        Returns:
            ColumnAnalysisResult with profiles and the numeric / categorical partition.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._profiles is None:
            raise ValueError("Must call fit() before result()")

        profiles = dict(self._profiles)
        summary = pd.DataFrame(
            [
                {
                    "column": p.name,
                    "type": "numeric" if p.is_numeric else "categorical",
                    "unique_count": p.unique_count,
                    "n_present": p.n_present,
                    "numeric_ratio": p.n_numeric_compatible / p.n_present if p.n_present else 0.0,
                    "samples": ", ".join(str(cell) for cell in p.sample_values),
                }
                for p in profiles.values()
            ],
            columns=["column", "type", "unique_count", "n_present", "numeric_ratio", "samples"],
        )
        return ColumnAnalysisResult(
            profiles=profiles,
            n_rows=len(self._view),
            numeric_columns=[name for name, p in profiles.items() if p.is_numeric],
            categorical_columns=[name for name, p in profiles.items() if not p.is_numeric],
            summary=summary,
        )
