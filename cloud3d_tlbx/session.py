"""Caller-owned state of one visualization session.

A session binds exactly one dataset to the category mappings built for it and to the
current axis selection. All three live in a single immutable state object which is
replaced in one assignment, so loading a new dataset never exposes codes of the previous
one, and a rejected load leaves the previous state untouched.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path

import numpy as np

from cloud3d_tlbx.analysis.axis_selection import AxisSelection, detect_best_columns
from cloud3d_tlbx.analysis.column_analyzer import ColumnAnalysisResult, ColumnProfile, analyze_column
from cloud3d_tlbx.analysis.coordinate_mapper import CategoryCache, CategoryMapping, map_to_numeric
from cloud3d_tlbx.analysis.point_cloud import PointCloud, build_point_cloud
from cloud3d_tlbx.data.tabular_dataset import TabularDataset
from cloud3d_tlbx.errors import EmptyDatasetError
from cloud3d_tlbx.utils.mapping_config import DEFAULT_MAPPING_CFG, MappingConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SessionState:
    dataset: TabularDataset
    cache: CategoryCache
    selection: AxisSelection


class VisualizationSession:
    """Explicit session holding the active dataset, its category mappings and the axis selection.

    Example:
        >>> from cloud3d_tlbx.session import VisualizationSession
        >>> from cloud3d_tlbx.utils import get_dataset_path
        >>> session = VisualizationSession()
        >>> session.load_csv(get_dataset_path("sample_points"))
        >>> session.axis_selection
        >>> cloud = session.point_cloud()
        >>> cloud.legend()
    """

    def __init__(self, config: MappingConfig = DEFAULT_MAPPING_CFG) -> None:
        self.config = config
        self._state: _SessionState | None = None

    # ------------------------------------------------------------------ lifecycle
    def load(self, data: TabularDataset | Iterable[Mapping[str, object]]) -> ColumnAnalysisResult:
        """Make ``data`` the active dataset.

        The dataset is validated and profiled before anything is replaced. On success the previous
        dataset, all its category mappings and the axis selection are discarded in one step, and the
        axis selection is reset to the auto-detected default.

        Args:
            data: A dataset, or raw records (mappings from column name to raw value)

        Returns:
            Column profiles of the new dataset

        Raises:
            EmptyDatasetError: If there is no record to visualize; the previous state is kept
        """
        try:
            dataset = data if isinstance(data, TabularDataset) else TabularDataset.from_records(data)
        except EmptyDatasetError:
            logger.warning("Rejected empty dataset; keeping the previous one")
            raise

        profiles = dataset.make_column_analyzer(config=self.config).fit().result()
        selection = detect_best_columns(dataset.records, self.config)
        self._state = _SessionState(dataset=dataset, cache=CategoryCache(), selection=selection)

        logger.info(
            "Loaded %d rows, %d columns (%d numeric, %d categorical); axes %s",
            profiles.n_rows,
            profiles.n_columns,
            profiles.n_numeric,
            profiles.n_categorical,
            selection.as_dict(),
        )
        return profiles

    def load_csv(self, csv_path: str | Path, **read_csv_kwargs: object) -> ColumnAnalysisResult:
        """Load a CSV file and make it the active dataset (see :meth:`load`)."""
        try:
            dataset = TabularDataset.from_csv(csv_path, **read_csv_kwargs)
        except EmptyDatasetError:
            logger.warning("Rejected empty CSV file %s; keeping the previous dataset", csv_path)
            raise
        return self.load(dataset)

    def reset(self) -> None:
        """Forget the dataset, its category mappings and the axis selection."""
        self._state = None
        logger.info("Session reset")

    @property
    def is_loaded(self) -> bool:
        return self._state is not None

    @property
    def dataset(self) -> TabularDataset:
        """Get the active dataset.

        Raises:
            EmptyDatasetError: If no dataset is loaded
        """
        return self._require_state().dataset

    # ------------------------------------------------------------------ analysis
    def column_profiles(self) -> ColumnAnalysisResult:
        """Profile every column of the active dataset."""
        return self.dataset.make_column_analyzer(config=self.config).fit().result()

    def analyze_column(self, column: str) -> ColumnProfile:
        """Profile one column; unknown names yield a degenerate categorical profile."""
        return analyze_column(self.dataset.records, column, self.config)

    def map_to_numeric(self, column: str) -> np.ndarray:
        """Convert ``column`` into one float per record, reusing this dataset's category mappings."""
        state = self._require_state()
        values, cache = map_to_numeric(state.dataset.records, column, state.cache, self.config)
        self._commit(state, cache=cache)
        return values

    def get_category_mapping(self, column: str) -> CategoryMapping | None:
        """Return the mapping used for ``column`` in this dataset, None if it was not encoded as categorical."""
        if self._state is None:
            return None
        return self._state.cache.get(column)

    def detect_best_columns(self) -> AxisSelection:
        """Return the auto-detected axis selection of the active dataset."""
        return detect_best_columns(self.dataset.records, self.config)

    # ------------------------------------------------------------------ axes & rendering
    @property
    def axis_selection(self) -> AxisSelection:
        """Get a copy of the current axis selection."""
        return replace(self._require_state().selection)

    def select_axes(self, x: str, y: str, z: str) -> AxisSelection:
        """Assign columns to the axes explicitly.

        Names that are not in the schema are accepted and mapped as entirely missing data.
        """
        state = self._require_state()
        unknown = [col for col in (x, y, z) if col not in state.dataset.columns]
        if unknown:
            logger.debug("Axis columns %s are not in the schema; they map to missing data", unknown)
        selection = AxisSelection(x, y, z)
        self._commit(state, selection=selection)
        return replace(selection)

    def point_cloud(self, selection: AxisSelection | None = None) -> PointCloud:
        """Build the normalized point cloud for ``selection`` (defaults to the current selection).

        Raises:
            EmptyDatasetError: If no dataset is loaded
        """
        state = self._require_state()
        cloud, cache = build_point_cloud(state.dataset.records, selection or state.selection, state.cache, self.config)
        self._commit(state, cache=cache)
        return cloud

    # ------------------------------------------------------------------ internals
    def _require_state(self) -> _SessionState:
        if self._state is None:
            raise EmptyDatasetError("No dataset loaded. Use load() or load_csv() first.")
        return self._state

    def _commit(self, state: _SessionState, **changes: object) -> None:
        self._state = replace(state, **changes)
