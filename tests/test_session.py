"""Tests for the visualization session lifecycle."""

import logging
from pathlib import Path

import pytest

from cloud3d_tlbx import EmptyDatasetError, TabularDataset, VisualizationSession
from cloud3d_tlbx.analysis import AxisSelection, ColumnAnalysisResult
from cloud3d_tlbx.utils import get_dataset_path


@pytest.fixture
def session(color_rows) -> VisualizationSession:
    """Session with the three-row colour dataset loaded."""
    session = VisualizationSession()
    session.load(color_rows)
    return session


class TestLoading:
    """Replacing the active dataset."""

    def test_load_profiles_and_detects_axes(self, color_rows) -> None:
        """Loading returns the column profiles and sets the default axes."""
        session = VisualizationSession()
        result = session.load(color_rows)

        assert isinstance(result, ColumnAnalysisResult)
        assert result.numeric_columns == ["a", "c"]
        assert session.is_loaded
        assert session.axis_selection == AxisSelection("a", "c", "b")

    def test_load_csv(self) -> None:
        """CSV files load through the same path."""
        session = VisualizationSession()
        session.load_csv(get_dataset_path("sample_points"))
        assert session.dataset.n_rows == 20
        assert session.axis_selection == AxisSelection("temperature", "humidity", "wind_speed")

    def test_load_dataset_instance(self, sample_dataset: TabularDataset) -> None:
        """An existing dataset is used as-is."""
        session = VisualizationSession()
        session.load(sample_dataset)
        assert session.dataset is sample_dataset

    def test_reload_discards_mappings(self, session: VisualizationSession) -> None:
        """Codes of the previous dataset never leak into the next one."""
        assert session.map_to_numeric("b").tolist() == [0.0, 1.0, 0.0]

        session.load([{"b": "blue", "n": 1}, {"b": "green", "n": 2}, {"b": "red", "n": 3}])

        assert session.get_category_mapping("b") is None
        assert session.map_to_numeric("b").tolist() == [0.0, 1.0, 2.0]
        assert session.get_category_mapping("b").labels == ["blue", "green", "red"]

    def test_reload_resets_selection(self, session: VisualizationSession) -> None:
        """A new dataset starts from its own default axes."""
        session.select_axes("b", "b", "b")
        session.load([{"p": 1, "q": 2, "r": 3}])
        assert session.axis_selection == AxisSelection("p", "q", "r")

    def test_failed_load_keeps_previous_state(self, session: VisualizationSession, caplog) -> None:
        """An empty dataset is rejected without touching the active one."""
        session.map_to_numeric("b")
        before = session.dataset

        with caplog.at_level(logging.WARNING, logger="cloud3d_tlbx"), pytest.raises(EmptyDatasetError):
            session.load([])

        assert session.dataset is before
        assert session.get_category_mapping("b") is not None
        assert session.axis_selection == AxisSelection("a", "c", "b")
        assert "Rejected empty dataset" in caplog.text

    def test_failed_csv_load_keeps_previous_state(self, session: VisualizationSession, tmp_path: Path) -> None:
        """A header-only CSV is rejected without touching the active dataset."""
        csv = tmp_path / "header.csv"
        csv.write_text("a,b\n")
        before = session.dataset

        with pytest.raises(EmptyDatasetError):
            session.load_csv(csv)
        assert session.dataset is before

    def test_reset(self, session: VisualizationSession) -> None:
        """Reset forgets everything."""
        session.map_to_numeric("b")
        session.reset()

        assert not session.is_loaded
        assert session.get_category_mapping("b") is None
        with pytest.raises(EmptyDatasetError):
            _ = session.dataset

    def test_unloaded_session_refuses_work(self) -> None:
        """Operations needing data raise until a dataset is loaded."""
        session = VisualizationSession()
        with pytest.raises(EmptyDatasetError, match="No dataset loaded"):
            session.point_cloud()
        with pytest.raises(EmptyDatasetError):
            session.map_to_numeric("a")


class TestAxesAndClouds:
    """Axis selection and point cloud generation through the session."""

    def test_select_axes(self, session: VisualizationSession) -> None:
        """Explicit selections replace the default."""
        session.select_axes("b", "a", "c")
        assert session.axis_selection == AxisSelection("b", "a", "c")
        assert session.point_cloud().axes["x"].is_categorical

    def test_selection_copy_is_detached(self, session: VisualizationSession) -> None:
        """Mutating a returned selection does not change the session."""
        selection = session.axis_selection
        selection.x = "b"
        assert session.axis_selection.x == "a"

    def test_unknown_axis_column(self, session: VisualizationSession) -> None:
        """Unknown columns are accepted and map as missing data."""
        session.select_axes("a", "missing", "c")
        cloud = session.point_cloud()
        assert cloud.points["y"].tolist() == [-5.0, -5.0, -5.0]

    def test_point_cloud_commits_mappings(self, session: VisualizationSession) -> None:
        """Mappings built while rendering are kept and reused."""
        cloud = session.point_cloud()
        mapping = session.get_category_mapping("b")

        assert cloud.axes["z"].category_mapping is mapping
        assert session.point_cloud().axes["z"].category_mapping is mapping

    def test_point_cloud_with_explicit_selection(self, session: VisualizationSession) -> None:
        """A one-off selection does not replace the stored one."""
        cloud = session.point_cloud(AxisSelection("c", "c", "c"))
        assert cloud.selection == AxisSelection("c", "c", "c")
        assert session.axis_selection == AxisSelection("a", "c", "b")

    def test_analysis_shortcuts(self, session: VisualizationSession) -> None:
        """Column profiling and detection run on the active dataset."""
        assert session.analyze_column("b").unique_count == 2
        assert session.column_profiles().categorical_columns == ["b"]
        assert session.detect_best_columns() == AxisSelection("a", "c", "b")
