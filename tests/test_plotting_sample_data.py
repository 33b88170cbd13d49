"""Smoke tests for the renderers using the bundled sample data."""

import matplotlib.pyplot as plt
import plotly.graph_objects as go
import pytest

from cloud3d_tlbx.analysis import AxisSelection, CategoryCache, build_point_cloud
from cloud3d_tlbx.plotting import CameraControls, plot_column_profiles, plot_point_cloud, plot_point_cloud_plotly


@pytest.fixture
def mixed_cloud(sample_dataset):
    """Cloud with two numeric axes and a categorical one."""
    cloud, _ = build_point_cloud(
        sample_dataset.records,
        AxisSelection("temperature", "humidity", "city"),
        CategoryCache(),
    )
    return cloud


def test_plotly_point_cloud(mixed_cloud) -> None:
    """The interactive scatter holds one marker per point and category ticks on the categorical axis."""
    fig = plot_point_cloud_plotly(mixed_cloud)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert len(fig.data[0].x) == mixed_cloud.n_points
    assert list(fig.layout.scene.zaxis.ticktext) == ["Lisbon", "Hamburg", "Madrid", "Lyon"]
    assert fig.layout.scene.xaxis.title.text == "temperature (Numeric)"
    assert "Points: 20" in fig.layout.title.text
    assert not fig.frames


def test_plotly_auto_rotate_frames(mixed_cloud) -> None:
    """Auto-rotation attaches one camera frame per orbit step and play controls."""
    fig = plot_point_cloud_plotly(mixed_cloud, controls=CameraControls(auto_rotate=True), n_frames=12)

    assert len(fig.frames) == 12
    assert [b.label for b in fig.layout.updatemenus[0].buttons] == ["Rotate", "Stop"]


def test_matplotlib_point_cloud(mixed_cloud) -> None:
    """The static scatter renders on a single 3-D axis."""
    fig = plot_point_cloud(mixed_cloud, figsize=(5, 5))

    assert len(fig.axes) == 1
    assert fig.axes[0].get_zlabel() == "city (Categorical)"
    plt.close(fig)


def test_column_profile_plot(sample_dataset) -> None:
    """The profile chart has one bar group per column."""
    result = sample_dataset.make_column_analyzer().fit().result()
    fig = result.plot_profiles(figsize=(6, 4))

    assert fig.axes
    assert "6 columns" in fig.axes[0].get_title()
    plt.close(fig)

    fig = plot_column_profiles(result)
    assert fig.axes
    plt.close(fig)
