"""Utility tests: path resolution and configuration objects."""

import matplotlib as mpl
import plotly.io as pio
import pytest

from cloud3d_tlbx.utils import (
    DEFAULT_MAPPING_CFG,
    MappingConfig,
    PlottingConfig,
    get_data_dir,
    get_dataset_path,
    known_datasets,
)


def test_get_dataset_path_sample_points() -> None:
    """Ensure bundled dataset path resolution works."""
    data_dir = get_data_dir()
    path = get_dataset_path("sample_points")

    assert path.exists()
    assert path.parent == data_dir
    assert path.name == "sample_points.csv"
    assert known_datasets() == ["sample_points"]


def test_mapping_config_defaults() -> None:
    """Default mapping constants."""
    assert DEFAULT_MAPPING_CFG.numeric_ratio_threshold == 0.8
    assert DEFAULT_MAPPING_CFG.sample_size == 5
    assert DEFAULT_MAPPING_CFG.scale == 10.0


@pytest.mark.parametrize(
    "kwargs",
    [{"numeric_ratio_threshold": 1.5}, {"sample_size": -1}, {"scale": 0.0}, {"hue_lightness": 2.0}],
)
def test_mapping_config_validation(kwargs: dict) -> None:
    """Out-of-range constants are rejected."""
    with pytest.raises(ValueError):
        MappingConfig(**kwargs)


def test_plotting_config_apply_restores() -> None:
    """Temporary styling restores rcParams and the plotly template."""
    prev_title_size = mpl.rcParams["axes.titlesize"]
    prev_template = pio.templates.default

    with PlottingConfig(title_size=31, plotly_template="plotly_white").apply():
        assert mpl.rcParams["axes.titlesize"] == 31
        assert pio.templates.default == "plotly_white"

    assert mpl.rcParams["axes.titlesize"] == prev_title_size
    assert pio.templates.default == prev_template
