"""Test configuration for the cloud3d toolbox."""

from pathlib import Path
import sys

import matplotlib
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(scope="session")
def sample_dataset():
    """Load the bundled sample dataset once per test session."""
    from cloud3d_tlbx.data import TabularDataset
    from cloud3d_tlbx.utils import get_dataset_path

    return TabularDataset.from_csv(get_dataset_path("sample_points"))


@pytest.fixture
def color_rows() -> list[dict[str, object]]:
    """Two numeric columns and one categorical column."""
    return [
        {"a": 1, "b": "red", "c": 10},
        {"a": 2, "b": "blue", "c": 20},
        {"a": 3, "b": "red", "c": 30},
    ]


@pytest.fixture
def color_records(color_rows):
    """Cell records of ``color_rows``."""
    from cloud3d_tlbx.data import TabularDataset

    return TabularDataset.from_records(color_rows).records
