from pathlib import Path
from typing import Literal


__all__ = ["get_data_dir", "get_dataset_path", "known_datasets"]


# Bundled sample files, keyed by the short name accepted by get_dataset_path.
_BUNDLED_CSV: dict[str, str] = {
    "sample_points": "sample_points.csv",
}


def get_data_dir() -> Path:
    """Return the ``_data`` directory at the repository root."""
    data_dir = (Path(__file__).parents[2] / "_data").resolve()
    assert data_dir.is_dir(), f"Data directory not found at {data_dir}"
    return data_dir


def known_datasets() -> list[str]:
    """Short names of the bundled CSV files."""
    return sorted(_BUNDLED_CSV)


def get_dataset_path(name: Literal["sample_points"] | str) -> Path:  # noqa: PYI051
    """Resolve a bundled CSV by short name, or any file name inside the data directory.

    Args:
        name: Short name from :func:`known_datasets` or a file name such as ``"my_points.csv"``

    Returns:
        Absolute path of the CSV file
    """
    csv_path = get_data_dir() / _BUNDLED_CSV.get(name, name)
    assert csv_path.is_file(), f"Dataset '{name}' not found at {csv_path}"
    return csv_path
