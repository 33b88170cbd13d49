from .mapping_config import DEFAULT_MAPPING_CFG, MappingConfig
from .paths import get_data_dir, get_dataset_path, known_datasets
from .plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_MAPPING_CFG",
    "DEFAULT_PLOT_CFG",
    "MappingConfig",
    "PlottingConfig",
    "get_data_dir",
    "get_dataset_path",
    "known_datasets",
]
