from .data import TabularDataset
from .errors import EmptyDatasetError
from .session import VisualizationSession


__all__ = ["EmptyDatasetError", "TabularDataset", "VisualizationSession"]
