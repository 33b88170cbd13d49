"""Analysis modules: column classification, coordinate mapping and point cloud generation."""

from .axis_selection import AxisSelection, detect_best_columns, select_axes
from .column_analyzer import ColumnAnalysisResult, ColumnAnalyzer, ColumnProfile, analyze_column
from .coordinate_mapper import (
    CategoryCache,
    CategoryMapping,
    build_category_mapping,
    get_category_mapping,
    map_to_numeric,
)
from .point_cloud import AxisInfo, PointCloud, build_point_cloud, normalize_axis, point_size


__all__ = [
    "AxisInfo",
    "AxisSelection",
    "CategoryCache",
    "CategoryMapping",
    "ColumnAnalysisResult",
    "ColumnAnalyzer",
    "ColumnProfile",
    "PointCloud",
    "analyze_column",
    "build_category_mapping",
    "build_point_cloud",
    "detect_best_columns",
    "get_category_mapping",
    "map_to_numeric",
    "normalize_axis",
    "point_size",
    "select_axes",
]
