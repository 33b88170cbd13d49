"""Normalization of three coordinate columns into a renderable point cloud."""

import colorsys
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd
from matplotlib.colors import to_hex
from sklearn.preprocessing import MinMaxScaler

from cloud3d_tlbx.data.views import Record
from cloud3d_tlbx.errors import EmptyDatasetError
from cloud3d_tlbx.utils.mapping_config import DEFAULT_MAPPING_CFG, MappingConfig

from .axis_selection import AXES, AxisSelection
from .coordinate_mapper import CategoryCache, CategoryMapping, map_to_numeric


logger = logging.getLogger(__name__)


def normalize_axis(values: Sequence[float] | np.ndarray, scale: float = DEFAULT_MAPPING_CFG.scale) -> np.ndarray:
    r"""Rescale one axis into :math:`[-scale/2, scale/2]`.

    Each finite value becomes :math:`((v - \min) / r - 0.5) \cdot scale`, where ``min`` and the range
    ``r`` are taken over the finite values only and a zero range is treated as 1 (a constant axis
    collapses onto ``-scale/2``). The min/max scaling itself is delegated to
    [sklearn's MinMaxScaler](https://scikit-learn.org/stable/modules/generated/sklearn.preprocessing.MinMaxScaler.html),
    which already maps zero ranges to 1.

    NaN and infinite values (unparseable entries of a numeric column) are placed at the axis center, 0.

    Args:
        values: Raw coordinates of one axis
        scale: Edge length of the display cube

    Returns:
        Array of rescaled coordinates with the same length as ``values``
    """
    arr = np.asarray(values, dtype=float)
    out = np.zeros_like(arr)
    finite = np.isfinite(arr)
    if finite.any():
        unit = MinMaxScaler().fit_transform(arr[finite].reshape(-1, 1)).ravel()
        out[finite] = (unit - 0.5) * scale
    return out


def point_size(n_points: int, config: MappingConfig = DEFAULT_MAPPING_CFG) -> float:
    """Marker size shrinking with the number of points, bounded below by ``config.min_point_size``."""
    return max(config.min_point_size, config.point_size_factor / math.sqrt(n_points))


def point_hues(n_points: int) -> np.ndarray:
    """Hue of every point, rotating once through the hue circle in row order."""
    return np.arange(n_points, dtype=float) / n_points


def point_colors(n_points: int, config: MappingConfig = DEFAULT_MAPPING_CFG) -> list[str]:
    """Hex colours of every point, from its hue at the configured HSL saturation and lightness."""
    return [
        to_hex(colorsys.hls_to_rgb(hue, config.hue_lightness, config.hue_saturation)) for hue in point_hues(n_points)
    ]


@dataclass(frozen=True)
class AxisInfo:
    """Source column of one axis and how it was encoded.

    Attributes:
        axis: ``"x"``, ``"y"`` or ``"z"``.
        column: Column the axis was mapped from.
        category_mapping: Mapping used for a categorical column, None for a numeric one.
    """

    axis: str
    column: str
    category_mapping: CategoryMapping | None = None

    @property
    def is_categorical(self) -> bool:
        return self.category_mapping is not None

    @property
    def label(self) -> str:
        return f"{self.column} {'(Categorical)' if self.is_categorical else '(Numeric)'}"


@dataclass(frozen=True)
class PointCloud:
    """Normalized coordinates and per-point metadata handed to a renderer.

    Attributes:
        points: One row per record, indexed by row position ``0..N-1``, with normalized coordinates
            ``x``, ``y``, ``z``, the unnormalized ``raw_x``, ``raw_y``, ``raw_z``, and ``hue`` / ``color``.
        point_size: Marker size shared by all points.
        axes: Axis name to :class:`AxisInfo`.
        records: Original records, ``records[i]`` belongs to ``points.loc[i]``.
        scale: Edge length of the display cube.
    """

    points: pd.DataFrame
    point_size: float
    axes: dict[str, AxisInfo]
    records: tuple[Record, ...]
    scale: float

    @property
    def n_points(self) -> int:
        return len(self.points)

    @property
    def selection(self) -> AxisSelection:
        return AxisSelection(*(self.axes[axis].column for axis in AXES))

    def record(self, index: int) -> Record:
        """Return the original record behind point ``index``."""
        return self.records[index]

    def legend(self) -> list[str]:
        """Legend lines: one per axis and the point count."""
        lines = [f"{axis.upper()} Axis: {self.axes[axis].label}" for axis in AXES]
        lines.append(f"Points: {self.n_points}")
        return lines

    def tick_positions(self, axis: str) -> tuple[list[float], list[str]]:
        """Normalized positions and labels of the categories of a categorical axis.

        Returns:
            Tuple ``(positions, labels)``; both empty for a numeric axis
        """
        mapping = self.axes[axis].category_mapping
        if mapping is None or len(mapping) == 0:
            return [], []
        codes = np.arange(len(mapping), dtype=float)
        raw = self.points[f"raw_{axis}"].to_numpy()
        lo, hi = raw.min(), raw.max()
        span = (hi - lo) or 1.0
        positions = ((codes - lo) / span - 0.5) * self.scale
        return positions.tolist(), [str(label) for label in mapping.labels]


def build_point_cloud(
    records: Sequence[Record],
    selection: AxisSelection,
    cache: CategoryCache,
    config: MappingConfig = DEFAULT_MAPPING_CFG,
) -> tuple[PointCloud, CategoryCache]:
    """Map the three selected columns and normalize them into a point cloud.

    Args:
        records: Records of the current dataset
        selection: Columns for the x, y and z axes
        cache: Category mappings built so far for this dataset
        config: Mapping constants (scale, point size, colours)

    Returns:
        Tuple of the point cloud and the (possibly extended) category cache

    Raises:
        EmptyDatasetError: If there are no records to visualize
    """
    if not records:
        raise EmptyDatasetError("No data to visualize.")

    n_points = len(records)
    raw: dict[str, np.ndarray] = {}
    axes: dict[str, AxisInfo] = {}
    for axis, column in zip(AXES, selection, strict=True):
        raw[axis], cache = map_to_numeric(records, column, cache, config)
        axes[axis] = AxisInfo(axis=axis, column=column, category_mapping=cache.get(column))

    points = pd.DataFrame(
        {
            **{axis: normalize_axis(raw[axis], config.scale) for axis in AXES},
            **{f"raw_{axis}": raw[axis] for axis in AXES},
            "hue": point_hues(n_points),
            "color": point_colors(n_points, config),
        },
        index=pd.RangeIndex(n_points, name="index"),
    )
    cloud = PointCloud(
        points=points,
        point_size=point_size(n_points, config),
        axes=axes,
        records=tuple(records),
        scale=config.scale,
    )
    logger.info("Visualized %d points across %s, %s, %s", n_points, *selection)
    return cloud, cache


__all__ = [
    "AxisInfo",
    "PointCloud",
    "build_point_cloud",
    "normalize_axis",
    "point_colors",
    "point_hues",
    "point_size",
]
