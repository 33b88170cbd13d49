"""Default choice of the three columns to visualize."""

from collections.abc import Iterator, Sequence
from dataclasses import asdict, dataclass

from cloud3d_tlbx.data.views import Record
from cloud3d_tlbx.errors import EmptyDatasetError
from cloud3d_tlbx.utils.mapping_config import DEFAULT_MAPPING_CFG, MappingConfig

from .column_analyzer import ColumnProfile, analyze_column


AXES: tuple[str, str, str] = ("x", "y", "z")


@dataclass
class AxisSelection:
    """Columns assigned to the x, y and z axes of the visualization."""

    x: str
    y: str
    z: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.x, self.y, self.z))

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def select_axes(profiles: Sequence[ColumnProfile]) -> AxisSelection:
    """Pick three columns from profiles given in column order, maximizing numeric axes.

    - 3+ numeric columns: the first three numeric columns.
    - 2 numeric: both numeric, z is the first categorical column (or the first numeric again).
    - 1 numeric: x is numeric, y the first categorical (or x), z the second categorical
      (or the first categorical, or x).
    - no numeric: the first three columns, reusing earlier ones when fewer exist.

    Raises:
        EmptyDatasetError: If ``profiles`` is empty
    """
    if not profiles:
        raise EmptyDatasetError("No columns to select axes from.")

    numeric = [p.name for p in profiles if p.is_numeric]
    categorical = [p.name for p in profiles if not p.is_numeric]

    if len(numeric) >= 3:
        return AxisSelection(numeric[0], numeric[1], numeric[2])
    if len(numeric) == 2:
        return AxisSelection(numeric[0], numeric[1], categorical[0] if categorical else numeric[0])
    if len(numeric) == 1:
        x = numeric[0]
        y = categorical[0] if categorical else x
        if len(categorical) >= 2:
            z = categorical[1]
        else:
            z = categorical[0] if categorical else x
        return AxisSelection(x, y, z)

    columns = [p.name for p in profiles]
    x = columns[0]
    y = columns[1] if len(columns) > 1 else x
    z = columns[2] if len(columns) > 2 else y
    return AxisSelection(x, y, z)


def detect_best_columns(
    records: Sequence[Record],
    config: MappingConfig = DEFAULT_MAPPING_CFG,
) -> AxisSelection:
    """Analyze every schema column (the first record's keys) and select the default axes.

    Raises:
        EmptyDatasetError: If ``records`` is empty
    """
    if not records:
        raise EmptyDatasetError
    return select_axes([analyze_column(records, col, config) for col in records[0]])


__all__ = ["AXES", "AxisSelection", "detect_best_columns", "select_axes"]
