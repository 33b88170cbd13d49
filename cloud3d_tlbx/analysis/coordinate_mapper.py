"""Conversion of any column into a numeric coordinate sequence.

Numeric columns are read as floats. Categorical columns are encoded through a
:class:`CategoryMapping`, assigning zero-based integer codes to distinct values in
first-seen order. Mappings are kept in an immutable :class:`CategoryCache` that the
caller passes in and receives back, so the same value always gets the same code for
as long as the caller keeps the cache of one dataset.

Example:
    >>> from cloud3d_tlbx.analysis.coordinate_mapper import CategoryCache, map_to_numeric
    >>> from cloud3d_tlbx.data import TabularDataset
    >>> ds = TabularDataset.from_records([{"b": "red"}, {"b": "blue"}, {"b": "red"}])
    >>> values, cache = map_to_numeric(ds.records, "b", CategoryCache())
    >>> values.tolist(), cache.get("b").labels
    ([0.0, 1.0, 0.0], ['red', 'blue'])
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from cloud3d_tlbx.data.cells import ABSENT, Cell, as_float, is_present
from cloud3d_tlbx.data.views import Record
from cloud3d_tlbx.utils.mapping_config import DEFAULT_MAPPING_CFG, MappingConfig

from .column_analyzer import analyze_column


@dataclass(frozen=True)
class CategoryMapping:
    """First-seen-order integer codes of a categorical column's distinct values.

    Attributes:
        column: Name of the encoded column.
        codes: Mapping from cell to code; codes are ``0..len(codes) - 1`` in first-seen order.
    """

    column: str
    codes: Mapping[Cell, int]

    def code(self, cell: Cell) -> int:
        """Return the code of ``cell``; absent or unknown values map to 0."""
        return self.codes.get(cell, 0)

    @property
    def labels(self) -> list[object]:
        """Raw values in code order, for legends and tick labels."""
        return [cell.raw for cell in self.codes]

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.codes)


@dataclass(frozen=True)
class CategoryCache:
    """Immutable store of the category mappings built for one dataset.

    ``with_mapping`` returns a new cache; a fresh, empty cache is used for every new dataset.
    """

    _mappings: Mapping[str, CategoryMapping] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, column: str) -> CategoryMapping | None:
        return self._mappings.get(column)

    def with_mapping(self, mapping: CategoryMapping) -> "CategoryCache":
        return CategoryCache(MappingProxyType({**self._mappings, mapping.column: mapping}))

    @property
    def columns(self) -> list[str]:
        return list(self._mappings)

    def __contains__(self, column: object) -> bool:
        return column in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)


def build_category_mapping(records: Sequence[Record], column: str) -> CategoryMapping:
    """Assign codes to the distinct present values of ``column`` in first-seen order."""
    codes: dict[Cell, int] = {}
    for record in records:
        cell = record.get(column, ABSENT)
        if is_present(cell) and cell not in codes:
            codes[cell] = len(codes)
    return CategoryMapping(column=column, codes=MappingProxyType(codes))


def map_to_numeric(
    records: Sequence[Record],
    column: str,
    cache: CategoryCache,
    config: MappingConfig = DEFAULT_MAPPING_CFG,
) -> tuple[np.ndarray, CategoryCache]:
    """Convert ``column`` into one float per record, in record order.

    Numeric columns yield their values, with NaN for entries that do not parse (the tolerated
    non-numeric share) and for absent entries. Categorical columns yield category codes, with 0
    for absent entries; their mapping is taken from ``cache`` when present and built otherwise.

    Args:
        records: Records of the current dataset (must not be empty)
        column: Column to convert; a column missing from the schema maps to all zeros
        cache: Category mappings built so far for this dataset
        config: Mapping constants

    Returns:
        Tuple of the float array and the cache, extended when a new mapping was built

    Raises:
        EmptyDatasetError: If ``records`` is empty
    """
    profile = analyze_column(records, column, config)

    if profile.is_numeric:
        values = np.fromiter((as_float(record.get(column, ABSENT)) for record in records), dtype=float)
        return values, cache

    mapping = cache.get(column)
    if mapping is None:
        mapping = build_category_mapping(records, column)
        cache = cache.with_mapping(mapping)
    values = np.fromiter((mapping.code(record.get(column, ABSENT)) for record in records), dtype=float)
    return values, cache


def get_category_mapping(cache: CategoryCache, column: str) -> CategoryMapping | None:
    """Return the mapping used to encode ``column``, or None when it was never encoded as categorical."""
    return cache.get(column)


__all__ = [
    "CategoryCache",
    "CategoryMapping",
    "build_category_mapping",
    "get_category_mapping",
    "map_to_numeric",
]
