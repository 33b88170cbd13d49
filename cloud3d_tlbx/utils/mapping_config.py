"""Numeric constants governing column classification and point generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MappingConfig:
    """Constants used by the column analyzer, the encoder and the point cloud builder.

    Attributes:
        numeric_ratio_threshold: A column is numeric when strictly more than this share of
            its present values is numeric-compatible.
        sample_size: Number of leading present values kept as display samples.
        scale: Edge length of the cube the normalized cloud is fitted into (centered at the origin).
        min_point_size: Lower bound for the marker size.
        point_size_factor: Marker size numerator, divided by ``sqrt(N)``.
        hue_saturation: HSL saturation of the per-point colour.
        hue_lightness: HSL lightness of the per-point colour.
    """

    numeric_ratio_threshold: float = 0.8
    sample_size: int = 5
    scale: float = 10.0
    min_point_size: float = 0.05
    point_size_factor: float = 0.2
    hue_saturation: float = 0.8
    hue_lightness: float = 0.6

    def __post_init__(self) -> None:
        if not 0.0 <= self.numeric_ratio_threshold <= 1.0:
            raise ValueError(f"numeric_ratio_threshold must be in [0, 1], got {self.numeric_ratio_threshold}")
        if self.sample_size < 0:
            raise ValueError(f"sample_size must be non-negative, got {self.sample_size}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        for name in ("hue_saturation", "hue_lightness"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")


# Default configuration used across the mapping engine
DEFAULT_MAPPING_CFG = MappingConfig()


__all__ = ["DEFAULT_MAPPING_CFG", "MappingConfig"]
