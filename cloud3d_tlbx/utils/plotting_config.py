"""Shared plotting configuration (scene colours, marker style, palette, font sizes)."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import plotly.io as pio
import seaborn as sns


@dataclass
class PlottingConfig:
    """Reusable plotting style shared by the point cloud and profile renderers."""

    style: str = "darkgrid"
    palette: str | list[str] = "tab10"
    font_scale: float = 1.0
    title_size: int = 14
    label_size: int = 12
    tick_size: int = 10
    figure_dpi: int = 100
    context: str = "notebook"
    plotly_template: str = "plotly_dark"
    scene_background: str = "#1a1a1a"
    grid_color: str = "#444444"
    marker_opacity: float = 0.9
    camera_distance: float = 1.5
    """Camera eye offset along each axis, relative to the half-width of the scene cube."""
    marker_pixels_per_unit: float = 140.0
    """Marker diameter in pixels per scene unit of point size."""
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore).

        For temporary styling (with automatic restoration), use :meth:`apply` instead.
        """
        palette_colors = sns.color_palette(self.palette)
        sns.set_theme(
            style=self.style,
            palette=palette_colors,
            context=self.context,
            font_scale=self.font_scale,
            **self.seaborn_kwargs,
        )
        mpl.rcParams.update(self._rc_params(palette_colors))
        pio.templates.default = self.plotly_template

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context, restoring previous rcParams afterwards."""
        palette_colors = sns.color_palette(self.palette)
        new_params = self._rc_params(palette_colors)
        prev = {k: mpl.rcParams[k] for k in new_params}
        prev_plotly_template = pio.templates.default

        with sns.axes_style(self.style), sns.plotting_context(self.context, font_scale=self.font_scale):
            mpl.rcParams.update(new_params)
            pio.templates.default = self.plotly_template
            try:
                yield
            finally:
                pio.templates.default = prev_plotly_template
                mpl.rcParams.update(prev)

    def _rc_params(self, palette_colors: list) -> dict[str, Any]:
        return {
            "axes.titlesize": self.title_size,
            "axes.labelsize": self.label_size,
            "xtick.labelsize": self.tick_size,
            "ytick.labelsize": self.tick_size,
            "figure.dpi": self.figure_dpi,
            "axes.prop_cycle": mpl.cycler(color=palette_colors),
        }


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()


__all__ = ["DEFAULT_PLOT_CFG", "PlottingConfig"]
