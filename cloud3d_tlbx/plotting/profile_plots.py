"""Column profile visualization."""

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.figure import Figure

from cloud3d_tlbx.analysis.column_analyzer import ColumnAnalysisResult
from cloud3d_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def plot_column_profiles(
    result: ColumnAnalysisResult,
    figsize: tuple[int, int] = (10, 5),
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> Figure:
    """Bar chart of distinct values per column, coloured by column type.

    Uses [:func:`seaborn.barplot`](https://seaborn.pydata.org/generated/seaborn.barplot.html); the title
    carries the row, column, numeric and categorical counts.

    Args:
        result: Column analysis results from ColumnAnalyzer.fit().result()
        figsize: Figure size (width, height)
        config: Plotting style

    Returns:
        matplotlib Figure object
    """
    with config.apply():
        fig, ax = plt.subplots(figsize=figsize)
        sns.barplot(
            data=result.summary,
            x="column",
            y="unique_count",
            hue="type",
            hue_order=["numeric", "categorical"],
            dodge=False,
            ax=ax,
        )
        ax.tick_params(axis="x", rotation=45)
        ax.set_xlabel("Column")
        ax.set_ylabel("Distinct values")
        ax.set_title(
            f"{result.n_rows} rows, {result.n_columns} columns "
            f"({result.n_numeric} numeric, {result.n_categorical} categorical)",
        )
        fig.tight_layout()
    return fig
