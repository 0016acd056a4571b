"""Utility functions for plotting card statistics."""

from typing import List, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

DEFAULT_CHART_TITLE = "Cards by Supertype"

# Bar colors, assigned by bar index and repeated past the eighth bar.
SUPERTYPE_PALETTE = [
    "#3B82F6",
    "#EF4444",
    "#10B981",
    "#F59E0B",
    "#8B5CF6",
    "#F97316",
    "#06B6D4",
    "#84CC16",
]


def bar_colors(count: int) -> List[str]:
    return [SUPERTYPE_PALETTE[i % len(SUPERTYPE_PALETTE)] for i in range(count)]


def plot_supertype_counts(
    series: Sequence[Tuple[str, int]], title: str = DEFAULT_CHART_TITLE
):
    """
    Generate a bar chart of card counts per supertype.
    Bars are drawn in series order. Returns a matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.set_title(title)

    if not series:
        ax.text(0.5, 0.5, "No data", ha="center", va="center")
        ax.axis("off")
        plt.close(fig)
        return fig

    x = [label for label, _ in series]
    y = [count for _, count in series]
    colors = bar_colors(len(series))
    ax.bar(x, y, color=colors, edgecolor=colors, linewidth=1)
    ax.set_ylabel("Number of Cards")
    ax.set_ylim(bottom=0)
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax.grid(True, axis="y", linestyle="--", alpha=0.5)
    ax.set_axisbelow(True)
    plt.setp(ax.get_xticklabels(), rotation=30, ha="right")

    fig.tight_layout()
    plt.close(fig)
    return fig
