"""utils package for utility/helper modules."""

from mtg_card_stats_ui.utils.formatting import (
    FILTER_LABELS,
    format_load_status,
    format_total,
)
from mtg_card_stats_ui.utils.logging_config import setup_logging
from mtg_card_stats_ui.utils.plot_utils import plot_supertype_counts

__all__ = [
    # formatting
    "FILTER_LABELS",
    "format_load_status",
    "format_total",
    # logging
    "setup_logging",
    # plotting
    "plot_supertype_counts",
]
