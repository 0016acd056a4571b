"""Tabs module."""

# Local application imports
from mtg_card_stats_ui.ui.tabs.card_stats_tab import (
    create_card_stats_tab,
    wire_card_stats_tab,
)

__all__ = [
    "create_card_stats_tab",
    "wire_card_stats_tab",
]
