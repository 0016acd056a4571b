# mtg_card_stats_ui/ui/tabs/card_stats_tab.py

"""Card stats tab module."""

# Standard library imports
import logging

# Third-party imports
import gradio as gr

# Local application imports
from mtg_card_stats_ui.app_config import app_config
from mtg_card_stats_ui.logic.card_stats_callbacks import (
    change_filter,
    make_load_callback,
    new_dashboard_state,
)
from mtg_card_stats_ui.ui.tabs.card_stats_components import (
    create_chart_section,
    create_color_filter_section,
    create_summary_section,
)
from mtg_card_stats_ui.ui.ui_objects import UITab

# Set up logger
logger = logging.getLogger(__name__)


def create_card_stats_tab() -> UITab:
    """Create the card stats tab. Components exist once the tab is rendered."""
    tab = UITab("Card Stats")
    tab.add_section(create_color_filter_section(app_config.get_default_filter()))
    tab.add_section(create_chart_section())
    tab.add_section(create_summary_section())
    return tab


def wire_card_stats_tab(tab: UITab, blocks: gr.Blocks, source=None) -> gr.State:
    """Attach the load and filter callbacks to a rendered card stats tab.

    Must be called inside the Blocks context the tab was rendered in.

    Args:
        tab: Rendered card stats tab
        blocks: Blocks the tab was rendered in
        source: Card document path or URL for this run; defaults to the configured source

    Returns:
        The per-session dashboard state
    """
    components = tab.get_component_map()
    state = gr.State(new_dashboard_state())
    outputs = [
        state,
        components["supertype_chart"],
        components["total_cards"],
        components["supertype_counts"],
        components["load_status"],
    ]

    blocks.load(make_load_callback(source), inputs=[state], outputs=outputs)
    components["color_filter"].change(
        change_filter,
        inputs=[components["color_filter"], state],
        outputs=outputs,
    )
    logger.debug("Card stats tab wired")
    return state
