# mtg_card_stats_ui/logic/card_stats_callbacks.py

"""Card stats tab callbacks module."""

# Standard library imports
import logging
from typing import Any, Optional, Tuple

# Local application imports
from mtg_card_stats import DashboardState, series_to_frame
from mtg_card_stats_ui.app_config import app_config
from mtg_card_stats_ui.utils.formatting import format_load_status, format_total
from mtg_card_stats_ui.utils.plot_utils import plot_supertype_counts

# Set up logger
logger = logging.getLogger(__name__)


def new_dashboard_state() -> DashboardState:
    """Create an empty dashboard state using the configured default filter."""
    return DashboardState(active_filter=app_config.get_default_filter())


def render_dashboard(state: DashboardState) -> Tuple[DashboardState, Any, str, Any, str]:
    """Build every output of the card stats tab from the current state.

    Returns:
        Tuple of (state, chart figure, total markdown, count table, status markdown)
    """
    series = state.chart_series()
    title = app_config.get("UI", "chart_title", fallback="Cards by Supertype")
    figure = plot_supertype_counts(series, title=title)
    return (
        state,
        figure,
        format_total(state.total),
        series_to_frame(series),
        format_load_status(state),
    )


async def load_dashboard(
    state: Optional[DashboardState], source=None
) -> Tuple[DashboardState, Any, str, Any, str]:
    """Load the card document into the session state and render it.

    Args:
        state: Current session state (a fresh one is created when None)
        source: Card document path or URL; defaults to the configured source

    Returns:
        Same outputs as render_dashboard
    """
    if state is None:
        state = new_dashboard_state()
    if not source:
        source = app_config.get_card_data_source()
    logger.info(f"Loading card data from {source}")
    await state.load(source, timeout=app_config.get_load_timeout())
    return render_dashboard(state)


def make_load_callback(source=None):
    """Bind a card document source to load_dashboard for Blocks.load.

    A falsy source keeps the configured one, read at load time.
    """

    async def load_callback(state: Optional[DashboardState]):
        return await load_dashboard(state, source=source)

    return load_callback


def change_filter(
    selection: Optional[str], state: Optional[DashboardState]
) -> Tuple[DashboardState, Any, str, Any, str]:
    """Apply a color filter selection and re-render the tab.

    Args:
        selection: Selected filter value from the color radio
        state: Current session state

    Returns:
        Same outputs as render_dashboard
    """
    if state is None:
        state = new_dashboard_state()
    state.select_filter(selection)
    return render_dashboard(state)
