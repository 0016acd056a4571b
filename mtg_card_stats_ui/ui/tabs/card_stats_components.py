# Standard library imports
import logging

# Third-party imports
import gradio as gr

# Local application imports
from mtg_card_stats import FILTER_ALL, FILTER_OPTIONS
from mtg_card_stats_ui.ui.ui_objects import UIContainer, UIElement, UISection
from mtg_card_stats_ui.utils.formatting import FILTER_LABELS, format_total

# Set up logger
logger = logging.getLogger(__name__)


def create_color_filter_section(default_filter: str = FILTER_ALL) -> UISection:
    """Create the color filter section."""
    section = UISection("color_filter", "Filter by Color")

    with section:
        section.add_element(
            UIElement(
                "color_filter",
                lambda: gr.Radio(
                    choices=[(FILTER_LABELS[value], value) for value in FILTER_OPTIONS],
                    value=default_filter,
                    show_label=False,
                    elem_id="color_filter",
                ),
            )
        )

    return section


def create_chart_section() -> UISection:
    """Create the supertype chart section."""
    section = UISection("supertype_chart", "Cards by Supertype", show_label=False)

    chart = UIElement(
        "supertype_chart",
        lambda: gr.Plot(label="Cards by Supertype", elem_id="supertype_chart"),
    )
    counts = UIElement(
        "supertype_counts",
        lambda: gr.Dataframe(
            headers=["Supertype", "Count"],
            interactive=False,
            label="Counts",
            elem_id="supertype_counts",
        ),
    )
    section.set_layout(UIContainer("row", children=[chart, counts]))
    return section


def create_summary_section() -> UISection:
    """Create the total count and load status section."""
    section = UISection("summary", "Summary", show_label=False)

    with section:
        section.add_element(
            UIElement(
                "total_cards",
                lambda: gr.Markdown(format_total(0), elem_id="total_cards"),
            )
        )
        section.add_element(
            UIElement(
                "load_status",
                lambda: gr.Markdown("⏳ Loading card data...", elem_id="load_status"),
            )
        )

    return section
