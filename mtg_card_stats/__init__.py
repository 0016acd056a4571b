"""MTG card stats library public API.

Loads a card catalog, classifies cards by color identity, filters them by
color category and counts them by supertype. Keep web/UI code out of this
namespace.
"""

from .aggregation import UNKNOWN_SUPERTYPE, aggregate_by_supertype, series_to_frame
from .classify import (
    COLOR_CATEGORIES,
    COLOR_CODES,
    COLORLESS,
    FILTER_ALL,
    FILTER_OPTIONS,
    MULTICOLOR,
    classify,
)
from .dashboard_state import DashboardState, DashboardStatus
from .data_loader import extract_cards, load_cards, load_cards_sync, read_document
from .errors import LoadError
from .filtering import filter_cards
from .models.card_record import CardRecord

__all__ = [
    "UNKNOWN_SUPERTYPE",
    "aggregate_by_supertype",
    "series_to_frame",
    "COLOR_CATEGORIES",
    "COLOR_CODES",
    "COLORLESS",
    "FILTER_ALL",
    "FILTER_OPTIONS",
    "MULTICOLOR",
    "classify",
    "DashboardState",
    "DashboardStatus",
    "extract_cards",
    "load_cards",
    "load_cards_sync",
    "read_document",
    "LoadError",
    "filter_cards",
    "CardRecord",
]
