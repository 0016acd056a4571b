"""Supertype counts for the bar chart."""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from mtg_card_stats.models.card_record import CardRecord

UNKNOWN_SUPERTYPE = "Unknown"

SupertypeSeries = List[Tuple[str, int]]


def aggregate_by_supertype(records: Iterable[CardRecord]) -> SupertypeSeries:
    """
    Count records per supertype.

    Records without a supertype are counted under "Unknown". The result is
    sorted by label so bar order and bar colors stay stable between renders.
    """
    counts: Dict[str, int] = defaultdict(int)
    for card in records:
        counts[card.supertype or UNKNOWN_SUPERTYPE] += 1
    return sorted(counts.items())


def series_to_frame(series: SupertypeSeries) -> pd.DataFrame:
    """Convert a supertype series to a two-column DataFrame for display."""
    return pd.DataFrame(series, columns=["Supertype", "Count"])
