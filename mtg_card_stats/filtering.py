"""Color category filter for card records."""

from typing import List, Optional, Sequence

from mtg_card_stats.classify import FILTER_ALL
from mtg_card_stats.models.card_record import CardRecord


def filter_cards(
    records: Sequence[CardRecord], active_category: Optional[str] = FILTER_ALL
) -> List[CardRecord]:
    """
    Narrow records to one color category.

    Args:
        records: All loaded records
        active_category: A color category, or "all"/None for no filtering

    Returns:
        New list of matching records in their original order
    """
    if not active_category or active_category == FILTER_ALL:
        return list(records)
    return [card for card in records if card.color_category == active_category]
