"""
dashboard_state.py

Session state for the card stats dashboard.

The state holds the full record set exactly once, as an immutable tuple, and
derives the visible view and the chart series from it on demand. Two states
matter to the UI:

- LOADING: no document has been loaded successfully yet
- READY:   records are present and a filter is active

A successful load moves LOADING -> READY. A failed load changes nothing
except last_error. Every filter selection is a READY -> READY transition.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from mtg_card_stats.aggregation import SupertypeSeries, aggregate_by_supertype
from mtg_card_stats.classify import FILTER_ALL, FILTER_OPTIONS
from mtg_card_stats.data_loader import DocumentSource, load_cards
from mtg_card_stats.errors import LoadError
from mtg_card_stats.filtering import filter_cards
from mtg_card_stats.models.card_record import CardRecord

logger = logging.getLogger(__name__)


class DashboardStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"


class DashboardState:
    """Full record set, active filter, and the views derived from them."""

    def __init__(self, active_filter: str = FILTER_ALL):
        if active_filter not in FILTER_OPTIONS:
            raise ValueError(f"Unknown filter: {active_filter!r}")
        self.status = DashboardStatus.LOADING
        self.active_filter = active_filter
        self.version = 0
        self.last_error: Optional[LoadError] = None
        self._records: Tuple[CardRecord, ...] = ()
        self._series_cache: Dict[Tuple[str, int], SupertypeSeries] = {}

    @property
    def records(self) -> Tuple[CardRecord, ...]:
        return self._records

    @property
    def is_ready(self) -> bool:
        return self.status is DashboardStatus.READY

    def set_records(self, records: Iterable[CardRecord]) -> None:
        """Replace the whole record set and mark the dashboard ready."""
        self._records = tuple(records)
        self.version += 1
        self._series_cache.clear()
        self.last_error = None
        self.status = DashboardStatus.READY

    async def load(self, source: DocumentSource, timeout: Optional[float] = None) -> bool:
        """
        Load the card document and replace the record set.

        Returns:
            True on success. On failure the error is logged and kept in
            last_error, and the current records and status are left as they were.
        """
        try:
            records = await load_cards(source, timeout=timeout)
        except LoadError as e:
            logger.error(f"Error loading card data: {e}")
            self.last_error = e
            return False
        self.set_records(records)
        return True

    def select_filter(self, value: Optional[str]) -> str:
        """
        Change the active filter.

        A falsy value means the selection was cleared; the current filter is
        kept. Returns the filter in effect afterwards.
        """
        if not value:
            return self.active_filter
        if value not in FILTER_OPTIONS:
            raise ValueError(f"Unknown filter: {value!r}")
        if value != self.active_filter:
            logger.debug(f"Filter changed: {self.active_filter} -> {value}")
        self.active_filter = value
        return self.active_filter

    @property
    def visible_records(self) -> List[CardRecord]:
        return filter_cards(self._records, self.active_filter)

    @property
    def total(self) -> int:
        return len(self.visible_records)

    def chart_series(self) -> SupertypeSeries:
        """Supertype counts for the visible records, memoized per filter and load."""
        key = (self.active_filter, self.version)
        if key not in self._series_cache:
            self._series_cache[key] = aggregate_by_supertype(self.visible_records)
        return list(self._series_cache[key])
