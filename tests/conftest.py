import pytest

from mtg_card_stats import CardRecord, DashboardState
from tests.helpers import get_sample_data_path

SAMPLE_CARDS_XML = get_sample_data_path("cards.xml")
MALFORMED_XML = get_sample_data_path("malformed.xml")
EMPTY_CATALOG_XML = get_sample_data_path("empty_catalog.xml")


@pytest.fixture
def three_records():
    """Colorless creature, blue creature, and a gold card with no supertype."""
    return [
        CardRecord(name="Sol Golem", colors="", supertype="Creature"),
        CardRecord(name="Merfolk Looter", colors="U", supertype="Creature"),
        CardRecord(name="Dimir Signet Thing", colors="UB", supertype=""),
    ]


@pytest.fixture
def ready_state(three_records):
    state = DashboardState()
    state.set_records(three_records)
    return state


@pytest.fixture
def sample_cards_path():
    return SAMPLE_CARDS_XML


@pytest.fixture
def malformed_path():
    return MALFORMED_XML


@pytest.fixture
def empty_catalog_path():
    return EMPTY_CATALOG_XML
