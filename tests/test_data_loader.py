import asyncio
import time
from unittest.mock import MagicMock, patch

import pytest
import requests

from mtg_card_stats import LoadError, extract_cards, load_cards, read_document
from mtg_card_stats.data_loader import load_cards_sync


def test_extract_cards_reads_fields_in_document_order():
    document = """
    <cards>
      <card><name>Serra Angel</name><colors>W</colors><maintype>Creature</maintype></card>
      <card><maintype>Instant</maintype><name>Lightning Helix</name><colors>RW</colors></card>
    </cards>
    """
    cards = extract_cards(document)

    assert [c.name for c in cards] == ["Serra Angel", "Lightning Helix"]
    assert cards[0].colors == "W"
    assert cards[0].supertype == "Creature"
    assert cards[0].color_category == "W"
    assert cards[1].color_category == "Gold"


def test_extract_cards_missing_fields_are_empty():
    cards = extract_cards("<cards><card><name>Wastes</name></card><card/></cards>")

    assert cards[0].name == "Wastes"
    assert cards[0].colors == ""
    assert cards[0].supertype == ""
    assert cards[0].color_category == "C"
    assert cards[1].name == ""


def test_extract_cards_finds_nested_cards_and_fields():
    document = """
    <library>
      <set code="LEA">
        <card><details><colors>G</colors></details><name>Llanowar Elves</name></card>
      </set>
      <card><name>Black Lotus</name></card>
    </library>
    """
    cards = extract_cards(document)

    assert [c.name for c in cards] == ["Llanowar Elves", "Black Lotus"]
    assert cards[0].colors == "G"


def test_extract_cards_uses_full_text_content():
    cards = extract_cards("<cards><card><name>Fire <b>//</b> Ice</name></card></cards>")
    assert cards[0].name == "Fire // Ice"


def test_extract_cards_accepts_bytes_with_declaration():
    document = b'<?xml version="1.0" encoding="UTF-8"?><cards><card><colors>B</colors></card></cards>'
    assert extract_cards(document)[0].color_category == "B"


def test_extract_cards_text_ignores_declared_encoding():
    document = '<?xml version="1.0" encoding="ISO-8859-1"?><cards><card><name>Jötun</name></card></cards>'
    assert extract_cards(document)[0].name == "Jötun"


def test_extract_cards_bytes_use_declared_encoding():
    document = '<?xml version="1.0" encoding="ISO-8859-1"?><cards><card><name>Jötun</name></card></cards>'
    assert extract_cards(document.encode("latin-1"))[0].name == "Jötun"


def test_extract_cards_with_default_namespace():
    document = """
    <cards xmlns="urn:x">
      <card><name>Serra Angel</name><colors>W</colors><maintype>Creature</maintype></card>
      <card><name>Lightning Helix</name><colors>RW</colors></card>
    </cards>
    """
    cards = extract_cards(document)

    assert [c.name for c in cards] == ["Serra Angel", "Lightning Helix"]
    assert cards[0].supertype == "Creature"
    assert cards[1].color_category == "Gold"


def test_extract_cards_without_card_elements():
    assert extract_cards("<cards></cards>") == []


@pytest.mark.parametrize("document", ["", "not xml at all", "<cards><card></cards>"])
def test_extract_cards_rejects_unparseable_documents(document):
    with pytest.raises(LoadError):
        extract_cards(document)


def test_read_document_from_file(sample_cards_path):
    assert read_document(sample_cards_path).startswith(b"<?xml")


def test_read_document_missing_file(tmp_path):
    missing = tmp_path / "missing.xml"
    with pytest.raises(LoadError) as excinfo:
        read_document(missing)
    assert excinfo.value.source == str(missing)


def test_read_document_from_url():
    response = MagicMock()
    response.content = b"<cards/>"
    with patch("mtg_card_stats.data_loader.requests.get", return_value=response) as mock_get:
        assert read_document("http://localhost:7860/static/test.xml", timeout=5) == b"<cards/>"

    mock_get.assert_called_once_with("http://localhost:7860/static/test.xml", timeout=5)
    response.raise_for_status.assert_called_once()


def test_read_document_http_error_is_load_error():
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with patch("mtg_card_stats.data_loader.requests.get", return_value=response):
        with pytest.raises(LoadError) as excinfo:
            read_document("https://example.com/test.xml")
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_read_document_connection_error_is_load_error():
    with patch(
        "mtg_card_stats.data_loader.requests.get",
        side_effect=requests.ConnectionError("refused"),
    ):
        with pytest.raises(LoadError):
            read_document("http://localhost:1/test.xml")


def test_load_cards_sync_sets_source_on_parse_error(malformed_path):
    with pytest.raises(LoadError) as excinfo:
        load_cards_sync(malformed_path)
    assert excinfo.value.source == str(malformed_path)


def test_load_cards(sample_cards_path):
    cards = asyncio.run(load_cards(sample_cards_path))

    assert len(cards) == 17
    assert cards[0].name == "Serra Angel"
    assert cards[-1].name == "Mystery Token"


def test_load_cards_malformed(malformed_path):
    with pytest.raises(LoadError):
        asyncio.run(load_cards(malformed_path))


def test_load_cards_timeout(sample_cards_path):
    def slow_load(source, timeout):
        time.sleep(0.5)
        return []

    with patch("mtg_card_stats.data_loader.load_cards_sync", side_effect=slow_load):
        with pytest.raises(LoadError) as excinfo:
            asyncio.run(load_cards(sample_cards_path, timeout=0.05))
    assert "Timed out" in str(excinfo.value)
