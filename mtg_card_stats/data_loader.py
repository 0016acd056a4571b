# data_loader.py
"""
Loading of the card document.

The document is a flat XML catalog:

    <cards>
      <card>
        <name>Serra Angel</name>
        <colors>W</colors>
        <maintype>Creature</maintype>
      </card>
      ...
    </cards>

Card and field elements are matched by local name, so a catalog that
declares a default namespace loads the same as a plain one. Every field is
optional. Fetching and parsing either succeed completely or
raise LoadError; partial results are never returned.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Union

import requests
from lxml import etree

from mtg_card_stats.errors import LoadError
from mtg_card_stats.models.card_record import CardRecord

logger = logging.getLogger(__name__)

CARD_TAG = "card"
# XML child element -> CardRecord field
FIELD_TAGS = {
    "colors": "colors",
    "maintype": "supertype",
    "name": "name",
}

DocumentSource = Union[str, Path]


def _is_url(source: DocumentSource) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _field_text(card: etree._Element, tag: str) -> str:
    # First descendant with the tag, all of its text content.
    element = card.find(f".//{{*}}{tag}")
    if element is None:
        return ""
    return "".join(element.itertext())


def extract_cards(document: Union[str, bytes]) -> List[CardRecord]:
    """
    Parse a card document into records, in document order.

    Args:
        document: Raw XML text

    Returns:
        List of CardRecord, one per <card> element

    Raises:
        LoadError: If the document is not well-formed XML
    """
    if isinstance(document, str):
        # Already decoded: the XML declaration's encoding no longer applies.
        document = document.encode("utf-8")
        parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
    else:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
    if not document.strip():
        raise LoadError("Card document is empty")

    try:
        root = etree.fromstring(document, parser=parser)
    except etree.XMLSyntaxError as e:
        raise LoadError(f"Card document is not valid XML: {e}") from e

    records = []
    for card in root.iter(f"{{*}}{CARD_TAG}"):
        fields = {attr: _field_text(card, tag) for tag, attr in FIELD_TAGS.items()}
        records.append(CardRecord(**fields))

    logger.debug(f"Extracted {len(records)} card records")
    return records


def read_document(source: DocumentSource, timeout: Optional[float] = None) -> bytes:
    """
    Fetch the raw card document from a file path or an http(s) URL.

    Raises:
        LoadError: If the document cannot be read
    """
    if _is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise LoadError(f"Failed to fetch card document: {e}", source=str(source)) from e
        return response.content

    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise LoadError(f"Failed to read card document: {e}", source=str(source)) from e


def load_cards_sync(source: DocumentSource, timeout: Optional[float] = None) -> List[CardRecord]:
    """Fetch and parse the card document in the calling thread."""
    document = read_document(source, timeout=timeout)
    try:
        records = extract_cards(document)
    except LoadError as e:
        e.source = str(source)
        raise
    logger.info(f"Loaded {len(records)} cards from {source}")
    return records


async def load_cards(source: DocumentSource, timeout: Optional[float] = None) -> List[CardRecord]:
    """
    Fetch and parse the card document without blocking the event loop.

    Args:
        source: File path or http(s) URL of the card document
        timeout: Optional limit in seconds for the whole fetch-and-parse

    Returns:
        List of CardRecord in document order

    Raises:
        LoadError: If the document cannot be fetched, parsed, or the timeout expires
    """
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(load_cards_sync, source, timeout), timeout=timeout
        )
    except asyncio.TimeoutError as e:
        raise LoadError(
            f"Timed out after {timeout}s loading card document", source=str(source)
        ) from e
