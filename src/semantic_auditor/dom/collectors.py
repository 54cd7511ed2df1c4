# src/semantic_auditor/dom/collectors.py
"""
Node collectors.

Each collector queries the document afresh and returns element models in
document order. Collections that must never be empty raise
EmptyCollectionError, which marks the fixture as broken rather than as
violating a rule.
"""
import logging
from typing import List

from .core import ElementBase
from .models import SiteDocument
from .registry import DOMRegistry
from ..errors import EmptyCollectionError

logger = logging.getLogger(__name__)

# (selector, take_all) in the order page sections are reported
PAGE_SECTION_QUERIES = (
    ("header", False),
    ("nav", False),
    ("main", False),
    ("section", True),
    ("article", True),
    ("footer", False),
)

SEMANTIC_SECTION_SELECTOR = "section, article, aside"
INTERACTIVE_SELECTOR = "a, button"
IMAGE_SELECTOR = "img"


def _require(elements: List[ElementBase], collection: str, selector: str) -> List[ElementBase]:
    if not elements:
        raise EmptyCollectionError(collection, selector)
    logger.debug("Collected %d %s", len(elements), collection)
    return elements


def get_page_sections(doc: SiteDocument) -> List[ElementBase]:
    """
    The major page divisions: the first header, nav and main, every section
    and article, then the first footer.
    """
    tags = []
    for selector, take_all in PAGE_SECTION_QUERIES:
        if take_all:
            tags.extend(doc.find_all(selector))
        else:
            tag = doc.find_first(selector)
            if tag is not None:
                tags.append(tag)

    selectors = ", ".join(selector for selector, _ in PAGE_SECTION_QUERIES)
    return _require([DOMRegistry.to_element(t) for t in tags], "semantic page sections", selectors)


def get_semantic_sections(doc: SiteDocument) -> List[ElementBase]:
    """All section, article and aside elements."""
    elements = [DOMRegistry.to_element(t) for t in doc.find_all(SEMANTIC_SECTION_SELECTOR)]
    return _require(elements, "semantic sections", SEMANTIC_SECTION_SELECTOR)


def get_interactive_elements(doc: SiteDocument) -> List[ElementBase]:
    """All links and buttons."""
    elements = [DOMRegistry.to_element(t) for t in doc.find_all(INTERACTIVE_SELECTOR)]
    return _require(elements, "interactive elements", INTERACTIVE_SELECTOR)


def get_images(doc: SiteDocument) -> List[ElementBase]:
    """All images. A page without images is valid."""
    return [DOMRegistry.to_element(t) for t in doc.find_all(IMAGE_SELECTOR)]
