# src/semantic_auditor/dom/models.py
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .core import is_inert


class SiteDocument:
    """
    A parsed HTML fixture.

    Wraps the BeautifulSoup tree and exposes the two query operations the
    collectors need. Selectors are CSS, matched by soupsieve, and results
    come back in document order. Content of <template> elements is skipped,
    as it is for querySelectorAll in a browser. The tree is never modified
    after parsing.
    """

    def __init__(self, soup: BeautifulSoup, source: str = "<string>"):
        self._soup = soup
        self.source = source

    def find_first(self, selector: str) -> Optional[Tag]:
        """First descendant matching `selector`, or None."""
        found = self.find_all(selector)
        return found[0] if found else None

    def find_all(self, selector: str) -> List[Tag]:
        """All descendants matching `selector`, in document order."""
        return [tag for tag in self._soup.select(selector) if not is_inert(tag)]

    def __repr__(self) -> str:
        return f"SiteDocument(source={self.source!r})"
