# src/semantic_auditor/dom/builder.py
import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from .models import SiteDocument
from .registry import DOMRegistry
from ..errors import FixtureLoadError
from ..utils.config_loader import get_nested_config
from ..utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class DOMBuilder:
    """
    Builder responsible for turning the HTML fixture into a SiteDocument.
    Loading happens once per session; the result is shared read-only.
    """

    def __init__(self, encoding: Optional[str] = None):
        """Initializes the builder and ensures the DOMRegistry is populated."""
        DOMRegistry.discover()
        self.encoding = encoding or get_nested_config("fixture.encoding", "utf-8")

    def load(self, path: Optional[Union[str, Path]] = None) -> SiteDocument:
        """
        Reads and parses the fixture file.

        Args:
            path: Location of the HTML file. Defaults to the configured
                  'fixture.path', relative to the project root.

        Returns:
            SiteDocument: The parsed document.

        Raises:
            FixtureLoadError: The file is missing, unreadable or not valid text
                              in the configured encoding.
        """
        raw_path = path if path is not None else get_nested_config("fixture.path", "index.html")
        try:
            fixture_path = PathUtils.resolve_fixture_path(raw_path)
        except FileNotFoundError as e:
            raise FixtureLoadError(str(raw_path), str(e)) from e

        if not fixture_path.is_file():
            raise FixtureLoadError(str(fixture_path), "file does not exist")

        try:
            html = fixture_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise FixtureLoadError(str(fixture_path), f"not valid {self.encoding}: {e}") from e
        except OSError as e:
            raise FixtureLoadError(str(fixture_path), e.strerror or str(e)) from e

        logger.info("Loaded fixture %s (%d chars)", fixture_path, len(html))
        return self.parse_doc(html, source=str(fixture_path))

    def parse_doc(self, html: str, source: str = "<string>") -> SiteDocument:
        """
        Parses raw HTML content into a SiteDocument.

        Args:
            html (str): The raw HTML string.
            source (str): Label used in logs and reports.
        """
        # Strip a leading BOM left by some editors
        clean_html = html.replace('\ufeff', '').strip()
        soup = BeautifulSoup(clean_html, 'html.parser')
        logger.debug("Parsed %s into %d tags", source, len(soup.find_all(True)))
        return SiteDocument(soup, source=source)
