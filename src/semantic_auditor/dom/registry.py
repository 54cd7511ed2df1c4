# src/semantic_auditor/dom/registry.py
import importlib
import logging
import pkgutil
from typing import Callable, Dict, Optional

from bs4 import Tag

from .core import ElementBase, ElementDefinition, Rule, parse_generic

logger = logging.getLogger(__name__)


class DOMRegistry:
    """
    Central registry for element parsers and property rules.

    Dynamically discovers ElementDefinition modules in the
    'semantic_auditor.dom.elements' package. Parsers are keyed by tag name,
    rules by the issue codes they declare through `check_spec`.
    """

    _parsers: Dict[str, Callable[[Tag], ElementBase]] = {}
    _rules: Dict[str, Rule] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Registers every module in `semantic_auditor.dom.elements` that exposes
        a `DEFINITION` attribute (instance of `ElementDefinition`).

        A module that fails to import is a programming error and propagates.
        """
        if cls._loaded:
            return

        import semantic_auditor.dom.elements as elements_pkg

        for _, name, _ in pkgutil.iter_modules(elements_pkg.__path__):
            module = importlib.import_module(f"semantic_auditor.dom.elements.{name}")
            defn = getattr(module, "DEFINITION", None)
            if not isinstance(defn, ElementDefinition):
                continue

            for tag_name in defn.tag_names:
                cls._parsers[tag_name] = defn.parser
            for rule in defn.rules:
                for code in getattr(rule, "defined_codes", []):
                    if code in cls._rules:
                        raise ValueError(f"Issue code {code} declared twice ({name})")
                    cls._rules[code] = rule

            logger.debug("Element definition loaded: %s -> %s", name, ", ".join(defn.tag_names))

        cls._loaded = True

    @classmethod
    def get_parser(cls, tag_name: str) -> Optional[Callable[[Tag], ElementBase]]:
        """Retrieves the parser function for a specific HTML tag."""
        cls.discover()
        return cls._parsers.get(tag_name)

    @classmethod
    def get_rule(cls, code: str) -> Rule:
        """Retrieves the rule that reports issue `code`."""
        cls.discover()
        try:
            return cls._rules[code]
        except KeyError:
            raise KeyError(f"No rule registered for issue code '{code}'") from None

    @classmethod
    def to_element(cls, tag: Tag) -> ElementBase:
        """Converts a bs4 Tag into its registered model, or a generic ElementBase."""
        parser = cls.get_parser(tag.name)
        return parser(tag) if parser else parse_generic(tag)
