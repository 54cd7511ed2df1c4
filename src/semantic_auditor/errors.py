# src/semantic_auditor/errors.py
from typing import Any, Dict, List, Optional


class FatalSetupError(Exception):
    """
    Raised when the fixture itself is broken, as opposed to a fixture
    that violates one of the markup rules.
    """


class FixtureLoadError(FatalSetupError):
    """The HTML fixture could not be found, read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load fixture '{path}': {reason}")


class EmptyCollectionError(FatalSetupError):
    """A collection that must contain elements came back empty."""

    def __init__(self, collection: str, selector: str):
        self.collection = collection
        self.selector = selector
        super().__init__(f"No {collection} found in the HTML document (selector: {selector})")


class PropertyViolation(AssertionError):
    """
    A property predicate returned false for an element.

    Carries the name of the check, the identifying attributes of the first
    counterexample and the rule results that flagged it.
    """

    def __init__(self, check: str, element: Dict[str, Any], results: List[tuple], checked: Optional[int] = None):
        self.check = check
        self.element = element
        self.results = results
        self.checked = checked
        codes = ", ".join(code for code, *_ in results)
        messages = "; ".join(msg for _, msg, *_ in results)
        super().__init__(f"[{check}] {codes}: {messages} (element: {element})")
