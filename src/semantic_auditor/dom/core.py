from typing import Any, Callable, Dict, List, Optional, Tuple

from bs4 import Tag
from pydantic import BaseModel, Field

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


def check_spec(codes: List[str]):
    """
    Decorator to declare which issue codes a property rule can return.
    The DOMRegistry binds each code to the rule that reports it.
    """
    def decorator(func):
        func.defined_codes = codes
        return func
    return decorator


class ElementBase(BaseModel):
    """
    Base data model representing a DOM element taken from the fixture.
    """
    tag: str
    attrs: Dict[str, Any] = Field(default_factory=dict)
    text: str = ""
    heading_count: int = 0

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def get_attr(self, name: str) -> Optional[str]:
        value = self.attrs.get(name)
        # bs4 keeps multi-valued attributes (class, rel) as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def identity(self) -> Dict[str, Any]:
        """Identifying attributes used when this element is reported."""
        ident: Dict[str, Any] = {"tag": self.tag}
        if self.attrs.get("id"):
            ident["id"] = self.attrs["id"]
        return ident


# Rule findings: (Code, Message, ElementType)
CheckResult = Tuple[str, str, str]
Rule = Callable[[ElementBase], List[CheckResult]]


def is_inert(tag: Tag) -> bool:
    """True for markup inside a <template>, which a browser never renders or queries."""
    return tag.find_parent("template") is not None


def text_content(tag: Tag) -> str:
    """Whitespace-trimmed text content of a tag and its descendants."""
    return tag.get_text(" ", strip=True)


def count_headings(tag: Tag) -> int:
    return sum(1 for heading in tag.select(HEADING_SELECTOR) if not is_inert(heading))


def parse_generic(tag: Tag) -> ElementBase:
    """Fallback parser for tags without a registered definition."""
    return ElementBase(
        tag=tag.name,
        attrs=dict(tag.attrs),
        text=text_content(tag),
        heading_count=count_headings(tag)
    )


class ElementDefinition:
    """
    Configuration object binding one or more HTML tags to a parser and the
    property rules that judge the parsed elements.
    """

    def __init__(
            self,
            tag_names: List[str],
            parser: Callable[[Tag], ElementBase],
            rules: Optional[List[Rule]] = None
    ):
        self.tag_names = list(tag_names)
        self.parser = parser
        self.rules = rules or []
