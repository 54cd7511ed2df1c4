from typing import List

from bs4 import Tag

from ..core import ElementBase, ElementDefinition, CheckResult, check_spec, count_headings, text_content

SEMANTIC_TAGS = ("header", "nav", "main", "section", "article", "aside", "footer")


class SectionElement(ElementBase):
    """
    Model for the HTML5 landmark and sectioning elements.
    Keeps the number of h1-h6 descendants for the heading check.
    """


def parse_section(tag: Tag) -> SectionElement:
    return SectionElement(
        tag=tag.name,
        attrs=dict(tag.attrs),
        text=text_content(tag),
        heading_count=count_headings(tag)
    )


# --- PROPERTY RULES ---


@check_spec(codes=["NON_SEMANTIC_TAG"])
def check_semantic_tag(node: ElementBase) -> List[CheckResult]:
    """A page section must be one of the HTML5 semantic elements."""
    if node.tag.lower() in SEMANTIC_TAGS:
        return []
    return [(
        "NON_SEMANTIC_TAG",
        f"<{node.tag}> is not a semantic element ({', '.join(SEMANTIC_TAGS)})",
        node.tag
    )]


@check_spec(codes=["MISSING_HEADING"])
def check_heading_presence(node: ElementBase) -> List[CheckResult]:
    """A semantic section must contain at least one h1-h6 descendant."""
    if node.heading_count > 0:
        return []
    return [("MISSING_HEADING", f"<{node.tag}> contains no h1-h6 heading", node.tag)]


# --- ELEMENT DEFINITION ---
DEFINITION = ElementDefinition(
    tag_names=list(SEMANTIC_TAGS),
    parser=parse_section,
    rules=[check_semantic_tag, check_heading_presence]
)
