from typing import Any, Dict, List, Optional

from bs4 import Tag

from ..core import ElementBase, ElementDefinition, CheckResult, check_spec, text_content

INTERACTIVE_TAGS = ("a", "button")


class InteractiveElement(ElementBase):
    """
    Data model for links and buttons.
    `text` holds the full trimmed text content, since its emptiness decides the rule.
    """

    @property
    def has_aria_label(self) -> bool:
        # Presence is what counts; an empty aria-label still passes.
        return self.has_attr("aria-label")

    @property
    def href(self) -> Optional[str]:
        return self.get_attr("href")

    def identity(self) -> Dict[str, Any]:
        ident = super().identity()
        ident.update({
            "text": self.text[:50],
            "has_aria_label": self.has_aria_label,
        })
        if self.tag == "a":
            ident["href"] = self.href
        return ident


def parse_interactive(tag: Tag) -> InteractiveElement:
    return InteractiveElement(
        tag=tag.name,
        attrs=dict(tag.attrs),
        text=text_content(tag)
    )


# --- PROPERTY RULES ---


@check_spec(codes=["MISSING_ACCESSIBLE_NAME"])
def check_accessible_name(node: ElementBase) -> List[CheckResult]:
    """
    Links and buttons need visible text or an aria-label.
    Any other element passes.
    """
    if node.tag.lower() not in INTERACTIVE_TAGS:
        return []

    if node.text.strip() or node.has_attr("aria-label"):
        return []

    return [(
        "MISSING_ACCESSIBLE_NAME",
        f"<{node.tag}> has neither text content nor an aria-label",
        node.tag
    )]


# --- ELEMENT DEFINITION ---
DEFINITION = ElementDefinition(
    tag_names=list(INTERACTIVE_TAGS),
    parser=parse_interactive,
    rules=[check_accessible_name]
)
