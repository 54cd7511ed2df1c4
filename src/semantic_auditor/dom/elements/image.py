from typing import Any, Dict, List

from bs4 import Tag

from ..core import ElementBase, ElementDefinition, CheckResult, check_spec


class ImageElement(ElementBase):
    tag: str = "img"

    @property
    def src(self) -> str: return self.get_attr('src') or ''

    def identity(self) -> Dict[str, Any]:
        ident = super().identity()
        ident.update({"src": self.src, "has_alt": self.has_attr("alt")})
        return ident


def parse_image(tag: Tag) -> ImageElement:
    return ImageElement(tag="img", attrs=dict(tag.attrs))


# --- RULES ---

@check_spec(codes=["MISSING_ALT"])
def check_alt_present(node: ElementBase) -> List[CheckResult]:
    # alt="" marks a decorative image and is accepted; only a missing attribute fails
    if node.has_attr("alt"):
        return []
    src = node.get_attr("src") or ""
    return [("MISSING_ALT", f"Image missing alt attribute: {src}", "image")]


# --- DEFINITION ---
DEFINITION = ElementDefinition(
    tag_names=["img"],
    parser=parse_image,
    rules=[check_alt_present]
)
