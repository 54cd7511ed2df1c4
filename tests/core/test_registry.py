# tests/core/test_registry.py
import pytest
from bs4 import BeautifulSoup

from semantic_auditor.dom.core import ElementBase
from semantic_auditor.dom.elements.image import ImageElement, check_alt_present, parse_image
from semantic_auditor.dom.elements.interactive import InteractiveElement, check_accessible_name
from semantic_auditor.dom.elements.section import (
    SectionElement,
    check_heading_presence,
    check_semantic_tag,
    parse_section,
)
from semantic_auditor.dom.registry import DOMRegistry


def _tag(html, name):
    return BeautifulSoup(html, "html.parser").find(name)


def test_rules_are_bound_by_issue_code():
    """Elke regel uit een DEFINITION is vindbaar via zijn issue code."""
    assert DOMRegistry.get_rule("NON_SEMANTIC_TAG") is check_semantic_tag
    assert DOMRegistry.get_rule("MISSING_HEADING") is check_heading_presence
    assert DOMRegistry.get_rule("MISSING_ACCESSIBLE_NAME") is check_accessible_name
    assert DOMRegistry.get_rule("MISSING_ALT") is check_alt_present


def test_unknown_issue_code():
    with pytest.raises(KeyError):
        DOMRegistry.get_rule("TITLE_TOO_LONG")


def test_parsers_are_registered_per_tag():
    for tag_name in ("header", "nav", "main", "section", "article", "aside", "footer"):
        assert DOMRegistry.get_parser(tag_name) is parse_section
    assert DOMRegistry.get_parser("img") is parse_image
    assert DOMRegistry.get_parser("div") is None


def test_to_element_builds_registered_models():
    """Bekende tags worden naar hun eigen model omgezet."""
    section = DOMRegistry.to_element(_tag("<section><div><h3>Deep</h3></div><h4>x</h4></section>", "section"))
    assert isinstance(section, SectionElement)
    assert section.heading_count == 2

    link = DOMRegistry.to_element(_tag("<a href='/x' aria-label='Go'>  Go  </a>", "a"))
    assert isinstance(link, InteractiveElement)
    assert link.text == "Go"
    assert link.has_aria_label
    assert link.href == "/x"

    img = DOMRegistry.to_element(_tag("<img src='a.png' alt>", "img"))
    assert isinstance(img, ImageElement)
    assert img.has_attr("alt")
    assert img.get_attr("alt") == ""
    assert img.identity() == {"tag": "img", "src": "a.png", "has_alt": True}


def test_to_element_falls_back_to_generic_model():
    """Onbekende tags worden een generiek ElementBase."""
    div = DOMRegistry.to_element(_tag("<div class='section card'><h2>A</h2></div>", "div"))
    assert type(div) is ElementBase
    assert div.tag == "div"
    assert div.heading_count == 1
    assert div.get_attr("class") == "section card"


def test_interactive_identity_reports_label_state():
    button = DOMRegistry.to_element(_tag("<button id='menu'></button>", "button"))
    assert button.identity() == {"tag": "button", "id": "menu", "text": "", "has_aria_label": False}
