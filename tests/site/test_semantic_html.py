# tests/site/test_semantic_html.py
"""
Property tests for the portfolio page (index.html).

Each test draws arbitrary members of a collection with Hypothesis and
asserts the matching rule holds. The collections are built once per
session; a broken fixture therefore shows up as a setup error, a rule
violation as a test failure.
"""
import pytest
from hypothesis import given, settings, strategies as st

from semantic_auditor.dom.builder import DOMBuilder
from semantic_auditor.dom.collectors import (
    get_images,
    get_interactive_elements,
    get_page_sections,
    get_semantic_sections,
)
from semantic_auditor.dom.elements.image import check_alt_present
from semantic_auditor.dom.elements.interactive import check_accessible_name
from semantic_auditor.dom.elements.section import SEMANTIC_TAGS, check_heading_presence, check_semantic_tag
from semantic_auditor.dom.qngine import QNGINE

NUM_RUNS = 100


@pytest.fixture(scope="session")
def site_doc():
    return DOMBuilder().load()


@pytest.fixture(scope="session")
def page_sections(site_doc):
    return get_page_sections(site_doc)


@pytest.fixture(scope="session")
def semantic_sections(site_doc):
    return get_semantic_sections(site_doc)


@pytest.fixture(scope="session")
def interactive_elements(site_doc):
    return get_interactive_elements(site_doc)


@pytest.fixture(scope="session")
def images(site_doc):
    return get_images(site_doc)


@settings(max_examples=NUM_RUNS)
@given(data=st.data())
def test_page_sections_use_semantic_elements(page_sections, data):
    """Alle grote paginaonderdelen gebruiken HTML5 semantische elementen."""
    section = data.draw(st.sampled_from(page_sections), label="section")
    assert section.tag in SEMANTIC_TAGS
    assert not check_semantic_tag(section), section.identity()


@settings(max_examples=NUM_RUNS)
@given(data=st.data())
def test_semantic_sections_have_heading(semantic_sections, data):
    """Elke section, article en aside bevat minstens één kop."""
    section = data.draw(st.sampled_from(semantic_sections), label="section")
    assert not check_heading_presence(section), section.identity()


@settings(max_examples=NUM_RUNS)
@given(data=st.data())
def test_interactive_elements_are_labelled(interactive_elements, data):
    """Links en buttons hebben tekst of een aria-label."""
    element = data.draw(st.sampled_from(interactive_elements), label="element")
    assert not check_accessible_name(element), element.identity()


@settings(max_examples=NUM_RUNS)
@given(data=st.data())
def test_images_have_alt(images, data):
    """Alle afbeeldingen hebben een alt-attribuut (leeg mag voor decoratie)."""
    if not images:
        return
    img = data.draw(st.sampled_from(images), label="img")
    assert not check_alt_present(img), img.identity()


@pytest.mark.parametrize("check", ["semantic_tags", "heading_presence", "interactive_accessibility", "image_alt"])
def test_every_element_passes(site_doc, check):
    """Exhaustieve controle: de eerste overtreding in documentvolgorde faalt de test."""
    QNGINE(site_doc, strategy="exhaustive").assert_check(check)


def test_repeated_runs_agree(site_doc):
    engine = QNGINE(site_doc, strategy="exhaustive")
    assert engine.run_all().model_dump() == engine.run_all().model_dump()
