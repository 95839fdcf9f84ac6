"""
Tests templates de page
  expand(template, id_factory, registry) → [Block]
"""
import itertools

import pytest

from block_composer.errors import UnknownTemplateError
from block_composer.registry import REGISTRY
from block_composer.renderer import render_blocks
from block_composer.templates import (
    PAGE_TEMPLATES, PageTemplate, TemplateEntry, expand, get_template,
)


def make_template(*entries):
    return PageTemplate(id="t", name="T", blocks=[TemplateEntry(type=t, props=p) for t, p in entries])


# ── expand ────────────────────────────────────────────────────────────────

def test_hero_then_cta_scenario():
    template = make_template(("hero", {"title": "Welcome"}), ("cta", {}))
    blocks = expand(template)

    assert [b.type for b in blocks] == ["hero", "cta"]
    assert blocks[0].props["title"] == "Welcome"
    assert blocks[0].props["subtitle"] == REGISTRY.default_props("hero")["subtitle"]
    assert blocks[1].props == REGISTRY.default_props("cta")
    assert blocks[0].id != blocks[1].id

    nodes = render_blocks(blocks)
    assert [n.block_type for n in nodes] == ["hero", "cta"]
    assert "Welcome" in nodes[0].html
    assert "Ready to Get Started?" in nodes[1].html


def test_same_type_twice_with_different_overrides():
    blocks = expand(make_template(("card", {"title": "One"}), ("card", {"title": "Two"})))
    assert [b.props["title"] for b in blocks] == ["One", "Two"]
    assert blocks[0].props["buttonText"] == blocks[1].props["buttonText"] == "Learn More"


def test_expansion_differs_only_by_ids():
    template = get_template("landing")
    first = expand(template)
    second = expand(template)
    assert [b.id for b in first] != [b.id for b in second]
    assert [(b.type, b.props) for b in first] == [(b.type, b.props) for b in second]


def test_override_lists_replace_defaults():
    blocks = expand(make_template(("features", {"features": [{"title": "Only"}]})))
    assert blocks[0].props["features"] == [{"title": "Only"}]


def test_nested_override_merges():
    blocks = expand(make_template(("header", {"logo": {"url": "/logo.svg"}})))
    logo = blocks[0].props["logo"]
    assert logo["url"] == "/logo.svg"
    assert logo["position"] == "left"


def test_expanded_blocks_carry_no_overlays():
    for block in expand(get_template("pricing")):
        assert block.link is None
        assert block.visibility is None
        assert block.animation is None
        assert block.style is None


def test_expand_does_not_touch_template():
    template = make_template(("hero", {"title": "Welcome"}))
    blocks = expand(template)
    blocks[0].props["title"] = "Changed"
    assert template.blocks[0].props == {"title": "Welcome"}


def test_custom_id_factory():
    counter = itertools.count(1)
    blocks = expand(get_template("landing"), id_factory=lambda: f"b{next(counter)}")
    assert [b.id for b in blocks] == ["b1", "b2", "b3", "b4", "b5"]


def test_unknown_type_kept_with_override_only():
    blocks = expand(make_template(("mystery", {"x": 1})))
    assert blocks[0].type == "mystery"
    assert blocks[0].props == {"x": 1}


# ── Catalogue ─────────────────────────────────────────────────────────────

def test_builtin_templates():
    assert [t.id for t in PAGE_TEMPLATES] == ["blank", "landing", "about", "product", "blog", "pricing"]
    assert expand(get_template("blank")) == []
    assert [b.type for b in expand(get_template("landing"))] == [
        "hero", "features", "testimonial", "stats", "cta",
    ]


def test_builtin_templates_only_use_registered_types():
    for template in PAGE_TEMPLATES:
        for entry in template.blocks:
            assert entry.type in REGISTRY


def test_unknown_template():
    with pytest.raises(UnknownTemplateError) as exc:
        get_template("nope")
    assert exc.value.template_id == "nope"
