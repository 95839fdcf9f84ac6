"""
Tests dispatcher de rendu + page HTML
  render_block(block, theme, viewport, editing, show_indicator, settings) → RenderedNode
  render_page(page, theme, ...)                                          → str
"""
import pytest

from block_composer.blocks import Block, BlockVisibility, StyleOverlay, from_preset
from block_composer.config import Settings
from block_composer.links import ExternalLink, ScrollLink
from block_composer.page import Page
from block_composer.registry import REGISTRY
from block_composer.renderer import RENDERERS, HtmlRenderer, PageRenderer, render_block, render_blocks, render_page
from block_composer.theme import Theme


def make_block(type_="hero", **kwargs):
    props = kwargs.pop("props", None)
    if props is None:
        props = REGISTRY.default_props(type_)
    return Block(id="b1", type=type_, props=props, **kwargs)


# ── Dispatch ──────────────────────────────────────────────────────────────

def test_known_type_renders():
    node = render_block(make_block())
    assert not node.fallback and not node.degraded and not node.hidden
    assert 'data-block-id="b1"' in node.html
    assert "Welcome to Our Site" in node.html


def test_unknown_type_fallback():
    node = render_block(Block(id="u", type="mystery", props={"x": 1}))
    assert node.fallback is True
    assert "Unknown block type: mystery" in node.html


@pytest.mark.parametrize("block_type", REGISTRY.types)
def test_every_registered_type_renders_its_defaults(block_type):
    node = render_block(REGISTRY.create_block(block_type))
    assert node.fallback is False
    assert node.degraded is False
    assert node.html


def test_malformed_props_give_field_placeholders():
    block = make_block(props={"title": {"bad": 1}, "overlay": "lots", "alignment": ["x"]})
    node = render_block(block)
    assert node.degraded is False
    assert "field-missing" in node.html
    assert "hero--center" in node.html


def test_raising_renderer_is_isolated(monkeypatch):
    def boom(props, theme):
        raise RuntimeError("kaboom")

    monkeypatch.setitem(RENDERERS, "hero", boom)
    nodes = render_blocks([make_block(), Block(id="b2", type="cta", props=REGISTRY.default_props("cta"))])
    assert nodes[0].degraded is True
    assert "Unable to render hero block" in nodes[0].html
    assert nodes[1].degraded is False


def test_renderer_sees_only_props_and_theme(monkeypatch):
    seen = {}

    def spy(*args, **kwargs):
        seen["args"], seen["kwargs"] = args, kwargs
        args[0]["title"] = "mutated"
        return "<p>ok</p>"

    monkeypatch.setitem(RENDERERS, "hero", spy)
    block = make_block(link=ExternalLink(url="https://x.com"), animation=from_preset("fadeIn"))
    render_block(block)

    props, theme = seen["args"]
    assert seen["kwargs"] == {}
    assert isinstance(theme, Theme)
    assert "link" not in props and "animation" not in props
    assert block.props["title"] == "Welcome to Our Site"


# ── Visibilité ────────────────────────────────────────────────────────────

def test_hidden_in_edit_mode_shows_placeholder():
    block = make_block(visibility=BlockVisibility(mobile=False))
    node = render_block(block, viewport="mobile", editing=True)
    assert node.hidden is True
    assert "Hidden on mobile" in node.html
    assert render_block(block, viewport="desktop", editing=True).hidden is False


def test_hidden_published_is_omitted():
    block = make_block(visibility=BlockVisibility(tablet=False))
    node = render_block(block, viewport="tablet")
    assert node.omitted is True
    assert node.html == ""
    assert render_blocks([block], viewport="tablet") == []


def test_hidden_published_empty_policy():
    block = make_block(visibility=BlockVisibility(tablet=False))
    node = render_block(block, viewport="tablet", settings=Settings(hidden_policy="empty"))
    assert node.omitted is False
    assert "block--hidden" in node.html
    assert "Welcome" not in node.html


def test_hidden_unknown_type_is_hidden_not_fallback():
    block = Block(id="u", type="mystery", visibility=BlockVisibility(desktop=False))
    node = render_block(block)
    assert node.omitted is True
    assert node.fallback is False


# ── Mode édition / liens ──────────────────────────────────────────────────

def test_edit_mode_uses_editable_variant_and_controls():
    html = render_block(make_block(), editing=True).html
    assert 'contenteditable="true"' in html
    assert 'data-action="move-up"' in html
    assert 'data-action="delete"' in html
    assert "Hero Section" in html
    assert "contenteditable" not in render_block(make_block()).html


def test_link_indicator():
    block = make_block(link=ExternalLink(url="https://x.com"))
    node = render_block(block, editing=True, show_indicator=True)
    assert node.href == "https://x.com"
    assert "block__link-indicator" in node.html
    assert "External" in node.html
    assert "<a href=\"https://x.com\" class=\"block__link" not in node.html


def test_published_link_wraps_block():
    block = make_block("testimonial", link=ExternalLink(url="https://x.com", new_tab=True))
    html = render_block(block).html
    assert '<a href="https://x.com" target="_blank" rel="nofollow noopener"' in html


def test_block_with_own_links_gets_clickable_div():
    block = make_block(link=ExternalLink(url="https://x.com", new_tab=True))
    html = render_block(block).html
    assert '<a href="https://x.com"' not in html
    assert 'data-href="https://x.com" role="link"' in html
    assert "window.open(&quot;https://x.com&quot;" in html
    assert "event.target.closest(&#x27;a&#x27;)" in html


def test_published_scroll_link_gets_onclick():
    block = make_block(link=ScrollLink(anchor_id="pricing"))
    html = render_block(block).html
    assert 'href="#pricing"' in html
    assert "onclick=" in html


def test_style_and_animation_on_container():
    block = make_block(
        animation=from_preset("bounceIn"),
        style=StyleOverlay.model_validate({"colors": {"textColor": "#101010"}, "customClass": "promo"}),
    )
    node = render_block(block)
    assert "animate-bounceIn" in node.html
    assert "promo" in node.html
    assert "color:#101010" in node.html
    assert node.style.effect_name == "bounceIn"


# ── Thème / contenu ───────────────────────────────────────────────────────

def test_theme_dict_is_applied():
    block = make_block(props={"title": "Hi", "backgroundImage": ""})
    html = render_block(block, theme={"primary_color": "#ff0000"}).html
    assert "background:#ff0000" in html


def test_props_are_escaped():
    html = render_block(make_block(props={"title": "<script>alert(1)</script>"})).html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_row_renders_nested_blocks():
    props = {"columns": [
        {"id": "c1", "width": {"desktop": 6}, "blocks": [{"type": "cta", "props": {"heading": "Inner CTA"}}]},
        {"id": "c2", "width": {"desktop": 6}, "blocks": [{"type": "mystery"}]},
    ]}
    html = render_block(make_block("row", props=props)).html
    assert "Inner CTA" in html
    assert "col-desktop-6" in html
    assert "Unknown block type: mystery" in html


def make_row(*children):
    return make_block("row", props={"columns": [{"id": "c1", "width": {"desktop": 12}, "blocks": list(children)}]})


def test_row_nested_hidden_block_follows_viewport():
    row = make_row({"id": "n1", "type": "cta", "props": {"heading": "Desktop only"},
                    "visibility": {"mobile": False}})
    assert "Desktop only" in render_block(row, viewport="desktop").html
    assert "Desktop only" not in render_block(row, viewport="mobile").html
    edit_html = render_block(row, viewport="mobile", editing=True).html
    assert "Hidden on mobile" in edit_html
    assert "Desktop only" not in edit_html


def test_row_nested_blocks_editable_with_controls():
    row = make_row({"id": "n1", "type": "hero", "props": {"title": "Inner"}})
    html = render_block(row, editing=True).html
    assert 'data-action="delete" data-block-id="n1"' in html
    assert 'contenteditable="true" data-field="title">Inner' in html
    assert 'data-block-id="n1"' in render_block(row).html
    assert 'data-action="delete" data-block-id="n1"' not in render_block(row).html


def test_row_nested_blocks_use_parent_settings():
    row = make_row({"id": "n1", "type": "cta", "visibility": {"mobile": False}})
    html = render_block(row, viewport="mobile", settings=Settings(hidden_policy="empty")).html
    assert 'class="block block--hidden" data-block-id="n1"' in html


def test_row_nested_children_get_stable_ids():
    row = make_row({"type": "cta"}, {"type": "divider"})
    first, second = render_block(row).html, render_block(row).html
    assert first == second
    assert 'data-block-id="c1-block-1"' in first
    assert 'data-block-id="c1-block-2"' in first


def test_row_nested_animation_effects_reported():
    row = make_row({"id": "n1", "type": "cta", "animation": {"kind": "spin"}})
    node = render_block(row)
    assert node.effects == ["spin"]
    html = render_page(Page(blocks=[row]))
    assert "anim-spin" in html
    assert "@keyframes anim-spin" in html


# ── Page ──────────────────────────────────────────────────────────────────

def test_render_page_document():
    page = Page(name="Accueil", blocks=[make_block(animation=from_preset("fadeIn"))])
    html = render_page(page, theme={"primary_color": "#0ea5e9"})
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Accueil</title>" in html
    assert "--color-primary: #0ea5e9" in html
    assert "@keyframes anim-fadeIn" in html
    assert "@keyframes anim-spin" not in html


def test_html_renderer_protocol():
    renderer = HtmlRenderer(viewport="mobile", editing=True)
    assert isinstance(renderer, PageRenderer)
    page = Page(blocks=[make_block(visibility=BlockVisibility(mobile=False))])
    assert "Hidden on mobile" in renderer.render_page(page)
