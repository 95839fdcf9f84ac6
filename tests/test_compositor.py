"""
Tests compositeur style/animation
  compose_style(block, viewport) → RenderStyle(declarations, class_names, effect_name)
"""
from block_composer.blocks import AnimationOverlay, Block, StyleOverlay, from_preset
from block_composer.compositor import compose_style, parse_custom_css
from block_composer.theme import Theme


def make_block(**kwargs):
    return Block(id="b1", type="hero", **kwargs)


# ── Base ──────────────────────────────────────────────────────────────────

def test_no_overlays_gives_empty_style():
    style = compose_style(make_block())
    assert style.declarations == {}
    assert style.class_names == []
    assert style.effect_name is None
    assert style.css() == ""


def test_deterministic():
    block = make_block(
        animation=from_preset("fadeInUp"),
        style=StyleOverlay.model_validate({"colors": {"textColor": "#111111"}}),
    )
    assert compose_style(block) == compose_style(block)


# ── Thème / inherit ───────────────────────────────────────────────────────

def test_inherit_text_color_uses_theme():
    block = make_block(style=StyleOverlay.model_validate({"colors": {"textColor": "inherit"}}))
    style = compose_style(block)
    assert "color" not in style.declarations
    assert style.resolve(Theme(text_color="#222222"))["color"] == "#222222"


def test_explicit_text_color_overrides_theme():
    block = make_block(style=StyleOverlay.model_validate({"colors": {"textColor": "#ff0000"}}))
    resolved = compose_style(block).resolve({"text_color": "#222222"})
    assert resolved["color"] == "#ff0000"


def test_default_values_are_skipped():
    block = make_block(style=StyleOverlay.model_validate({
        "typography": {"textTransform": "none", "textDecoration": "none"},
        "colors": {"backgroundColor": "transparent"},
        "layout": {"maxWidth": "none", "height": "auto", "minHeight": "0", "overflow": "visible"},
        "border": {"style": "none", "width": "2px", "radius": "4px"},
    }))
    assert compose_style(block).declarations == {"border-radius": "4px"}


# ── Animation ─────────────────────────────────────────────────────────────

def test_animation_declarations_and_class():
    block = make_block(animation=AnimationOverlay(kind="zoomIn", duration_ms=400, delay_ms=100, easing="spring"))
    style = compose_style(block)
    assert style.declarations["animation-name"] == "anim-zoomIn"
    assert style.declarations["animation-duration"] == "400ms"
    assert style.declarations["animation-delay"] == "100ms"
    assert style.declarations["animation-timing-function"] == "cubic-bezier(0.175, 0.885, 0.32, 1.275)"
    assert style.declarations["animation-fill-mode"] == "both"
    assert style.class_names == ["animate-zoomIn"]
    assert style.effect_name == "zoomIn"


def test_animation_none_is_ignored():
    style = compose_style(make_block(animation=AnimationOverlay(kind="none")))
    assert style.declarations == {}
    assert style.effect_name is None


def test_custom_css_wins_over_animation():
    block = make_block(
        animation=from_preset("fadeIn"),
        style=StyleOverlay(custom_css="animation-duration: 2s; opacity: .9", custom_class="promo wide"),
    )
    style = compose_style(block)
    assert style.declarations["animation-duration"] == "2s"
    assert style.declarations["opacity"] == ".9"
    assert style.class_names == ["animate-fadeIn", "promo", "wide"]


# ── Overlay de style ──────────────────────────────────────────────────────

def test_responsive_override_camel_case():
    style = StyleOverlay.model_validate({
        "typography": {"fontSize": "48px", "textAlign": "left"},
        "responsive": {"mobile": {"typography": {"fontSize": "28px"}}},
    })
    block = make_block(style=style)
    assert compose_style(block, "desktop").declarations["font-size"] == "48px"
    mobile = compose_style(block, "mobile").declarations
    assert mobile["font-size"] == "28px"
    assert mobile["text-align"] == "left"


def test_responsive_override_can_disable_base_flags():
    style = StyleOverlay.model_validate({
        "colors": {"gradientEnabled": True, "gradientStart": "#000", "gradientEnd": "#fff"},
        "shadow": {"enabled": True, "blur": "12px"},
        "responsive": {"mobile": {
            "shadow": {"enabled": False},
            "colors": {"gradientEnabled": False},
        }},
    })
    block = make_block(style=style)
    desktop = compose_style(block, "desktop").declarations
    assert "box-shadow" in desktop
    assert desktop["background"] == "linear-gradient(to right, #000, #fff)"
    mobile = compose_style(block, "mobile").declarations
    assert "box-shadow" not in mobile
    assert "background" not in mobile


def test_gradient_background():
    block = make_block(style=StyleOverlay.model_validate({"colors": {
        "gradientEnabled": True, "gradientStart": "#000", "gradientEnd": "#fff",
        "backgroundColor": "#123456",
    }}))
    decl = compose_style(block).declarations
    assert decl["background"] == "linear-gradient(to right, #000, #fff)"
    assert "background-color" not in decl


def test_spacing_border_shadow():
    block = make_block(style=StyleOverlay.model_validate({
        "spacing": {"padding": {"top": "10px", "bottom": "inherit"}, "gap": "8px"},
        "border": {"style": "solid", "width": "1px", "color": "#ccc"},
        "shadow": {"enabled": True, "blur": "12px"},
    }))
    decl = compose_style(block).declarations
    assert decl["padding-top"] == "10px"
    assert "padding-bottom" not in decl
    assert decl["gap"] == "8px"
    assert decl["border-style"] == "solid"
    assert decl["box-shadow"] == "0 4px 12px 0 rgba(0,0,0,0.1)"


def test_parse_custom_css_ignores_garbage():
    assert parse_custom_css("color: red;; nonsense ; : x; Margin-Top : 4px") == {
        "color": "red", "margin-top": "4px",
    }
