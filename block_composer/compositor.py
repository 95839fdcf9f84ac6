"""
Compositeur style/animation — block → RenderStyle.

Ordre fixe :
  1. style vide
  2. animation (si kind != none) — fill-mode "both"
  3. overlay de style (+ surcharge responsive du viewport), "inherit" = on saute
  4. custom_css en dernier
Le style custom peut donc toujours écraser une propriété issue de l'animation,
jamais l'inverse.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .blocks.animation import EASING_CURVES, AnimationOverlay
from .blocks.models import Block
from .blocks.style import INHERIT, StyleOverlay, TypographyStyle
from .theme import base_declarations


class RenderStyle(BaseModel):
    declarations: Dict[str, str] = Field(default_factory=dict)
    class_names: List[str] = Field(default_factory=list)
    effect_name: Optional[str] = None

    def css(self) -> str:
        """Style inline : "prop:valeur;prop:valeur"."""
        return ";".join(f"{prop}:{value}" for prop, value in self.declarations.items())

    def resolve(self, theme: Any) -> Dict[str, str]:
        """Déclarations effectives : tokens de base du thème, puis celles du bloc."""
        resolved = base_declarations(theme)
        resolved.update(self.declarations)
        return resolved


def _set(css: Dict[str, str], prop: str, value: Any, skip: tuple = ()):
    """Pose une déclaration sauf valeur vide, "inherit" ou explicitement ignorée."""
    if value is None or value == "":
        return
    value = str(value)
    if value == INHERIT or value in skip:
        return
    css[prop] = value


def _animation(css: Dict[str, str], anim: AnimationOverlay):
    css["animation-name"] = f"anim-{anim.kind}"
    css["animation-duration"] = f"{anim.duration_ms}ms"
    css["animation-delay"] = f"{anim.delay_ms}ms"
    css["animation-timing-function"] = EASING_CURVES.get(anim.easing, "ease")
    css["animation-fill-mode"] = "both"


def _typography(css: Dict[str, str], t: TypographyStyle):
    _set(css, "font-family", t.font_family)
    _set(css, "font-size", t.font_size)
    _set(css, "font-weight", t.font_weight)
    _set(css, "font-style", t.font_style)
    _set(css, "line-height", t.line_height)
    _set(css, "letter-spacing", t.letter_spacing)
    _set(css, "text-transform", t.text_transform, skip=("none",))
    _set(css, "text-decoration", t.text_decoration, skip=("none",))
    _set(css, "text-align", t.text_align)


def _style(css: Dict[str, str], style: StyleOverlay):
    if style.typography:
        _typography(css, style.typography)

    c = style.colors
    if c:
        if c.gradient_enabled and c.gradient_start and c.gradient_end:
            direction = c.gradient_direction or "to right"
            css["background"] = f"linear-gradient({direction}, {c.gradient_start}, {c.gradient_end})"
        else:
            _set(css, "background-color", c.background_color, skip=("transparent",))
        _set(css, "color", c.text_color)
        _set(css, "--heading-color", c.heading_color)
        _set(css, "--accent-color", c.accent_color)

    sp = style.spacing
    if sp:
        for box in ("margin", "padding"):
            value = getattr(sp, box)
            if value is None:
                continue
            for side in ("top", "right", "bottom", "left"):
                _set(css, f"{box}-{side}", getattr(value, side))
        _set(css, "gap", sp.gap)

    b = style.border
    if b:
        if b.style and b.style not in ("none", INHERIT):
            _set(css, "border-width", b.width)
            css["border-style"] = b.style
            _set(css, "border-color", b.color)
        _set(css, "border-radius", b.radius)

    sh = style.shadow
    if sh and sh.enabled:
        inset = "inset " if sh.inset else ""
        css["box-shadow"] = (
            f"{inset}{sh.x or '0'} {sh.y or '4px'} {sh.blur or '6px'} "
            f"{sh.spread or '0'} {sh.color or 'rgba(0,0,0,0.1)'}"
        )

    lay = style.layout
    if lay:
        _set(css, "display", lay.display)
        _set(css, "flex-direction", lay.flex_direction)
        _set(css, "justify-content", lay.justify_content)
        _set(css, "align-items", lay.align_items)
        _set(css, "width", lay.width)
        _set(css, "max-width", lay.max_width, skip=("none",))
        _set(css, "min-width", lay.min_width)
        _set(css, "height", lay.height, skip=("auto",))
        _set(css, "max-height", lay.max_height)
        _set(css, "min-height", lay.min_height, skip=("0",))
        _set(css, "overflow", lay.overflow, skip=("visible",))
        _set(css, "position", lay.position)
        _set(css, "z-index", lay.z_index)


def parse_custom_css(raw: Optional[str]) -> Dict[str, str]:
    """ "a: b; c: d" → {"a": "b", "c": "d"} — les fragments sans ":" sont ignorés."""
    out: Dict[str, str] = {}
    for chunk in (raw or "").split(";"):
        prop, sep, value = chunk.partition(":")
        prop, value = prop.strip().lower(), value.strip()
        if sep and prop and value:
            out[prop] = value
    return out


def compose_style(block: Block, viewport: Optional[str] = None) -> RenderStyle:
    """Style unique passé au renderer. Pur et déterministe."""
    css: Dict[str, str] = {}
    classes: List[str] = []
    effect = None

    anim = block.animation
    if anim is not None and anim.kind != "none":
        _animation(css, anim)
        effect = anim.kind
        classes.append(f"animate-{anim.kind}")

    if block.style is not None:
        style = block.style.for_viewport(viewport)
        _style(css, style)
        css.update(parse_custom_css(style.custom_css))
        if style.custom_class:
            classes.extend(style.custom_class.split())

    return RenderStyle(declarations=css, class_names=classes, effect_name=effect)
