"""Overlay d'animation + catalogue des presets."""
from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

AnimationKind = Literal[
    "none",
    # Fade
    "fadeIn", "fadeOut", "fadeInUp", "fadeInDown", "fadeInLeft", "fadeInRight",
    # Slide
    "slideUp", "slideDown", "slideLeft", "slideRight",
    # Zoom
    "zoomIn", "zoomOut", "zoomInUp", "zoomInDown",
    # Rotation
    "rotateIn", "rotateOut", "flipX", "flipY", "spin",
    # Bounce / elastic
    "bounce", "bounceIn", "bounceOut", "elastic", "rubberBand", "pulse",
    # Attention
    "shake", "wobble", "swing", "tada", "jello", "heartBeat",
    # Effets spéciaux
    "blur", "glow", "typewriter", "parallax", "morphing",
]

EasingName = Literal[
    "linear", "ease", "ease-in", "ease-out", "ease-in-out",
    "bounce", "elastic", "spring", "back", "circ",
    "expo-in", "expo-out", "expo-in-out",
]

EASING_CURVES: Dict[str, str] = {
    "linear":      "linear",
    "ease":        "ease",
    "ease-in":     "ease-in",
    "ease-out":    "ease-out",
    "ease-in-out": "ease-in-out",
    "bounce":      "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
    "elastic":     "cubic-bezier(0.68, -0.6, 0.32, 1.6)",
    "spring":      "cubic-bezier(0.175, 0.885, 0.32, 1.275)",
    "back":        "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
    "circ":        "cubic-bezier(0.075, 0.82, 0.165, 1)",
    "expo-in":     "cubic-bezier(0.95, 0.05, 0.795, 0.035)",
    "expo-out":    "cubic-bezier(0.19, 1, 0.22, 1)",
    "expo-in-out": "cubic-bezier(1, 0, 0, 1)",
}


class AnimationOverlay(BaseModel):
    """Animation d'un bloc. kind="none" → aucun effet de présentation."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    kind: AnimationKind = "none"
    duration_ms: int = Field(default=500, ge=0)
    delay_ms: int = Field(default=0, ge=0)
    easing: EasingName = "ease-out"


class AnimationPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: Literal["fade", "slide", "zoom", "rotate", "bounce", "attention", "special"]
    default_duration_ms: int
    default_easing: EasingName


def _p(id, name, category, duration, easing):
    return AnimationPreset(id=id, name=name, category=category,
                           default_duration_ms=duration, default_easing=easing)


ANIMATION_PRESETS: Dict[str, AnimationPreset] = {p.id: p for p in [
    _p("fadeIn",      "Fade In",       "fade",      500,  "ease-out"),
    _p("fadeOut",     "Fade Out",      "fade",      500,  "ease-in"),
    _p("fadeInUp",    "Fade In Up",    "fade",      600,  "ease-out"),
    _p("fadeInDown",  "Fade In Down",  "fade",      600,  "ease-out"),
    _p("fadeInLeft",  "Fade In Left",  "fade",      600,  "ease-out"),
    _p("fadeInRight", "Fade In Right", "fade",      600,  "ease-out"),
    _p("slideUp",     "Slide Up",      "slide",     500,  "ease-out"),
    _p("slideDown",   "Slide Down",    "slide",     500,  "ease-out"),
    _p("slideLeft",   "Slide Left",    "slide",     500,  "ease-out"),
    _p("slideRight",  "Slide Right",   "slide",     500,  "ease-out"),
    _p("zoomIn",      "Zoom In",       "zoom",      400,  "ease-out"),
    _p("zoomOut",     "Zoom Out",      "zoom",      400,  "ease-in"),
    _p("zoomInUp",    "Zoom In Up",    "zoom",      500,  "ease-out"),
    _p("zoomInDown",  "Zoom In Down",  "zoom",      500,  "ease-out"),
    _p("rotateIn",    "Rotate In",     "rotate",    600,  "ease-out"),
    _p("rotateOut",   "Rotate Out",    "rotate",    600,  "ease-in"),
    _p("flipX",       "Flip X",        "rotate",    700,  "ease-in-out"),
    _p("flipY",       "Flip Y",        "rotate",    700,  "ease-in-out"),
    _p("spin",        "Spin",          "rotate",    1000, "linear"),
    _p("bounce",      "Bounce",        "bounce",    800,  "bounce"),
    _p("bounceIn",    "Bounce In",     "bounce",    750,  "bounce"),
    _p("bounceOut",   "Bounce Out",    "bounce",    750,  "bounce"),
    _p("elastic",     "Elastic",       "bounce",    1000, "elastic"),
    _p("rubberBand",  "Rubber Band",   "bounce",    800,  "elastic"),
    _p("pulse",       "Pulse",         "bounce",    1000, "ease-in-out"),
    _p("shake",       "Shake",         "attention", 500,  "ease-in-out"),
    _p("wobble",      "Wobble",        "attention", 800,  "ease-in-out"),
    _p("swing",       "Swing",         "attention", 800,  "ease-in-out"),
    _p("tada",        "Tada",          "attention", 1000, "ease-in-out"),
    _p("jello",       "Jello",         "attention", 900,  "ease-in-out"),
    _p("heartBeat",   "Heart Beat",    "attention", 1300, "ease-in-out"),
    _p("blur",        "Blur Reveal",   "special",   600,  "ease-out"),
    _p("glow",        "Glow",          "special",   1500, "ease-in-out"),
    _p("typewriter",  "Typewriter",    "special",   2000, "linear"),
    _p("parallax",    "Parallax",      "special",   0,    "linear"),
    _p("morphing",    "Morphing",      "special",   800,  "ease-in-out"),
]}


def from_preset(kind: str, delay_ms: int = 0) -> AnimationOverlay:
    """Overlay pré-rempli avec la durée et l'easing par défaut du preset."""
    preset = ANIMATION_PRESETS.get(kind)
    if preset is None:
        return AnimationOverlay()
    return AnimationOverlay(
        kind=kind,
        duration_ms=preset.default_duration_ms,
        delay_ms=delay_ms,
        easing=preset.default_easing,
    )
