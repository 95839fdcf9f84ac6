"""
CSS de page — variables du thème + styles de base des blocs + keyframes.

Pipeline :
  generate_css_variables(theme)   →  :root { --color-primary: ...; ... }
  BASE_CSS                        →  reset + conteneur bloc + contrôles d'édition
  keyframes(effects)              →  @keyframes anim-<kind> des seuls effets utilisés
"""
from typing import Any, Dict, Iterable

from ..theme import generate_css_variables

BASE_CSS = """
*, *::before, *::after { box-sizing: border-box; }
body { margin: 0; font-family: var(--font-family-base); font-size: var(--font-size-md);
  line-height: var(--line-height-base); color: var(--color-text); background: var(--color-bg); }
h1, h2, h3, h4 { color: var(--color-heading); font-family: var(--font-family-headings); }
img { max-width: 100%; display: block; }
.block { position: relative; }
.block__link { display: block; color: inherit; text-decoration: none; }
.link--hover-underline:hover { text-decoration: underline; }
.link--hover-highlight:hover { background: rgba(59, 130, 246, 0.08); }
.link--hover-scale { transition: transform var(--transition-base); }
.link--hover-scale:hover { transform: scale(1.02); }
.block--editing { outline: 1px dashed transparent; }
.block--editing:hover { outline-color: var(--color-primary); }
.block__controls, .block__label { position: absolute; top: -12px; z-index: 10; opacity: 0;
  background: #1f2937; color: #d1d5db; border-radius: 6px; font-size: 12px; }
.block__controls { right: 8px; display: flex; gap: 4px; padding: 4px; }
.block__controls button { background: none; border: 0; color: inherit; cursor: pointer; }
.block__label { left: 8px; padding: 2px 8px; }
.block--editing:hover .block__controls, .block--editing:hover .block__label { opacity: 1; }
.block--hidden { opacity: .3; border: 1px dashed #6b7280; border-radius: 4px; padding: 8px; }
.block__hidden-label { font-size: 12px; color: #9ca3af; text-align: center; }
.block__unknown, .block__error { padding: 16px; border: 1px dashed #dc2626; color: #dc2626; }
.block__link-indicator { position: absolute; bottom: 4px; right: 4px; z-index: 10; font-size: 11px;
  padding: 2px 6px; border-radius: 4px; background: #111827; color: #f9fafb; }
.field-missing { opacity: .5; font-style: italic; }
.img-placeholder { background: var(--color-bg-gray); min-height: 120px; }
.btn { display: inline-block; padding: 10px 20px; border-radius: var(--border-radius-md); text-decoration: none; }
.btn--light { background: #fff; color: var(--color-primary); }
.hero { position: relative; background-size: cover; background-position: center; padding: 96px 24px; color: #fff; }
.hero__overlay { position: absolute; inset: 0; background: #000; }
.hero__content { position: relative; max-width: 960px; margin: 0 auto; }
.hero--center { text-align: center; }
.hero--right { text-align: right; }
.hero .hero__title, .cta .cta__heading, .sale-banner h2 { color: inherit; }
.cta, .sale-banner { padding: 64px 24px; text-align: center; color: #fff; }
.gallery, .features__grid, .product-grid, .course-grid, .categories, .course-categories { display: grid; gap: 24px; }
.pricing, .stats { display: flex; gap: 24px; justify-content: center; flex-wrap: wrap; }
.pricing__plan--highlighted { border: 2px solid var(--color-primary); }
.row { display: flex; flex-wrap: wrap; }
""".strip()

KEYFRAMES: Dict[str, str] = {
    "fadeIn":      "from { opacity: 0; } to { opacity: 1; }",
    "fadeOut":     "from { opacity: 1; } to { opacity: 0; }",
    "fadeInUp":    "from { opacity: 0; transform: translateY(30px); } to { opacity: 1; transform: none; }",
    "fadeInDown":  "from { opacity: 0; transform: translateY(-30px); } to { opacity: 1; transform: none; }",
    "fadeInLeft":  "from { opacity: 0; transform: translateX(-30px); } to { opacity: 1; transform: none; }",
    "fadeInRight": "from { opacity: 0; transform: translateX(30px); } to { opacity: 1; transform: none; }",
    "slideUp":     "from { transform: translateY(100%); } to { transform: none; }",
    "slideDown":   "from { transform: translateY(-100%); } to { transform: none; }",
    "slideLeft":   "from { transform: translateX(100%); } to { transform: none; }",
    "slideRight":  "from { transform: translateX(-100%); } to { transform: none; }",
    "zoomIn":      "from { opacity: 0; transform: scale(.5); } to { opacity: 1; transform: scale(1); }",
    "zoomOut":     "from { opacity: 1; transform: scale(1); } to { opacity: 0; transform: scale(.5); }",
    "zoomInUp":    "from { opacity: 0; transform: scale(.5) translateY(60px); } to { opacity: 1; transform: none; }",
    "zoomInDown":  "from { opacity: 0; transform: scale(.5) translateY(-60px); } to { opacity: 1; transform: none; }",
    "rotateIn":    "from { opacity: 0; transform: rotate(-200deg); } to { opacity: 1; transform: none; }",
    "rotateOut":   "from { opacity: 1; transform: none; } to { opacity: 0; transform: rotate(200deg); }",
    "flipX":       "from { transform: perspective(400px) rotateX(90deg); } to { transform: perspective(400px) rotateX(0); }",
    "flipY":       "from { transform: perspective(400px) rotateY(90deg); } to { transform: perspective(400px) rotateY(0); }",
    "spin":        "from { transform: rotate(0); } to { transform: rotate(360deg); }",
    "bounce":      "0%, 20%, 53%, 100% { transform: none; } 40% { transform: translateY(-30px); } 70% { transform: translateY(-15px); } 90% { transform: translateY(-4px); }",
    "bounceIn":    "0% { opacity: 0; transform: scale(.3); } 50% { opacity: 1; transform: scale(1.05); } 70% { transform: scale(.9); } 100% { transform: scale(1); }",
    "bounceOut":   "20% { transform: scale(.9); } 50% { opacity: 1; transform: scale(1.1); } 100% { opacity: 0; transform: scale(.3); }",
    "elastic":     "0% { transform: scale(0); } 55% { transform: scale(1.15); } 75% { transform: scale(.95); } 100% { transform: scale(1); }",
    "rubberBand":  "0%, 100% { transform: scale(1); } 30% { transform: scale(1.25, .75); } 40% { transform: scale(.75, 1.25); } 60% { transform: scale(1.15, .85); }",
    "pulse":       "0%, 100% { transform: scale(1); } 50% { transform: scale(1.05); }",
    "shake":       "0%, 100% { transform: none; } 20%, 60% { transform: translateX(-10px); } 40%, 80% { transform: translateX(10px); }",
    "wobble":      "0%, 100% { transform: none; } 15% { transform: translateX(-25%) rotate(-5deg); } 45% { transform: translateX(15%) rotate(3deg); } 75% { transform: translateX(-5%) rotate(-1deg); }",
    "swing":       "20% { transform: rotate(15deg); } 40% { transform: rotate(-10deg); } 60% { transform: rotate(5deg); } 80% { transform: rotate(-5deg); } 100% { transform: rotate(0); }",
    "tada":        "0%, 100% { transform: scale(1); } 10%, 20% { transform: scale(.9) rotate(-3deg); } 30%, 50%, 70%, 90% { transform: scale(1.1) rotate(3deg); } 40%, 60%, 80% { transform: scale(1.1) rotate(-3deg); }",
    "jello":       "0%, 100% { transform: none; } 30% { transform: skewX(-12.5deg) skewY(-12.5deg); } 50% { transform: skewX(6.25deg) skewY(6.25deg); } 70% { transform: skewX(-3deg) skewY(-3deg); }",
    "heartBeat":   "0%, 28%, 70% { transform: scale(1); } 14%, 42% { transform: scale(1.3); }",
    "blur":        "from { opacity: 0; filter: blur(12px); } to { opacity: 1; filter: blur(0); }",
    "glow":        "0%, 100% { box-shadow: 0 0 0 rgba(59, 130, 246, 0); } 50% { box-shadow: 0 0 24px rgba(59, 130, 246, .6); }",
    "typewriter":  "from { clip-path: inset(0 100% 0 0); } to { clip-path: inset(0 0 0 0); }",
    "parallax":    "from { transform: translateY(0); } to { transform: translateY(-20px); }",
    "morphing":    "0%, 100% { border-radius: 30% 70% 70% 30% / 30% 30% 70% 70%; } 50% { border-radius: 70% 30% 30% 70% / 70% 70% 30% 30%; }",
}


def keyframes(effects: Iterable[str]) -> str:
    """@keyframes des effets demandés (ordre stable, effets inconnus ignorés)."""
    seen = []
    for effect in effects:
        if effect in KEYFRAMES and effect not in seen:
            seen.append(effect)
    return "\n".join(f"@keyframes anim-{name} {{ {KEYFRAMES[name]} }}" for name in seen)


def generate_page_css(theme: Any, effects: Iterable[str] = ()) -> str:
    """CSS complet : variables du thème, styles de base, keyframes utilisées."""
    parts = [generate_css_variables(theme), BASE_CSS]
    frames = keyframes(effects)
    if frames:
        parts.append(frames)
    return "\n\n".join(parts)
