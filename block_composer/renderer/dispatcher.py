"""
Dispatcher — Block → RenderedNode.

Étapes :
  1. visibilité (édition → placeholder "Hidden on {viewport}" ; publié → hidden_policy)
  2. style composé (compositor)
  3. lookup registry → fallback "Unknown block type: {type}" si absent
  4. variante éditable inline si édition + type éditable
  5. renderer(props, theme) — ne voit ni link, ni style, ni visibilité
  6. conteneur : style, classe d'animation, contrôles d'édition, indicateur
     de lien, wrapper <a> en mode publié (<div data-href> si le contenu a ses propres liens)
Les blocs imbriqués (row) sont rendus via render_nested(), avec le viewport,
le mode et les settings du bloc parent.
Un renderer qui lève est isolé : placeholder d'erreur pour ce bloc seulement.
"""
import contextvars
import copy
import html
import json
import logging
from typing import Any, Iterable, List, Optional

from ..blocks.models import Block
from ..compositor import RenderStyle, compose_style
from ..config import Settings, get_settings
from ..links.models import LINK_KIND_CONFIGS
from ..links.resolver import describe, is_active, link_attributes, resolve_href
from ..links.actions import onclick_script
from ..registry import REGISTRY, BlockTypeRegistry
from ..theme import Theme
from .base import RenderedNode
from .blocks import EDITABLE_RENDERERS, RENDERERS

log = logging.getLogger(__name__)


class _RenderContext:
    """Contexte du bloc en cours de rendu, hérité par ses blocs imbriqués."""

    def __init__(self, viewport: str, editing: bool, show_indicator: bool,
                 settings: Settings, registry: BlockTypeRegistry):
        self.viewport = viewport
        self.editing = editing
        self.show_indicator = show_indicator
        self.settings = settings
        self.registry = registry
        self.effects: List[str] = []   # effets d'animation des blocs imbriqués


_CONTEXT: contextvars.ContextVar = contextvars.ContextVar("block_composer_render", default=None)

# (action, titre, glyphe) : ordre d'affichage de la barre de contrôles
CONTROLS = [
    ("move-up",           "Move Up",              "↑"),
    ("move-down",         "Move Down",            "↓"),
    ("duplicate",         "Duplicate Block",      "⧉"),
    ("copy",              "Copy to Clipboard",    "⎘"),
    ("toggle-visibility", "Toggle visibility on {viewport}", "👁"),
    ("delete",            "Delete",               "✕"),
]


def _esc(value: Any) -> str:
    return html.escape(str(value))


def _attrs(attrs: dict) -> str:
    out = []
    for name, value in attrs.items():
        if value is True:
            out.append(f" {name}")
        elif value not in (None, False):
            out.append(f' {name}="{_esc(value)}"')
    return "".join(out)


# ── Morceaux du conteneur ───────────────────────────────────────────────────

def _hidden_placeholder(block: Block, viewport: str) -> str:
    return (f'<div class="block block--hidden" data-block-id="{_esc(block.id)}">'
            f'<div class="block__hidden-label">Hidden on {_esc(viewport)}</div></div>')


def _unknown(block_type: str) -> str:
    return f'<div class="block__unknown">Unknown block type: {_esc(block_type)}</div>'


def _error(block_type: str) -> str:
    return f'<div class="block__error">Unable to render {_esc(block_type)} block</div>'


def _controls(block: Block, label: str, viewport: str) -> str:
    buttons = []
    for action, title, glyph in CONTROLS:
        if action == "toggle-visibility" and not block.is_visible(viewport):
            glyph = "⊘"
        buttons.append(
            f'<button type="button" data-action="{action}" data-block-id="{_esc(block.id)}" '
            f'title="{_esc(title.format(viewport=viewport))}">{glyph}</button>'
        )
    return (f'<div class="block__controls">{"".join(buttons)}</div>'
            f'<div class="block__label">{_esc(label)}</div>')


def _indicator(block: Block) -> str:
    label, value = describe(block.link)
    cfg = LINK_KIND_CONFIGS[block.link.kind]
    return (f'<div class="block__link-indicator link-indicator--{cfg.color}" '
            f'title="{_esc(cfg.description)}" data-link-kind="{cfg.kind}">'
            f'<span class="link-indicator__kind">{_esc(label)}</span> '
            f'<span class="link-indicator__value">{_esc(value or "")}</span></div>')


def _navigate_script(attrs: dict) -> str:
    # Un clic sur un lien interne au bloc garde sa propre navigation
    href = json.dumps(attrs["href"])
    if attrs.get("target") == "_blank":
        go = f"window.open({href},'_blank','noopener');"
    else:
        go = f"window.location.href={href};"
    return f"if(event.target.closest('a'))return;{go}"


def _link_wrapper(block: Block, content: str, settings: Settings) -> str:
    desc = block.link
    attrs = link_attributes(desc)
    script = onclick_script(desc, settings)
    extra = {"class": f"block__link link--hover-{desc.hover_effect}"}
    if desc.cursor_style != "pointer":
        extra["style"] = f"cursor:{desc.cursor_style}"

    if "<a " in content:
        # Pas de <a> imbriqués : <div> cliquable
        wrapper = {"data-href": attrs["href"], "role": "link", "tabindex": "0", **extra}
        if "data-track-label" in attrs:
            wrapper["data-track-label"] = attrs["data-track-label"]
        wrapper["onclick"] = script or _navigate_script(attrs)
        return f"<div{_attrs(wrapper)}>{content}</div>"

    attrs.update(extra)
    if script:
        attrs["onclick"] = script
    return f"<a{_attrs(attrs)}>{content}</a>"


def _container(block: Block, style: RenderStyle, inner: str, extra_classes: List[str]) -> str:
    classes = ["block", f"block--{block.type}", *extra_classes, *style.class_names]
    css = style.css()
    style_attr = f' style="{_esc(css)}"' if css else ""
    return (f'<div class="{_esc(" ".join(classes))}" data-block-id="{_esc(block.id)}"'
            f'{style_attr}>{inner}</div>')


# ── Point d'entrée ──────────────────────────────────────────────────────────

def render_block(
    block: Block,
    theme: Any = None,
    viewport: str = "desktop",
    editing: bool = False,
    show_indicator: bool = False,
    settings: Optional[Settings] = None,
    registry: BlockTypeRegistry = REGISTRY,
) -> RenderedNode:
    """Rend un bloc. Ne lève pas, quelles que soient les props ou le type."""
    settings = settings or get_settings()
    theme = Theme.coerce(theme)
    node = RenderedNode(block_id=block.id, block_type=block.type)

    # 1. Visibilité, avant le lookup : un bloc masqué de type inconnu reste masqué
    if not block.is_visible(viewport):
        node.hidden = True
        if editing:
            node.html = _hidden_placeholder(block, viewport)
        elif settings.hidden_policy == "omit":
            node.omitted = True
        else:
            node.html = f'<div class="block block--hidden" data-block-id="{_esc(block.id)}"></div>'
        return node

    # 2. Style
    style = compose_style(block, viewport)
    node.style = style

    # 3–5. Lookup + renderer
    entry = registry.get(block.type)
    fn = None
    if entry is not None:
        if editing and entry.editable:
            fn = EDITABLE_RENDERERS.get(block.type)
        fn = fn or RENDERERS.get(block.type)

    if fn is None:
        log.warning("Type de bloc inconnu : %r (bloc %s)", block.type, block.id)
        node.fallback = True
        content = _unknown(block.type)
    else:
        ctx = _RenderContext(viewport, editing, show_indicator, settings, registry)
        token = _CONTEXT.set(ctx)
        try:
            content = fn(copy.deepcopy(block.props), theme)
        except Exception:
            log.exception("Rendu du bloc %s (%s) en échec", block.id, block.type)
            node.degraded = True
            content = _error(block.type)
        finally:
            _CONTEXT.reset(token)
        node.effects.extend(ctx.effects)

    if style.effect_name:
        node.effects.insert(0, style.effect_name)

    # 6. Conteneur
    extra = []
    inner = ""
    if editing:
        extra.append("block--editing")
        inner += _controls(block, entry.label if entry else block.type, viewport)

    if is_active(block.link):
        node.href = resolve_href(block.link)
        if show_indicator:
            inner += _indicator(block)
        if not editing:
            content = _link_wrapper(block, content, settings)

    if node.fallback:
        extra.append("block--unknown")
    if node.degraded:
        extra.append("block--error")

    node.html = _container(block, style, inner + content, extra)
    return node


def render_blocks(blocks: Iterable[Block], theme: Any = None, **kwargs) -> List[RenderedNode]:
    """Rend une liste dans l'ordre ; les blocs omis (masqués en publié) disparaissent."""
    nodes = [render_block(block, theme, **kwargs) for block in blocks]
    return [n for n in nodes if not n.omitted]


def render_nested(blocks: Iterable[Block], theme: Any = None) -> List[RenderedNode]:
    """
    Rend les blocs imbriqués d'un renderer (colonnes d'une row) dans le
    contexte du bloc parent : viewport, mode édition, indicateurs, settings.
    Hors d'un rendu en cours, se comporte comme render_blocks().
    """
    ctx = _CONTEXT.get()
    if ctx is None:
        return render_blocks(blocks, theme)
    nodes = render_blocks(
        blocks, theme,
        viewport=ctx.viewport, editing=ctx.editing, show_indicator=ctx.show_indicator,
        settings=ctx.settings, registry=ctx.registry,
    )
    for node in nodes:
        ctx.effects.extend(node.effects)
    return nodes
