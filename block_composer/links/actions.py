"""
Comportement runtime au clic — distinct de la résolution du href.

handle_click() pilote un ClickRuntime (navigateur, webview, harnais de test) ;
onclick_script() produit l'équivalent JS inline pour le HTML publié.
Aucune des deux ne lève : un échec (ancre absente, script en erreur) est
journalisé et remonté dans le ClickOutcome, la page reste interactive.
"""
import json
import logging
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from ..config import Settings, get_settings
from .resolver import _coerce, resolve_href

log = logging.getLogger(__name__)


@runtime_checkable
class ClickRuntime(Protocol):
    scroll_y: float

    def navigate(self, href: str, new_tab: bool = False) -> None: ...
    def element_top(self, element_id: str) -> Optional[float]: ...
    def scroll_to(self, top: float, smooth: bool = True) -> None: ...
    def modal(self, modal_id: str, action: str) -> None: ...
    def run_script(self, body: str) -> None: ...


class ClickOutcome(BaseModel):
    kind: str
    prevented_default: bool = False
    href: Optional[str] = None
    error: Optional[str] = None


def handle_click(link: Any, runtime: ClickRuntime, settings: Optional[Settings] = None) -> ClickOutcome:
    """Exécute l'action d'un lien (fire-and-forget, le résultat n'est pas suivi)."""
    settings = settings or get_settings()
    desc = _coerce(link)
    if desc is None or desc.kind == "none":
        return ClickOutcome(kind="none")

    kind = desc.kind
    try:
        if kind == "scroll":
            return _scroll(desc, runtime, settings)
        if kind == "modal":
            if not desc.modal_id:
                return ClickOutcome(kind=kind, prevented_default=True, error="modal id missing")
            runtime.modal(desc.modal_id, desc.action)
            return ClickOutcome(kind=kind, prevented_default=True)
        if kind == "script":
            return _script(desc, runtime, settings)

        href = resolve_href(desc)
        new_tab = bool(getattr(desc, "new_tab", False))
        runtime.navigate(href, new_tab=new_tab)
        return ClickOutcome(kind=kind, href=href)
    except Exception as e:
        log.warning("Action de lien %s en échec : %s", kind, e)
        return ClickOutcome(kind=kind, prevented_default=True, error=str(e))


def _scroll(desc, runtime: ClickRuntime, settings: Settings) -> ClickOutcome:
    anchor = desc.anchor_id.lstrip("#")
    top = runtime.element_top(anchor) if anchor else None
    if top is None:
        log.warning("Cible de scroll introuvable : %r", anchor)
        return ClickOutcome(kind="scroll", prevented_default=True, error=f"anchor not found: {anchor}")
    target = top + runtime.scroll_y - _offset(desc, settings)
    runtime.scroll_to(target, smooth=desc.smooth_scroll)
    return ClickOutcome(kind="scroll", prevented_default=True, href=f"#{anchor}")


def _offset(desc, settings: Settings) -> int:
    if desc.scroll_offset_px is None:
        return settings.default_scroll_offset
    return desc.scroll_offset_px


def _script(desc, runtime: ClickRuntime, settings: Settings) -> ClickOutcome:
    if not settings.allow_scripts:
        log.warning("Lien script ignoré (BLOCK_COMPOSER_ALLOW_SCRIPTS désactivé)")
        return ClickOutcome(kind="script", prevented_default=True, error="script links are disabled")
    if not desc.script_body:
        return ClickOutcome(kind="script", prevented_default=True)
    try:
        runtime.run_script(desc.script_body)
    except Exception as e:
        log.exception("Script de lien en erreur")
        return ClickOutcome(kind="script", prevented_default=True, error=str(e))
    return ClickOutcome(kind="script", prevented_default=True)


# ── Équivalent JS pour le rendu HTML ────────────────────────────────────────

def onclick_script(link: Any, settings: Optional[Settings] = None) -> Optional[str]:
    """Handler onclick inline (non échappé) ou None si navigation standard."""
    settings = settings or get_settings()
    desc = _coerce(link)
    if desc is None:
        return None

    if desc.kind == "scroll":
        anchor = desc.anchor_id.lstrip("#")
        if not anchor:
            return None
        behavior = "smooth" if desc.smooth_scroll else "auto"
        return (
            "event.preventDefault();"
            f"var el=document.getElementById({json.dumps(anchor)});"
            f"if(el){{window.scrollTo({{top:el.getBoundingClientRect().top+window.scrollY-{_offset(desc, settings)},"
            f"behavior:'{behavior}'}});}}"
        )
    if desc.kind == "modal":
        detail = json.dumps({"id": desc.modal_id, "action": desc.action})
        return (
            "event.preventDefault();"
            f"document.dispatchEvent(new CustomEvent('block-composer:modal',{{detail:{detail}}}));"
        )
    if desc.kind == "script":
        if not settings.allow_scripts or not desc.script_body:
            return "event.preventDefault();"
        return (
            "event.preventDefault();"
            f"try{{{desc.script_body}}}catch(err){{console.error('Link script error:',err);}}"
        )
    return None
