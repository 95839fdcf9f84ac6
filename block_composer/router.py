"""
Router FastAPI — endpoints block_composer.

POST /block-composer/render                 → Page + thème → HTMLResponse
POST /block-composer/links/validate         → {value, kind} → {valid, message?}
POST /block-composer/links/resolve          → {link} → {href, attributes, label, value}
GET  /block-composer/catalog                → types de blocs par catégorie, types de liens, animations
GET  /block-composer/templates              → templates de page disponibles
POST /block-composer/templates/{id}/expand  → blocs concrets (ids neufs)
"""
from typing import Any, Dict, Literal

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from .blocks.animation import ANIMATION_PRESETS
from .errors import UnknownTemplateError
from .links.models import LINK_KIND_CONFIGS, LinkDescriptor, SOCIAL_PLATFORMS
from .links.resolver import ValidationResult, describe, link_attributes, resolve_href, validate
from .page import Page
from .registry import CATEGORY_LABELS, REGISTRY
from .renderer.html import render_page
from .templates import PAGE_TEMPLATES, expand, get_template

router = APIRouter(prefix="/block-composer", tags=["block_composer"])


class RenderRequest(BaseModel):
    page: Page
    theme: Dict[str, Any] = Field(default_factory=dict)
    viewport: Literal["desktop", "tablet", "mobile"] = "desktop"
    editing: bool = False
    show_indicators: bool = False


class LinkValidateRequest(BaseModel):
    value: str = ""
    kind: str


class LinkResolveRequest(BaseModel):
    link: LinkDescriptor


@router.post("/render", response_class=HTMLResponse, summary="Rend une page en HTML")
def render(req: RenderRequest) -> HTMLResponse:
    """Reçoit une page (liste de blocs) et un thème, retourne le HTML complet."""
    html = render_page(req.page, req.theme, viewport=req.viewport,
                       editing=req.editing, show_indicators=req.show_indicators)
    return HTMLResponse(content=html)


@router.post("/links/validate", response_model=ValidationResult, summary="Valide une saisie de lien")
def validate_link(req: LinkValidateRequest) -> ValidationResult:
    return validate(req.value, req.kind)


@router.post("/links/resolve", summary="Résout un lien en href + attributs")
def resolve_link(req: LinkResolveRequest) -> dict:
    link = req.link
    label, value = describe(link)
    return {
        "kind": link.kind,
        "href": resolve_href(link),
        "attributes": link_attributes(link),
        "label": label,
        "value": value,
    }


@router.get("/catalog", summary="Catalogue des blocs, liens et animations")
def catalog() -> JSONResponse:
    """Menu d'ajout de bloc (par catégorie) + types de liens + presets d'animation."""
    menu = [
        {
            "category": category,
            "label": CATEGORY_LABELS.get(category, category),
            "blocks": [
                {"type": e.type, "label": e.label, "icon": e.icon, "editable": e.editable}
                for e in entries
            ],
        }
        for category, entries in REGISTRY.menu().items()
    ]
    return JSONResponse({
        "blocks": menu,
        "links": [cfg.model_dump() for cfg in LINK_KIND_CONFIGS.values()],
        "social_platforms": [p.model_dump() for p in SOCIAL_PLATFORMS],
        "animations": [p.model_dump() for p in ANIMATION_PRESETS.values()],
    })


@router.get("/templates", summary="Liste les templates de page")
def templates() -> JSONResponse:
    return JSONResponse({"templates": [
        {"id": t.id, "name": t.name, "description": t.description,
         "icon": t.icon, "blocks": len(t.blocks)}
        for t in PAGE_TEMPLATES
    ]})


@router.post("/templates/{template_id}/expand", summary="Instancie les blocs d'un template")
def expand_template(template_id: str) -> JSONResponse:
    try:
        template = get_template(template_id)
    except UnknownTemplateError as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    return JSONResponse({"template": template.id, "blocks": [b.to_data() for b in expand(template)]})
