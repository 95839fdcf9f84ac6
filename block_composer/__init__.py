"""
block_composer — composition déclarative de blocs + résolution de liens.

Usage (template → HTML):
    >>> from block_composer import Page, get_template, render_page
    >>> page = Page(name="Accueil", slug="")
    >>> page.load_template(get_template("landing"))
    >>> html = render_page(page, theme={"primary_color": "#0ea5e9"})

Usage (liens):
    >>> from block_composer import parse_link, resolve_href, validate
    >>> validate("a@b.co", "email").valid
    True
    >>> resolve_href(parse_link({"kind": "scroll", "anchorId": "pricing"}))
    '#pricing'
"""

# ── Liens ───────────────────────────────────────────────────────────────────
from .links import (
    LinkDescriptor, LINK_KINDS, LINK_KIND_CONFIGS, SOCIAL_PLATFORMS,
    NoLink, InternalLink, ExternalLink, AnchorLink, ScrollLink, EmailLink,
    PhoneLink, SmsLink, DownloadLink, ModalLink, SocialLink, ScriptLink,
    parse_link, validate, resolve_href, link_attributes, describe,
    PLACEHOLDER_HREF, ValidationResult,
    ClickRuntime, ClickOutcome, handle_click, onclick_script,
)

# ── Blocs ───────────────────────────────────────────────────────────────────
from .blocks import (
    Block, BlockVisibility, VIEWPORTS, new_block_id,
    AnimationOverlay, ANIMATION_PRESETS, from_preset,
    StyleOverlay, INHERIT,
)
from .compositor import RenderStyle, compose_style
from .registry import REGISTRY, BlockTypeEntry, BlockTypeRegistry, get_registry
from .templates import PAGE_TEMPLATES, PageTemplate, TemplateEntry, expand, get_template
from .page import Page, export_block, export_blocks, import_block, import_blocks

# ── Rendu ───────────────────────────────────────────────────────────────────
from .theme import Theme
from .renderer import RenderedNode, render_block, render_blocks, render_page, HtmlRenderer

# ── Config / erreurs ────────────────────────────────────────────────────────
from .config import Settings, get_settings, reset_settings
from .errors import BlockComposerError, RegistryError, BlockNotFoundError, UnknownTemplateError

__version__ = "0.1.0"

__all__ = [
    # liens
    "LinkDescriptor", "LINK_KINDS", "LINK_KIND_CONFIGS", "SOCIAL_PLATFORMS",
    "NoLink", "InternalLink", "ExternalLink", "AnchorLink", "ScrollLink", "EmailLink",
    "PhoneLink", "SmsLink", "DownloadLink", "ModalLink", "SocialLink", "ScriptLink",
    "parse_link", "validate", "resolve_href", "link_attributes", "describe",
    "PLACEHOLDER_HREF", "ValidationResult",
    "ClickRuntime", "ClickOutcome", "handle_click", "onclick_script",
    # blocs
    "Block", "BlockVisibility", "VIEWPORTS", "new_block_id",
    "AnimationOverlay", "ANIMATION_PRESETS", "from_preset",
    "StyleOverlay", "INHERIT",
    "RenderStyle", "compose_style",
    "REGISTRY", "BlockTypeEntry", "BlockTypeRegistry", "get_registry",
    "PAGE_TEMPLATES", "PageTemplate", "TemplateEntry", "expand", "get_template",
    "Page", "export_block", "export_blocks", "import_block", "import_blocks",
    # rendu
    "Theme", "RenderedNode", "render_block", "render_blocks", "render_page", "HtmlRenderer",
    # config / erreurs
    "Settings", "get_settings", "reset_settings",
    "BlockComposerError", "RegistryError", "BlockNotFoundError", "UnknownTemplateError",
]
