"""
Renderer HTML — génère le document complet d'une Page.
"""
import html
from typing import Any, Optional

from ..config import Settings
from ..page import Page
from ..theme import Theme
from .base import RenderedNode
from .css import generate_page_css
from .dispatcher import render_block, render_blocks


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(
    page: Page,
    theme: Any = None,
    viewport: str = "desktop",
    editing: bool = False,
    show_indicators: bool = False,
    settings: Optional[Settings] = None,
    lang: str = "en",
    extra_head: str = "",
    extra_body_end: str = "",
) -> str:
    """Génère le HTML complet d'une page."""
    theme = Theme.coerce(theme)
    nodes = render_blocks(
        page.blocks, theme,
        viewport=viewport, editing=editing,
        show_indicator=show_indicators, settings=settings,
    )
    effects = [effect for n in nodes for effect in n.effects]
    css = generate_page_css(theme, effects)
    blocks_html = "\n".join(n.html for n in nodes)

    font_url = theme.token("font_google_url", "")
    font_link = (f'<link rel="preconnect" href="https://fonts.googleapis.com">\n'
                 f'  <link rel="stylesheet" href="{html.escape(font_url)}">') if font_url else ""
    body_class = ' class="editing"' if editing else ""

    return f"""<!DOCTYPE html>
<html lang="{html.escape(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{html.escape(page.name)}</title>
  {font_link}
  <style>{css}</style>
  {extra_head}
</head>
<body{body_class} data-page-id="{html.escape(page.id)}" data-viewport="{html.escape(viewport)}">
<main>
{blocks_html}
</main>
{extra_body_end}
</body>
</html>"""


class HtmlRenderer:
    """Renderer de page HTML paramétré (viewport, mode édition, settings)."""

    def __init__(self, viewport: str = "desktop", editing: bool = False,
                 show_indicators: bool = False, settings: Optional[Settings] = None):
        self.viewport = viewport
        self.editing = editing
        self.show_indicators = show_indicators
        self.settings = settings

    def render_page(self, page: Page, theme: Any = None) -> str:
        return render_page(page, theme, viewport=self.viewport, editing=self.editing,
                           show_indicators=self.show_indicators, settings=self.settings)

    def render_block(self, block, theme: Any = None) -> RenderedNode:
        return render_block(block, theme, viewport=self.viewport, editing=self.editing,
                            show_indicator=self.show_indicators, settings=self.settings)
