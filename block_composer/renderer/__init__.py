from .base import BlockRenderer, PageRenderer, RenderedNode
from .blocks import RENDERERS, EDITABLE_RENDERERS
from .dispatcher import render_block, render_blocks, render_nested
from .html import HtmlRenderer, render_page
from .css import generate_page_css, keyframes

__all__ = [
    "BlockRenderer", "PageRenderer", "RenderedNode",
    "RENDERERS", "EDITABLE_RENDERERS",
    "render_block", "render_blocks", "render_nested",
    "HtmlRenderer", "render_page",
    "generate_page_css", "keyframes",
]
