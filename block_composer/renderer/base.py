"""
Contrats du rendu — renderer par type de bloc, nœud rendu, renderer de page.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from ..compositor import RenderStyle
from ..theme import Theme


@runtime_checkable
class BlockRenderer(Protocol):
    """Renderer d'un type : ne voit que (props, theme), jamais link/style/visibility."""
    def __call__(self, props: Dict[str, Any], theme: Theme) -> str: ...


@runtime_checkable
class PageRenderer(Protocol):
    def render_page(self, page: Any, theme: Any = None) -> str: ...
    def render_block(self, block: Any, theme: Any = None) -> "RenderedNode": ...


class RenderedNode(BaseModel):
    block_id: str
    block_type: str
    html: str = ""
    hidden: bool = False      # masqué sur ce viewport
    omitted: bool = False     # absent de la sortie publiée
    fallback: bool = False    # type inconnu
    degraded: bool = False    # renderer en erreur, placeholder rendu
    href: Optional[str] = None
    style: Optional[RenderStyle] = None
    # effets d'animation du bloc et de ses blocs imbriqués (@keyframes à émettre)
    effects: List[str] = Field(default_factory=list)
