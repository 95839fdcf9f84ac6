"""
Bloc — unité plaçable d'une page.

Les edits remplacent un champ entier (props, link, visibility, animation,
style) ; un bloc n'est jamais muté partiellement en place.
"""
import uuid
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..links.models import LinkDescriptor
from .animation import AnimationOverlay
from .style import StyleOverlay

Viewport = Literal["desktop", "tablet", "mobile"]
VIEWPORTS: tuple = Viewport.__args__


def new_block_id() -> str:
    return f"block-{uuid.uuid4().hex[:12]}"


class BlockVisibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    desktop: bool = True
    tablet: bool = True
    mobile: bool = True

    def is_visible(self, viewport: str) -> bool:
        return bool(getattr(self, viewport, True))

    def toggled(self, viewport: str) -> "BlockVisibility":
        return self.model_copy(update={viewport: not self.is_visible(viewport)})


class Block(BaseModel):
    """
    id     : unique dans sa page / son expansion de template
    type   : tag du Block Type Registry (un type inconnu reste chargeable)
    props  : record libre dont la forme dépend du type
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_block_id)
    type: str
    props: Dict[str, Any] = Field(default_factory=dict)
    link: Optional[LinkDescriptor] = None
    visibility: Optional[BlockVisibility] = None
    animation: Optional[AnimationOverlay] = None
    style: Optional[StyleOverlay] = None

    def is_visible(self, viewport: str) -> bool:
        return self.visibility is None or self.visibility.is_visible(viewport)

    def to_data(self) -> Dict[str, Any]:
        """Forme JSON (clés camelCase) pour la couche de persistance."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
