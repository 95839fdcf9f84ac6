"""
Overlay de style d'un bloc — typographie, couleurs, espacements, bordures,
ombres, layout. Toute valeur "inherit" signifie : laisser le thème décider.
"""
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..utils import deep_merge

INHERIT = "inherit"


class _Section(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TypographyStyle(_Section):
    font_family: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    line_height: Optional[str] = None
    letter_spacing: Optional[str] = None
    text_transform: Optional[str] = None
    text_decoration: Optional[str] = None
    text_align: Optional[str] = None


class ColorStyle(_Section):
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    heading_color: Optional[str] = None
    accent_color: Optional[str] = None
    border_color: Optional[str] = None
    overlay_color: Optional[str] = None
    overlay_opacity: Optional[float] = None
    gradient_enabled: bool = False
    gradient_start: Optional[str] = None
    gradient_end: Optional[str] = None
    gradient_direction: Optional[str] = None


class SpacingValue(_Section):
    top: Optional[str] = None
    right: Optional[str] = None
    bottom: Optional[str] = None
    left: Optional[str] = None


class SpacingStyle(_Section):
    margin: Optional[SpacingValue] = None
    padding: Optional[SpacingValue] = None
    gap: Optional[str] = None


class BorderStyle(_Section):
    width: Optional[str] = None
    style: Optional[str] = None
    color: Optional[str] = None
    radius: Optional[str] = None


class ShadowStyle(_Section):
    enabled: bool = False
    x: Optional[str] = None
    y: Optional[str] = None
    blur: Optional[str] = None
    spread: Optional[str] = None
    color: Optional[str] = None
    inset: bool = False


class LayoutStyle(_Section):
    display: Optional[str] = None
    flex_direction: Optional[str] = None
    justify_content: Optional[str] = None
    align_items: Optional[str] = None
    width: Optional[str] = None
    max_width: Optional[str] = None
    min_width: Optional[str] = None
    height: Optional[str] = None
    max_height: Optional[str] = None
    min_height: Optional[str] = None
    overflow: Optional[str] = None
    position: Optional[str] = None
    z_index: Optional[int] = None


class StyleOverlay(_Section):
    typography: Optional[TypographyStyle] = None
    heading_typography: Optional[TypographyStyle] = None
    colors: Optional[ColorStyle] = None
    spacing: Optional[SpacingStyle] = None
    border: Optional[BorderStyle] = None
    shadow: Optional[ShadowStyle] = None
    layout: Optional[LayoutStyle] = None
    # Surcharges par viewport (desktop/tablet/mobile), fusionnées sur la base
    responsive: Dict[str, "StyleOverlay"] = {}
    custom_class: Optional[str] = None
    custom_css: Optional[str] = None

    def for_viewport(self, viewport: Optional[str]) -> "StyleOverlay":
        """Overlay effectif pour un viewport (base + surcharge responsive)."""
        override = self.responsive.get(viewport) if viewport else None
        if override is None:
            return self
        base = self.model_dump(exclude_none=True, exclude={"responsive"})
        patch = override.model_dump(exclude_none=True, exclude_unset=True, exclude={"responsive"})
        return StyleOverlay.model_validate(deep_merge(base, patch))


StyleOverlay.model_rebuild()
