"""Blocs — modèle, overlays d'animation et de style."""
from .models import Block, BlockVisibility, Viewport, VIEWPORTS, new_block_id
from .animation import (
    AnimationOverlay, AnimationKind, AnimationPreset,
    ANIMATION_PRESETS, EASING_CURVES, from_preset,
)
from .style import (
    INHERIT, StyleOverlay, TypographyStyle, ColorStyle, SpacingValue,
    SpacingStyle, BorderStyle, ShadowStyle, LayoutStyle,
)

__all__ = [
    "Block", "BlockVisibility", "Viewport", "VIEWPORTS", "new_block_id",
    "AnimationOverlay", "AnimationKind", "AnimationPreset",
    "ANIMATION_PRESETS", "EASING_CURVES", "from_preset",
    "INHERIT", "StyleOverlay", "TypographyStyle", "ColorStyle", "SpacingValue",
    "SpacingStyle", "BorderStyle", "ShadowStyle", "LayoutStyle",
]
