"""
Thème — tokens fournis par le theme provider (record opaque en lecture seule).

Le composer ne lit que quelques tokens de base (couleurs, typo, rayon) ;
tout champ supplémentaire est conservé tel quel pour les renderers.
Dérive aussi le bloc :root { --var: ... } de la page publiée.
"""
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class Theme(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    primary_color: str = "#3b82f6"
    secondary_color: str = "#8b5cf6"
    text_color: str = "#2d3748"
    heading_color: str = "#1a202c"
    background_color: str = "#ffffff"
    accent_color: str = "#f59e0b"
    font_family: str = "Inter, sans-serif"
    heading_font_family: str = "Inter, sans-serif"
    font_size_base: int = 16
    line_height_base: float = 1.6
    border_radius: str = "8px"

    @classmethod
    def coerce(cls, theme: Any) -> "Theme":
        """Theme, dict ou None → Theme (valeurs par défaut si invalide)."""
        if isinstance(theme, Theme):
            return theme
        if isinstance(theme, Mapping):
            try:
                return cls.model_validate(dict(theme))
            except ValidationError:
                return cls()
        return cls()

    def token(self, name: str, default: Optional[str] = None) -> Any:
        return getattr(self, name, default)


# Propriété CSS → token du thème qui la fournit quand l'overlay dit "inherit"
THEME_BASE_PROPERTIES: Dict[str, str] = {
    "color":            "text_color",
    "background-color": "background_color",
    "font-family":      "font_family",
    "border-radius":    "border_radius",
}


def base_declarations(theme: Any) -> Dict[str, str]:
    t = Theme.coerce(theme)
    return {prop: str(t.token(name)) for prop, name in THEME_BASE_PROPERTIES.items()}


# ── Dérivation couleurs ─────────────────────────────────────────────────────

def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convertit #RRGGBB (ou #RGB) en (R, G, B)."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def lighten(hex_color: str, percent: int = 20) -> str:
    """Éclaircit une couleur de X% (couleur non-hex retournée telle quelle)."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return hex_color
    factor = 1 + (percent / 100)
    return f"#{min(255, int(r * factor)):02x}{min(255, int(g * factor)):02x}{min(255, int(b * factor)):02x}"


def darken(hex_color: str, percent: int = 20) -> str:
    """Assombrit une couleur de X% (couleur non-hex retournée telle quelle)."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return hex_color
    factor = 1 - (percent / 100)
    return f"#{max(0, int(r * factor)):02x}{max(0, int(g * factor)):02x}{max(0, int(b * factor)):02x}"


def generate_css_variables(theme: Any) -> str:
    """Bloc :root {} de la page publiée, dérivé des tokens du thème."""
    t = Theme.coerce(theme)
    base = t.font_size_base

    return f""":root {{
  --color-primary: {t.primary_color};
  --color-primary-light: {lighten(t.primary_color, 15)};
  --color-primary-dark: {darken(t.primary_color, 15)};
  --color-secondary: {t.secondary_color};
  --color-accent: {t.accent_color};
  --color-text: {t.text_color};
  --color-heading: {t.heading_color};
  --color-bg: {t.background_color};
  --color-bg-gray: #f7fafc;
  --color-border: #e2e8f0;
  --font-family-base: {t.font_family};
  --font-family-headings: {t.heading_font_family};
  --font-size-sm: {round(base * 0.875)}px;
  --font-size-md: {base}px;
  --font-size-lg: {round(base * 1.125)}px;
  --font-size-2xl: {round(base * 1.5)}px;
  --font-size-4xl: {round(base * 2.25)}px;
  --line-height-base: {t.line_height_base};
  --border-radius-md: {t.border_radius};
  --shadow-md: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
  --transition-base: 200ms cubic-bezier(0.4, 0, 0.2, 1);
}}"""
