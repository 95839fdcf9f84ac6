"""
Configuration du block composer — lue depuis l'environnement.

BLOCK_COMPOSER_ALLOW_SCRIPTS   → active les liens "script" (désactivés par défaut)
BLOCK_COMPOSER_HIDDEN_POLICY   → "omit" | "empty" : blocs masqués en mode publié
BLOCK_COMPOSER_SCROLL_OFFSET   → offset par défaut des liens "scroll" (px)
BLOCK_COMPOSER_LOG_LEVEL       → niveau de log de l'app FastAPI
"""
import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field

HiddenPolicy = Literal["omit", "empty"]

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    allow_scripts: bool = False
    hidden_policy: HiddenPolicy = "omit"
    default_scroll_offset: int = Field(default=80, ge=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            allow_scripts=os.getenv("BLOCK_COMPOSER_ALLOW_SCRIPTS", "").strip().lower() in _TRUTHY,
            hidden_policy=os.getenv("BLOCK_COMPOSER_HIDDEN_POLICY", "omit").strip().lower(),
            default_scroll_offset=int(os.getenv("BLOCK_COMPOSER_SCROLL_OFFSET", "80")),
            log_level=os.getenv("BLOCK_COMPOSER_LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings du process (mis en cache — voir reset_settings)."""
    return Settings.from_env()


def reset_settings():
    """Vide le cache (tests, rechargement de config en dev)."""
    get_settings.cache_clear()
