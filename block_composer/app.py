"""
block_composer — FastAPI app
Démarrer : uvicorn block_composer.app:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .registry import REGISTRY
from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s — %(message)s")

    app = FastAPI(title="block_composer — Composition de blocs", version=__version__, docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__, "block_types": len(REGISTRY)}

    log.info("block_composer %s — %d types de blocs, scripts %s",
             __version__, len(REGISTRY), "activés" if settings.allow_scripts else "désactivés")
    return app


app = create_app()
