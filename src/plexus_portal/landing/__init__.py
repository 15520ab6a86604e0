"""
Plexus Portal — Landing stranica

Jedan fiksni HTML dokument za svaki zahtjev (bilo koja putanja, bilo koja
metoda). Dokument se čita jednom, pri kreiranju aplikacije.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from plexus_portal.core.config import LandingConfig

logger = logging.getLogger("plexus_portal.landing")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(config: Optional[LandingConfig] = None) -> FastAPI:
    """Factory za landing aplikaciju."""
    config = config or LandingConfig.from_env()
    html = config.html_path.read_text(encoding="utf-8")
    logger.info("Landing stranica: %s (%d B)", config.html_path, len(html))

    app = FastAPI(title="Med&X Landing", docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/{full_path:path}", methods=ALL_METHODS, response_class=HTMLResponse)
    async def landing(full_path: str):
        return HTMLResponse(html, media_type="text/html; charset=utf-8")

    return app
