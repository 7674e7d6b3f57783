"""
Application FastAPI d'AniDesk.

Construit l'application autour d'un Container DI explicite, configure
CORS, la journalisation des requêtes, les gestionnaires d'erreurs et
monte les routes.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .. import __version__
from ..container import Container
from .deps import error_response
from .routes.catalog import router as catalog_router
from .routes.episodes import router as episodes_router
from .routes.health import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ferme le client HTTP amont à l'arrêt."""
    container: Container = app.state.container
    logger.info("Démarrage de l'API", upstream=container.config().upstream_base_url)
    yield
    await container.page_fetcher().close()
    logger.info("API arrêtée")


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Crée l'application web.

    Args:
        container: Container à utiliser (un nouveau Container par défaut).
            Les tests passent un container dont le page_fetcher est remplacé.

    Returns:
        Application FastAPI prête à servir
    """
    container = container or Container()
    settings = container.config()

    app = FastAPI(title=settings.service_name, version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Journalise chaque requête (méthode, chemin, statut, durée)."""
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Requête traitée",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 1),
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Paramètres invalides : erreur client 400."""
        logger.info("Paramètres invalides", path=request.url.path, errors=str(exc.errors()))
        return error_response(400, "Invalid request parameters")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Toute erreur non gérée : 500 générique, détail dans les logs."""
        logger.opt(exception=exc).error(
            "Erreur non gérée", method=request.method, path=request.url.path
        )
        return error_response(500, "Internal server error")

    # Routes
    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(episodes_router)

    return app
