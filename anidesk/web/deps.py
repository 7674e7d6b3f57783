"""
Dépendances partagées de l'application web.

Le container est porté par app.state : les routes le reçoivent via
Depends au lieu d'importer un objet global.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from ..config import Settings
from ..container import Container
from ..services.catalog import CatalogService


def get_container(request: Request) -> Container:
    """Container créé au démarrage de l'application."""
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    """Configuration de l'application."""
    return container.config()


def get_catalog_service(container: Container = Depends(get_container)) -> CatalogService:
    """Service catalogue (nouvelle instance par requête)."""
    return container.catalog_service()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Enveloppe d'erreur {success: false, error}."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})
