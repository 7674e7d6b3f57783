"""
Routes du catalogue : listes, recherche, fiche et genres.

Chaque route fait une seule passe recuperation + extraction. Tout echec
interne donne une enveloppe d'erreur 500 avec un message fixe ; le detail
n'est ecrit que dans les logs.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from loguru import logger

from ...core.errors import InvalidAnimeIdError
from ...services.catalog import CatalogService
from ..deps import error_response, get_catalog_service
from ..schemas import (
    AnimeDetailsSchema,
    AnimeSummarySchema,
    Envelope,
    GenreSchema,
    SearchPageSchema,
)

router = APIRouter()

_ENVELOPE_OPTIONS = {"response_model_exclude_none": True}


def _summaries(items) -> Envelope[list[AnimeSummarySchema]]:
    return Envelope[list[AnimeSummarySchema]](
        success=True, data=[AnimeSummarySchema.from_entity(item) for item in items]
    )


@router.get("/trending", response_model=Envelope[list[AnimeSummarySchema]], **_ENVELOPE_OPTIONS)
async def trending(catalog: CatalogService = Depends(get_catalog_service)):
    """Animes tendance (12 au plus)."""
    try:
        items = await catalog.trending()
    except Exception:
        logger.exception("Echec de recuperation des tendances")
        return error_response(500, "Failed to fetch trending anime")
    return _summaries(items)


@router.get("/search", response_model=Envelope[SearchPageSchema], **_ENVELOPE_OPTIONS)
async def search(
    q: Optional[str] = Query(default=None, description="Texte recherche"),
    page: int = Query(default=1, ge=1, description="Numero de page"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Recherche par mot-cle avec pagination deduite."""
    if not q or not q.strip():
        return error_response(400, "Query parameter is required")
    try:
        result = await catalog.search(q, page=page)
    except Exception:
        logger.exception("Echec de la recherche", query=q, page=page)
        return error_response(500, "Failed to search anime")
    return Envelope[SearchPageSchema](success=True, data=SearchPageSchema.from_entity(result))


@router.get("/anime/{anime_id}", response_model=Envelope[AnimeDetailsSchema], **_ENVELOPE_OPTIONS)
async def anime_details(anime_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    """Fiche detaillee d'un anime."""
    try:
        details = await catalog.anime_details(anime_id)
    except InvalidAnimeIdError:
        logger.info("Identifiant refuse", anime_id=anime_id)
        return error_response(400, "Invalid anime id")
    except Exception:
        logger.exception("Echec de recuperation de la fiche", anime_id=anime_id)
        return error_response(500, "Failed to fetch anime details")
    return Envelope[AnimeDetailsSchema](success=True, data=AnimeDetailsSchema.from_entity(details))


@router.get("/recent-episodes", response_model=Envelope[list[AnimeSummarySchema]], **_ENVELOPE_OPTIONS)
async def recent_episodes(catalog: CatalogService = Depends(get_catalog_service)):
    """Derniers episodes (20 au plus)."""
    try:
        items = await catalog.recent_episodes()
    except Exception:
        logger.exception("Echec de recuperation des derniers episodes")
        return error_response(500, "Failed to fetch recent episodes")
    return _summaries(items)


@router.get("/popular", response_model=Envelope[list[AnimeSummarySchema]], **_ENVELOPE_OPTIONS)
async def popular(catalog: CatalogService = Depends(get_catalog_service)):
    """Animes les plus populaires (20 au plus)."""
    try:
        items = await catalog.popular()
    except Exception:
        logger.exception("Echec de recuperation des animes populaires")
        return error_response(500, "Failed to fetch popular anime")
    return _summaries(items)


@router.get("/genres", response_model=Envelope[list[GenreSchema]], **_ENVELOPE_OPTIONS)
async def genres(catalog: CatalogService = Depends(get_catalog_service)):
    """Liste des genres."""
    try:
        items = await catalog.genres()
    except Exception:
        logger.exception("Echec de recuperation des genres")
        return error_response(500, "Failed to fetch genres")
    return Envelope[list[GenreSchema]](
        success=True, data=[GenreSchema.from_entity(item) for item in items]
    )
