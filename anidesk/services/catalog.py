"""
Service catalogue : composition recuperation + extraction.

Chaque operation fait une seule requete amont puis une seule passe
d'extraction. Aucun etat n'est conserve entre deux appels : pas de
cache, pas de relance.
"""

import re
from urllib.parse import quote

from loguru import logger

from anidesk.adapters.scraping.extractor import (
    extract_details,
    extract_genres,
    extract_list_items,
    parse_document,
    parse_pagination,
)
from anidesk.core.entities import AnimeDetails, AnimeSummary, Genre, SearchPage
from anidesk.core.errors import InvalidAnimeIdError
from anidesk.core.ports.scraper import IPageFetcher

TRENDING_LIMIT = 12
RECENT_LIMIT = 20
POPULAR_LIMIT = 20

HOME_PATH = "/home"
SEARCH_PATH = "/search"
POPULAR_PATH = "/most-popular"
GENRE_PATH = "/genre"

_ANIME_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
_ANIME_ID_MAX_LENGTH = 200


def validate_anime_id(anime_id: str) -> str:
    """
    Verifie qu'un identifiant peut etre place dans un chemin amont.

    Seuls lettres, chiffres, ".", "_" et "-" sont acceptes ; "/" "?" "#"
    et "%" sont refuses pour empecher de sortir du chemin prevu.

    Raises:
        InvalidAnimeIdError: Identifiant vide, trop long ou hors jeu de caracteres
    """
    if (
        not anime_id
        or len(anime_id) > _ANIME_ID_MAX_LENGTH
        or not _ANIME_ID_PATTERN.fullmatch(anime_id)
    ):
        raise InvalidAnimeIdError(anime_id)
    return anime_id


class CatalogService:
    """
    Operations en lecture seule sur le catalogue amont.

    Example:
        service = CatalogService(fetcher=HiAnimeFetcher(...))
        page = await service.search("naruto", page=2)
        print(page.pagination.has_next)
    """

    def __init__(self, fetcher: IPageFetcher) -> None:
        self._fetcher = fetcher

    async def _fetch_document(self, path: str, params=None):
        markup = await self._fetcher.fetch(path, params=params)
        return parse_document(markup)

    async def trending(self) -> list[AnimeSummary]:
        """Animes tendance de la page d'accueil (12 au plus)."""
        document = await self._fetch_document(HOME_PATH)
        return extract_list_items(document, limit=TRENDING_LIMIT)

    async def recent_episodes(self) -> list[AnimeSummary]:
        """Derniers episodes de la page d'accueil (20 au plus)."""
        document = await self._fetch_document(HOME_PATH)
        return extract_list_items(document, limit=RECENT_LIMIT)

    async def popular(self) -> list[AnimeSummary]:
        """Animes les plus populaires (20 au plus)."""
        document = await self._fetch_document(POPULAR_PATH)
        return extract_list_items(document, limit=POPULAR_LIMIT)

    async def search(self, query: str, page: int = 1) -> SearchPage:
        """
        Recherche par mot-cle.

        Args:
            query: Texte recherche (encode dans le parametre keyword)
            page: Numero de page demande (1-indexe)

        Returns:
            SearchPage avec tous les resultats de la page et la pagination deduite
        """
        document = await self._fetch_document(SEARCH_PATH, params={"keyword": query, "page": page})
        results = extract_list_items(document)
        pagination = parse_pagination(document, current_page=page)
        logger.debug(
            "Recherche effectuee",
            query=query,
            page=page,
            results=len(results),
            total_pages=pagination.total_pages,
        )
        return SearchPage(results=results, pagination=pagination)

    async def anime_details(self, anime_id: str) -> AnimeDetails:
        """
        Fiche detaillee d'un anime.

        L'identifiant est valide puis encode avant d'etre place dans le chemin.

        Raises:
            InvalidAnimeIdError: Identifiant refuse (aucun appel amont)
        """
        validate_anime_id(anime_id)
        document = await self._fetch_document(f"/{quote(anime_id, safe='')}")
        return extract_details(document, anime_id)

    async def genres(self) -> list[Genre]:
        """Liste des genres de la page /genre."""
        document = await self._fetch_document(GENRE_PATH)
        return extract_genres(document)
