"""
Client REST de l'API AniDesk.

Equivalent Python du client desktop : enveloppe chaque route de l'API,
deballe le champ "data" de l'enveloppe {success, data|error} et
reconstruit les entites du domaine.

Usage:
    client = AniDeskAPIClient(base_url="http://localhost:3001")
    page = await client.search("naruto", page=2)
    await client.close()
"""

from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import quote

import httpx
from loguru import logger

from anidesk.core.entities import AnimeDetails, AnimeSummary, Genre, Pagination, SearchPage
from anidesk.core.errors import APIError


def _summary_from_json(item: dict[str, Any]) -> AnimeSummary:
    return AnimeSummary(
        id=item.get("id", ""),
        title=item.get("title", ""),
        poster_url=item.get("posterUrl", ""),
        type=item.get("type", ""),
        episode_count=item.get("episodeCount", ""),
        duration=item.get("duration", ""),
        rating=item.get("rating", ""),
        year=item.get("year", ""),
    )


def _details_from_json(item: dict[str, Any]) -> AnimeDetails:
    return AnimeDetails(
        id=item.get("id", ""),
        title=item.get("title", ""),
        poster_url=item.get("posterUrl", ""),
        description=item.get("description", ""),
        type=item.get("type", ""),
        status=item.get("status", ""),
        release_date=item.get("releaseDate", ""),
        genres=list(item.get("genres") or []),
        episodes=item.get("episodes", ""),
        duration=item.get("duration", ""),
        rating=item.get("rating", ""),
    )


class AniDeskAPIClient:
    """
    Client HTTP de l'API AniDesk.

    Toute reponse non-2xx ou toute enveloppe success=false leve APIError ;
    les erreurs reseau remontent en httpx.HTTPError.

    Example:
        client = AniDeskAPIClient(base_url="http://localhost:3001")
        health = await client.health_check()
        if health["status"] == "healthy":
            trending = await client.trending()
        await client.close()
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        """
        Initialise le client.

        Args:
            base_url: Origine de l'API (configurable, jamais codee en dur)
            timeout: Delai maximal d'une requete en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        """Origine de l'API."""
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def _request(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Appelle une route et retourne le champ data de l'enveloppe.

        Raises:
            APIError: Statut non-2xx, corps non JSON ou success=false
            httpx.HTTPError: API injoignable
        """
        client = self._get_client()
        response = await client.get(endpoint, params=params)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Reponse API illisible", endpoint=endpoint, status_code=response.status_code)
            raise APIError("Invalid JSON response", status_code=response.status_code) from e
        if not isinstance(payload, dict):
            raise APIError("Unexpected response shape", status_code=response.status_code)

        if response.is_error or not payload.get("success", False):
            message = payload.get("error") or f"HTTP error! status: {response.status_code}"
            logger.error("Requete API en echec", endpoint=endpoint, status_code=response.status_code)
            raise APIError(message, status_code=response.status_code)

        return payload.get("data")

    async def health_check(self) -> dict[str, str]:
        """
        Verifie la disponibilite de l'API.

        Ne leve jamais : toute erreur donne le statut "unhealthy".

        Returns:
            {"status": "healthy" | "unhealthy", "timestamp": ISO-8601}
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        try:
            response = await self._get_client().get("/health")
        except httpx.HTTPError as e:
            logger.warning("API injoignable", base_url=self._base_url, error=str(e))
            return {"status": "unhealthy", "timestamp": timestamp}
        status = "healthy" if response.is_success else "unhealthy"
        return {"status": status, "timestamp": timestamp}

    async def trending(self) -> list[AnimeSummary]:
        """Animes tendance."""
        data = await self._request("/trending")
        return [_summary_from_json(item) for item in data or []]

    async def recent_episodes(self) -> list[AnimeSummary]:
        """Derniers episodes."""
        data = await self._request("/recent-episodes")
        return [_summary_from_json(item) for item in data or []]

    async def popular(self) -> list[AnimeSummary]:
        """Animes populaires."""
        data = await self._request("/popular")
        return [_summary_from_json(item) for item in data or []]

    async def search(self, query: str, page: int = 1) -> SearchPage:
        """Recherche par mot-cle (le texte est encode par httpx)."""
        data = await self._request("/search", params={"q": query, "page": page}) or {}
        pagination = data.get("pagination") or {}
        return SearchPage(
            results=[_summary_from_json(item) for item in data.get("results") or []],
            pagination=Pagination(
                current_page=int(pagination.get("currentPage", page)),
                total_pages=int(pagination.get("totalPages", 1)),
            ),
        )

    async def anime_details(self, anime_id: str) -> AnimeDetails:
        """Fiche detaillee d'un anime (identifiant encode comme segment de chemin)."""
        data = await self._request(f"/anime/{quote(anime_id, safe='')}")
        return _details_from_json(data or {})

    async def genres(self) -> list[Genre]:
        """Liste des genres."""
        data = await self._request("/genres")
        return [
            Genre(id=item.get("id", ""), name=item.get("name", ""), url=item.get("url", ""))
            for item in data or []
        ]

    async def episode_links(self, episode_id: str) -> Any:
        """Liens de lecture d'un episode (route non implementee cote API)."""
        return await self._request(f"/episodes/{quote(episode_id, safe='')}/links")

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
