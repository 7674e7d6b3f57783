"""
Session de navigation du client.

Porte l'etat de vue du client desktop : vue active, listes deja chargees,
anime selectionne et lecteur ouvert. Au premier echec de l'API, la session
bascule sur le catalogue d'echantillon et n'affiche plus qu'une ligne
de statut.
"""

from enum import Enum
from typing import Any, Optional

import httpx
from loguru import logger

from anidesk.adapters.client.api_client import AniDeskAPIClient
from anidesk.core.entities import AnimeDetails, AnimeSummary, Episode, Pagination, SampleAnime
from anidesk.core.errors import APIError
from anidesk.data.sample_data import (
    RECENT_SAMPLE,
    SAMPLE_ANIME,
    TRENDING_SAMPLE,
    search_sample,
)

PLACEHOLDER_EPISODE_COUNT = 12
STATUS_CONNECTED = "Connected to API"
STATUS_SAMPLE = "API unavailable - showing sample data"
PLAYER_SAMPLE_MESSAGE = "Streaming is unavailable with sample data"


class View(str, Enum):
    """Vues du client."""

    HOME = "home"
    TRENDING = "trending"
    SEARCH = "search"
    POPULAR = "popular"
    RECENT = "recent"


def sample_to_summary(anime: SampleAnime) -> AnimeSummary:
    """Convertit une entree d'echantillon en carte de liste."""
    duration = ""
    if anime.episodes and anime.episodes[0].duration_seconds:
        duration = f"{anime.episodes[0].duration_seconds // 60}m"
    return AnimeSummary(
        id=anime.id,
        title=anime.title,
        poster_url=anime.poster_url,
        type="Movie" if "Movie" in anime.genres else "TV",
        episode_count=str(len(anime.episodes)),
        duration=duration,
        rating="" if anime.rating is None else str(anime.rating),
        year=str(anime.year),
    )


def sample_to_details(anime: SampleAnime) -> AnimeDetails:
    """Convertit une entree d'echantillon en fiche detaillee."""
    summary = sample_to_summary(anime)
    return AnimeDetails(
        id=anime.id,
        title=anime.title,
        poster_url=anime.poster_url,
        description=anime.description,
        type=summary.type,
        status=anime.status,
        release_date=str(anime.year),
        genres=list(anime.genres),
        episodes=summary.episode_count,
        duration=summary.duration,
        rating=summary.rating,
    )


def placeholder_episodes(count: int = PLACEHOLDER_EPISODE_COUNT, anime_id: str = "") -> tuple[Episode, ...]:
    """Episodes generiques affiches quand aucun episode n'est connu."""
    return tuple(
        Episode(
            id=f"{anime_id}-episode-{number}" if anime_id else str(number),
            title=f"Episode {number}",
            episode_number=number,
        )
        for number in range(1, count + 1)
    )


class BrowserSession:
    """
    Etat de navigation du client.

    Attributes:
        active_view: Vue affichee
        listings: Listes deja chargees, par vue
        search_query: Derniere recherche demandee
        search_pagination: Pagination de la derniere recherche (None en mode echantillon)
        selected: Fiche de l'anime ouvert
        player_open: Lecteur (placeholder) affiche
        player_message: Raison de l'absence de liens de lecture
        use_sample_data: Mode echantillon actif
        status_line: Ligne de statut unique affichee a l'utilisateur

    Example:
        session = BrowserSession(api_client)
        await session.check_health()
        cards = await session.load(View.TRENDING)
    """

    def __init__(self, api_client: AniDeskAPIClient) -> None:
        self._api = api_client
        self.active_view = View.HOME
        self.listings: dict[View, list[AnimeSummary]] = {}
        self.search_query = ""
        self.search_pagination: Optional[Pagination] = None
        self._loaded_search: Optional[tuple[str, int]] = None
        self.selected: Optional[AnimeDetails] = None
        self.player_open = False
        self.player_message = ""
        self.use_sample_data = False
        self.status_line = ""

    def _degrade(self, reason: str) -> None:
        """Bascule en mode echantillon."""
        if not self.use_sample_data:
            logger.warning("Bascule sur les donnees d'echantillon", reason=reason)
        self.use_sample_data = True
        self.status_line = STATUS_SAMPLE

    async def check_health(self) -> bool:
        """
        Interroge /health et choisit le mode de donnees.

        Returns:
            True si l'API repond, False si la session passe en mode echantillon
        """
        health = await self._api.health_check()
        if health["status"] == "healthy":
            self.use_sample_data = False
            self.status_line = f"{STATUS_CONNECTED} ({self._api.base_url})"
            return True
        self._degrade("health check failed")
        return False

    def _sample_listing(self, view: View) -> list[AnimeSummary]:
        if view is View.TRENDING:
            entries = TRENDING_SAMPLE
        elif view is View.RECENT:
            entries = RECENT_SAMPLE
        elif view is View.SEARCH:
            entries = tuple(search_sample(self.search_query))
        else:
            entries = SAMPLE_ANIME
        return [sample_to_summary(anime) for anime in entries]

    async def _fetch_listing(self, view: View, page: int) -> list[AnimeSummary]:
        if view in (View.HOME, View.TRENDING):
            return await self._api.trending()
        if view is View.RECENT:
            return await self._api.recent_episodes()
        if view is View.POPULAR:
            return await self._api.popular()
        result = await self._api.search(self.search_query, page=page)
        self.search_pagination = result.pagination
        return result.results

    async def load(self, view: View, query: Optional[str] = None, page: int = 1) -> list[AnimeSummary]:
        """
        Charge la liste d'une vue, sauf si elle l'est deja.

        La recherche est rechargee quand la requete ou la page change.
        Une recherche vide ne contacte pas l'API.

        Args:
            view: Vue a afficher
            query: Texte recherche (vue SEARCH uniquement)
            page: Page de recherche demandee

        Returns:
            Cartes de la vue
        """
        self.active_view = view
        if view is View.SEARCH:
            if query is not None:
                self.search_query = query.strip()
            if view in self.listings and self._loaded_search == (self.search_query, page):
                return self.listings[view]
            if not self.search_query:
                self.listings[view] = []
                self._loaded_search = (self.search_query, page)
                return []
        elif view in self.listings:
            return self.listings[view]

        if self.use_sample_data:
            items = self._sample_listing(view)
        else:
            try:
                items = await self._fetch_listing(view, page)
            except (APIError, httpx.HTTPError) as e:
                self._degrade(str(e))
                items = self._sample_listing(view)

        if view is View.SEARCH:
            self._loaded_search = (self.search_query, page)
            if self.use_sample_data:
                self.search_pagination = None
        self.listings[view] = items
        return items

    @staticmethod
    def _find_sample(anime_id: str) -> Optional[SampleAnime]:
        return next((anime for anime in SAMPLE_ANIME if anime.id == anime_id), None)

    async def select(self, anime_id: str) -> Optional[AnimeDetails]:
        """
        Ouvre la fiche d'un anime.

        Le catalogue d'echantillon ne repond qu'en mode echantillon.

        Returns:
            La fiche, ou None si l'anime est introuvable
        """
        if self.use_sample_data:
            sample = self._find_sample(anime_id)
            self.selected = sample_to_details(sample) if sample else None
            return self.selected

        try:
            self.selected = await self._api.anime_details(anime_id)
        except (APIError, httpx.HTTPError) as e:
            self._degrade(str(e))
            self.selected = None
        return self.selected

    def open_player(self) -> None:
        """Affiche le lecteur pour l'anime selectionne."""
        if self.selected is not None:
            self.player_open = True

    def close_player(self) -> None:
        """Revient a la grille."""
        self.player_open = False

    def episodes_for(self, anime_id: str) -> tuple[Episode, ...]:
        """Episodes d'echantillon en mode echantillon, sinon 12 episodes generiques."""
        sample = self._find_sample(anime_id) if self.use_sample_data else None
        if sample is not None and sample.episodes:
            return sample.episodes
        return placeholder_episodes(anime_id=anime_id)

    async def fetch_episode_links(self, episode_id: str) -> Optional[Any]:
        """
        Demande les liens de lecture d'un episode.

        En cas d'echec, player_message indique pourquoi.

        Returns:
            Les liens, ou None s'ils sont indisponibles
        """
        if self.use_sample_data:
            self.player_message = PLAYER_SAMPLE_MESSAGE
            return None
        try:
            links = await self._api.episode_links(episode_id)
        except APIError as e:
            self.player_message = e.message
            return None
        except httpx.HTTPError as e:
            self._degrade(str(e))
            self.player_message = PLAYER_SAMPLE_MESSAGE
            return None
        self.player_message = ""
        return links
