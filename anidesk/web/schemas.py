"""
Schemas de reponse de l'API.

Les cles JSON sont en camelCase (posterUrl, episodeCount...), generees
depuis les noms de champs Python. Toutes les routes de donnees renvoient
l'enveloppe {success, data} ou {success, error}.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from anidesk.core.entities import AnimeDetails, AnimeSummary, Genre, Pagination, SearchPage

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base des schemas : alias camelCase, construction par nom accepte."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(CamelModel, Generic[T]):
    """Enveloppe uniforme des reponses."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None


class AnimeSummarySchema(CamelModel):
    """Carte d'une page de liste."""

    id: str = ""
    title: str = ""
    poster_url: str = ""
    type: str = ""
    episode_count: str = ""
    duration: str = ""
    rating: str = ""
    year: str = ""

    @classmethod
    def from_entity(cls, summary: AnimeSummary) -> "AnimeSummarySchema":
        return cls(
            id=summary.id,
            title=summary.title,
            poster_url=summary.poster_url,
            type=summary.type,
            episode_count=summary.episode_count,
            duration=summary.duration,
            rating=summary.rating,
            year=summary.year,
        )


class AnimeDetailsSchema(CamelModel):
    """Fiche detaillee d'un anime."""

    id: str = ""
    title: str = ""
    poster_url: str = ""
    description: str = ""
    type: str = ""
    status: str = ""
    release_date: str = ""
    genres: list[str] = []
    episodes: str = ""
    duration: str = ""
    rating: str = ""

    @classmethod
    def from_entity(cls, details: AnimeDetails) -> "AnimeDetailsSchema":
        return cls(
            id=details.id,
            title=details.title,
            poster_url=details.poster_url,
            description=details.description,
            type=details.type,
            status=details.status,
            release_date=details.release_date,
            genres=list(details.genres),
            episodes=details.episodes,
            duration=details.duration,
            rating=details.rating,
        )


class GenreSchema(CamelModel):
    id: str = ""
    name: str = ""
    url: str = ""

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreSchema":
        return cls(id=genre.id, name=genre.name, url=genre.url)


class PaginationSchema(CamelModel):
    current_page: int
    total_pages: int
    has_next: bool

    @classmethod
    def from_entity(cls, pagination: Pagination) -> "PaginationSchema":
        return cls(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            has_next=pagination.has_next,
        )


class SearchPageSchema(CamelModel):
    """Page de resultats de recherche."""

    results: list[AnimeSummarySchema]
    pagination: PaginationSchema

    @classmethod
    def from_entity(cls, page: SearchPage) -> "SearchPageSchema":
        return cls(
            results=[AnimeSummarySchema.from_entity(item) for item in page.results],
            pagination=PaginationSchema.from_entity(page.pagination),
        )


class HealthResponse(BaseModel):
    """Reponse de /health (hors enveloppe)."""

    status: str
    service: str
    timestamp: str
