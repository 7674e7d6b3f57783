"""
Anime catalogue entities.

Transient records built from one upstream page (API side) or from the
static sample catalogue (client side). Nothing here is persisted.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AnimeSummary:
    """
    One card of a listing page.

    Every field is a string; a field the markup does not provide is "".

    Attributes:
        id: Third segment of the card link (e.g. "naruto-677")
        title: Display title
        poster_url: Poster image URL
        type: Format label (TV, Movie, OVA...)
        episode_count: Episode count label as shown by the site
        duration: Duration label (e.g. "24m")
        rating: Age/score rating label
        year: Release year label
    """

    id: str = ""
    title: str = ""
    poster_url: str = ""
    type: str = ""
    episode_count: str = ""
    duration: str = ""
    rating: str = ""
    year: str = ""


@dataclass
class AnimeDetails:
    """
    Detail page of one anime.

    Attributes:
        genres: Genre names in document order (duplicates kept)
        episodes: Episode count label, not a list of episodes
    """

    id: str = ""
    title: str = ""
    poster_url: str = ""
    description: str = ""
    type: str = ""
    status: str = ""
    release_date: str = ""
    genres: list[str] = field(default_factory=list)
    episodes: str = ""
    duration: str = ""
    rating: str = ""


@dataclass
class Genre:
    """Genre link from the genre listing page."""

    id: str = ""
    name: str = ""
    url: str = ""


@dataclass
class Pagination:
    """Pagination state of a search page."""

    current_page: int = 1
    total_pages: int = 1

    @property
    def has_next(self) -> bool:
        """True when another page follows the current one."""
        return self.current_page < self.total_pages


@dataclass
class SearchPage:
    """One page of search results."""

    results: list[AnimeSummary] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)


@dataclass
class Episode:
    """
    Placeholder episode, client side only.

    Attributes:
        episode_number: 1-indexed episode number
        duration_seconds: Runtime in seconds
    """

    id: str
    title: str
    episode_number: int
    duration_seconds: Optional[int] = None
    thumbnail_url: str = ""
    url: str = ""


@dataclass
class SampleAnime:
    """
    Entry of the static sample catalogue used when the API is unreachable.

    Attributes:
        status: "ongoing", "completed" or "upcoming"
    """

    id: str
    title: str
    year: int
    poster_url: str = ""
    rating: Optional[float] = None
    description: str = ""
    genres: tuple[str, ...] = ()
    status: str = "completed"
    episodes: tuple[Episode, ...] = ()
