"""
Catalogue d'echantillon du client.

Utilise quand l'API est injoignable : le client affiche ces titres a la
place des resultats amont. Les episodes sont generes localement.
"""

import re

from anidesk.core.entities import Episode, SampleAnime

EPISODE_DURATION_SECONDS = 24 * 60


def _slug(title: str) -> str:
    return re.sub(r"\s+", "-", title.lower())


def create_episodes(count: int, anime_title: str) -> tuple[Episode, ...]:
    """Genere count episodes de 24 minutes pour un titre."""
    slug = _slug(anime_title)
    return tuple(
        Episode(
            id=f"ep-{number}",
            title=f"{anime_title} Episode {number}",
            episode_number=number,
            duration_seconds=EPISODE_DURATION_SECONDS,
            thumbnail_url=f"/thumbnails/ep-{number}.jpg",
            url=f"/episodes/{slug}-episode-{number}",
        )
        for number in range(1, count + 1)
    )


def _movie(movie_id: str, title: str, minutes: int) -> tuple[Episode, ...]:
    """Episode unique d'un film."""
    slug = _slug(title)
    return (
        Episode(
            id=movie_id,
            title=f"{title} (Movie)",
            episode_number=1,
            duration_seconds=minutes * 60,
            thumbnail_url=f"/thumbnails/{slug}.jpg",
            url=f"/movies/{slug}",
        ),
    )


SAMPLE_ANIME: tuple[SampleAnime, ...] = (
    SampleAnime(
        id="anime-1",
        title="Attack on Titan",
        poster_url="/posters/aot.jpg",
        year=2013,
        rating=9.0,
        description="Humanity fights for survival against giant humanoid Titans.",
        episodes=create_episodes(25, "Attack on Titan"),
        genres=("Action", "Drama", "Fantasy"),
        status="completed",
    ),
    SampleAnime(
        id="anime-2",
        title="Demon Slayer",
        poster_url="/posters/demon-slayer.jpg",
        year=2019,
        rating=8.7,
        description="A young man becomes a demon slayer to save his sister.",
        episodes=create_episodes(26, "Demon Slayer"),
        genres=("Action", "Supernatural", "Shounen"),
        status="ongoing",
    ),
    SampleAnime(
        id="anime-3",
        title="Your Name",
        poster_url="/posters/your-name.jpg",
        year=2016,
        rating=8.4,
        description="Two teenagers share a profound, magical connection.",
        episodes=_movie("movie-1", "Your Name", 106),
        genres=("Romance", "Drama", "Movie"),
        status="completed",
    ),
    SampleAnime(
        id="anime-4",
        title="One Piece",
        poster_url="/posters/one-piece.jpg",
        year=1999,
        rating=9.1,
        description="A pirate crew searches for the ultimate treasure.",
        episodes=create_episodes(1000, "One Piece"),
        genres=("Adventure", "Comedy", "Shounen"),
        status="ongoing",
    ),
    SampleAnime(
        id="anime-5",
        title="Spirited Away",
        poster_url="/posters/spirited-away.jpg",
        year=2001,
        rating=9.3,
        description="A girl enters a world ruled by gods and witches.",
        episodes=_movie("movie-2", "Spirited Away", 125),
        genres=("Adventure", "Family", "Movie"),
        status="completed",
    ),
    SampleAnime(
        id="anime-6",
        title="Naruto",
        poster_url="/posters/naruto.jpg",
        year=2002,
        rating=8.3,
        description="A young ninja seeks recognition and dreams of becoming Hokage.",
        episodes=create_episodes(720, "Naruto"),
        genres=("Action", "Adventure", "Shounen"),
        status="completed",
    ),
)

TRENDING_SAMPLE = SAMPLE_ANIME[0:4]
RECENT_SAMPLE = SAMPLE_ANIME[1:5]


def search_sample(query: str) -> list[SampleAnime]:
    """Titres de l'echantillon contenant query (insensible a la casse)."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [anime for anime in SAMPLE_ANIME if needle in anime.title.lower()]
