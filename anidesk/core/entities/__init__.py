"""
Entités du domaine AniDesk.

Toutes les entités sont transitoires : elles vivent le temps d'une requête
(API) ou d'un rendu (client) et ne sont jamais persistées.

Exports:
- AnimeSummary: Carte d'une page de liste
- AnimeDetails: Fiche détaillée d'un anime
- Genre: Lien de la liste des genres
- Pagination / SearchPage: Page de résultats de recherche
- Episode / SampleAnime: Données locales du client (mode échantillon)
"""

from anidesk.core.entities.anime import (
    AnimeDetails,
    AnimeSummary,
    Episode,
    Genre,
    Pagination,
    SampleAnime,
    SearchPage,
)

__all__ = [
    "AnimeSummary",
    "AnimeDetails",
    "Genre",
    "Pagination",
    "SearchPage",
    "Episode",
    "SampleAnime",
]
