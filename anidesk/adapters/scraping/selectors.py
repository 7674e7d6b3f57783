"""
Chaines de repli des selecteurs CSS du site amont.

Chaque champ d'un enregistrement est decrit par un tuple ordonne
d'accesseurs : le premier qui produit une valeur non vide l'emporte,
sinon le champ vaut "". Un champ absent ne fait donc jamais echouer
l'enregistrement et ne retire jamais de cle.

Usage:
    title = resolve(card, SUMMARY_FIELDS["title"])
"""

from typing import Callable, Optional, Sequence

from bs4 import Tag

Accessor = Callable[[Tag], Optional[str]]

# Conteneurs de la page
LIST_ITEM_SELECTOR = ".film_list-wrap .flw-item"
PAGINATION_LINK_SELECTOR = ".pagination .page-link"
GENRE_LINK_SELECTOR = ".genre-list a"
INFO_ITEM_SELECTOR = ".item"
INFO_VALUE_SELECTOR = ".name"


def text_of(selector: str) -> Accessor:
    """Texte nettoye du premier element correspondant a selector."""

    def accessor(node: Tag) -> Optional[str]:
        element = node.select_one(selector)
        if element is None:
            return None
        return element.get_text(" ", strip=True)

    accessor.__name__ = f"text_of({selector!r})"
    return accessor


def attr_of(selector: str, attribute: str) -> Accessor:
    """Attribut du premier element correspondant a selector qui le porte."""

    def accessor(node: Tag) -> Optional[str]:
        for element in node.select(selector):
            value = element.get(attribute)
            if isinstance(value, list):
                value = " ".join(value)
            if value:
                return value.strip()
        return None

    accessor.__name__ = f"attr_of({selector!r}, {attribute!r})"
    return accessor


def path_segment_of(selector: str, index: int, attribute: str = "href") -> Accessor:
    """
    Segment d'un lien decoupe sur "/".

    Reproduit le decoupage brut du lien : "/watch/naruto-677" donne
    ["", "watch", "naruto-677"], donc l'index 2 vaut "naruto-677".
    Un index negatif compte depuis la fin.
    """

    def accessor(node: Tag) -> Optional[str]:
        element = node.select_one(f"{selector}[{attribute}]")
        if element is None:
            return None
        segments = str(element.get(attribute, "")).split("/")
        try:
            return segments[index]
        except IndexError:
            return None

    accessor.__name__ = f"path_segment_of({selector!r}, {index})"
    return accessor


def resolve(node: Tag, chain: Sequence[Accessor]) -> str:
    """
    Applique une chaine de repli sur un noeud.

    Args:
        node: Element racine de l'enregistrement (carte, document...)
        chain: Accesseurs ordonnes, du plus specifique au plus generique

    Returns:
        Premiere valeur non vide (espaces retires), ou "" si aucune
    """
    for accessor in chain:
        value = accessor(node)
        if value and value.strip():
            return value.strip()
    return ""


# Champs d'une carte de liste (AnimeSummary)
SUMMARY_FIELDS: dict[str, tuple[Accessor, ...]] = {
    "id": (path_segment_of("a", 2),),
    "title": (
        attr_of(".film-name a", "title"),
        attr_of("a", "title"),
        text_of(".film-name"),
    ),
    "poster_url": (
        attr_of(".film-poster-img", "data-src"),
        attr_of("img", "src"),
    ),
    "type": (text_of(".fdi-type"),),
    "episode_count": (
        text_of(".fdi-episode"),
        text_of(".tick-eps"),
    ),
    "duration": (text_of(".fdi-duration"),),
    "rating": (
        text_of(".film-rating"),
        text_of(".tick-rate"),
    ),
    "year": (text_of(".fdi-year"),),
}

# Champs de la fiche detaillee hors lignes libellees (AnimeDetails)
DETAIL_FIELDS: dict[str, tuple[Accessor, ...]] = {
    "title": (
        text_of(".film-name"),
        text_of("h2.film-name"),
    ),
    "poster_url": (
        attr_of(".film-poster-img", "src"),
        attr_of(".film-poster-img", "data-src"),
    ),
    "description": (
        text_of(".film-description .text"),
        text_of(".film-description"),
    ),
    "rating": (
        text_of(".film-rating"),
        text_of(".tick-pg"),
    ),
}

# Libelles des lignes "libelle : valeur" de la fiche detaillee
DETAIL_LABELS: dict[str, str] = {
    "type": "Type:",
    "status": "Status:",
    "release_date": "Released:",
    "episodes": "Episodes:",
    "duration": "Duration:",
}
GENRES_LABEL = "Genres:"
