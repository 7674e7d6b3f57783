"""
Extraction des enregistrements depuis le HTML du site amont.

Transforme un document analyse par BeautifulSoup en entites du domaine :
- extract_list_items : cartes d'une page de liste -> AnimeSummary
- extract_details : fiche d'un anime -> AnimeDetails
- extract_genres : page des genres -> Genre
- parse_pagination : liens de pagination -> Pagination

L'extraction n'echoue jamais pour un champ manquant (il vaut ""). Seul un
document impossible a analyser leve MarkupError.
"""

import re
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from anidesk.adapters.scraping.selectors import (
    DETAIL_FIELDS,
    DETAIL_LABELS,
    GENRE_LINK_SELECTOR,
    GENRES_LABEL,
    INFO_ITEM_SELECTOR,
    INFO_VALUE_SELECTOR,
    LIST_ITEM_SELECTOR,
    PAGINATION_LINK_SELECTOR,
    SUMMARY_FIELDS,
    resolve,
)
from anidesk.core.entities import AnimeDetails, AnimeSummary, Genre, Pagination
from anidesk.core.errors import MarkupError

_LEADING_INT = re.compile(r"\s*(\d+)")


def parse_document(markup: str | bytes) -> BeautifulSoup:
    """
    Analyse le HTML brut d'une page.

    Args:
        markup: HTML recu du site amont

    Returns:
        Document BeautifulSoup

    Raises:
        MarkupError: Entree non textuelle, vide, ou rejetee par le parseur
    """
    if not isinstance(markup, (str, bytes)):
        raise MarkupError(f"Expected HTML text, got {type(markup).__name__}")
    if not markup.strip():
        raise MarkupError("Empty document")
    try:
        return BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as e:
        raise MarkupError(str(e)) from e


def extract_summary(card: Tag) -> AnimeSummary:
    """Convertit une carte de liste en AnimeSummary."""
    return AnimeSummary(**{name: resolve(card, chain) for name, chain in SUMMARY_FIELDS.items()})


def extract_list_items(document: Tag, limit: Optional[int] = None) -> list[AnimeSummary]:
    """
    Extrait les cartes d'une page de liste, dans l'ordre du document.

    Args:
        document: Document analyse
        limit: Nombre maximal de cartes (None = toutes)

    Returns:
        Liste d'AnimeSummary (au plus limit elements)
    """
    cards = document.select(LIST_ITEM_SELECTOR)
    if limit is not None:
        cards = cards[:limit]
    return [extract_summary(card) for card in cards]


def _find_labeled_item(document: Tag, label: str) -> Optional[Tag]:
    """
    Bloc ".item" le plus interne dont le texte contient label.

    Correspondance par inclusion de texte : heuristique dependante du
    balisage amont, pas un contrat exact.
    """
    for item in document.select(INFO_ITEM_SELECTOR):
        if label not in item.get_text():
            continue
        nested = item.select(INFO_ITEM_SELECTOR)
        if not any(label in child.get_text() for child in nested):
            return item
    return None


def read_labeled_value(document: Tag, label: str) -> str:
    """
    Lit la valeur d'une ligne "libelle : valeur" de la fiche.

    Ordre de repli :
    1. texte des noeuds ".name" du bloc
    2. texte du bloc apres le libelle
    3. ""

    Args:
        document: Document (ou fragment) analyse
        label: Libelle recherche, ex. "Type:"

    Returns:
        Valeur nettoyee, "" si le bloc est absent
    """
    item = _find_labeled_item(document, label)
    if item is None:
        return ""

    names = [node.get_text(" ", strip=True) for node in item.select(INFO_VALUE_SELECTOR)]
    names = [name for name in names if name]
    if names:
        return ", ".join(names)

    text = item.get_text(" ", strip=True)
    position = text.find(label)
    if position < 0:
        return ""
    return text[position + len(label):].strip()


def read_labeled_links(document: Tag, label: str) -> list[str]:
    """
    Lit les liens d'une ligne libellee, dans l'ordre du document.

    Les liens sous ".name" sont prioritaires ; a defaut, tous les liens du
    bloc sont pris. Les doublons sont conserves.
    """
    item = _find_labeled_item(document, label)
    if item is None:
        return []

    links = item.select(f"{INFO_VALUE_SELECTOR} a") or item.select("a")
    names = [link.get_text(" ", strip=True) for link in links]
    return [name for name in names if name]


def extract_details(document: Tag, anime_id: str) -> AnimeDetails:
    """
    Extrait la fiche detaillee d'un anime.

    Args:
        document: Document analyse de la page /{anime_id}
        anime_id: Identifiant demande, repris tel quel dans la fiche

    Returns:
        AnimeDetails (genres vaut [] si aucun lien de genre)
    """
    fields = {name: resolve(document, chain) for name, chain in DETAIL_FIELDS.items()}
    labeled = {name: read_labeled_value(document, label) for name, label in DETAIL_LABELS.items()}
    return AnimeDetails(
        id=anime_id,
        genres=read_labeled_links(document, GENRES_LABEL),
        **fields,
        **labeled,
    )


def extract_genres(document: Tag) -> list[Genre]:
    """
    Extrait la liste des genres.

    L'id d'un genre est le dernier segment de son lien ("/genre/action" -> "action").
    """
    genres = []
    for link in document.select(GENRE_LINK_SELECTOR):
        href = str(link.get("href") or "")
        genres.append(
            Genre(
                id=href.split("/")[-1] if href else "",
                name=link.get_text(" ", strip=True),
                url=href,
            )
        )
    return genres


def _parse_int(text: Optional[str]) -> Optional[int]:
    """Entier en tete de texte ("5", " 12 pages"), None sinon."""
    if not text:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _page_param(href: Optional[str]) -> Optional[int]:
    """Valeur du parametre page d'un lien, None si absente."""
    if not href:
        return None
    values = parse_qs(urlsplit(href).query).get("page")
    return _parse_int(values[0]) if values else None


def parse_pagination(document: Tag, current_page: int) -> Pagination:
    """
    Deduit la pagination d'une page de recherche.

    Le nombre total de pages est le texte de l'avant-dernier lien de
    pagination ; a defaut, le parametre page du dernier lien ; a defaut, 1.
    Heuristique : le balisage amont n'est pas maitrise.
    """
    links = document.select(PAGINATION_LINK_SELECTOR)
    total: Optional[int] = None
    if len(links) >= 2:
        total = _parse_int(links[-2].get_text())
    if not total and links:
        total = _page_param(str(links[-1].get("href") or ""))
    return Pagination(current_page=current_page, total_pages=total or 1)
