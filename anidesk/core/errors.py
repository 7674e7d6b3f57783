"""
Exceptions metier d'AniDesk.

Deux familles d'erreurs :
- erreurs d'entree client (InvalidAnimeIdError) -> HTTP 400
- erreurs amont/analyse (TransportError, MarkupError) -> HTTP 500
"""

from typing import Optional


class AniDeskError(Exception):
    """Classe de base de toutes les erreurs AniDesk."""


class TransportError(AniDeskError):
    """
    Echec de recuperation d'une page amont.

    Levee quand le site amont est injoignable, depasse le delai
    ou repond avec un statut non-2xx.

    Attributes:
        url: URL demandee
        status_code: Statut HTTP recu, ou None si aucune reponse
        reason: Description courte de l'echec
    """

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else reason or "no response"
        super().__init__(f"Upstream request failed for {url}: {detail}")


class MarkupError(AniDeskError):
    """Le document recu ne peut pas etre analyse comme du HTML."""


class InvalidAnimeIdError(AniDeskError):
    """Identifiant d'anime refuse avant tout appel amont."""

    def __init__(self, anime_id: str) -> None:
        self.anime_id = anime_id
        super().__init__(f"Invalid anime id: {anime_id!r}")


class APIError(AniDeskError):
    """
    Erreur renvoyee par l'API AniDesk au client REST.

    Attributes:
        status_code: Statut HTTP de la reponse (None si erreur de format)
        message: Message d'erreur de l'enveloppe, si present
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(f"API error ({status_code}): {message}")
