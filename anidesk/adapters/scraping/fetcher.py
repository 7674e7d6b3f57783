"""
Client HTTP pour la recuperation des pages du site amont.

Implemente l'interface IPageFetcher. Chaque appel fait une seule requete
GET avec une identite de navigateur et un Referer pointant sur l'origine
amont. Aucune relance : un echec est remonte directement a l'appelant.

Usage:
    fetcher = HiAnimeFetcher(base_url="https://hianime.to", user_agent=UA)
    html = await fetcher.fetch("/home")
    await fetcher.close()
"""

import asyncio
from typing import Mapping, Optional

import httpx
from loguru import logger

from anidesk.core.errors import TransportError
from anidesk.core.ports.scraper import IPageFetcher

_PROTECTED_HEADERS = ("user-agent", "referer")


class HiAnimeFetcher(IPageFetcher):
    """
    Recuperateur de pages HiAnime.

    - En-tetes User-Agent et Referer toujours presents
    - Delai total par requete (10s par defaut), corps compris
    - Statuts non-2xx, timeouts et erreurs reseau convertis en TransportError

    Example:
        fetcher = HiAnimeFetcher(base_url="https://hianime.to", user_agent=UA)
        html = await fetcher.fetch("/search", params={"keyword": "naruto", "page": 2})
        await fetcher.close()
    """

    def __init__(self, base_url: str, user_agent: str, timeout: float = 10.0) -> None:
        """
        Initialise le recuperateur.

        Args:
            base_url: Origine du site amont (ex: "https://hianime.to")
            user_agent: Identite de navigateur envoyee a chaque requete
            timeout: Delai maximal d'une requete en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        """Origine du site amont."""
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure pour le site amont
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    def build_headers(self, extra: Optional[Mapping[str, Optional[str]]] = None) -> dict[str, str]:
        """
        Fusionne les en-tetes par defaut et ceux de l'appelant.

        L'appelant peut remplacer User-Agent/Referer par une valeur non vide,
        mais une valeur None ou vide ne retire jamais ces en-tetes.

        Args:
            extra: En-tetes supplementaires de l'appelant

        Returns:
            Dictionnaire d'en-tetes a envoyer
        """
        headers = {
            "User-Agent": self._user_agent,
            "Referer": self._base_url,
        }
        for name, value in (extra or {}).items():
            if name.lower() in _PROTECTED_HEADERS:
                if not value:
                    continue
                # Remplacer la cle existante quelle que soit sa casse
                canonical = "User-Agent" if name.lower() == "user-agent" else "Referer"
                headers[canonical] = value
            elif value is not None:
                headers[name] = value
        return headers

    async def fetch(
        self,
        path: str,
        params: Optional[Mapping[str, str | int]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> str:
        """
        Recupere le HTML d'une page amont.

        Args:
            path: Chemin relatif a l'origine (ex: "/home")
            params: Parametres de requete optionnels
            headers: En-tetes supplementaires

        Returns:
            Corps de la reponse decode en texte

        Raises:
            TransportError: Amont injoignable, statut non-2xx ou delai depasse
        """
        client = self._get_client()
        url = f"{self._base_url}{path}"
        logger.debug("Requete amont", url=url, params=dict(params or {}))

        try:
            # Le timeout httpx porte sur chaque lecture : borne globale en plus
            async with asyncio.timeout(self._timeout):
                response = await client.get(
                    path,
                    params=dict(params) if params else None,
                    headers=self.build_headers(headers),
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Reponse amont en erreur", url=url, status_code=status)
            raise TransportError(url, status_code=status) from e
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.warning("Delai amont depasse", url=url, timeout=self._timeout)
            raise TransportError(url, reason="timeout") from e
        except httpx.HTTPError as e:
            logger.warning("Amont injoignable", url=url, error=str(e))
            raise TransportError(url, reason=type(e).__name__) from e

        return response.text

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Appele a l'arret de l'application pour liberer les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
