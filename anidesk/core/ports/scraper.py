"""
Interfaces ports pour le scraping du site amont.

Interface abstraite (port) définissant le contrat de récupération des pages.
L'implémentation (adaptateur) fournit le client HTTP concret (HiAnimeFetcher).
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional


class IPageFetcher(ABC):
    """
    Interface de récupération des pages HTML amont.

    Une seule tentative par appel : aucune relance, aucun cache.
    """

    @abstractmethod
    async def fetch(
        self,
        path: str,
        params: Optional[Mapping[str, str | int]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> str:
        """
        Récupère une page du site amont.

        Args :
            path : Chemin relatif à l'origine amont (ex: "/home")
            params : Paramètres de requête optionnels
            headers : En-têtes supplémentaires (ne peuvent pas retirer les en-têtes par défaut)

        Retourne :
            Le HTML brut de la page

        Lève :
            TransportError : amont injoignable, statut non-2xx ou délai dépassé
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les ressources réseau."""
        ...
