"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports scraping : Contrats pour le site amont
- IPageFetcher : Récupération d'une page HTML (une tentative, délai fixe)
"""

from anidesk.core.ports.scraper import IPageFetcher

__all__ = [
    "IPageFetcher",
]
