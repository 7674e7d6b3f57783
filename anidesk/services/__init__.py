"""
Couche application (cas d'utilisation).

- CatalogService : operations de l'API (recuperation + extraction)
- BrowserSession : etat de navigation du client et mode echantillon
"""

from anidesk.services.browser import BrowserSession, View
from anidesk.services.catalog import CatalogService

__all__ = [
    "BrowserSession",
    "CatalogService",
    "View",
]
