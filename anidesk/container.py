"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'API et la CLI.
Le container est cree une seule fois par processus puis passe
explicitement a l'application web (app.state) et aux commandes.
"""

from dependency_injector import containers, providers

from .adapters.client.api_client import AniDeskAPIClient
from .adapters.scraping.fetcher import HiAnimeFetcher
from .config import Settings
from .services.browser import BrowserSession
from .services.catalog import CatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        catalog = container.catalog_service()
        session = container.browser_session()

    En test, le recuperateur amont peut etre remplace :
        container.page_fetcher.override(providers.Object(fake_fetcher))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Recuperateur amont - Singleton pour partager le client HTTP entre requetes
    page_fetcher = providers.Singleton(
        HiAnimeFetcher,
        base_url=config.provided.upstream_base_url,
        user_agent=config.provided.user_agent,
        timeout=config.provided.request_timeout,
    )

    # Service catalogue (stateless) - Factory, une instance par requete
    catalog_service = providers.Factory(
        CatalogService,
        fetcher=page_fetcher,
    )

    # Client REST - Singleton avec base_url depuis config
    api_client = providers.Singleton(
        AniDeskAPIClient,
        base_url=config.provided.api_base_url,
        timeout=config.provided.client_timeout,
    )

    # Session de navigation - Factory car porte l'etat de vue
    browser_session = providers.Factory(
        BrowserSession,
        api_client=api_client,
    )
