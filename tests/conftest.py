"""
Fixtures pytest partagees pour les tests AniDesk.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (amont et API fictifs, log dans tmp_path)
- Mock de IPageFetcher
- Container dont le recuperateur amont est remplace
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers

from anidesk.config import Settings
from anidesk.container import Container
from anidesk.core.ports.scraper import IPageFetcher

UPSTREAM = "https://hianime.test"
API = "http://api.anidesk.test"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test isoles de l'environnement.

    Le site amont et l'API pointent vers des domaines fictifs
    interceptes par respx.
    """
    return Settings(
        host="127.0.0.1",
        port=3001,
        upstream_base_url=UPSTREAM,
        api_base_url=API,
        request_timeout=10.0,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """
    Mock de IPageFetcher pour les tests.

    Le HTML retourne doit etre configure dans chaque test
    (mock_fetcher.fetch.return_value = ...).
    """
    return AsyncMock(spec=IPageFetcher)


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    """Container avec la configuration de test."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.reset_override()
