"""
Tests unitaires pour les commandes CLI du client.

Tests couvrant:
- health: code de sortie selon la disponibilite de l'API
- browse: vue demandee, repli sur l'echantillon
- search: transmission de la page, pagination affichee
- show: fiche, lecteur placeholder et liens d'episode, anime introuvable
- genres: erreur sans repli
- serve: fabrique uvicorn, code 1 si le port ne peut pas etre ouvert
- config / version
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from typer.testing import CliRunner

from anidesk.adapters.client.api_client import AniDeskAPIClient
from anidesk.core.entities import AnimeDetails, AnimeSummary, Genre, Pagination, SearchPage
from anidesk.core.errors import APIError
from anidesk.main import app
from anidesk.services.browser import STATUS_SAMPLE, BrowserSession

_COMMANDS = "anidesk.adapters.cli.commands"
API = "http://api.anidesk.test"

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_api() -> AsyncMock:
    """Client REST mocke, API disponible par defaut."""
    api = AsyncMock(spec=AniDeskAPIClient)
    api.base_url = API
    api.health_check.return_value = {"status": "healthy", "timestamp": "2024-01-01T00:00:00+00:00"}
    return api


@pytest.fixture
def mock_container(mock_api: AsyncMock):
    """Mock le Container instancie par run_with_container.

    La BrowserSession est reelle : seul le client REST est simule.
    """
    with patch("anidesk.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.api_client.return_value = mock_api
        container_instance.browser_session.side_effect = lambda: BrowserSession(api_client=mock_api)
        yield container_instance


@pytest.fixture
def mock_render_grid():
    with patch(f"{_COMMANDS}.render_grid") as mock_render:
        yield mock_render


# ============================================================================
# health
# ============================================================================


class TestHealthCommand:
    def test_healthy(self, mock_container, mock_api):
        result = runner.invoke(app, ["health"])

        assert result.exit_code == 0
        assert "API disponible" in result.stdout
        mock_api.close.assert_awaited_once()

    def test_unhealthy_exits_1(self, mock_container, mock_api):
        mock_api.health_check.return_value = {"status": "unhealthy", "timestamp": "x"}

        result = runner.invoke(app, ["health"])

        assert result.exit_code == 1
        assert "API indisponible" in result.stdout
        mock_api.close.assert_awaited_once()


# ============================================================================
# browse
# ============================================================================


class TestBrowseCommand:
    def test_default_view_is_home(self, mock_container, mock_api, mock_render_grid):
        mock_api.trending.return_value = [AnimeSummary(id="naruto", title="Naruto")]

        result = runner.invoke(app, ["browse"])

        assert result.exit_code == 0
        cards, title = mock_render_grid.call_args.args
        assert [card.id for card in cards] == ["naruto"]
        assert title == "Accueil"

    def test_recent_view(self, mock_container, mock_api, mock_render_grid):
        mock_api.recent_episodes.return_value = []

        result = runner.invoke(app, ["browse", "recent"])

        assert result.exit_code == 0
        mock_api.recent_episodes.assert_awaited_once()
        assert mock_render_grid.call_args.args[1] == "Derniers episodes"

    def test_unknown_view_is_rejected(self, mock_container):
        result = runner.invoke(app, ["browse", "favorites"])
        assert result.exit_code != 0

    def test_unreachable_api_shows_samples(self, mock_container, mock_api, mock_render_grid):
        mock_api.health_check.return_value = {"status": "unhealthy", "timestamp": "x"}

        result = runner.invoke(app, ["browse", "trending"])

        assert result.exit_code == 0
        assert STATUS_SAMPLE in result.stdout
        cards = mock_render_grid.call_args.args[0]
        assert [card.title for card in cards][:2] == ["Attack on Titan", "Demon Slayer"]
        mock_api.trending.assert_not_awaited()


# ============================================================================
# search
# ============================================================================


class TestSearchCommand:
    def test_search_with_page(self, mock_container, mock_api):
        mock_api.search.return_value = SearchPage(
            results=[AnimeSummary(id="naruto", title="Naruto")],
            pagination=Pagination(current_page=2, total_pages=5),
        )

        result = runner.invoke(app, ["search", "naruto", "--page", "2"])

        assert result.exit_code == 0
        mock_api.search.assert_awaited_once_with("naruto", page=2)
        assert "Page 2/5" in result.stdout

    def test_page_must_be_positive(self, mock_container):
        result = runner.invoke(app, ["search", "naruto", "-p", "0"])
        assert result.exit_code != 0

    def test_no_results(self, mock_container, mock_api):
        mock_api.search.return_value = SearchPage(results=[], pagination=Pagination())

        result = runner.invoke(app, ["search", "zzz"])

        assert result.exit_code == 0
        assert "aucun resultat" in result.stdout


# ============================================================================
# show
# ============================================================================


class TestShowCommand:
    def test_show_details(self, mock_container, mock_api):
        mock_api.anime_details.return_value = AnimeDetails(
            id="naruto-677", title="Naruto", status="Finished Airing", genres=["Action"]
        )

        result = runner.invoke(app, ["show", "naruto-677"])

        assert result.exit_code == 0
        assert "Finished Airing" in result.stdout
        assert "Video Player Placeholder" not in result.stdout

    def test_show_with_player(self, mock_container, mock_api):
        mock_api.anime_details.return_value = AnimeDetails(id="naruto-677", title="Naruto")
        mock_api.episode_links.side_effect = APIError("Episode streaming is not available", 501)

        result = runner.invoke(app, ["show", "naruto-677", "--play"])

        assert result.exit_code == 0
        assert "Video Player Placeholder" in result.stdout
        assert "Episode streaming is not available" in result.stdout
        assert "Episode 12" in result.stdout
        mock_api.episode_links.assert_awaited_once_with("naruto-677-episode-1")

    def test_not_found_exits_1(self, mock_container, mock_api):
        mock_api.anime_details.side_effect = APIError("Failed to fetch anime details", 500)

        result = runner.invoke(app, ["show", "unknown-id"])

        assert result.exit_code == 1
        assert "introuvable" in result.stdout


# ============================================================================
# genres / config / version
# ============================================================================


class TestGenresCommand:
    def test_genres(self, mock_container, mock_api):
        mock_api.genres.return_value = [Genre(id="action", name="Action", url="/genre/action")]

        result = runner.invoke(app, ["genres"])

        assert result.exit_code == 0
        assert "Action" in result.stdout

    def test_unreachable_api_exits_1(self, mock_container, mock_api):
        mock_api.genres.side_effect = httpx.ConnectError("refused")

        result = runner.invoke(app, ["genres"])

        assert result.exit_code == 1
        assert "impossible de recuperer les genres" in result.stdout


class TestMiscCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "AniDesk v" in result.stdout

    def test_config(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Site amont" in result.stdout


# ============================================================================
# serve
# ============================================================================


class TestServeCommand:
    def test_serve_starts_app_factory(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "3999"])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args == ("anidesk.web.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 3999
        assert kwargs["log_config"] is None
        assert "Serveur arrêté" in result.stdout

    @pytest.mark.parametrize("code", [1, 3])
    def test_bind_failure_exits_1(self, code):
        """uvicorn termine par sys.exit quand le port est deja pris."""
        with patch("uvicorn.run", side_effect=SystemExit(code)), patch("anidesk.main.logger") as mock_logger:
            result = runner.invoke(app, ["serve", "--port", "3999"])

        assert result.exit_code == 1
        assert "Serveur arrêté" not in result.stdout
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["port"] == 3999
