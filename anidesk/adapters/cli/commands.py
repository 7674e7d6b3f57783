"""
Commandes CLI du client (health, browse, search, show, genres).

Chaque commande passe par une BrowserSession : si l'API ne repond pas,
l'affichage bascule sur le catalogue d'echantillon.
"""

from enum import Enum
from typing import Annotated

import httpx
import typer

from anidesk.adapters.cli.helpers import run_with_container, suppress_loguru
from anidesk.adapters.cli.views import (
    console,
    render_details,
    render_genres,
    render_grid,
    render_player,
    render_status,
)
from anidesk.container import Container
from anidesk.core.errors import APIError
from anidesk.services.browser import View

_VIEW_TITLES = {
    View.HOME: "Accueil",
    View.TRENDING: "Tendances",
    View.POPULAR: "Populaires",
    View.RECENT: "Derniers episodes",
    View.SEARCH: "Recherche",
}


class BrowseView(str, Enum):
    """Vues de liste accessibles par la commande browse."""

    HOME = "home"
    TRENDING = "trending"
    POPULAR = "popular"
    RECENT = "recent"


def health() -> None:
    """Verifie la disponibilite de l'API."""
    run_with_container(_health_async)


async def _health_async(container: Container) -> None:
    """Implementation async de la commande health."""
    api = container.api_client()
    result = await api.health_check()
    if result["status"] == "healthy":
        console.print(f"[green]API disponible[/green] ({api.base_url}) - {result['timestamp']}")
        return
    console.print(f"[red]API indisponible[/red] ({api.base_url}) - {result['timestamp']}")
    raise typer.Exit(1)


def browse(
    view: Annotated[
        BrowseView,
        typer.Argument(help="Vue a afficher"),
    ] = BrowseView.HOME,
) -> None:
    """
    Affiche une liste d'animes sous forme de grille.

    Exemples:
      anidesk browse              # Accueil
      anidesk browse trending     # Tendances (12 max)
      anidesk browse recent       # Derniers episodes (20 max)
    """
    run_with_container(_browse_async, View(view.value))


async def _browse_async(container: Container, view: View) -> None:
    """Implementation async de la commande browse."""
    session = container.browser_session()
    with suppress_loguru():
        await session.check_health()
        cards = await session.load(view)
    render_status(session.status_line, session.use_sample_data)
    render_grid(cards, _VIEW_TITLES[view])


def search(
    query: Annotated[str, typer.Argument(help="Texte recherche")],
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Numero de page")] = 1,
) -> None:
    """Recherche un anime par mot-cle."""
    run_with_container(_search_async, query, page)


async def _search_async(container: Container, query: str, page: int) -> None:
    """Implementation async de la commande search."""
    session = container.browser_session()
    with suppress_loguru():
        await session.check_health()
        cards = await session.load(View.SEARCH, query=query, page=page)
    render_status(session.status_line, session.use_sample_data)
    render_grid(cards, f"{_VIEW_TITLES[View.SEARCH]} : {query}", session.search_pagination)


def show(
    anime_id: Annotated[str, typer.Argument(help="Identifiant de l'anime")],
    play: Annotated[
        bool,
        typer.Option("--play", help="Ouvre le lecteur (placeholder) et la liste des episodes"),
    ] = False,
) -> None:
    """Affiche la fiche detaillee d'un anime."""
    run_with_container(_show_async, anime_id, play)


async def _show_async(container: Container, anime_id: str, play: bool) -> None:
    """Implementation async de la commande show."""
    session = container.browser_session()
    with suppress_loguru():
        await session.check_health()
        details = await session.select(anime_id)
    render_status(session.status_line, session.use_sample_data)

    if details is None:
        console.print(f"[red]Anime introuvable : {anime_id}[/red]")
        raise typer.Exit(1)

    render_details(details)
    if play:
        episodes = session.episodes_for(anime_id)
        session.open_player()
        with suppress_loguru():
            await session.fetch_episode_links(episodes[0].id)
        render_player(details, episodes, message=session.player_message)
        session.close_player()


def genres() -> None:
    """Liste les genres du site amont."""
    run_with_container(_genres_async)


async def _genres_async(container: Container) -> None:
    """Implementation async de la commande genres (pas de repli echantillon)."""
    api = container.api_client()
    try:
        with suppress_loguru():
            items = await api.genres()
    except (APIError, httpx.HTTPError) as e:
        console.print(f"[red]Erreur: impossible de recuperer les genres ({e})[/red]")
        raise typer.Exit(1)
    render_genres(items)
