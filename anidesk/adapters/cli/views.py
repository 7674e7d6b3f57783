"""
Affichage Rich du client.

Equivalent terminal des composants du client desktop : grille d'animes,
fiche detaillee, lecteur (placeholder) avec liste d'episodes et ligne
de statut.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from anidesk.core.entities import AnimeDetails, AnimeSummary, Episode, Genre, Pagination

console = Console()

MAX_EPISODES_SHOWN = 24


def render_status(status_line: str, sample_mode: bool) -> None:
    """Ligne de statut unique (jaune en mode echantillon)."""
    if not status_line:
        return
    style = "yellow" if sample_mode else "green"
    console.print(f"[{style}]{status_line}[/{style}]")


def build_grid(cards: Sequence[AnimeSummary], title: str) -> Table:
    """Construit la grille des cartes."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre", style="bold cyan")
    table.add_column("Type")
    table.add_column("Eps", justify="right")
    table.add_column("Duree")
    table.add_column("Note", justify="right")
    table.add_column("Annee")
    table.add_column("ID", style="dim")

    for index, card in enumerate(cards, start=1):
        table.add_row(
            str(index),
            card.title or "(sans titre)",
            card.type,
            card.episode_count,
            card.duration,
            f"⭐ {card.rating}" if card.rating else "N/A",
            card.year,
            card.id,
        )
    return table


def render_grid(cards: Sequence[AnimeSummary], title: str, pagination: Optional[Pagination] = None) -> None:
    """Affiche la grille, ou un message si elle est vide."""
    if not cards:
        console.print(f"[dim]{title} : aucun resultat.[/dim]")
        return
    console.print(build_grid(cards, title))
    if pagination is not None:
        suffix = " (suite disponible)" if pagination.has_next else ""
        console.print(f"Page {pagination.current_page}/{pagination.total_pages}{suffix}")


def build_details_panel(details: AnimeDetails) -> Panel:
    """Panneau de la fiche detaillee."""
    rows = [
        ("Type", details.type),
        ("Statut", details.status),
        ("Sortie", details.release_date),
        ("Episodes", details.episodes),
        ("Duree", details.duration),
        ("Note", details.rating),
        ("Genres", ", ".join(details.genres)),
    ]
    lines = [f"[bold]{label} :[/bold] {value}" for label, value in rows if value]
    if details.description:
        lines.append("")
        lines.append(details.description)
    return Panel("\n".join(lines) or "[dim]Aucune information[/dim]", title=details.title or details.id)


def render_details(details: AnimeDetails) -> None:
    console.print(build_details_panel(details))


def build_episode_table(episodes: Sequence[Episode], current_episode: int = 1) -> Table:
    """Liste des episodes, l'episode courant en surbrillance."""
    table = Table(title="Episodes")
    table.add_column("N°", justify="right")
    table.add_column("Titre")
    table.add_column("Duree", justify="right")

    for episode in episodes[:MAX_EPISODES_SHOWN]:
        duration = f"{episode.duration_seconds // 60} min" if episode.duration_seconds else ""
        style = "reverse" if episode.episode_number == current_episode else None
        table.add_row(
            f"Episode {episode.episode_number}",
            episode.title or f"Episode {episode.episode_number}",
            duration,
            style=style,
        )
    remaining = len(episodes) - MAX_EPISODES_SHOWN
    if remaining > 0:
        table.caption = f"... et {remaining} autres episodes"
    return table


def render_player(
    details: AnimeDetails,
    episodes: Sequence[Episode],
    current_episode: int = 1,
    message: str = "",
) -> None:
    """Lecteur placeholder suivi de la liste des episodes."""
    body = f"▶  Video Player Placeholder\n\nEpisode {current_episode}: {details.title}"
    if message:
        body += f"\n\n[yellow]{message}[/yellow]"
    console.print(
        Panel(
            body,
            title=f"← Back  |  {details.title}",
            padding=(1, 4),
        )
    )
    console.print(build_episode_table(episodes, current_episode))


def render_genres(genres: Sequence[Genre]) -> None:
    table = Table(title="Genres")
    table.add_column("ID", style="dim")
    table.add_column("Nom", style="bold")
    table.add_column("URL")
    for genre in genres:
        table.add_row(genre.id, genre.name, genre.url)
    console.print(table)
