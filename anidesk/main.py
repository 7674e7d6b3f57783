"""
Point d'entrée CLI d'AniDesk.

Configure le logging et fournit les commandes : serveur API et client terminal.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import browse, genres, health, search, show
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="anidesk",
    help="Proxy de scraping HiAnime et client terminal",
)
container = Container()

# Commandes du client
app.command()(health)
app.command()(browse)
app.command()(search)
app.command()(show)
app.command()(genres)


@app.command()
def config() -> None:
    """Affiche la configuration courante."""
    settings = container.config()
    typer.echo(f"API : {settings.host}:{settings.port}")
    typer.echo(f"Site amont : {settings.upstream_base_url}")
    typer.echo(f"Délai amont : {settings.request_timeout}s")
    typer.echo(f"Client REST : {settings.api_base_url}")
    typer.echo(f"Niveau de log : {settings.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AniDesk v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute (défaut: HOST)")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute (défaut: PORT)")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """
    Lance le serveur API.

    Code de sortie 1 si le port ne peut pas être ouvert ; arrêt propre
    (code 0) sur SIGINT/SIGTERM.
    """
    import uvicorn

    settings = container.config()
    host = host or settings.host
    port = port or settings.port

    typer.echo(f"🚀 {settings.service_name} sur http://{host}:{port}")
    typer.echo(f"📖 Health check: http://{host}:{port}/health")
    try:
        uvicorn.run(
            "anidesk.web.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=settings.log_level.lower(),
            # Les loggers uvicorn passent par loguru (configure_logging)
            log_config=None,
        )
    except SystemExit as e:
        # uvicorn quitte via sys.exit quand le port ne peut pas être ouvert
        if e.code in (None, 0):
            raise
        logger.error("Impossible de démarrer le serveur", host=host, port=port, exit_code=e.code)
        raise typer.Exit(1)
    typer.echo("🛑 Serveur arrêté")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug("Démarrage d'AniDesk", version=__version__)

    app()


if __name__ == "__main__":
    main()
