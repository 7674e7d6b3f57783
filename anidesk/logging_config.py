"""
Configuration du logging d'AniDesk via loguru.

Deux sorties :
- console : lisible, coloree, niveau configurable
- fichier : JSON avec rotation, tout depuis DEBUG (requetes amont comprises)

Les loggers standard de uvicorn et httpx sont rediriges vers loguru pour
que les erreurs serveur (port occupe, requetes) arrivent dans le meme
fichier JSON que les logs de l'application.
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

# Loggers stdlib rediriges, avec leur niveau minimal
STDLIB_LOGGERS: dict[str, int] = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.INFO,
    # httpx journalise chaque requete en INFO, deja couvert par le fetcher
    "httpx": logging.WARNING,
}


class InterceptHandler(logging.Handler):
    """Handler logging qui renvoie chaque enregistrement vers loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter jusqu'a l'appelant reel, hors du module logging
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.bind(stdlib_logger=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_stdlib_logging() -> None:
    """Remplace les handlers des loggers de STDLIB_LOGGERS par InterceptHandler."""
    handler = InterceptHandler()
    for name, level in STDLIB_LOGGERS.items():
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [handler]
        stdlib_logger.setLevel(level)
        stdlib_logger.propagate = False


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/anidesk.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin du fichier JSON
        rotation_size : Taille maximale avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    intercept_stdlib_logging()
    logger.debug("Logging configure", log_file=str(log_file), level=log_level)
