"""
Utilitaires partages pour les commandes CLI d'AniDesk.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- run_with_container : execute une implementation async avec un container neuf
"""

import asyncio
from contextlib import contextmanager
from typing import Any, Awaitable, Callable

from loguru import logger as loguru_logger

from anidesk.container import Container


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("anidesk")
    try:
        yield
    finally:
        loguru_logger.enable("anidesk")


def run_with_container(func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
    """
    Execute func(container, *args, **kwargs) dans une boucle asyncio.

    Le client REST du container est ferme a la fin, meme en cas d'erreur.

    Usage:
        def browse(view: str) -> None:
            run_with_container(_browse_async, view)
    """

    async def run():
        container = Container()
        try:
            return await func(container, *args, **kwargs)
        finally:
            await container.api_client().close()

    return asyncio.run(run())
