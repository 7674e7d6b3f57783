"""
Route des liens de lecture.

Non implementee : la diffusion video est hors du perimetre du proxy.
"""

from fastapi import APIRouter

from ..deps import error_response

router = APIRouter()


@router.get("/episodes/{episode_id}/links")
async def episode_links(episode_id: str):
    """Toujours 501 : aucun lien de lecture n'est extrait."""
    return error_response(501, "Episode streaming is not available")
