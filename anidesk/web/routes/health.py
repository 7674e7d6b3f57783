"""
Route de santé.

Ne contacte jamais le site amont.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ...config import Settings
from ..deps import get_settings
from ..schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)):
    """Statut du service avec horodatage ISO-8601."""
    return HealthResponse(
        status="OK",
        service=settings.service_name,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
