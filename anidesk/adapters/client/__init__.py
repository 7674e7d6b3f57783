"""Client REST de l'API AniDesk (equivalent du client desktop)."""

from anidesk.adapters.client.api_client import AniDeskAPIClient

__all__ = [
    "AniDeskAPIClient",
]
