"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ANIDESK_,
et peut optionnellement être fournie via un fichier .env.

HOST et PORT sont aussi acceptés sans préfixe, comme pour la plupart des
plateformes d'hébergement.
"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de anidesk/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ANIDESK_.
    Exemple : ANIDESK_LOG_LEVEL=DEBUG

    Le client REST (api_base_url) et le serveur (host/port) sont configurés
    séparément : aucun des deux n'est déduit de l'autre.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIDESK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Serveur API
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("ANIDESK_HOST", "HOST", "host"),
    )
    port: int = Field(
        default=3001,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("ANIDESK_PORT", "PORT", "port"),
    )
    service_name: str = Field(default="HiAnime API")
    cors_origins: str = Field(default="*")

    # Site amont
    upstream_base_url: str = Field(default="https://hianime.to")
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    request_timeout: float = Field(default=10.0, gt=0)

    # Client REST (equivalent du client desktop)
    api_base_url: str = Field(default="http://localhost:3001")
    client_timeout: float = Field(default=10.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/anidesk.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("upstream_base_url", "api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le slash final pour concaténer les chemins sans doublon."""
        return v.rstrip("/")

    @property
    def cors_origins_list(self) -> list[str]:
        """Liste des origines CORS autorisées (séparées par des virgules)."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
