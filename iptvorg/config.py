"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe IPTVORG_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from iptvorg.utils.constants import DEFAULT_GROUP, DEFAULT_STREAM_SCHEMES

# Trouver le fichier .env à la racine du projet (parent de iptvorg/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe IPTVORG_.
    Exemple : IPTVORG_LOG_LEVEL=DEBUG, IPTVORG_STREAM_SCHEMES=http,https,udp
    """

    model_config = SettingsConfigDict(
        env_prefix="IPTVORG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données (instantané de la bibliothèque)
    database_url: str = Field(default="sqlite:///iptvorg.db")

    # Parsing et import
    default_group: str = Field(default=DEFAULT_GROUP)
    stream_schemes: Annotated[tuple[str, ...], NoDecode] = Field(default=DEFAULT_STREAM_SCHEMES)
    deduplicate_urls: bool = Field(default=True)

    # Cache et API HTTP
    cache_ttl_seconds: int = Field(default=60, ge=0)
    cache_dir: Path = Field(default=Path(".cache/library"))
    max_upload_mb: int = Field(default=100, ge=1)
    page_size: int = Field(default=1000, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/iptvorg.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", "cache_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("stream_schemes", mode="before")
    @classmethod
    def split_schemes(cls, v: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
        """Accepte une liste séparée par des virgules ("http,https,rtmp")."""
        if isinstance(v, str):
            v = v.split(",")
        return tuple(scheme.strip().lower() for scheme in v if scheme.strip())

    @property
    def max_upload_bytes(self) -> int:
        """Taille maximale d'une playlist envoyée à l'API, en octets."""
        return self.max_upload_mb * 1024 * 1024
