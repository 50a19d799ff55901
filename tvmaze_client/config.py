"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TVMAZE_,
et peut optionnellement être fournie via un fichier .env.

La clé API et l'identité produit sont optionnelles - l'API publique de TVmaze
fonctionne sans authentification.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvmaze_client.core.options import ProductInfo, TVMazeOptions
from tvmaze_client.utils.constants import (
    DEFAULT_API_ADDRESS,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
)

# Trouver le fichier .env à la racine du projet (parent de tvmaze_client/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TVMAZE_.
    Exemple : TVMAZE_API_KEY=secret

    Settings reste mutable; le client ne reçoit qu'un TVMazeOptions immutable
    construit par to_options().
    """

    model_config = SettingsConfigDict(
        env_prefix="TVMAZE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    api_address: str = Field(default=DEFAULT_API_ADDRESS)
    api_key: Optional[str] = Field(default=None)

    # Identité produit (header User-Agent)
    product_name: Optional[str] = Field(default=None)
    product_version: Optional[str] = Field(default=None)

    # Transport HTTP
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    connect_timeout_seconds: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)

    # Logging (fichier optionnel, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("api_address")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le slash final de l'adresse de base."""
        return v.strip().rstrip("/")

    @property
    def api_key_enabled(self) -> bool:
        """Vérifie si une clé API est configurée."""
        return bool(self.api_key and self.api_key.strip())

    def to_options(self) -> TVMazeOptions:
        """Construit les options immutables du client depuis les paramètres."""
        product = None
        if self.product_name:
            product = ProductInfo(name=self.product_name, version=self.product_version or None)
        return TVMazeOptions(
            api_address=self.api_address,
            api_key=self.api_key if self.api_key_enabled else None,
            product=product,
        )
