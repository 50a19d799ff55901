"""
Options partagees du client TVmaze.

Les options sont une valeur immutable capturee a la construction du client:
modifier la configuration de l'application apres coup n'a aucun effet sur
un client deja construit.
"""

import re
from dataclasses import dataclass
from typing import Optional

from tvmaze_client.core.errors import ConfigurationError
from tvmaze_client.utils.constants import DEFAULT_API_ADDRESS

# token HTTP (RFC 9110), sans "/" ni espace
_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9!#$%&'*+.^_`|~-]+")


def _is_token(value: object) -> bool:
    return isinstance(value, str) and _TOKEN_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class ProductInfo:
    """
    Identite du produit qui utilise la librairie.

    Envoyee dans le header User-Agent sous la forme ``name/version``.

    Attributes:
        name: Nom du produit (ex: "MyApp")
        version: Version optionnelle (ex: "1.2.0")
    """

    name: str
    version: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError("Product name must not be empty")
        if not _is_token(self.name):
            raise ConfigurationError(f"Invalid product name: {self.name!r}")
        if self.version is not None and not _is_token(self.version):
            raise ConfigurationError(f"Invalid product version: {self.version!r}")

    def __str__(self) -> str:
        if self.version:
            return f"{self.name}/{self.version}"
        return self.name


@dataclass(frozen=True)
class TVMazeOptions:
    """
    Configuration du client TVmaze.

    Attributes:
        api_address: Adresse de base de l'API (sans slash final)
        api_key: Cle API optionnelle, ajoutee en dernier parametre de chaque requete
        product: Identite optionnelle envoyee comme User-Agent

    Example:
        options = TVMazeOptions(api_key="secret", product=ProductInfo("MyApp", "1.0"))
    """

    api_address: str = DEFAULT_API_ADDRESS
    api_key: Optional[str] = None
    product: Optional[ProductInfo] = None

    def __post_init__(self) -> None:
        if not isinstance(self.api_address, str) or not self.api_address.strip():
            raise ConfigurationError("API address must not be empty")
        # frozen: passer par object.__setattr__ pour normaliser
        object.__setattr__(self, "api_address", self.api_address.strip().rstrip("/"))

    @property
    def has_api_key(self) -> bool:
        """Vrai si une cle API non vide est configuree."""
        return bool(self.api_key and self.api_key.strip())
