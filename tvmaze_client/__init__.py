"""
tvmaze-client - Client asynchrone type pour l'API TVmaze.

Ce package construit les URLs des endpoints TVmaze, applique la cle API et
le User-Agent configures, envoie les requetes via httpx et decode les
reponses JSON en enregistrements pydantic immutables.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (enregistrements, options, erreurs)
- adapters/ : Couche infrastructure (client HTTP)
"""

from tvmaze_client.adapters.api import QueryParameters, TVMazeClient, build_url
from tvmaze_client.core.errors import (
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RateLimitError,
    TVMazeError,
    TVMazeHTTPError,
)
from tvmaze_client.core.options import ProductInfo, TVMazeOptions

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "InvalidArgumentError",
    "ProductInfo",
    "QueryParameters",
    "RateLimitError",
    "TVMazeClient",
    "TVMazeError",
    "TVMazeHTTPError",
    "TVMazeOptions",
    "build_url",
]
