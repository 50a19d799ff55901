"""
Utilitaires et constantes pour tvmaze-client.

Ce module contient les constantes partagees entre le client et la configuration.
"""

from tvmaze_client.utils.constants import (
    DEFAULT_API_ADDRESS,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_COUNTRY,
    DEFAULT_TIMEOUT,
)

__all__ = [
    "DEFAULT_API_ADDRESS",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_COUNTRY",
    "DEFAULT_TIMEOUT",
]
