"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI: parametres,
options immutables, transport httpx partage et client TVmaze.
"""

import httpx
from dependency_injector import containers, providers

from .adapters.api.tvmaze_client import TVMazeClient
from .config import Settings


def _build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Cree le transport HTTP avec les timeouts configures."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.timeout_seconds,
            connect=settings.connect_timeout_seconds,
        ),
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.tvmaze_client()
        shows = await client.search_shows("girls")
        await container.http_client().aclose()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Options - snapshot immutable des parametres
    options = providers.Singleton(lambda settings: settings.to_options(), config)

    # Transport - un seul client httpx pour le connection pooling
    http_client = providers.Singleton(_build_http_client, config)

    # Client TVmaze - sans etat, nouvelle instance a chaque appel
    tvmaze_client = providers.Factory(
        TVMazeClient,
        http_client=http_client,
        options=options,
    )
