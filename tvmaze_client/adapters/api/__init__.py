"""
Client de l'API externe TVmaze.

Ce module fournit:
- TVMazeClient: une coroutine typee par endpoint de l'API
- QueryParameters / build_url: construction des URLs de requete

Les erreurs (TVMazeHTTPError, RateLimitError, DecodeError...) sont definies
dans core/errors.py.
"""

from tvmaze_client.adapters.api.query import QueryParameters, build_url, encode_query
from tvmaze_client.adapters.api.tvmaze_client import TVMazeClient

__all__ = [
    "QueryParameters",
    "TVMazeClient",
    "build_url",
    "encode_query",
]
