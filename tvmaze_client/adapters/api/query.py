"""
Construction des URLs de requete TVmaze.

Transforme une liste ordonnee de parametres en query string et la
concatene a ``adresse de base + chemin``. L'ordre d'insertion est conserve
et aucun parametre n'est deduplique.

Les valeurs sont encodees en pourcentage (les noms sont des litteraux fixes
comme ``q`` ou ``embed[]`` et restent tels quels). Pour des valeurs composees
de caracteres surs, la sortie est identique a une concatenation brute.
"""

from collections.abc import Iterator
from datetime import date
from typing import Optional
from urllib.parse import quote

from tvmaze_client.core.errors import InvalidArgumentError
from tvmaze_client.utils.constants import (
    DATE_FORMAT,
    EMBED_LIST_PARAMETER,
    EMBED_PARAMETER,
)


class QueryParameters:
    """
    Liste ordonnee de paires (nom, valeur) formant une query string.

    Example:
        params = QueryParameters()
        params.add("q", "girls")
        params.add_embed("cast", "episodes")
        build_url("http://api.tvmaze.com", "/singlesearch/shows", params)
        # http://api.tvmaze.com/singlesearch/shows?q=girls&embed[]=cast&embed[]=episodes
    """

    def __init__(self, items: Optional[list[tuple[str, str]]] = None) -> None:
        self._items: list[tuple[str, str]] = list(items) if items else []

    def add(self, name: str, value: str) -> "QueryParameters":
        """Ajoute un parametre en fin de liste."""
        self._items.append((name, value))
        return self

    def add_date(self, name: str, value: date) -> "QueryParameters":
        """Ajoute une date au format ISO 8601 (yyyy-MM-dd)."""
        return self.add(name, value.strftime(DATE_FORMAT))

    def add_embed(self, *tokens: str) -> "QueryParameters":
        """
        Ajoute les sous-ressources a inclure dans la reponse.

        - aucun token : rien n'est ajoute
        - un token : ``embed=<token>``
        - plusieurs tokens : ``embed[]=<token>`` pour chacun d'eux

        Tous les tokens sont emis, pas seulement le premier.

        Raises:
            InvalidArgumentError: Si un token est None, vide ou pas une chaine
        """
        for token in tokens:
            if not isinstance(token, str) or not token.strip():
                raise InvalidArgumentError(f"Invalid embed token: {token!r}")

        if len(tokens) == 1:
            return self.add(EMBED_PARAMETER, tokens[0])

        for token in tokens:
            self.add(EMBED_LIST_PARAMETER, token)
        return self

    def copy(self) -> "QueryParameters":
        return QueryParameters(self._items)

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"QueryParameters({self._items!r})"


def encode_query(parameters: QueryParameters) -> str:
    """
    Encode les parametres en query string.

    Returns:
        "" pour une liste vide, sinon ``?n1=v1&n2=v2...`` dans l'ordre d'insertion
    """
    segments = [f"{name}={quote(value, safe='')}" for name, value in parameters]
    if not segments:
        return ""
    return "?" + "&".join(segments)


def build_url(base_address: str, path: str, parameters: QueryParameters) -> str:
    """
    Construit l'URL complete d'une requete.

    Args:
        base_address: Adresse de base sans slash final (ex: "http://api.tvmaze.com")
        path: Chemin de l'endpoint, commencant par "/"
        parameters: Parametres de la requete

    Returns:
        ``base_address + path + query``
    """
    return base_address + path + encode_query(parameters)
