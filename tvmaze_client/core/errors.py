"""
Exceptions du client TVmaze.

Chaque type d'erreur correspond a une categorie distincte pour que
l'appelant puisse brancher dessus (ex: 404 = episode introuvable):

- ConfigurationError : dependance manquante a la construction du client
- TVMazeHTTPError : statut HTTP d'echec (4xx/5xx), corps non decode
- RateLimitError : cas particulier du 429, aucune relance automatique
- DecodeError : corps JSON invalide ou de forme inattendue
- InvalidArgumentError : parametre requis absent, leve avant tout appel reseau

Les erreurs de transport (httpx.TransportError) ne sont pas enveloppees
et remontent telles quelles a l'appelant.
"""

from typing import Optional

import httpx


class TVMazeError(Exception):
    """Classe de base des erreurs levees par le client TVmaze."""


class ConfigurationError(TVMazeError):
    """Client construit sans transport ou avec des options invalides."""


class InvalidArgumentError(TVMazeError, ValueError):
    """Parametre d'operation invalide, detecte avant l'envoi de la requete."""


class TVMazeHTTPError(TVMazeError, httpx.HTTPStatusError):
    """
    Reponse HTTP avec un statut d'echec.

    Herite de httpx.HTTPStatusError pour que le code existant qui inspecte
    ``e.response.status_code`` continue de fonctionner.

    Attributes:
        status_code: Code de statut HTTP de la reponse
    """

    def __init__(self, response: httpx.Response, message: Optional[str] = None) -> None:
        """
        Initialise l'erreur depuis la reponse en echec.

        Args:
            response: Reponse httpx dont le statut indique un echec
            message: Message optionnel (genere depuis le statut sinon)
        """
        if message is None:
            message = (
                f"TVmaze returned HTTP {response.status_code} "
                f"for {response.request.url.path}"
            )
        super().__init__(message, request=response.request, response=response)

    @property
    def status_code(self) -> int:
        """Code de statut HTTP de la reponse."""
        return self.response.status_code


class RateLimitError(TVMazeHTTPError):
    """
    Le service a repondu 429 Too Many Requests.

    Aucune relance n'est tentee: l'appelant decide de la strategie.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, response: httpx.Response) -> None:
        """
        Initialise l'erreur avec la valeur Retry-After optionnelle.

        Args:
            response: Reponse 429 du service
        """
        retry_after_header = response.headers.get("Retry-After")
        self.retry_after = (
            int(retry_after_header)
            if retry_after_header and retry_after_header.isdigit()
            else None
        )
        super().__init__(
            response, f"Rate limited. Retry after: {self.retry_after}s"
        )


class DecodeError(TVMazeError):
    """Le corps de la reponse n'est pas du JSON valide pour la forme attendue."""
