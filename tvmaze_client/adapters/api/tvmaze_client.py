"""
Client TVmaze pour la recherche et recuperation de metadonnees de series TV.

Chaque methode publique est une operation sans etat qui emet exactement une
requete GET et decode la reponse JSON en enregistrements types. Aucun cache,
aucune relance: les erreurs remontent directement a l'appelant.

Reference API: https://www.tvmaze.com/api

Usage:
    async with TVMazeClient.create(TVMazeOptions(api_key="xxx")) as client:
        results = await client.search_shows("Breaking Bad")
        show = await client.get_show(results[0].show.id, "cast", "episodes")
"""

import datetime
from dataclasses import replace
from functools import lru_cache
from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from tvmaze_client.adapters.api.query import QueryParameters, build_url
from tvmaze_client.core.entities import (
    CastCredit,
    CastMember,
    CrewCredit,
    CrewMember,
    Episode,
    Person,
    PersonSearchResult,
    ScheduleEntry,
    SearchResult,
    Season,
    Show,
    ShowAlias,
    ShowImage,
)
from tvmaze_client.core.errors import (
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RateLimitError,
    TVMazeHTTPError,
)
from tvmaze_client.core.options import TVMazeOptions
from tvmaze_client.utils.constants import (
    API_KEY_PARAMETER,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
)


@lru_cache(maxsize=None)
def _type_adapter(shape: Any) -> TypeAdapter:
    """Retourne (et memorise) le TypeAdapter pydantic d'une forme de resultat."""
    return TypeAdapter(shape)


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{name} must be a non-empty string")
    return value


def _require_id(name: str, value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return str(value)


def _require_page(page: Any) -> str:
    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        raise InvalidArgumentError(f"page must be a non-negative integer, got {page!r}")
    return str(page)


def _require_date(name: str, value: Any) -> datetime.date:
    if not isinstance(value, datetime.date):
        raise InvalidArgumentError(f"{name} must be a date, got {value!r}")
    return value


class TVMazeClient:
    """
    Client API TVmaze.

    Combine la construction des URLs (QueryParameters / build_url) et
    l'envoi des requetes (_get_json) qui applique uniformement les options
    partagees: adresse de base, cle API, User-Agent.

    Les options sont copiees a la construction et ne changent plus ensuite;
    le client peut donc etre utilise par plusieurs coroutines concurrentes.

    Example:
        http_client = httpx.AsyncClient()
        client = TVMazeClient(http_client, TVMazeOptions())
        episodes = await client.get_show_episodes(1, specials=True)
        await http_client.aclose()
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        options: Optional[TVMazeOptions] = None,
    ) -> None:
        """
        Initialise le client TVmaze.

        Args:
            http_client: Transport HTTP asynchrone (non ferme par le client)
            options: Options partagees (adresse, cle API, produit), defaut si None

        Raises:
            ConfigurationError: Si le transport est absent ou les options invalides
        """
        if http_client is None:
            raise ConfigurationError("An httpx.AsyncClient is required")
        if options is None:
            options = TVMazeOptions()
        elif not isinstance(options, TVMazeOptions):
            raise ConfigurationError(
                f"options must be TVMazeOptions, got {type(options).__name__}"
            )

        self._http_client = http_client
        self._options = replace(options)
        self._owns_client = False

    @classmethod
    def create(
        cls,
        options: Optional[TVMazeOptions] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> "TVMazeClient":
        """
        Cree un client proprietaire de son propre httpx.AsyncClient.

        Le transport est ferme par close() ou a la sortie du bloc ``async with``.
        """
        http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
        )
        client = cls(http_client, options)
        client._owns_client = True
        return client

    @property
    def options(self) -> TVMazeOptions:
        """Options capturees a la construction."""
        return self._options

    async def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par create()."""
        if self._owns_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def __aenter__(self) -> "TVMazeClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Recherche
    # ------------------------------------------------------------------

    async def search_shows(self, query: str) -> list[SearchResult]:
        """
        Recherche parmi tous les shows par nom.

        Args:
            query: Texte recherche

        Returns:
            Liste de SearchResult (score + show), eventuellement vide
        """
        params = QueryParameters().add("q", _require_text("query", query))
        return await self._get_json("/search/shows", list[SearchResult], params)

    async def search_single_show(self, query: str, *embed: str) -> Show:
        """
        Recherche le show le plus pertinent pour une requete.

        Renvoie 404 (TVMazeHTTPError) si aucun show ne correspond.

        Args:
            query: Texte recherche
            *embed: Sous-ressources a inclure (ex: "episodes", "cast")
        """
        params = QueryParameters().add("q", _require_text("query", query))
        params.add_embed(*embed)
        return await self._get_json("/singlesearch/shows", Show, params)

    async def lookup_show_by_imdb_id(self, imdb_id: str) -> Show:
        """Recherche un show par son ID IMDb (ex: "tt0944947")."""
        params = QueryParameters().add("imdb", _require_text("imdb_id", imdb_id))
        return await self._get_json("/lookup/shows", Show, params)

    async def lookup_show_by_tvdb_id(self, tvdb_id: str) -> Show:
        """Recherche un show par son ID TheTVDB."""
        params = QueryParameters().add("thetvdb", _require_text("tvdb_id", tvdb_id))
        return await self._get_json("/lookup/shows", Show, params)

    async def lookup_show_by_tvrage_id(self, tvrage_id: str) -> Show:
        """Recherche un show par son ID TVRage."""
        params = QueryParameters().add("tvrage", _require_text("tvrage_id", tvrage_id))
        return await self._get_json("/lookup/shows", Show, params)

    async def search_people(self, query: str) -> list[PersonSearchResult]:
        """Recherche des personnes par nom."""
        params = QueryParameters().add("q", _require_text("query", query))
        return await self._get_json("/search/people", list[PersonSearchResult], params)

    # ------------------------------------------------------------------
    # Programmes de diffusion
    # ------------------------------------------------------------------

    async def get_schedule(
        self,
        date: Optional[datetime.date] = None,
        country: Optional[str] = None,
    ) -> list[ScheduleEntry]:
        """
        Liste complete des episodes diffuses dans un pays a une date donnee.

        Les episodes sont tries par ordre de diffusion et incluent le show.
        Attention: le code ISO du Royaume-Uni est GB, pas UK.

        Args:
            date: Date du programme (le service utilise aujourd'hui si None)
            country: Code pays ISO 3166-1 (le service utilise "US" si None ou vide)
        """
        params = QueryParameters()
        if date is not None:
            params.add_date("date", _require_date("date", date))
        if country:
            params.add("country", country)
        return await self._get_json("/schedule", list[ScheduleEntry], params)

    async def get_streaming_schedule(
        self,
        date: Optional[datetime.date] = None,
        country: Optional[str] = None,
    ) -> list[ScheduleEntry]:
        """
        Liste des episodes diffuses sur les plateformes web a une date donnee.

        TVmaze distingue les web channels locaux (un seul pays) et globaux.
        Le parametre country a trois etats:

        - None : parametre omis, chaines locales et globales
        - "" : ``country=`` envoye vide, chaines globales uniquement
        - code ISO : chaines locales de ce pays uniquement

        Args:
            date: Date du programme (le service utilise aujourd'hui si None)
            country: Voir ci-dessus
        """
        params = QueryParameters()
        if date is not None:
            params.add_date("date", _require_date("date", date))
        if country is not None:
            params.add("country", country)
        return await self._get_json("/schedule/web", list[ScheduleEntry], params)

    async def get_full_schedule(self) -> list[ScheduleEntry]:
        """
        Tous les episodes futurs connus de TVmaze, tous pays confondus.

        La reponse pese plusieurs Mo et est mise en cache 24h cote service.
        """
        return await self._get_json("/schedule/full", list[ScheduleEntry])

    # ------------------------------------------------------------------
    # Shows
    # ------------------------------------------------------------------

    async def get_show(self, show_id: int, *embed: str) -> Show:
        """
        Recupere les informations principales d'un show.

        Args:
            show_id: ID TVmaze du show
            *embed: Sous-ressources a inclure (ex: "cast", "nextepisode")
        """
        path = f"/shows/{_require_id('show_id', show_id)}"
        params = QueryParameters().add_embed(*embed)
        return await self._get_json(path, Show, params)

    async def get_show_episodes(self, show_id: int, specials: bool = False) -> list[Episode]:
        """
        Liste complete des episodes d'un show, dans l'ordre de diffusion.

        Args:
            show_id: ID TVmaze du show
            specials: Inclure les episodes speciaux (exclus par defaut)
        """
        path = f"/shows/{_require_id('show_id', show_id)}/episodes"
        params = QueryParameters()
        if specials:
            params.add("specials", "1")
        return await self._get_json(path, list[Episode], params)

    async def get_episode_by_number(self, show_id: int, season: int, number: int) -> Episode:
        """
        Recupere un episode par numero de saison et d'episode.

        Raises:
            TVMazeHTTPError: status_code 404 si l'episode n'existe pas
        """
        path = f"/shows/{_require_id('show_id', show_id)}/episodebynumber"
        params = QueryParameters()
        params.add("season", _require_id("season", season))
        params.add("number", _require_id("number", number))
        return await self._get_json(path, Episode, params)

    async def get_episodes_by_date(self, show_id: int, date: datetime.date) -> list[Episode]:
        """
        Episodes d'un show diffuses a une date donnee.

        Utile pour les emissions quotidiennes sans numerotation de saison.

        Raises:
            TVMazeHTTPError: status_code 404 si aucun episode ce jour-la
        """
        path = f"/shows/{_require_id('show_id', show_id)}/episodesbydate"
        params = QueryParameters().add_date("date", _require_date("date", date))
        return await self._get_json(path, list[Episode], params)

    async def get_show_seasons(self, show_id: int) -> list[Season]:
        """Saisons d'un show, par ordre croissant."""
        path = f"/shows/{_require_id('show_id', show_id)}/seasons"
        return await self._get_json(path, list[Season])

    async def get_season_episodes(self, season_id: int) -> list[Episode]:
        """
        Episodes d'une saison.

        Les speciaux sont toujours inclus, reconnaissables a ``number`` None.
        """
        path = f"/seasons/{_require_id('season_id', season_id)}/episodes"
        return await self._get_json(path, list[Episode])

    async def get_show_cast(self, show_id: int) -> list[CastMember]:
        """
        Distribution principale d'un show.

        Triee par importance du personnage (nombre d'apparitions), ordre
        determine par le service.
        """
        path = f"/shows/{_require_id('show_id', show_id)}/cast"
        return await self._get_json(path, list[CastMember])

    async def get_show_crew(self, show_id: int) -> list[CrewMember]:
        path = f"/shows/{_require_id('show_id', show_id)}/crew"
        return await self._get_json(path, list[CrewMember])

    async def get_show_aliases(self, show_id: int) -> list[ShowAlias]:
        """AKAs d'un show; country None signifie le pays d'origine du show."""
        path = f"/shows/{_require_id('show_id', show_id)}/akas"
        return await self._get_json(path, list[ShowAlias])

    async def get_show_images(self, show_id: int) -> list[ShowImage]:
        path = f"/shows/{_require_id('show_id', show_id)}/images"
        return await self._get_json(path, list[ShowImage])

    async def get_show_index(self, page: int = 1) -> list[Show]:
        """
        Index pagine de tous les shows (250 maximum par page).

        La pagination est basee sur l'ID: la page N contient les IDs de
        N*250 a (N+1)*250, une suppression ne decale donc jamais les pages
        suivantes. Une page au-dela de la fin renvoie 404.

        Args:
            page: Numero de page
        """
        params = QueryParameters().add("page", _require_page(page))
        return await self._get_json("/shows", list[Show], params)

    # ------------------------------------------------------------------
    # Episodes et personnes
    # ------------------------------------------------------------------

    async def get_episode(self, episode_id: int, *embed: str) -> Episode:
        """Recupere un episode par son ID (embed possible, ex: "show")."""
        path = f"/episodes/{_require_id('episode_id', episode_id)}"
        params = QueryParameters().add_embed(*embed)
        return await self._get_json(path, Episode, params)

    async def get_person(self, person_id: int, *embed: str) -> Person:
        """Recupere une personne par son ID (embed possible, ex: "castcredits")."""
        path = f"/people/{_require_id('person_id', person_id)}"
        params = QueryParameters().add_embed(*embed)
        return await self._get_json(path, Person, params)

    async def get_person_cast_credits(self, person_id: int, *embed: str) -> list[CastCredit]:
        """
        Credits de distribution d'une personne (niveau show).

        Sans embed, seules les references au show et au personnage sont
        renvoyees; ``embed="show"`` ou ``"character"`` inclut les objets complets.
        """
        path = f"/people/{_require_id('person_id', person_id)}/castcredits"
        params = QueryParameters().add_embed(*embed)
        return await self._get_json(path, list[CastCredit], params)

    async def get_person_crew_credits(self, person_id: int, *embed: str) -> list[CrewCredit]:
        """Credits d'equipe d'une personne (niveau show)."""
        path = f"/people/{_require_id('person_id', person_id)}/crewcredits"
        params = QueryParameters().add_embed(*embed)
        return await self._get_json(path, list[CrewCredit], params)

    async def get_person_index(self, page: int = 1) -> list[Person]:
        """Index pagine de toutes les personnes (1000 maximum par page)."""
        params = QueryParameters().add("page", _require_page(page))
        return await self._get_json("/people", list[Person], params)

    # ------------------------------------------------------------------
    # Envoi des requetes
    # ------------------------------------------------------------------

    async def _get_json(
        self,
        path: str,
        shape: Any,
        parameters: Optional[QueryParameters] = None,
    ) -> Any:
        """
        Envoie une requete GET et decode la reponse dans la forme demandee.

        La cle API, si configuree, est toujours ajoutee en dernier parametre.
        L'identite produit, si configuree, remplace le User-Agent par defaut.

        Args:
            path: Chemin de l'endpoint (ex: "/shows/1")
            shape: Type attendu (ex: Show, list[Episode])
            parameters: Parametres de l'operation (non modifies)

        Returns:
            Reponse decodee

        Raises:
            RateLimitError: Sur 429, sans relance
            TVMazeHTTPError: Sur tout autre statut d'echec (corps non decode)
            DecodeError: Si le corps n'est pas du JSON de la forme attendue
            httpx.TransportError: Erreur reseau, propagee telle quelle
        """
        params = parameters.copy() if parameters is not None else QueryParameters()
        if self._options.has_api_key:
            params.add(API_KEY_PARAMETER, self._options.api_key)

        url = build_url(self._options.api_address, path, params)

        headers: dict[str, str] = {}
        if self._options.product is not None:
            headers["User-Agent"] = str(self._options.product)

        # Pas d'URL complete dans les logs: elle contient la cle API
        logger.debug("Requete TVmaze", path=path, parameters=len(params))

        # /lookup/shows repond par une redirection vers /shows/{id}
        response = await self._http_client.get(url, headers=headers, follow_redirects=True)

        logger.debug("Reponse TVmaze", path=path, status=response.status_code)

        if response.status_code == 429:
            raise RateLimitError(response)
        if not response.is_success:
            raise TVMazeHTTPError(response)

        try:
            return _type_adapter(shape).validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response body for {path}: {e}") from e
