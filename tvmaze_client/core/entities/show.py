"""
Enregistrements lies aux shows: show, saison, alias, images, resultat de recherche.

Les references vers Episode et CastMember sont resolues dans
``tvmaze_client.core.entities`` une fois tous les modules charges.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, model_validator

from tvmaze_client.core.entities.common import (
    AirSchedule,
    Country,
    Externals,
    ImageLinks,
    Links,
    Network,
    OptionalDate,
    Rating,
    TVMazeModel,
)


class ShowEmbedded(TVMazeModel):
    """Sous-ressources incluses via le parametre embed."""

    episodes: tuple[Episode, ...] = ()
    seasons: tuple[Season, ...] = ()
    cast: tuple[CastMember, ...] = ()
    crew: tuple[CrewMember, ...] = ()
    akas: tuple[ShowAlias, ...] = ()
    images: tuple[ShowImage, ...] = ()
    nextepisode: Optional[Episode] = None
    previousepisode: Optional[Episode] = None


class Show(TVMazeModel):
    """
    Show TVmaze avec ses informations principales.

    Attributes:
        id: ID TVmaze du show
        name: Titre du show
        type: Type libre ("Scripted", "Reality", "Animation"...)
        genres: Genres tels que renvoyes par le service
        network: Chaine de diffusion, None pour un show purement web
        web_channel: Plateforme web, None pour un show diffuse a la TV
        externals: IDs IMDb / TheTVDB / TVRage
        embedded: Sous-ressources demandees via embed, None sinon
    """

    id: int
    url: Optional[str] = None
    name: str
    type: Optional[str] = None
    language: Optional[str] = None
    genres: tuple[str, ...] = ()
    status: Optional[str] = None
    runtime: Optional[int] = None
    average_runtime: Optional[int] = Field(default=None, alias="averageRuntime")
    premiered: OptionalDate = None
    ended: OptionalDate = None
    official_site: Optional[str] = Field(default=None, alias="officialSite")
    schedule: Optional[AirSchedule] = None
    rating: Optional[Rating] = None
    weight: Optional[int] = None
    network: Optional[Network] = None
    web_channel: Optional[Network] = Field(default=None, alias="webChannel")
    dvd_country: Optional[Country] = Field(default=None, alias="dvdCountry")
    externals: Optional[Externals] = None
    image: Optional[ImageLinks] = None
    summary: Optional[str] = None
    updated: Optional[int] = None
    links: Optional[Links] = Field(default=None, alias="_links")
    embedded: Optional[ShowEmbedded] = Field(default=None, alias="_embedded")


class SearchResult(TVMazeModel):
    """
    Resultat de /search/shows: un show et son score de pertinence.

    Un objet show nu (sans enveloppe score/show) est accepte tel quel.
    """

    score: Optional[float] = None
    show: Show

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_show(cls, data: Any) -> Any:
        if isinstance(data, dict) and "show" not in data:
            return {"score": None, "show": data}
        return data

    @property
    def id(self) -> int:
        return self.show.id

    @property
    def name(self) -> str:
        return self.show.name


class Season(TVMazeModel):
    """Saison d'un show, renvoyee par ordre croissant par le service."""

    id: int
    url: Optional[str] = None
    number: Optional[int] = None
    name: str = ""
    episode_order: Optional[int] = Field(default=None, alias="episodeOrder")
    premiere_date: OptionalDate = Field(default=None, alias="premiereDate")
    end_date: OptionalDate = Field(default=None, alias="endDate")
    network: Optional[Network] = None
    web_channel: Optional[Network] = Field(default=None, alias="webChannel")
    image: Optional[ImageLinks] = None
    summary: Optional[str] = None
    links: Optional[Links] = Field(default=None, alias="_links")


class ShowAlias(TVMazeModel):
    """
    AKA d'un show.

    Un pays None signifie un AKA dans le pays d'origine du show.
    """

    name: str
    country: Optional[Country] = None


class ImageResolution(TVMazeModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class ImageResolutions(TVMazeModel):
    """Declinaisons d'une image (la taille moyenne peut manquer)."""

    original: Optional[ImageResolution] = None
    medium: Optional[ImageResolution] = None


class ShowImage(TVMazeModel):
    """
    Image d'un show.

    Le type ("poster", "banner", "background", "typography") est None pour
    les anciennes images non classees.
    """

    id: int
    type: Optional[str] = None
    main: bool = False
    resolutions: ImageResolutions = Field(default_factory=ImageResolutions)
