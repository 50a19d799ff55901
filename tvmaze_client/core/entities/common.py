"""
Sous-objets partages des enregistrements TVmaze.

Les enumerations du service (type de show, genre, statut, type d'image)
restent des chaines libres: leur ensemble de valeurs n'est pas fige cote API.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _empty_to_none(value: Any) -> Any:
    """TVmaze renvoie parfois "" au lieu de null pour les dates inconnues."""
    if value == "":
        return None
    return value


OptionalDate = Annotated[Optional[date], BeforeValidator(_empty_to_none)]


class TVMazeModel(BaseModel):
    """
    Base des enregistrements decodes depuis l'API.

    Les instances sont immutables (snapshot d'une reponse), les champs
    inconnus sont ignores et les noms camelCase du JSON sont exposes en
    snake_case via des alias.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ImageLinks(TVMazeModel):
    """URLs d'une image en taille moyenne et originale."""

    medium: Optional[str] = None
    original: Optional[str] = None


class Country(TVMazeModel):
    """Pays d'une chaine ou d'un alias (code ISO 3166-1)."""

    name: str
    code: str
    timezone: Optional[str] = None


class Network(TVMazeModel):
    """Chaine TV ou plateforme web (web channel)."""

    id: int
    name: str
    country: Optional[Country] = None
    official_site: Optional[str] = Field(default=None, alias="officialSite")


class AirSchedule(TVMazeModel):
    """Horaire de diffusion habituel d'un show."""

    time: str = ""
    days: tuple[str, ...] = ()


class Rating(TVMazeModel):
    average: Optional[float] = None


class Externals(TVMazeModel):
    """Identifiants du show chez des services tiers."""

    tvrage: Optional[int] = None
    thetvdb: Optional[int] = None
    imdb: Optional[str] = None


class Link(TVMazeModel):
    href: str
    name: Optional[str] = None


class Links(TVMazeModel):
    """
    Liens HAL (_links) d'un enregistrement.

    Seules les relations exposees par l'API sont renseignees, les autres
    restent None.
    """

    self_link: Optional[Link] = Field(default=None, alias="self")
    previous_episode: Optional[Link] = Field(default=None, alias="previousepisode")
    next_episode: Optional[Link] = Field(default=None, alias="nextepisode")
    show: Optional[Link] = None
    character: Optional[Link] = None
