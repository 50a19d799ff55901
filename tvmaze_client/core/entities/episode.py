"""
Enregistrements lies aux episodes et aux entrees de programme TV.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from tvmaze_client.core.entities.common import (
    ImageLinks,
    Links,
    OptionalDate,
    Rating,
    TVMazeModel,
)


class GuestCrewMember(TVMazeModel):
    """Membre d'equipe invite sur un episode."""

    type: str = Field(alias="guestCrewType")
    person: Person


class EpisodeEmbedded(TVMazeModel):
    """Sous-ressources d'un episode incluses via embed."""

    show: Optional[Show] = None
    guestcast: tuple[CastMember, ...] = ()
    guestcrew: tuple[GuestCrewMember, ...] = ()


class Episode(TVMazeModel):
    """
    Episode TVmaze.

    Les speciaux ont un numero d'episode None.

    Attributes:
        id: ID TVmaze de l'episode
        season: Numero de saison
        number: Numero dans la saison, None pour un special
        airdate: Date de diffusion (None si inconnue)
        airstamp: Horodatage de diffusion avec fuseau
    """

    id: int
    url: Optional[str] = None
    name: str = ""
    season: Optional[int] = None
    number: Optional[int] = None
    type: Optional[str] = None
    airdate: OptionalDate = None
    airtime: Optional[str] = None
    airstamp: Optional[datetime] = None
    runtime: Optional[int] = None
    rating: Optional[Rating] = None
    image: Optional[ImageLinks] = None
    summary: Optional[str] = None
    links: Optional[Links] = Field(default=None, alias="_links")
    embedded: Optional[EpisodeEmbedded] = Field(default=None, alias="_embedded")

    @property
    def is_special(self) -> bool:
        return self.number is None


class ScheduleEntry(Episode):
    """
    Episode d'un programme de diffusion.

    /schedule place le show dans ``show``, /schedule/web et /schedule/full
    dans ``_embedded.show``; ``aired_show`` masque cette difference.
    """

    show: Optional[Show] = None

    @property
    def aired_show(self) -> Optional[Show]:
        if self.show is not None:
            return self.show
        if self.embedded is not None:
            return self.embedded.show
        return None
