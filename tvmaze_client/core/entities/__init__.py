"""
Enregistrements du domaine TVmaze.

Modeles pydantic immutables decodes depuis les reponses JSON du service.
Ils ne representent que les champs necessaires a un acces type, pas le
schema complet de l'API.

Exports :
- Show, Season, ShowAlias, ShowImage, SearchResult : shows
- Episode, ScheduleEntry : episodes et programmes
- Person, Character, CastMember, CrewMember, CastCredit, CrewCredit,
  PersonSearchResult : personnes et credits
"""

from tvmaze_client.core.entities.common import (
    AirSchedule,
    Country,
    Externals,
    ImageLinks,
    Link,
    Links,
    Network,
    Rating,
    TVMazeModel,
)
from tvmaze_client.core.entities.episode import (
    Episode,
    EpisodeEmbedded,
    GuestCrewMember,
    ScheduleEntry,
)
from tvmaze_client.core.entities.person import (
    CastCredit,
    CastCreditEmbedded,
    CastMember,
    Character,
    CrewCredit,
    CrewCreditEmbedded,
    CrewMember,
    Person,
    PersonEmbedded,
    PersonSearchResult,
)
from tvmaze_client.core.entities.show import (
    ImageResolution,
    ImageResolutions,
    SearchResult,
    Season,
    Show,
    ShowAlias,
    ShowEmbedded,
    ShowImage,
)

# Les modules se referencent mutuellement (Show <-> Episode <-> Person):
# les references sont resolues ici, ou tous les noms sont disponibles.
ShowEmbedded.model_rebuild()
Show.model_rebuild()
SearchResult.model_rebuild()
GuestCrewMember.model_rebuild()
EpisodeEmbedded.model_rebuild()
Episode.model_rebuild()
ScheduleEntry.model_rebuild()
PersonEmbedded.model_rebuild()
Person.model_rebuild()
PersonSearchResult.model_rebuild()
CastMember.model_rebuild()
CrewMember.model_rebuild()
CastCreditEmbedded.model_rebuild()
CastCredit.model_rebuild()
CrewCreditEmbedded.model_rebuild()
CrewCredit.model_rebuild()

__all__ = [
    # Objets communs
    "AirSchedule",
    "Country",
    "Externals",
    "ImageLinks",
    "Link",
    "Links",
    "Network",
    "Rating",
    "TVMazeModel",
    # Shows
    "ImageResolution",
    "ImageResolutions",
    "SearchResult",
    "Season",
    "Show",
    "ShowAlias",
    "ShowEmbedded",
    "ShowImage",
    # Episodes
    "Episode",
    "EpisodeEmbedded",
    "GuestCrewMember",
    "ScheduleEntry",
    # Personnes
    "CastCredit",
    "CastCreditEmbedded",
    "CastMember",
    "Character",
    "CrewCredit",
    "CrewCreditEmbedded",
    "CrewMember",
    "Person",
    "PersonEmbedded",
    "PersonSearchResult",
]
