"""
Enregistrements lies aux personnes: fiche, personnage, distribution, equipe, credits.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, model_validator

from tvmaze_client.core.entities.common import (
    Country,
    ImageLinks,
    Links,
    OptionalDate,
    TVMazeModel,
)


class PersonEmbedded(TVMazeModel):
    castcredits: tuple[CastCredit, ...] = ()
    crewcredits: tuple[CrewCredit, ...] = ()


class Person(TVMazeModel):
    """
    Personne (acteur, membre d'equipe).

    Attributes:
        id: ID TVmaze de la personne
        country: Pays de naissance, None si inconnu
        gender: Genre libre tel que renvoye par le service
    """

    id: int
    url: Optional[str] = None
    name: str
    country: Optional[Country] = None
    birthday: OptionalDate = None
    deathday: OptionalDate = None
    gender: Optional[str] = None
    image: Optional[ImageLinks] = None
    updated: Optional[int] = None
    links: Optional[Links] = Field(default=None, alias="_links")
    embedded: Optional[PersonEmbedded] = Field(default=None, alias="_embedded")


class PersonSearchResult(TVMazeModel):
    """Resultat de /search/people: une personne et son score."""

    score: Optional[float] = None
    person: Person

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_person(cls, data: Any) -> Any:
        if isinstance(data, dict) and "person" not in data:
            return {"score": None, "person": data}
        return data


class Character(TVMazeModel):
    id: int
    url: Optional[str] = None
    name: str
    image: Optional[ImageLinks] = None
    links: Optional[Links] = Field(default=None, alias="_links")


class CastMember(TVMazeModel):
    """
    Element de distribution: une personne et le personnage joue.

    Attributes:
        is_self: La personne joue son propre role
        voice: Role de doublage uniquement
    """

    person: Person
    character: Character
    is_self: bool = Field(default=False, alias="self")
    voice: bool = False


class CrewMember(TVMazeModel):
    """Membre d'equipe d'un show (type libre: "Creator", "Executive Producer"...)."""

    type: str
    person: Person


class CastCreditEmbedded(TVMazeModel):
    show: Optional[Show] = None
    character: Optional[Character] = None


class CastCredit(TVMazeModel):
    """
    Credit de distribution d'une personne: un show et un personnage.

    Sans embed, seules les references (_links) sont renseignees.
    """

    is_self: bool = Field(default=False, alias="self")
    voice: bool = False
    links: Optional[Links] = Field(default=None, alias="_links")
    embedded: Optional[CastCreditEmbedded] = Field(default=None, alias="_embedded")


class CrewCreditEmbedded(TVMazeModel):
    show: Optional[Show] = None


class CrewCredit(TVMazeModel):
    """Credit d'equipe d'une personne: un show et un type de poste."""

    type: str
    links: Optional[Links] = Field(default=None, alias="_links")
    embedded: Optional[CrewCreditEmbedded] = Field(default=None, alias="_embedded")
