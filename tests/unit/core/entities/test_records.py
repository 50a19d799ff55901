"""
Tests pour les enregistrements TVmaze decodes par pydantic.

Verifie le mapping des alias camelCase, les dates vides, l'immutabilite
et la tolerance aux champs inconnus.
"""

from datetime import date

import pytest
from pydantic import TypeAdapter, ValidationError

from tvmaze_client.core.entities import (
    CastMember,
    Episode,
    PersonSearchResult,
    ScheduleEntry,
    SearchResult,
    Show,
    ShowImage,
)
from tests.fixtures.tvmaze_responses import (
    TVMAZE_CAST_RESPONSE,
    TVMAZE_EPISODE_RESPONSE,
    TVMAZE_IMAGES_RESPONSE,
    TVMAZE_PERSON_RESPONSE,
    TVMAZE_SHOW_EMBED_RESPONSE,
    TVMAZE_SHOW_RESPONSE,
)


class TestShow:
    """Tests pour Show."""

    def test_camel_case_aliases(self):
        """Les champs camelCase sont exposes en snake_case."""
        show = Show.model_validate(TVMAZE_SHOW_RESPONSE)
        assert show.average_runtime == 60
        assert show.official_site == "http://www.cbs.com/shows/under-the-dome/"
        assert show.network.official_site == "https://www.cbs.com/"
        assert show.schedule.days == ("Thursday",)
        assert show.rating.average == 6.5

    def test_populate_by_name(self):
        """Les enregistrements peuvent etre construits avec les noms Python."""
        show = Show(id=5, name="True Detective", average_runtime=55)
        assert show.average_runtime == 55

    def test_records_are_frozen(self):
        show = Show.model_validate(TVMAZE_SHOW_RESPONSE)
        with pytest.raises(ValidationError):
            show.name = "Other"

    def test_links_are_frozen(self):
        """Les liens HAL sont des enregistrements, pas des dictionnaires modifiables."""
        show = Show.model_validate(TVMAZE_SHOW_RESPONSE)
        assert show.links.self_link.href == "https://api.tvmaze.com/shows/1"
        assert show.links.next_episode is None
        with pytest.raises(ValidationError):
            show.links.self_link = None
        with pytest.raises(TypeError):
            show.links["self"] = None

    def test_unknown_fields_are_ignored(self):
        show = Show.model_validate({"id": 1, "name": "X", "newField": {"a": 1}})
        assert not hasattr(show, "newField")

    def test_empty_dates_become_none(self):
        show = Show.model_validate({"id": 1, "name": "X", "premiered": "", "ended": None})
        assert show.premiered is None
        assert show.ended is None

    def test_free_form_type_and_genres(self):
        """Les enumerations du service restent des chaines libres."""
        show = Show.model_validate(
            {"id": 1, "name": "X", "type": "Panel Show", "genres": ["Unheard Genre"]}
        )
        assert show.type == "Panel Show"
        assert show.genres == ("Unheard Genre",)

    def test_missing_required_field_raises(self):
        with pytest.raises(ValidationError):
            Show.model_validate({"id": 1})

    def test_embedded_resources(self):
        show = Show.model_validate(TVMAZE_SHOW_EMBED_RESPONSE)
        assert isinstance(show.embedded.cast[0], CastMember)
        assert isinstance(show.embedded.episodes[0], Episode)
        assert show.embedded.seasons == ()
        assert show.embedded.nextepisode is None


class TestSearchResults:
    """Tests pour SearchResult et PersonSearchResult."""

    def test_scored_envelope(self):
        result = SearchResult.model_validate({"score": 17.5, "show": TVMAZE_SHOW_RESPONSE})
        assert result.score == 17.5
        assert result.id == 1
        assert result.name == "Under the Dome"

    def test_bare_show_is_wrapped(self):
        result = SearchResult.model_validate({"id": 1, "name": "X"})
        assert result.score is None
        assert result.show.id == 1

    def test_bare_person_is_wrapped(self):
        result = PersonSearchResult.model_validate(TVMAZE_PERSON_RESPONSE)
        assert result.person.name == "Mike Vogel"


class TestEpisodes:
    """Tests pour Episode et ScheduleEntry."""

    def test_episode_fields(self):
        episode = Episode.model_validate(TVMAZE_EPISODE_RESPONSE)
        assert episode.season == 1
        assert episode.number == 1
        assert episode.airdate == date(2013, 6, 24)
        assert not episode.is_special

    def test_schedule_entry_show_at_root(self):
        entry = ScheduleEntry.model_validate(
            dict(TVMAZE_EPISODE_RESPONSE, show=TVMAZE_SHOW_RESPONSE)
        )
        assert entry.aired_show.id == 1

    def test_schedule_entry_without_show(self):
        entry = ScheduleEntry.model_validate(TVMAZE_EPISODE_RESPONSE)
        assert entry.aired_show is None


class TestCast:
    """Tests pour CastMember."""

    def test_self_alias(self):
        payload = dict(TVMAZE_CAST_RESPONSE[0], self=True, voice=True)
        member = CastMember.model_validate(payload)
        assert member.is_self is True
        assert member.voice is True

    def test_decoded_lists_do_not_share_instances(self):
        """Deux decodages de la meme reponse produisent des objets distincts."""
        adapter = TypeAdapter(list[CastMember])
        first = adapter.validate_python(TVMAZE_CAST_RESPONSE)
        second = adapter.validate_python(TVMAZE_CAST_RESPONSE)
        assert first == second
        assert first[0] is not second[0]


class TestShowImage:
    """Tests pour ShowImage."""

    def test_resolutions(self):
        image = ShowImage.model_validate(TVMAZE_IMAGES_RESPONSE[0])
        assert image.resolutions.original.width == 680
        assert image.resolutions.medium.height == 295

    def test_missing_medium_resolution(self):
        image = ShowImage.model_validate(TVMAZE_IMAGES_RESPONSE[1])
        assert image.resolutions.medium is None
        assert image.resolutions.original.width is None

    def test_resolutions_are_frozen(self):
        image = ShowImage.model_validate(TVMAZE_IMAGES_RESPONSE[0])
        with pytest.raises(ValidationError):
            image.resolutions.original = None
        with pytest.raises(TypeError):
            image.resolutions["x"] = None
