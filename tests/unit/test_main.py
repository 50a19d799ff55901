"""
Tests pour la CLI typer (commandes de consultation).

Les appels HTTP sont simules avec respx; le transport partage du
container est recree a chaque commande.
"""

import httpx
import pytest
import respx
from typer.testing import CliRunner

from tvmaze_client.config import Settings
from tvmaze_client.main import app, container
from tests.fixtures.tvmaze_responses import (
    TVMAZE_EPISODE_RESPONSE,
    TVMAZE_SCHEDULE_RESPONSE,
    TVMAZE_SEARCH_PEOPLE_RESPONSE,
    TVMAZE_SEARCH_SHOWS_RESPONSE,
    TVMAZE_SHOW_RESPONSE,
    TVMAZE_SPECIAL_EPISODE_RESPONSE,
)

BASE_URL = "http://api.tvmaze.com"

runner = CliRunner()


@pytest.fixture(autouse=True)
def override_settings(test_settings: Settings):
    """Injecte des Settings isoles dans le container de la CLI."""
    container.config.override(test_settings)
    container.options.reset()
    yield
    container.config.reset_override()
    container.options.reset()


class TestCommands:
    """Tests des commandes CLI."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "tvmaze-client v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "http://api.tvmaze.com" in result.output

    @respx.mock
    def test_search(self):
        respx.get(f"{BASE_URL}/search/shows").mock(
            return_value=httpx.Response(200, json=TVMAZE_SEARCH_SHOWS_RESPONSE)
        )

        result = runner.invoke(app, ["search", "dome"])

        assert result.exit_code == 0
        assert "Under the Dome" in result.output

    @respx.mock
    def test_search_without_results(self):
        respx.get(f"{BASE_URL}/search/shows").mock(return_value=httpx.Response(200, json=[]))

        result = runner.invoke(app, ["search", "nothing"])

        assert result.exit_code == 0
        assert "Aucun show" in result.output

    @respx.mock
    def test_show_with_embed(self):
        route = respx.get(f"{BASE_URL}/shows/1").mock(
            return_value=httpx.Response(200, json=TVMAZE_SHOW_RESPONSE)
        )

        result = runner.invoke(app, ["show", "1", "--embed", "cast"])

        assert result.exit_code == 0
        assert "Under the Dome" in result.output
        assert route.calls.last.request.url.params["embed"] == "cast"

    @respx.mock
    def test_show_not_found_exits_with_error(self):
        respx.get(f"{BASE_URL}/shows/999999").mock(return_value=httpx.Response(404))

        result = runner.invoke(app, ["show", "999999"])

        assert result.exit_code == 1
        assert "404" in result.output

    @respx.mock
    def test_episodes_with_specials(self):
        route = respx.get(f"{BASE_URL}/shows/1/episodes").mock(
            return_value=httpx.Response(
                200, json=[TVMAZE_SPECIAL_EPISODE_RESPONSE, TVMAZE_EPISODE_RESPONSE]
            )
        )

        result = runner.invoke(app, ["episodes", "1", "--specials"])

        assert result.exit_code == 0
        assert "S01E01" in result.output
        assert route.calls.last.request.url.params["specials"] == "1"

    @respx.mock
    def test_schedule(self):
        route = respx.get(f"{BASE_URL}/schedule").mock(
            return_value=httpx.Response(200, json=TVMAZE_SCHEDULE_RESPONSE)
        )

        result = runner.invoke(app, ["schedule", "--date", "2013-06-24", "--country", "US"])

        assert result.exit_code == 0
        assert route.calls.last.request.url.params.multi_items() == [
            ("date", "2013-06-24"),
            ("country", "US"),
        ]

    @respx.mock
    def test_web_schedule_global_channels(self):
        route = respx.get(f"{BASE_URL}/schedule/web").mock(
            return_value=httpx.Response(200, json=[])
        )

        result = runner.invoke(app, ["schedule", "--web", "--country", ""])

        assert result.exit_code == 0
        assert route.calls.last.request.url.params.multi_items() == [("country", "")]

    @respx.mock
    def test_people(self):
        respx.get(f"{BASE_URL}/search/people").mock(
            return_value=httpx.Response(200, json=TVMAZE_SEARCH_PEOPLE_RESPONSE)
        )

        result = runner.invoke(app, ["people", "mike"])

        assert result.exit_code == 0
        assert "Mike Vogel" in result.output
