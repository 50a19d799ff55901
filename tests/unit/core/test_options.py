"""
Tests pour TVMazeOptions et ProductInfo.
"""

import dataclasses

import pytest

from tvmaze_client.core.errors import ConfigurationError
from tvmaze_client.core.options import ProductInfo, TVMazeOptions


class TestProductInfo:
    """Tests pour ProductInfo."""

    def test_user_agent_with_version(self):
        assert str(ProductInfo("MyApp", "1.0")) == "MyApp/1.0"

    def test_user_agent_without_version(self):
        assert str(ProductInfo("MyApp")) == "MyApp"

    def test_empty_name_raises(self):
        with pytest.raises(ConfigurationError):
            ProductInfo("  ")

    @pytest.mark.parametrize("name", ["Séries", "My App", "app/1", ""])
    def test_invalid_name_raises(self, name):
        """Le nom doit etre un token HTTP ASCII, sans espace ni slash."""
        with pytest.raises(ConfigurationError):
            ProductInfo(name)

    @pytest.mark.parametrize("version", ["1.0 beta", "vé", "1/2", ""])
    def test_invalid_version_raises(self, version):
        with pytest.raises(ConfigurationError):
            ProductInfo("MyApp", version)

    def test_token_characters_are_accepted(self):
        assert str(ProductInfo("my_app-v2", "1.2.0+build.7")) == "my_app-v2/1.2.0+build.7"


class TestTVMazeOptions:
    """Tests pour TVMazeOptions."""

    def test_defaults(self):
        options = TVMazeOptions()
        assert options.api_address == "http://api.tvmaze.com"
        assert options.api_key is None
        assert options.product is None
        assert not options.has_api_key

    def test_trailing_slash_is_stripped(self):
        options = TVMazeOptions(api_address="https://api.tvmaze.com/")
        assert options.api_address == "https://api.tvmaze.com"

    def test_empty_address_raises(self):
        with pytest.raises(ConfigurationError):
            TVMazeOptions(api_address="")

    def test_non_string_address_raises(self):
        with pytest.raises(ConfigurationError):
            TVMazeOptions(api_address=123)

    def test_blank_api_key_is_disabled(self):
        assert not TVMazeOptions(api_key="  ").has_api_key
        assert TVMazeOptions(api_key="secret").has_api_key

    def test_options_are_immutable(self):
        """Les options ne peuvent pas etre modifiees apres construction."""
        options = TVMazeOptions(api_key="secret")
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.api_key = "other"
