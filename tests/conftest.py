"""
Fixtures pytest partagees pour les tests tvmaze-client.

Ce module contient les fixtures communes utilisees dans les tests:
- Isolation des variables d'environnement TVMAZE_
- Settings de test avec fichier de log temporaire
"""

import os
from pathlib import Path

import pytest

from tvmaze_client.config import Settings


@pytest.fixture(autouse=True)
def clean_tvmaze_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Supprime les variables TVMAZE_ de l'environnement du developpeur.

    Evite qu'une cle API locale fausse les assertions sur les URLs.
    """
    for name in list(os.environ):
        if name.upper().startswith("TVMAZE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log.
    """
    return Settings(
        _env_file=None,
        api_address="http://api.tvmaze.com",
        api_key=None,
        product_name="tvmaze-tests",
        product_version="0.1.0",
        log_file=tmp_path / "test.log",
    )
