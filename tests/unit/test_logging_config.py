"""
Tests pour la configuration loguru.
"""

from loguru import logger

from tvmaze_client.logging_config import configure_logging, console_format


class TestConsoleFormat:
    """Tests pour le format console."""

    def test_without_extra(self):
        template = console_format({"extra": {}})
        assert "{extra}" not in template
        assert template.endswith("\n{exception}")

    def test_with_extra(self):
        """Le contexte (path, status) est affiche quand il est present."""
        template = console_format({"extra": {"path": "/shows/1", "status": 200}})
        assert "{extra}" in template


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_file_sink_creates_parent_directory(self, tmp_path):
        log_file = tmp_path / "logs" / "tvmaze.log"

        configure_logging(log_level="ERROR", log_file=log_file)

        assert log_file.parent.is_dir()
        assert log_file.exists()
        logger.remove()

    def test_file_sink_keeps_only_library_logs(self, tmp_path):
        log_file = tmp_path / "tvmaze.log"

        configure_logging(log_level="ERROR", log_file=log_file)
        logger.debug("Message hors librairie", path="/shows/1")
        logger.complete()

        assert log_file.read_text() == ""
        logger.remove()
