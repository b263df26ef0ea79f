"""
Tests pour la configuration (pydantic-settings) et le logging (loguru).
"""

from pathlib import Path

import pytest
from loguru import logger

from hvsort.config import Settings
from hvsort.logging_config import _console_format, configure_logging, verbosity_to_level


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("HVSORT_LOG_LEVEL", "HVSORT_HONOR_ROTATION", "HVSORT_VIDEO_EXTENSIONS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.honor_rotation is True
        assert settings.rename_keep_extension is True
        assert ".mp4" in settings.video_extensions
        assert settings.log_level == "INFO"
        assert "~" not in str(settings.log_file)

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("HVSORT_LOG_LEVEL", "debug")
        monkeypatch.setenv("HVSORT_HONOR_ROTATION", "false")
        monkeypatch.setenv("HVSORT_VIDEO_EXTENSIONS", '["MXF", ".MP4"]')

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.honor_rotation is False
        assert settings.video_extensions == [".mxf", ".mp4"]

    def test_retention_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, log_retention_count=0)


class TestLogging:
    """Tests pour configure_logging et verbosity_to_level."""

    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [(0, False, "INFO"), (1, False, "DEBUG"), (2, False, "TRACE"), (3, True, "ERROR")],
    )
    def test_verbosity_to_level(self, verbose, quiet, expected) -> None:
        assert verbosity_to_level(verbose, quiet) == expected

    def test_file_keeps_only_hvsort_events(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "hvsort.log"

        configure_logging(log_level="WARNING", log_file=log_file)
        logger.info("Evenement exterieur", file="a.mp4")
        logger.complete()
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert '"message": "Journalisation prete"' in content
        assert '"log_file": ' in content
        assert "Evenement exterieur" not in content

    def test_console_format_lists_present_context(self) -> None:
        record = {"extra": {"destination": "/p/H/a.mp4", "source": "/p/a.mp4", "count": 3}}

        template = _console_format(record)

        assert template.endswith("\n{exception}")
        assert "{extra[source]}" in template
        assert "{extra[destination]}" in template
        assert template.index("{extra[source]}") < template.index("{extra[destination]}")
        assert "count" not in template
        assert "/p/a.mp4" not in template

    def test_console_format_without_context(self) -> None:
        assert "extra" not in _console_format({"extra": {}})
