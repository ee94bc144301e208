"""Unit tests for SettingsManager."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

from quicklang.core import AUTO_DETECT
from quicklang.core.language_tag import ENGLISH, FRENCH, GERMAN, JAPANESE
from quicklang.services import SettingsManager

VARIABLES = (
    "QUICKLANG_SOURCE_LANGUAGE",
    "QUICKLANG_TARGET_LANGUAGE",
    "QUICKLANG_PROBE_LANGUAGE",
    "QUICKLANG_LOG_LEVEL",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove QuickLang variables from the environment before and after a test."""
    saved = {name: os.environ.pop(name, None) for name in VARIABLES}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


def make_settings(directory: Path, content: str) -> SettingsManager:
    (directory / ".env").write_text(content)
    return SettingsManager(project_root=directory)


class TestSettingsManagerDefaults:
    def test_defaults_without_env_file(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_source_language() == AUTO_DETECT
        assert settings.get_target_language() == JAPANESE
        assert settings.get_probe_language() == ENGLISH
        assert settings.get_log_level() == logging.INFO


class TestSettingsManagerLanguages:
    def test_reads_languages_from_env_file(self, temp_env_dir, clean_env):
        settings = make_settings(
            temp_env_dir,
            "QUICKLANG_SOURCE_LANGUAGE=de\nQUICKLANG_TARGET_LANGUAGE=fr\n",
        )

        assert settings.get_source_language() == GERMAN
        assert settings.get_target_language() == FRENCH

    def test_strips_whitespace(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_TARGET_LANGUAGE='  fr  '\n")
        assert settings.get_target_language() == FRENCH

    def test_unknown_code_falls_back_to_default(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_TARGET_LANGUAGE=klingon\n")
        assert settings.get_target_language() == JAPANESE

    def test_auto_detect_target_falls_back(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_TARGET_LANGUAGE=auto\n")
        assert settings.get_target_language() == JAPANESE

    def test_auto_detect_probe_falls_back(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_PROBE_LANGUAGE=auto\n")
        assert settings.get_probe_language() == ENGLISH

    def test_process_environment_wins(self, temp_env_dir, clean_env):
        os.environ["QUICKLANG_TARGET_LANGUAGE"] = "de"
        settings = make_settings(temp_env_dir, "QUICKLANG_TARGET_LANGUAGE=fr\n")
        assert settings.get_target_language() == GERMAN


class TestSettingsManagerLogLevel:
    def test_reads_log_level(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_LOG_LEVEL=debug\n")
        assert settings.get_log_level() == logging.DEBUG

    def test_invalid_log_level_defaults_to_info(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_LOG_LEVEL=chatty\n")
        assert settings.get_log_level() == logging.INFO


class TestSettingsManagerReload:
    def test_reload_env_overrides_values(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "QUICKLANG_TARGET_LANGUAGE=fr\n")
        assert settings.get_target_language() == FRENCH

        (temp_env_dir / ".env").write_text("QUICKLANG_TARGET_LANGUAGE=de\n")
        settings.reload_env()

        assert settings.get_target_language() == GERMAN
