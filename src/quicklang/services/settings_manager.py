"""Settings Manager - Handles default languages and logging configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from quicklang.core.errors import UnknownLanguage
from quicklang.core.language_tag import LanguageTag
from quicklang.services.language_catalog import LanguageCatalog

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages application settings.

    Reads values from a .env file in the project root; variables already set
    in the process environment take precedence.
    """

    DEFAULT_SOURCE_LANGUAGE = "auto"
    DEFAULT_TARGET_LANGUAGE = "ja"
    DEFAULT_PROBE_LANGUAGE = "en"
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(
        self,
        project_root: Optional[Path] = None,
        catalog: Optional[LanguageCatalog] = None,
    ):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
            catalog: Catalog used to resolve configured language codes.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root
        self._catalog = catalog or LanguageCatalog()

    def get_source_language(self) -> LanguageTag:
        """Initial source language for the picker (Auto Detect allowed)."""
        return self._language("QUICKLANG_SOURCE_LANGUAGE", self.DEFAULT_SOURCE_LANGUAGE)

    def get_target_language(self) -> LanguageTag:
        """Initial target language for the picker (never Auto Detect)."""
        tag = self._language("QUICKLANG_TARGET_LANGUAGE", self.DEFAULT_TARGET_LANGUAGE)
        if tag.is_auto_detect:
            logger.warning("Auto Detect is not a valid target language; using default")
            return self._catalog.from_code(self.DEFAULT_TARGET_LANGUAGE)
        return tag

    def get_probe_language(self) -> LanguageTag:
        """Concrete language used to check availability for Auto Detect sources."""
        tag = self._language("QUICKLANG_PROBE_LANGUAGE", self.DEFAULT_PROBE_LANGUAGE)
        if tag.is_auto_detect:
            return self._catalog.from_code(self.DEFAULT_PROBE_LANGUAGE)
        return tag

    def get_log_level(self) -> int:
        """Root log level name from environment, as a logging constant."""
        name = (os.getenv("QUICKLANG_LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _language(self, variable: str, default: str) -> LanguageTag:
        value = os.getenv(variable)
        code = value.strip() if value and value.strip() else default
        try:
            return self._catalog.from_code(code)
        except UnknownLanguage:
            logger.warning("%s=%r is not a supported language; using %r", variable, code, default)
            return self._catalog.from_code(default)
