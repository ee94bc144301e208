"""Argos Translation Provider - Implements the provider contract with Argos Translate."""

import logging
import threading
from typing import Optional

from argostranslate import package as argos_package
from argostranslate import translate as argos_translate
from langdetect import DetectorFactory, LangDetectException, detect_langs

from quicklang.core.errors import DownloadFailed, ProviderUnavailable, TranslationFailed
from quicklang.core.language_tag import ENGLISH, LanguageTag
from quicklang.services.translation.translation_provider import (
    AvailabilityStatus,
    TranslationProvider,
)

logger = logging.getLogger(__name__)

# Make language detection deterministic
DetectorFactory.seed = 0


class ArgosTranslationProvider(TranslationProvider):
    """
    Offline translation through Argos Translate language packages.

    Pairs without a direct package are served by pivoting through English,
    which is how Argos composes installed translations. Auto Detect sources
    are resolved with langdetect at translation time, restricted to
    languages that have an installed model for the target.
    """

    PIVOT_CODE = "en"

    # Catalog codes that Argos spells differently
    ARGOS_CODES = {"zh-Hant": "zt"}
    # langdetect output that Argos spells differently
    DETECTED_CODES = {"zh-cn": "zh", "zh-tw": "zt"}

    def __init__(self, fallback_source: LanguageTag = ENGLISH):
        """
        Args:
            fallback_source: Language assumed when Auto Detect cannot resolve
                the input, and prepared when a model is requested for an
                Auto Detect source.
        """
        self.fallback_source = fallback_source
        self._index_lock = threading.Lock()
        self._index_loaded = False
        self._session = 0

    def check_availability(
        self, source: LanguageTag, target: LanguageTag
    ) -> AvailabilityStatus:
        from_code = self._argos_code(source)
        to_code = self._argos_code(target)
        logger.debug("Checking availability %s -> %s", from_code, to_code)

        if from_code == to_code or self._installed_translation(from_code, to_code):
            return AvailabilityStatus.INSTALLED

        try:
            plan = self._download_plan(from_code, to_code)
        except Exception as e:
            raise ProviderUnavailable(str(e)) from e

        if plan is None:
            return AvailabilityStatus.UNSUPPORTED
        return AvailabilityStatus.DOWNLOAD_REQUIRED

    def prepare_model(self, source: LanguageTag, target: LanguageTag) -> None:
        if source.is_auto_detect:
            source = self.fallback_source
        from_code = self._argos_code(source)
        to_code = self._argos_code(target)

        try:
            plan = self._download_plan(from_code, to_code)
        except Exception as e:
            raise DownloadFailed(f"Package index unavailable: {e}") from e

        if plan is None:
            raise DownloadFailed(f"No language package for {from_code} -> {to_code}")

        installed = {
            (pkg.from_code, pkg.to_code) for pkg in argos_package.get_installed_packages()
        }
        for pkg in plan:
            if (pkg.from_code, pkg.to_code) in installed:
                continue
            logger.info("Downloading language package %s -> %s", pkg.from_code, pkg.to_code)
            try:
                path = pkg.download()
                argos_package.install_from_path(path)
            except Exception as e:
                raise DownloadFailed(str(e)) from e
            logger.info("Installed language package %s -> %s", pkg.from_code, pkg.to_code)

    def translate(self, text: str, source: LanguageTag, target: LanguageTag) -> str:
        session = self._session
        to_code = self._argos_code(target)
        if source.is_auto_detect:
            from_code = self._detect_code(text, to_code)
        else:
            from_code = self._argos_code(source)

        if from_code == to_code:
            return text

        translation = self._installed_translation(from_code, to_code)
        if translation is None:
            raise TranslationFailed(
                f"No installed model for {from_code} -> {to_code}"
            )

        try:
            result = translation.translate(text)
        except Exception as e:
            raise TranslationFailed(str(e)) from e

        if session != self._session:
            raise TranslationFailed("Translation session was invalidated")
        return result

    def invalidate_session(self) -> None:
        # Argos cannot interrupt a running translation; results of older
        # sessions are rejected when they finish.
        self._session += 1
        logger.debug("Invalidated translation session (now %d)", self._session)

    def _argos_code(self, tag: LanguageTag) -> str:
        if tag.is_auto_detect:
            tag = self.fallback_source
        return self.ARGOS_CODES.get(tag.code, tag.code)

    def _detect_code(self, text: str, to_code: str) -> str:
        """
        Pick the most probable detected language that can be translated to
        `to_code` with installed models.

        Falls back to the fallback source, the pair availability checks and
        downloads cover, when detection fails or no candidate is usable.
        """
        fallback = self._argos_code(self.fallback_source)
        try:
            candidates = detect_langs(text)
        except LangDetectException as e:
            logger.warning("Language detection failed (%s); assuming %s", e, fallback)
            return fallback

        for candidate in candidates:
            code = self.DETECTED_CODES.get(candidate.lang, candidate.lang)
            if code == to_code or self._installed_translation(code, to_code) is not None:
                logger.debug("Detected source language %s (p=%.2f)", code, candidate.prob)
                return code

        logger.info(
            "No installed model for detected languages %s; assuming %s",
            [candidate.lang for candidate in candidates],
            fallback,
        )
        return fallback

    def _installed_translation(self, from_code: str, to_code: str):
        languages = {lang.code: lang for lang in argos_translate.get_installed_languages()}
        from_lang = languages.get(from_code)
        to_lang = languages.get(to_code)
        if from_lang is None or to_lang is None:
            return None
        return from_lang.get_translation(to_lang)

    def _ensure_index(self) -> None:
        with self._index_lock:
            if self._index_loaded:
                return
            logger.info("Updating Argos package index")
            argos_package.update_package_index()
            self._index_loaded = True

    def _download_plan(self, from_code: str, to_code: str) -> Optional[list]:
        """
        Packages needed for a pair: the direct package if offered, otherwise
        both legs of an English pivot. None if the pair cannot be served.
        """
        self._ensure_index()
        available = {
            (pkg.from_code, pkg.to_code): pkg
            for pkg in argos_package.get_available_packages()
        }
        direct = available.get((from_code, to_code))
        if direct is not None:
            return [direct]

        legs = []
        if from_code != self.PIVOT_CODE:
            legs.append((from_code, self.PIVOT_CODE))
        if to_code != self.PIVOT_CODE:
            legs.append((self.PIVOT_CODE, to_code))
        if len(legs) < 2 or any(leg not in available for leg in legs):
            return None
        return [available[leg] for leg in legs]
