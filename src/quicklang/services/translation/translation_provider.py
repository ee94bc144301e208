"""Translation Provider - Abstract contract for the on-device translation engine."""

from abc import ABC, abstractmethod
from enum import Enum

from quicklang.core.language_tag import LanguageTag


class AvailabilityStatus(Enum):
    """Readiness of a language pair on this device."""

    INSTALLED = "installed"
    DOWNLOAD_REQUIRED = "download_required"
    UNSUPPORTED = "unsupported"


class TranslationProvider(ABC):
    """
    External capability performing availability checks, model downloads and
    translation.

    Calls are blocking; the coordinators run them on worker threads.
    Implementations (e.g., ArgosTranslationProvider) adapt a concrete engine.
    """

    @abstractmethod
    def check_availability(
        self, source: LanguageTag, target: LanguageTag
    ) -> AvailabilityStatus:
        """
        Report whether a language pair can be translated.

        Args:
            source: Concrete source language (never Auto Detect).
            target: Target language.

        Raises:
            ProviderUnavailable: On transport or platform error.
        """
        pass

    @abstractmethod
    def prepare_model(self, source: LanguageTag, target: LanguageTag) -> None:
        """
        Download and install the model(s) needed for a language pair.

        Raises:
            DownloadFailed: On network or storage error.
        """
        pass

    @abstractmethod
    def translate(self, text: str, source: LanguageTag, target: LanguageTag) -> str:
        """
        Translate text; ``source`` may be Auto Detect.

        Raises:
            TranslationFailed: On any runtime error, carrying the engine message.
        """
        pass

    @abstractmethod
    def invalidate_session(self) -> None:
        """Best-effort signal to abandon in-flight work."""
        pass
