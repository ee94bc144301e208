"""Services layer - language catalog, translation providers and integrations."""

from quicklang.services.language_catalog import LanguageCatalog
from quicklang.services.settings_manager import SettingsManager
from quicklang.services.provider_workers import ProviderCallWorker, QtTaskRunner, WorkerSignals

# Translation providers
from quicklang.services.translation import (
    ArgosTranslationProvider,
    AvailabilityStatus,
    TranslationProvider,
)

__all__ = [
    "LanguageCatalog",
    "SettingsManager",
    "ProviderCallWorker",
    "QtTaskRunner",
    "WorkerSignals",
    "AvailabilityStatus",
    "TranslationProvider",
    "ArgosTranslationProvider",
]
