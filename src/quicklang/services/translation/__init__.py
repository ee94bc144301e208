"""Translation providers - abstract contract and Argos Translate implementation."""

from quicklang.services.translation.translation_provider import AvailabilityStatus, TranslationProvider
from quicklang.services.translation.argos_translation_provider import ArgosTranslationProvider

__all__ = [
    "AvailabilityStatus",
    "TranslationProvider",
    "ArgosTranslationProvider",
]
