"""
QuickLang - A small desktop translator backed by on-device models.

This package provides a desktop application with:
- Source/target language pickers with Auto Detect
- Model availability checks and consented model downloads
- Cancellable translation requests
"""

__version__ = "0.1.0"

# Make key components available at package level
from quicklang.core import AUTO_DETECT, CoordinatorState, LanguageTag, Phase, TranslationRequest

__all__ = [
    "AUTO_DETECT",
    "CoordinatorState",
    "LanguageTag",
    "Phase",
    "TranslationRequest",
]
