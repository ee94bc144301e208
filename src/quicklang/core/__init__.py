"""Core domain models - language tags, requests, coordinator state and errors."""

from .coordinator_state import CoordinatorState, Phase
from .error_messages import describe_failure
from .errors import (
    DownloadFailed,
    ErrorKind,
    IllegalStateError,
    InvalidRequest,
    ProviderError,
    ProviderUnavailable,
    QuickLangError,
    TranslationFailed,
    UnknownLanguage,
)
from .language_tag import AUTO_DETECT, ENGLISH, LanguageTag
from .translation_request import TranslationRequest

__all__ = [
    "AUTO_DETECT",
    "ENGLISH",
    "LanguageTag",
    "TranslationRequest",
    "CoordinatorState",
    "Phase",
    "ErrorKind",
    "QuickLangError",
    "InvalidRequest",
    "UnknownLanguage",
    "IllegalStateError",
    "ProviderError",
    "ProviderUnavailable",
    "DownloadFailed",
    "TranslationFailed",
    "describe_failure",
]
