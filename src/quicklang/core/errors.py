"""Exception types shared by the catalog, provider and coordinators."""

from enum import Enum


class ErrorKind(Enum):
    """Category of a failure, as surfaced in a failed coordinator state."""

    INVALID_REQUEST = "invalid_request"
    UNSUPPORTED_LANGUAGE_PAIR = "unsupported_language_pair"
    MODEL_DOWNLOAD_FAILED = "model_download_failed"
    TRANSLATION_FAILED = "translation_failed"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    UNKNOWN_LANGUAGE = "unknown_language"


class QuickLangError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind


class InvalidRequest(QuickLangError, ValueError):
    """Empty text or Auto Detect used as a target language."""

    kind = ErrorKind.INVALID_REQUEST


class UnknownLanguage(QuickLangError, LookupError):
    """Language code or tag not present in the catalog."""

    kind = ErrorKind.UNKNOWN_LANGUAGE

    def __init__(self, code: str):
        super().__init__(f"Unknown language: {code!r}")
        self.code = code


class IllegalStateError(QuickLangError, RuntimeError):
    """Operation invoked in a coordinator state that does not allow it."""


class ProviderError(QuickLangError):
    """Failure reported by a translation provider."""


class ProviderUnavailable(ProviderError):
    kind = ErrorKind.PROVIDER_UNAVAILABLE


class DownloadFailed(ProviderError):
    kind = ErrorKind.MODEL_DOWNLOAD_FAILED


class TranslationFailed(ProviderError):
    kind = ErrorKind.TRANSLATION_FAILED
