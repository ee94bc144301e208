"""User-facing messages for failure kinds."""

from typing import Optional

from quicklang.core.errors import ErrorKind


_MESSAGES = {
    ErrorKind.INVALID_REQUEST: "Enter some text and choose a target language.",
    ErrorKind.UNSUPPORTED_LANGUAGE_PAIR: (
        "This language pair cannot be translated. Try choosing a different language."
    ),
    ErrorKind.MODEL_DOWNLOAD_FAILED: (
        "The language model could not be downloaded. Check your network connection."
    ),
    ErrorKind.TRANSLATION_FAILED: "An error occurred during translation",
    ErrorKind.PROVIDER_UNAVAILABLE: "Could not check language availability",
    ErrorKind.UNKNOWN_LANGUAGE: "Unknown language.",
}


def describe_failure(kind: ErrorKind, detail: Optional[str] = None) -> str:
    """
    Build the message shown for a failed request.

    Translation and availability failures append the provider detail so the
    underlying cause is visible; the other kinds have a fixed message.
    """
    base = _MESSAGES[kind]
    if kind in (ErrorKind.TRANSLATION_FAILED, ErrorKind.PROVIDER_UNAVAILABLE):
        return f"{base}: {detail}" if detail else f"{base}."
    return base
