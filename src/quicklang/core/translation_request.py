"""Translation request value object."""

from dataclasses import dataclass

from quicklang.core.errors import InvalidRequest
from quicklang.core.language_tag import LanguageTag


@dataclass(frozen=True)
class TranslationRequest:
    """
    One user-triggered translation.

    Immutable: editing the input or re-triggering creates a new request
    rather than mutating this one.
    """

    source_language: LanguageTag
    target_language: LanguageTag
    text: str

    def __post_init__(self):
        if self.target_language.is_auto_detect:
            raise InvalidRequest("Auto Detect cannot be used as a target language")

    @property
    def is_empty(self) -> bool:
        """True if there is nothing to translate."""
        return not self.text or not self.text.strip()

    def __repr__(self) -> str:
        preview = self.text[:30] + ("..." if len(self.text) > 30 else "")
        return (
            f"TranslationRequest(source={self.source_language.code!r}, "
            f"target={self.target_language.code!r}, text={preview!r})"
        )
