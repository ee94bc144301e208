"""Language Catalog - Static set of supported languages and their display names."""

from quicklang.core import language_tag as tags
from quicklang.core.errors import UnknownLanguage
from quicklang.core.language_tag import AUTO_DETECT, LanguageTag


class LanguageCatalog:
    """
    Fixed, ordered catalog of languages offered in the pickers.

    Auto Detect is only offered as a source language.
    """

    DEFAULT_ENTRIES: tuple[tuple[LanguageTag, str], ...] = (
        (AUTO_DETECT, "Auto Detect"),
        (tags.ENGLISH, "English"),
        (tags.JAPANESE, "Japanese"),
        (tags.SPANISH, "Spanish"),
        (tags.FRENCH, "French"),
        (tags.GERMAN, "German"),
        (tags.CHINESE_SIMPLIFIED, "Chinese (Simplified)"),
        (tags.CHINESE_TRADITIONAL, "Chinese (Traditional)"),
        (tags.KOREAN, "Korean"),
        (tags.RUSSIAN, "Russian"),
        (tags.ARABIC, "Arabic"),
        (tags.PORTUGUESE, "Portuguese"),
        (tags.ITALIAN, "Italian"),
        (tags.TURKISH, "Turkish"),
        (tags.THAI, "Thai"),
        (tags.VIETNAMESE, "Vietnamese"),
        (tags.INDONESIAN, "Indonesian"),
        (tags.POLISH, "Polish"),
        (tags.UKRAINIAN, "Ukrainian"),
        (tags.HINDI, "Hindi"),
    )

    def __init__(self, entries: tuple[tuple[LanguageTag, str], ...] = DEFAULT_ENTRIES):
        self._entries = entries
        self._names = dict(entries)
        self._by_code = {tag.code: tag for tag, _ in entries}

    def list_source_languages(self) -> tuple[LanguageTag, ...]:
        """All languages valid as a source, Auto Detect first."""
        auto = tuple(tag for tag, _ in self._entries if tag.is_auto_detect)
        rest = tuple(tag for tag, _ in self._entries if not tag.is_auto_detect)
        return auto + rest

    def list_target_languages(self) -> tuple[LanguageTag, ...]:
        """All languages valid as a target (everything except Auto Detect)."""
        return tuple(tag for tag, _ in self._entries if not tag.is_auto_detect)

    def display_name(self, tag: LanguageTag) -> str:
        """
        Human-readable name for a tag.

        Raises:
            UnknownLanguage: If the tag is not in the catalog.
        """
        try:
            return self._names[tag]
        except KeyError:
            raise UnknownLanguage(tag.code) from None

    def from_code(self, code: str) -> LanguageTag:
        """Resolve a language code to its catalog tag."""
        try:
            return self._by_code[code]
        except KeyError:
            raise UnknownLanguage(code) from None

    def contains(self, tag: LanguageTag) -> bool:
        return tag in self._names
