"""Language identifiers understood by the translation provider."""

from dataclasses import dataclass


AUTO_DETECT_CODE = "auto"


@dataclass(frozen=True)
class LanguageTag:
    """Opaque, immutable language identifier (BCP-47-like code)."""

    code: str

    @property
    def is_auto_detect(self) -> bool:
        """True for the Auto Detect sentinel."""
        return self.code == AUTO_DETECT_CODE

    def __str__(self) -> str:
        return self.code


AUTO_DETECT = LanguageTag(AUTO_DETECT_CODE)

ENGLISH = LanguageTag("en")
JAPANESE = LanguageTag("ja")
SPANISH = LanguageTag("es")
FRENCH = LanguageTag("fr")
GERMAN = LanguageTag("de")
CHINESE_SIMPLIFIED = LanguageTag("zh")
CHINESE_TRADITIONAL = LanguageTag("zh-Hant")
KOREAN = LanguageTag("ko")
RUSSIAN = LanguageTag("ru")
ARABIC = LanguageTag("ar")
PORTUGUESE = LanguageTag("pt")
ITALIAN = LanguageTag("it")
TURKISH = LanguageTag("tr")
THAI = LanguageTag("th")
VIETNAMESE = LanguageTag("vi")
INDONESIAN = LanguageTag("id")
POLISH = LanguageTag("pl")
UKRAINIAN = LanguageTag("uk")
HINDI = LanguageTag("hi")
