"""Unit tests for LanguageCatalog."""

import pytest

from quicklang.core import AUTO_DETECT, LanguageTag, UnknownLanguage
from quicklang.core.language_tag import CHINESE_TRADITIONAL, ENGLISH, JAPANESE
from quicklang.services import LanguageCatalog


@pytest.fixture
def catalog():
    return LanguageCatalog()


class TestLanguageCatalogListing:
    def test_sources_start_with_auto_detect(self, catalog):
        sources = catalog.list_source_languages()
        assert sources[0] == AUTO_DETECT
        assert ENGLISH in sources

    def test_targets_exclude_auto_detect(self, catalog):
        targets = catalog.list_target_languages()
        assert AUTO_DETECT not in targets
        assert targets[0] == ENGLISH

    def test_sources_are_targets_plus_auto_detect(self, catalog):
        assert catalog.list_source_languages() == (AUTO_DETECT,) + catalog.list_target_languages()

    def test_listing_is_deterministic(self, catalog):
        assert catalog.list_target_languages() == LanguageCatalog().list_target_languages()

    def test_auto_detect_first_even_if_declared_last(self):
        catalog = LanguageCatalog(((ENGLISH, "English"), (AUTO_DETECT, "Auto Detect")))
        assert catalog.list_source_languages() == (AUTO_DETECT, ENGLISH)


class TestLanguageCatalogLookup:
    def test_display_name(self, catalog):
        assert catalog.display_name(JAPANESE) == "Japanese"
        assert catalog.display_name(AUTO_DETECT) == "Auto Detect"
        assert catalog.display_name(CHINESE_TRADITIONAL) == "Chinese (Traditional)"

    def test_display_name_unknown_tag(self, catalog):
        with pytest.raises(UnknownLanguage) as exc_info:
            catalog.display_name(LanguageTag("tlh"))
        assert exc_info.value.code == "tlh"

    def test_from_code(self, catalog):
        assert catalog.from_code("ja") == JAPANESE
        assert catalog.from_code("auto") == AUTO_DETECT

    def test_from_code_unknown(self, catalog):
        with pytest.raises(UnknownLanguage):
            catalog.from_code("xx")

    def test_contains(self, catalog):
        assert catalog.contains(ENGLISH)
        assert not catalog.contains(LanguageTag("xx"))
