"""Tests for MainWindow - state rendering and translate/cancel toggle."""

import pytest

from quicklang.core import CoordinatorState, ErrorKind
from quicklang.core.language_tag import ENGLISH, FRENCH, JAPANESE
from quicklang.services import LanguageCatalog
from quicklang.ui import MainWindow


@pytest.fixture
def window(qt_app):
    catalog = LanguageCatalog()
    window = MainWindow()
    window.populate_languages(
        catalog.list_source_languages(),
        catalog.list_target_languages(),
        catalog.display_name,
    )
    return window


def test_pickers_are_populated(window):
    assert window.source_combo.itemText(0) == "Auto Detect"
    assert window.target_combo.itemText(0) == "English"
    assert window.source_combo.count() == window.target_combo.count() + 1


def test_select_languages(window):
    window.select_languages(FRENCH, JAPANESE)

    assert window.selected_source_language() == FRENCH
    assert window.selected_target_language() == JAPANESE


def test_translate_button_requires_text(window):
    assert not window.translate_button.isEnabled()

    window.source_text.setPlainText("Hello")
    assert window.translate_button.isEnabled()


def test_button_toggles_to_cancel_while_busy(window):
    clicks = []
    window.translate_clicked.connect(lambda: clicks.append("translate"))
    window.cancel_clicked.connect(lambda: clicks.append("cancel"))
    window.source_text.setPlainText("Hello")

    window.translate_button.click()
    window.render_state(CoordinatorState.translating())
    assert window.translate_button.text() == "Cancel"
    window.translate_button.click()

    assert clicks == ["translate", "cancel"]


def test_completed_state_shows_text_and_copy(window):
    window.render_state(CoordinatorState.completed("こんにちは"))

    assert window.result_text.toPlainText() == "こんにちは"
    assert not window.copy_button.isHidden()
    assert window.translate_button.text() == "Translate"


def test_failed_state_shows_message(window):
    window.render_state(CoordinatorState.failed(ErrorKind.UNSUPPORTED_LANGUAGE_PAIR, "Not supported"))

    assert window.result_text.toPlainText() == "Not supported"
    assert window.status_label.text() == "Failed"
    assert window.copy_button.isHidden()


def test_idle_after_cancel_keeps_button_enabled_with_text(window):
    window.source_text.setPlainText("Hello")
    window.render_state(CoordinatorState.checking())
    window.render_state(CoordinatorState.idle())

    assert window.translate_button.text() == "Translate"
    assert window.translate_button.isEnabled()


def test_selected_language_defaults_to_first_items(window):
    assert window.selected_source_language().is_auto_detect
    assert window.selected_target_language() == ENGLISH
