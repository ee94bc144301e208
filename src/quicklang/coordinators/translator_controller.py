"""Translator Controller - Routes main window signals to the coordinators."""

import logging
from functools import partial
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Slot
from PySide6.QtGui import QGuiApplication

from quicklang.coordinators.language_availability_coordinator import (
    LanguageAvailabilityCoordinator,
)
from quicklang.coordinators.translation_request_coordinator import (
    TranslationRequestCoordinator,
)
from quicklang.core import (
    CoordinatorState,
    InvalidRequest,
    LanguageTag,
    Phase,
    TranslationRequest,
    describe_failure,
)
from quicklang.services import LanguageCatalog
from quicklang.ui import LanguageAvailabilityDialog, MainWindow

logger = logging.getLogger(__name__)


class TranslatorController(QObject):
    """
    Glue between the main window and the translation workflow.

    Turns button presses into coordinator calls, renders every state change,
    and asks the user for consent when a model download is required.
    """

    def __init__(
        self,
        main_window: MainWindow,
        coordinator: TranslationRequestCoordinator,
        availability_coordinator: LanguageAvailabilityCoordinator,
        catalog: LanguageCatalog,
        clipboard=None,
        dialog_factory: Optional[Callable[[LanguageTag, LanguageTag], object]] = None,
    ):
        super().__init__()

        self.main_window = main_window
        self.coordinator = coordinator
        self.availability_coordinator = availability_coordinator
        self.catalog = catalog
        self._clipboard = clipboard
        self._dialog_factory = dialog_factory or self._create_availability_dialog

    def bind(self) -> None:
        """Wire window and coordinator signals to this controller."""
        self.main_window.translate_clicked.connect(self.handle_translate_clicked)
        self.main_window.cancel_clicked.connect(self.handle_cancel_clicked)
        self.main_window.copy_clicked.connect(self.handle_copy_clicked)
        self.main_window.language_settings_clicked.connect(self.handle_language_settings_clicked)
        self.coordinator.state_changed.connect(self.handle_state_changed)

    @Slot()
    def handle_translate_clicked(self) -> None:
        try:
            request = TranslationRequest(
                source_language=self.main_window.selected_source_language(),
                target_language=self.main_window.selected_target_language(),
                text=self.main_window.source_text_value(),
            )
            self.coordinator.submit(request)
        except InvalidRequest as e:
            logger.info("Rejected translation request: %s", e)
            self.main_window.show_error("Cannot Translate", describe_failure(e.kind))

    @Slot()
    def handle_cancel_clicked(self) -> None:
        self.coordinator.cancel()

    @Slot(object)
    def handle_state_changed(self, state: CoordinatorState) -> None:
        self.main_window.render_state(state)

        if state.phase is Phase.AWAITING_DOWNLOAD_CONSENT:
            # Prompt after the emission so every observer sees this state first
            QTimer.singleShot(
                0, partial(self._ask_download_consent, self.coordinator.generation)
            )

    @Slot()
    def handle_copy_clicked(self) -> None:
        state = self.coordinator.current_state()
        if state.phase is not Phase.COMPLETED:
            return

        clipboard = self._clipboard or QGuiApplication.clipboard()
        clipboard.setText(state.text)
        self.main_window.show_copied_feedback()

    @Slot()
    def handle_language_settings_clicked(self) -> None:
        dialog = self._dialog_factory(
            self.main_window.selected_source_language(),
            self.main_window.selected_target_language(),
        )
        dialog.exec()

    def _ask_download_consent(self, generation: int) -> None:
        if not self._awaits_consent(generation):
            logger.debug("Skipping download prompt for generation %d", generation)
            return

        request = self.coordinator.current_request()
        consent = self.main_window.ask_download_consent(
            self.catalog.display_name(request.source_language),
            self.catalog.display_name(request.target_language),
        )

        # The user may have cancelled or resubmitted while the prompt was open
        if not self._awaits_consent(generation):
            return

        if consent:
            self.coordinator.confirm_download()
        else:
            self.coordinator.cancel()

    def _awaits_consent(self, generation: int) -> bool:
        return (
            self.coordinator.generation == generation
            and self.coordinator.current_state().phase is Phase.AWAITING_DOWNLOAD_CONSENT
        )

    def _create_availability_dialog(self, source: LanguageTag, target: LanguageTag):
        return LanguageAvailabilityDialog(
            coordinator=self.availability_coordinator,
            source=source,
            target=target,
            source_name=self.catalog.display_name(source),
            target_name=self.catalog.display_name(target),
            parent=self.main_window,
        )
