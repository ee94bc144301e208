"""Language Availability Coordinator - Checks a language pair and pre-downloads its model."""

import logging
from functools import partial
from typing import Optional

from PySide6.QtCore import QObject, Signal

from quicklang.core import ENGLISH, IllegalStateError, LanguageTag
from quicklang.services import AvailabilityStatus, QtTaskRunner, TranslationProvider

logger = logging.getLogger(__name__)


STATUS_MESSAGES = {
    AvailabilityStatus.INSTALLED: "The translation model is installed.",
    AvailabilityStatus.DOWNLOAD_REQUIRED: (
        "The translation model is available but needs to be downloaded."
    ),
    AvailabilityStatus.UNSUPPORTED: "This language pair is not supported.",
}


class LanguageAvailabilityCoordinator(QObject):
    """
    Backs the language settings dialog.

    Lets the user inspect a pair and download its model ahead of time,
    without translating anything.
    """

    availability_checked = Signal(object, str)  # AvailabilityStatus or None, message
    download_finished = Signal(bool, str)
    busy_changed = Signal(bool)

    def __init__(
        self,
        provider: TranslationProvider,
        task_runner=None,
        probe_language: LanguageTag = ENGLISH,
    ):
        super().__init__()
        self.provider = provider
        self.task_runner = task_runner if task_runner is not None else QtTaskRunner()
        self.probe_language = probe_language

        self.source: Optional[LanguageTag] = None
        self.target: Optional[LanguageTag] = None
        self.status: Optional[AvailabilityStatus] = None
        self.busy = False
        self._generation = 0

    def check(self, source: LanguageTag, target: LanguageTag) -> None:
        """Query availability of a pair; supersedes any earlier check."""
        self._generation += 1
        generation = self._generation

        if target.is_auto_detect:
            self.source = source
            self.target = target
            self.status = None
            if self.busy:
                self._set_busy(False)
            self.availability_checked.emit(None, "The target language is not valid.")
            return

        self.source = source
        self.target = target
        self.status = None
        self._set_busy(True)

        probe = self.probe_language if source.is_auto_detect else source
        self.task_runner.start(
            partial(self.provider.check_availability, probe, target),
            partial(self._handle_status, generation),
            partial(self._handle_check_error, generation),
        )

    def download(self) -> None:
        """
        Download the model for the last checked pair.

        Raises:
            IllegalStateError: Unless the last check reported DOWNLOAD_REQUIRED.
        """
        if self.status is not AvailabilityStatus.DOWNLOAD_REQUIRED or self.busy:
            raise IllegalStateError("No downloadable language pair has been checked")

        generation = self._generation
        self._set_busy(True)
        self.task_runner.start(
            partial(self.provider.prepare_model, self.source, self.target),
            partial(self._handle_downloaded, generation),
            partial(self._handle_download_error, generation),
        )

    def can_download(self) -> bool:
        return self.status is AvailabilityStatus.DOWNLOAD_REQUIRED and not self.busy

    def _handle_status(self, generation: int, status: AvailabilityStatus) -> None:
        if generation != self._generation:
            logger.debug("Ignoring stale availability status %s", status)
            return
        self.status = status
        self._set_busy(False)
        self.availability_checked.emit(status, STATUS_MESSAGES[status])

    def _handle_check_error(self, generation: int, error: Exception) -> None:
        if generation != self._generation:
            return
        logger.warning("Availability check failed: %s", error)
        self.status = None
        self._set_busy(False)
        self.availability_checked.emit(None, f"Failed to check availability: {error}")

    def _handle_downloaded(self, generation: int, _result=None) -> None:
        if generation != self._generation:
            return
        self.status = AvailabilityStatus.INSTALLED
        self._set_busy(False)
        self.download_finished.emit(True, "The translation model is ready.")

    def _handle_download_error(self, generation: int, error: Exception) -> None:
        if generation != self._generation:
            return
        logger.warning("Model download failed: %s", error)
        self._set_busy(False)
        self.download_finished.emit(False, f"Failed to prepare the translation model: {error}")

    def _set_busy(self, busy: bool) -> None:
        self.busy = busy
        self.busy_changed.emit(busy)
