"""Translation Request Coordinator - Drives one request through check, download and translate."""

import logging
from functools import partial
from typing import Optional

from PySide6.QtCore import QObject, Signal

from quicklang.core import (
    CoordinatorState,
    ENGLISH,
    ErrorKind,
    IllegalStateError,
    InvalidRequest,
    LanguageTag,
    Phase,
    TranslationRequest,
    describe_failure,
)
from quicklang.services import AvailabilityStatus, QtTaskRunner, TranslationProvider

logger = logging.getLogger(__name__)


class TranslationRequestCoordinator(QObject):
    """
    Orchestrates the translate workflow for the main window.

    Responsibilities:
    - Own the single CoordinatorState and emit it on every transition.
    - Sequence provider calls: availability check, optional model download
      (after explicit consent), translation.
    - Cancel and supersede requests; only the most recent one matters.

    Every provider call carries the generation it was issued under. When a
    request is cancelled or superseded the generation moves on, and any
    result that arrives later for an older generation is dropped.
    """

    state_changed = Signal(object)  # CoordinatorState

    def __init__(
        self,
        provider: TranslationProvider,
        task_runner=None,
        probe_language: LanguageTag = ENGLISH,
    ):
        """
        Args:
            provider: Translation engine adapter.
            task_runner: Object with ``start(call, on_result, on_error)``;
                defaults to a QThreadPool-backed runner.
            probe_language: Concrete language used for availability checks
                when the source is Auto Detect.
        """
        super().__init__()

        if probe_language.is_auto_detect:
            raise ValueError("probe_language must be a concrete language")

        self.provider = provider
        self.task_runner = task_runner if task_runner is not None else QtTaskRunner()
        self.probe_language = probe_language

        self._state = CoordinatorState.idle()
        self._request: Optional[TranslationRequest] = None
        self._generation = 0

    def current_state(self) -> CoordinatorState:
        """Return the current state without side effects."""
        return self._state

    def current_request(self) -> Optional[TranslationRequest]:
        """Return the request being processed (or last processed), if any."""
        return self._request

    @property
    def generation(self) -> int:
        return self._generation

    def submit(self, request: TranslationRequest) -> None:
        """
        Start translating ``request``, cancelling any request still in flight.

        Raises:
            InvalidRequest: If the text is empty or the target is Auto Detect.
                The state is left unchanged.
        """
        if request.is_empty:
            raise InvalidRequest("Nothing to translate")
        if request.target_language.is_auto_detect:
            raise InvalidRequest("Auto Detect cannot be used as a target language")

        if self._state.is_in_flight:
            logger.info("Superseding in-flight request in state %s", self._state.phase.value)
            self._invalidate_provider_session()

        self._generation += 1
        generation = self._generation
        self._request = request
        logger.info("Submitting %r (generation %d)", request, generation)
        self._set_state(CoordinatorState.checking())

        source = request.source_language
        if source.is_auto_detect:
            source = self.probe_language

        self.task_runner.start(
            partial(self.provider.check_availability, source, request.target_language),
            partial(self._handle_availability, generation),
            partial(self._handle_availability_error, generation),
        )

    def confirm_download(self) -> None:
        """
        Accept the model download for the pending request.

        Raises:
            IllegalStateError: If no request is awaiting download consent.
        """
        if self._state.phase is not Phase.AWAITING_DOWNLOAD_CONSENT:
            raise IllegalStateError(
                f"confirm_download() is not valid in state {self._state.phase.value}"
            )

        generation = self._generation
        request = self._request
        self._set_state(CoordinatorState.downloading())

        self.task_runner.start(
            partial(
                self.provider.prepare_model,
                request.source_language,
                request.target_language,
            ),
            partial(self._handle_model_prepared, generation),
            partial(self._handle_download_error, generation),
        )

    def cancel(self) -> None:
        """Abandon the current request and return to idle. Idempotent."""
        if self._state.phase is Phase.IDLE:
            return

        if self._state.is_in_flight:
            self._invalidate_provider_session()
            logger.info("Cancelled request (generation %d)", self._generation)

        self._generation += 1
        self._request = None
        self._set_state(CoordinatorState.idle())

    def _handle_availability(self, generation: int, status: AvailabilityStatus) -> None:
        if not self._is_current(generation, "availability"):
            return

        if status is AvailabilityStatus.INSTALLED:
            self._start_translation(generation)
        elif status is AvailabilityStatus.DOWNLOAD_REQUIRED:
            self._set_state(CoordinatorState.awaiting_download_consent())
        elif status is AvailabilityStatus.UNSUPPORTED:
            self._fail(ErrorKind.UNSUPPORTED_LANGUAGE_PAIR)
        else:
            self._fail(ErrorKind.PROVIDER_UNAVAILABLE, f"Unknown status: {status!r}")

    def _handle_availability_error(self, generation: int, error: Exception) -> None:
        if not self._is_current(generation, "availability"):
            return
        logger.warning("Availability check failed: %s", error)
        self._fail(ErrorKind.PROVIDER_UNAVAILABLE, str(error))

    def _handle_model_prepared(self, generation: int, _result=None) -> None:
        if not self._is_current(generation, "download"):
            return
        self._start_translation(generation)

    def _handle_download_error(self, generation: int, error: Exception) -> None:
        if not self._is_current(generation, "download"):
            return
        logger.warning("Model download failed: %s", error)
        self._fail(ErrorKind.MODEL_DOWNLOAD_FAILED, str(error))

    def _start_translation(self, generation: int) -> None:
        request = self._request
        self._set_state(CoordinatorState.translating())

        self.task_runner.start(
            partial(
                self.provider.translate,
                request.text,
                request.source_language,
                request.target_language,
            ),
            partial(self._handle_translation, generation),
            partial(self._handle_translation_error, generation),
        )

    def _handle_translation(self, generation: int, text: str) -> None:
        if not self._is_current(generation, "translation"):
            return
        self._set_state(CoordinatorState.completed(text))

    def _handle_translation_error(self, generation: int, error: Exception) -> None:
        if not self._is_current(generation, "translation"):
            return
        logger.warning("Translation failed: %s", error)
        self._fail(ErrorKind.TRANSLATION_FAILED, str(error))

    def _is_current(self, generation: int, stage: str) -> bool:
        """Drop results from cancelled or superseded requests."""
        if generation != self._generation:
            logger.debug(
                "Ignoring stale %s result (generation %d, current %d)",
                stage,
                generation,
                self._generation,
            )
            return False
        return True

    def _fail(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self._set_state(CoordinatorState.failed(kind, describe_failure(kind, detail)))

    def _invalidate_provider_session(self) -> None:
        try:
            self.provider.invalidate_session()
        except Exception:
            # Best-effort signal; the generation check already discards results
            logger.warning("Provider failed to invalidate its session", exc_info=True)

    def _set_state(self, state: CoordinatorState) -> None:
        logger.info("State %s -> %s", self._state.phase.value, state.phase.value)
        self._state = state
        self.state_changed.emit(state)
