"""Unit tests for core value objects."""

import dataclasses

import pytest

from quicklang.core import (
    AUTO_DETECT,
    CoordinatorState,
    ErrorKind,
    InvalidRequest,
    LanguageTag,
    Phase,
    TranslationRequest,
    describe_failure,
)
from quicklang.core.language_tag import ENGLISH, JAPANESE


class TestLanguageTag:
    def test_equality_and_hash_by_code(self):
        assert LanguageTag("en") == ENGLISH
        assert len({LanguageTag("ja"), JAPANESE}) == 1

    def test_auto_detect_sentinel(self):
        assert AUTO_DETECT.is_auto_detect
        assert not ENGLISH.is_auto_detect

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ENGLISH.code = "fr"


class TestTranslationRequest:
    def test_auto_detect_source_is_allowed(self):
        request = TranslationRequest(AUTO_DETECT, JAPANESE, "Hello")
        assert request.source_language.is_auto_detect

    def test_auto_detect_target_fails_at_construction(self):
        with pytest.raises(InvalidRequest):
            TranslationRequest(ENGLISH, AUTO_DETECT, "Hello")

    @pytest.mark.parametrize("text,empty", [("", True), ("  \n", True), ("Hi", False)])
    def test_is_empty(self, text, empty):
        assert TranslationRequest(ENGLISH, JAPANESE, text).is_empty is empty

    def test_is_immutable(self):
        request = TranslationRequest(ENGLISH, JAPANESE, "Hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.text = "Bye"

    def test_repr_truncates_long_text(self):
        request = TranslationRequest(ENGLISH, JAPANESE, "x" * 100)
        assert "..." in repr(request)


class TestCoordinatorState:
    def test_completed_carries_text_only(self):
        state = CoordinatorState.completed("done")
        assert state.phase is Phase.COMPLETED
        assert state.text == "done"
        assert state.error_kind is None
        assert state.is_terminal
        assert not state.is_in_flight

    def test_failed_carries_kind_and_message(self):
        state = CoordinatorState.failed(ErrorKind.UNSUPPORTED_LANGUAGE_PAIR, "nope")
        assert state.is_terminal
        assert state.text is None
        assert state.error_kind is ErrorKind.UNSUPPORTED_LANGUAGE_PAIR

    @pytest.mark.parametrize(
        "state",
        [
            CoordinatorState.checking(),
            CoordinatorState.awaiting_download_consent(),
            CoordinatorState.downloading(),
            CoordinatorState.translating(),
        ],
    )
    def test_in_flight_states(self, state):
        assert state.is_in_flight
        assert not state.is_terminal

    def test_idle_is_neither(self):
        state = CoordinatorState.idle()
        assert not state.is_in_flight
        assert not state.is_terminal


class TestDescribeFailure:
    def test_translation_failure_includes_detail(self):
        message = describe_failure(ErrorKind.TRANSLATION_FAILED, "model crashed")
        assert message.endswith("model crashed")

    def test_translation_failure_without_detail(self):
        assert describe_failure(ErrorKind.TRANSLATION_FAILED).endswith(".")

    def test_fixed_message_ignores_detail(self):
        message = describe_failure(ErrorKind.MODEL_DOWNLOAD_FAILED, "errno 28")
        assert "errno 28" not in message
        assert "network" in message

    def test_every_kind_has_a_message(self):
        for kind in ErrorKind:
            assert describe_failure(kind)
