"""Shared fixtures for QuickLang tests."""

import os
from dataclasses import dataclass
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from quicklang.services import TranslationProvider  # noqa: E402


@dataclass
class PendingCall:
    call: Callable[[], Any]
    on_result: Callable[[Any], None]
    on_error: Callable[[Exception], None]


class ManualTaskRunner:
    """
    Task runner that queues provider calls instead of running them.

    Tests decide when each call completes, which makes cancellation races
    reproducible.
    """

    def __init__(self):
        self.pending: list[PendingCall] = []

    def start(self, call, on_result, on_error) -> None:
        self.pending.append(PendingCall(call, on_result, on_error))

    def run_next(self) -> None:
        """Execute the oldest queued call and deliver its outcome."""
        pending = self.pending.pop(0)
        try:
            value = pending.call()
        except Exception as e:
            pending.on_error(e)
        else:
            pending.on_result(value)

    def run_all(self) -> None:
        """Run until no calls are queued, including calls queued meanwhile."""
        while self.pending:
            self.run_next()


@pytest.fixture
def task_runner():
    """Provide a task runner under test control."""
    return ManualTaskRunner()


@pytest.fixture
def mock_provider():
    """Provide a mocked TranslationProvider."""
    return MagicMock(spec=TranslationProvider)


@pytest.fixture
def qt_app():
    """Ensure a QApplication exists for widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
