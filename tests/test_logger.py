"""Tests for logging setup."""

import logging

from quicklang.logger import LOGGER_NAME, setup_logging


def test_setup_logging_is_idempotent():
    first = setup_logging(logging.DEBUG)
    handler_count = len(first.handlers)

    second = setup_logging(logging.WARNING)

    assert first is second
    assert first.name == LOGGER_NAME
    assert len(second.handlers) == handler_count >= 1
    assert second.level == logging.WARNING

