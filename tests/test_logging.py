"""Tests for logging utilities."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from testframe.core.config import LoggingSettings
from testframe.core.logging import FRAMEWORK_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo logger level changes made by configure_logging."""

    root = logging.getLogger()
    framework = logging.getLogger(FRAMEWORK_LOGGER)
    root_level, framework_level = root.level, framework.level
    root_handlers = list(root.handlers)
    yield
    root.setLevel(root_level)
    framework.setLevel(framework_level)
    root.handlers[:] = root_handlers


def test_configure_logging_sets_root_level() -> None:
    """configure_logging should set the root logger level according to settings."""

    settings = LoggingSettings(level="DEBUG", structured=False)
    configure_logging(settings)
    assert logging.getLogger().level == logging.DEBUG


def test_framework_level_tunes_framework_loggers() -> None:
    """A framework level should apply to the testframe logger hierarchy only."""

    settings = LoggingSettings(level="INFO", structured=True, framework_level="DEBUG")
    configure_logging(settings)
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger(FRAMEWORK_LOGGER).level == logging.DEBUG
    tracker_logger = logging.getLogger("testframe.framework.tracker")
    assert tracker_logger.getEffectiveLevel() == logging.DEBUG
