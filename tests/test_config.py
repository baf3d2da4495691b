"""Tests for runtime configuration."""

import logging

import pytest

from lodestar.config import DEFAULT_LOG_FORMAT, LodestarHandler, SearchSettings, configure_logging
from lodestar.core.exceptions import ConfigurationError


def test_defaults():
    settings = SearchSettings()

    assert settings.log_level == "WARNING"
    assert settings.log_format == DEFAULT_LOG_FORMAT


def test_from_env():
    settings = SearchSettings.from_env(
        {"LODESTAR_LOG_LEVEL": "debug", "LODESTAR_LOG_FORMAT": "%(message)s"}
    )

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "%(message)s"


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("LODESTAR_LOG_LEVEL", "INFO")

    assert SearchSettings.from_env().log_level == "INFO"


def test_invalid_level():
    with pytest.raises(ConfigurationError):
        SearchSettings.from_env({"LODESTAR_LOG_LEVEL": "LOUD"})


def test_configure_logging_replaces_handler():
    logger = logging.getLogger("lodestar")
    original_level = logger.level
    original_handlers = list(logger.handlers)
    try:
        configure_logging(SearchSettings(log_level="DEBUG"))
        configure_logging(SearchSettings(log_level="ERROR"))

        added = [h for h in logger.handlers if h not in original_handlers]
        assert len(added) == 1
        assert logger.level == logging.ERROR
    finally:
        for handler in list(logger.handlers):
            if handler not in original_handlers:
                logger.removeHandler(handler)
        logger.setLevel(original_level)


def test_configure_logging_installs_lodestar_handler():
    logger = logging.getLogger("lodestar")
    original_level = logger.level
    original_handlers = list(logger.handlers)
    try:
        configure_logging(SearchSettings(log_format="%(message)s"))

        installed = [h for h in logger.handlers if isinstance(h, LodestarHandler)]
        assert len(installed) == 1
        assert installed[0].formatter._fmt == "%(message)s"
    finally:
        for handler in list(logger.handlers):
            if handler not in original_handlers:
                logger.removeHandler(handler)
        logger.setLevel(original_level)
