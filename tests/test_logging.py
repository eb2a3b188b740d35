"""
Tests for logging configuration.
"""

import logging

from maharishi.utils.logging import (
    QUIET_LOGGERS,
    configure_logging,
    get_logger,
    resolve_level,
)


class TestResolveLevel:

    def test_names_are_case_insensitive(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING

    def test_unknown_name_falls_back_to_info(self):
        assert resolve_level("chatty") == logging.INFO


class TestConfigureLogging:

    def test_root_level_and_quiet_http_loggers(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("debug")

            assert root.level == logging.DEBUG
            for name in QUIET_LOGGERS:
                assert logging.getLogger(name).level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_error_level_not_lowered_for_http_loggers(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("error")

            assert logging.getLogger("httpx").level == logging.ERROR
        finally:
            root.setLevel(previous)


class TestGetLogger:

    def test_single_handler_per_logger(self):
        first = get_logger("maharishi.tests.single_handler")
        second = get_logger("maharishi.tests.single_handler")

        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_explicit_level(self):
        logger = get_logger("maharishi.tests.explicit_level", level=logging.ERROR)
        assert logger.level == logging.ERROR
