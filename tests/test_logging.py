"""Tests for the root logger setup."""

import logging

import pytest

from race_event_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    """Detach the root handlers (pytest's included) for one test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_console_and_file(self, bare_root_logger, tmp_path):
        logfile = tmp_path / "api.log"
        setup_logging("debug", str(logfile))

        assert bare_root_logger.level == logging.DEBUG
        assert len(bare_root_logger.handlers) == 2

        logging.getLogger("race_event_api.test").warning("Event %s is full", 7)
        for handler in bare_root_logger.handlers:
            handler.flush()
        assert "[WARNING] race_event_api.test: Event 7 is full" in logfile.read_text(encoding="utf-8")

    def test_empty_logfile_means_console_only(self, bare_root_logger):
        setup_logging("INFO", "")
        assert [type(h) for h in bare_root_logger.handlers] == [logging.StreamHandler]

    def test_unknown_level_falls_back_to_info(self, bare_root_logger):
        setup_logging("chatty")
        assert bare_root_logger.level == logging.INFO

    def test_second_call_is_a_no_op(self, bare_root_logger):
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(bare_root_logger.handlers) == 1
        assert bare_root_logger.level == logging.INFO
