"""
Unit tests for logging setup.
"""

import logging

import pytest

from reddit_fetcher.utils.logging_config import get_logger, set_log_level, setup_file_logging


@pytest.fixture
def restore_levels():
    yield
    set_log_level(logging.INFO)


class TestGetLogger:
    """Test get_logger."""

    def test_namespaced_name(self):
        assert get_logger("tests").name == "reddit.tests"

    def test_handler_attached_once(self):
        first = get_logger("tests-once")
        second = get_logger("tests-once")
        assert first is second
        assert len(second.handlers) == 1


class TestSetLogLevel:
    """Test set_log_level."""

    def test_applies_to_existing_loggers(self, restore_levels):
        logger = get_logger("tests-level")

        set_log_level(logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_leaves_foreign_loggers_alone(self, restore_levels):
        foreign = logging.getLogger("not_reddit.tests")
        foreign.setLevel(logging.WARNING)

        set_log_level(logging.DEBUG)

        assert foreign.level == logging.WARNING


class TestFileLogging:
    """Test setup_file_logging."""

    def test_writes_records_from_child_loggers(self, tmp_path):
        log_file = setup_file_logging(tmp_path)
        root = logging.getLogger("reddit")
        try:
            get_logger("tests-file").info("page fetched")
            for handler in root.handlers:
                handler.flush()

            assert log_file == tmp_path / "reddit.log"
            assert "page fetched" in log_file.read_text()
        finally:
            for handler in list(root.handlers):
                if isinstance(handler, logging.FileHandler):
                    root.removeHandler(handler)
                    handler.close()
