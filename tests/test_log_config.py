"""Tests for the logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from booktoggle.logging_logs.log_config import LOG_FILE_NAME, DuplicateFilter, get_logger, setup_logging


@pytest.fixture
def service_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger('booktoggle')
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def make_record(msg: str) -> logging.LogRecord:
    return logging.LogRecord('booktoggle', logging.INFO, __file__, 1, msg, None, None)


class TestSetupLogging:
    def test_installs_console_and_file_handlers(self, service_logger: logging.Logger, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=str(tmp_path), level='warning')

        assert logger is service_logger
        assert len(logger.handlers) == 2
        console, file_handler = logger.handlers
        assert console.level == logging.WARNING
        assert file_handler.baseFilename == str(tmp_path / LOG_FILE_NAME)
        assert logging.getLogger('pymongo').level == logging.WARNING

    def test_is_idempotent(self, service_logger: logging.Logger, tmp_path: Path) -> None:
        setup_logging(log_dir=str(tmp_path))
        setup_logging(log_dir=str(tmp_path))
        assert len(service_logger.handlers) == 2

    def test_module_loggers_reach_the_file(self, service_logger: logging.Logger, tmp_path: Path) -> None:
        setup_logging(log_dir=str(tmp_path))
        get_logger('services.toggle_controller').info('Activated books: 3 documents inserted')
        for handler in service_logger.handlers:
            handler.flush()
        assert 'Activated books' in (tmp_path / LOG_FILE_NAME).read_text()


class TestDuplicateFilter:
    def test_drops_immediate_repeat(self) -> None:
        dup_filter = DuplicateFilter()
        assert dup_filter.filter(make_record('same'))
        assert not dup_filter.filter(make_record('same'))
        assert dup_filter.filter(make_record('different'))
