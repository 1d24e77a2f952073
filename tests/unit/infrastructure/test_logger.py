"""Tests for structured logging setup."""
import logging
from logging.handlers import RotatingFileHandler

from decorum.config.schemas import LoggingConfig
from decorum.infrastructure.logging.logger import DetailedFormatter, get_logger, setup_logging


def test_setup_logging_defaults_to_a_stream_handler():
    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert type(root.handlers[0]) is logging.StreamHandler
    assert isinstance(root.handlers[0].formatter, DetailedFormatter)


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "nested" / "decorum.log"
    setup_logging(LoggingConfig(level="info", destination="file", file_path=str(log_file)))

    get_logger("decorum.test").info("Chain built", kind="speaker", depth=2)
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO" in content
    assert "event='Chain built'" in content
    assert "kind='speaker'" in content
    assert "depth=2" in content
    assert "test_logger.test_setup_logging_writes_to_file" in content


def test_setup_logging_both_destinations(tmp_path):
    setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "decorum.log"), backup_count=2))

    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 2
    assert file_handlers[0].maxBytes == 10 * 1024 * 1024


def test_setup_logging_replaces_previous_handlers(tmp_path):
    setup_logging(LoggingConfig(destination="file", file_path=str(tmp_path / "first.log")))
    setup_logging(LoggingConfig(destination="file", file_path=str(tmp_path / "second.log")))

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].baseFilename.endswith("second.log")


def test_level_filters_records(tmp_path):
    log_file = tmp_path / "decorum.log"
    setup_logging(LoggingConfig(level="WARNING", destination="file", file_path=str(log_file)))

    logger = get_logger("decorum.test")
    logger.debug("hidden detail")
    logger.warning("visible warning")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "hidden detail" not in content
    assert "visible warning" in content
