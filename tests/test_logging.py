"""Tests for logging configuration."""

import logging

import pytest

from ifts_data.utils.logging import configure_logging, get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_stdout_output(restore_root_logger):
    configure_logging(level="WARNING", output="stdout", log_format="text")
    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_settings_read_from_environment(restore_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_OUTPUT", "stdout")
    configure_logging()
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


def test_file_output_creates_log_dir(restore_root_logger, tmp_path):
    log_path = tmp_path / "logs" / "ifts.log"
    configure_logging(level="INFO", output="both", file_path=str(log_path), log_format="json")

    get_logger("ifts.test").info("hello")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert len(restore_root_logger.handlers) == 2
    assert '"message": "hello"' in log_path.read_text(encoding="utf-8")


def test_unopenable_log_file_keeps_existing_handlers(restore_root_logger, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    before = list(restore_root_logger.handlers)

    with pytest.raises(OSError):
        configure_logging(output="file", file_path=str(blocker / "ifts.log"))

    assert restore_root_logger.handlers == before
