import logging
import logging.handlers

from matrix_simple import config
from matrix_simple import logger


def test_get_logger_adds_handler_once():
    a = logger.get_logger("matrix_simple.test.once")
    b = logger.get_logger("matrix_simple.test.once")
    assert a is b
    assert 1 == len(a.handlers)
    assert isinstance(a.handlers[0], logging.StreamHandler)
    assert config.LOG_LEVEL == a.level


def test_get_logger_file_handler(tmp_path, monkeypatch):
    log_file = tmp_path / "matrix.log"
    monkeypatch.setattr(config, "SHOULD_LOG", True)
    monkeypatch.setattr(config, "LOG_FILE_NAME", str(log_file))
    l = logger.get_logger("matrix_simple.test.file")
    try:
        assert 2 == len(l.handlers)
        file_handler = l.handlers[1]
        assert isinstance(file_handler, logging.handlers.RotatingFileHandler)
        assert 20 == file_handler.backupCount
        l.error("written")
        file_handler.flush()
        assert "matrix_simple.test.file - ERROR" in log_file.read_text()
    finally:
        for handler in l.handlers:
            handler.close()
        l.handlers = []


def test_set_level():
    child = logger.get_logger("matrix_simple.test.level")
    logger.set_level(logging.DEBUG, "matrix_simple.test")
    try:
        assert logging.DEBUG == child.level
    finally:
        logger.set_level(config.LOG_LEVEL, "matrix_simple.test")


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("MATRIX_SIMPLE_LOG_LEVEL", "debug")
    assert logging.DEBUG == config.get_log_level()
    monkeypatch.setenv("MATRIX_SIMPLE_LOG_LEVEL", "verbose")
    assert logging.WARNING == config.get_log_level()
    monkeypatch.delenv("MATRIX_SIMPLE_LOG_LEVEL")
    assert logging.WARNING == config.get_log_level()
