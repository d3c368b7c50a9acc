import logging
import logging.handlers
import sys

from matrix_simple import config


def get_logger(name="matrix_simple"):
    logger = logging.getLogger(name)
    logger.setLevel(config.LOG_LEVEL)
    if len(logger.handlers) == 0:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(asctime)s: %(message)s")
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        if config.SHOULD_LOG:
            file_handler = logging.handlers.RotatingFileHandler(
                config.LOG_FILE_NAME, backupCount=20, maxBytes=5242880)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger


def set_level(level, name="matrix_simple"):
    """Sets the level of `name` and every logger below it."""
    logging.getLogger(name).setLevel(level)
    prefix = name + "."
    for other in list(logging.Logger.manager.loggerDict):
        if other.startswith(prefix):
            logging.getLogger(other).setLevel(level)
