import logging
import os

#
# Logging configuration.
#

def get_log_level():
    level = os.environ.get("MATRIX_SIMPLE_LOG_LEVEL", "WARNING")
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        # Unknown names fall back to the default.
        return logging.WARNING
    return numeric

LOG_LEVEL = get_log_level()


def get_should_log():
    return os.environ.get("MATRIX_SIMPLE_SHOULD_LOG", "").strip().lower() in ("1", "true", "yes")

# Whether to also write logs to LOG_FILE_NAME.
SHOULD_LOG = get_should_log()


def get_log_file_name():
    if os.environ.get("MATRIX_SIMPLE_LOG_FILE"):
        return os.environ["MATRIX_SIMPLE_LOG_FILE"]
    directory = os.path.dirname(os.path.realpath(__file__))
    log_directory = 'log'
    file_name = 'matrix-simple.log'
    return os.path.join(*[directory, log_directory, file_name])

LOG_FILE_NAME = get_log_file_name()


#
# Output configuration.
#

# Any format understood by `tabulate`.
TABLE_FORMAT = os.environ.get("MATRIX_SIMPLE_TABLE_FORMAT", "plain")
