"""
Logging configuration for the package logger, read from settings.ini.

The logger gets an extra TRACE level, used for diagnostics such as
unregistered status codes being converted to StatusCode.UNKNOWN.
"""
import logging
from configparser import ConfigParser
from pathlib import Path
from typing import Tuple

ini_file_path_posix = Path(__file__).parent / "settings.ini"
ini_file_path = str(ini_file_path_posix.absolute())

LOGGER_TRACE = 5
logging.addLevelName(LOGGER_TRACE, "TRACE")

log_level_mapper = {
    "notset": logging.NOTSET,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "trace": LOGGER_TRACE,
}

log_format_mapper = {
    "$name": "%(name)s",
    "$levelname": "%(levelname)s",
    "$funcName": "%(funcName)s",
    "$asctime": "%(asctime)s",
    "$message": "%(message)s",
}


def read_logging_settings(path: str) -> Tuple[str, int, int, str]:
    """
    Returns logger name, logger level, stream handler level and
    stream handler format from the [Logging] section of the ini file.

    :raises ValueError: one of the levels is not in log_level_mapper
    """
    parser = ConfigParser()
    parser.read(path)

    logger_name = parser.get("Logging", "logger_name")
    logger_level = parser.get("Logging", "logger_level")
    stream_handler_level = parser.get("Logging", "stream_handler_level")

    if any(
        (
            (logger_level not in log_level_mapper),
            (stream_handler_level not in log_level_mapper),
        )
    ):
        raise ValueError(
            f"{Path(path).name} contains invalid value "
            f"for one of the logger levels ({logger_level} or {stream_handler_level})"
        )

    log_format = parser.get("Logging", "stream_handler_format")
    for key, value in log_format_mapper.items():
        log_format = log_format.replace(key, value)

    return (
        logger_name,
        log_level_mapper[logger_level],
        log_level_mapper[stream_handler_level],
        log_format,
    )


LOGGER_NAME, MAIN_LOGGER_LEVEL, STREAM_HANDLER_LEVEL, FORMAT = read_logging_settings(
    ini_file_path
)


def _trace(message, *args, **kwargs):
    self = logging.getLogger(LOGGER_NAME)

    if self.isEnabledFor(LOGGER_TRACE):
        self._log(LOGGER_TRACE, message, args, **kwargs)


main_logger = logging.getLogger(LOGGER_NAME)
main_logger.trace = _trace  # type: ignore
main_logger.propagate = False
main_logger.setLevel(MAIN_LOGGER_LEVEL)

handler = logging.StreamHandler()
handler.setLevel(STREAM_HANDLER_LEVEL)

formatter = logging.Formatter(FORMAT)

handler.setFormatter(formatter)
main_logger.addHandler(handler)
