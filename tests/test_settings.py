import logging

import pytest

from httpcodex import settings


def test_trace_level_registered():
    assert logging.getLevelName(settings.LOGGER_TRACE) == "TRACE"


def test_logger_configuration():
    log = logging.getLogger(settings.LOGGER_NAME)

    assert settings.LOGGER_NAME == "httpcodex"
    assert log.propagate is False
    assert hasattr(log, "trace")
    assert settings.handler in log.handlers


def test_format_placeholders_translated():
    assert "$" not in settings.FORMAT
    assert settings.FORMAT == "%(levelname)s | %(name)s | %(message)s"


INI_TEMPLATE = """\
[Logging]
logger_name = httpcodex
logger_level = {logger_level}
stream_handler_level = {stream_handler_level}
stream_handler_format = $levelname | $name | $message
"""


@pytest.fixture
def write_ini(tmp_path):
    def inner(logger_level="warning", stream_handler_level="warning"):
        path = tmp_path / "settings.ini"
        path.write_text(
            INI_TEMPLATE.format(
                logger_level=logger_level,
                stream_handler_level=stream_handler_level,
            )
        )
        return str(path)

    return inner


def test_read_logging_settings(write_ini):
    path = write_ini(logger_level="trace", stream_handler_level="debug")

    assert settings.read_logging_settings(path) == (
        "httpcodex",
        settings.LOGGER_TRACE,
        logging.DEBUG,
        "%(levelname)s | %(name)s | %(message)s",
    )


def test_packaged_ini_matches_module():
    assert settings.read_logging_settings(settings.ini_file_path) == (
        settings.LOGGER_NAME,
        settings.MAIN_LOGGER_LEVEL,
        settings.STREAM_HANDLER_LEVEL,
        settings.FORMAT,
    )


@pytest.mark.parametrize(
    argnames=("logger_level", "stream_handler_level"),
    argvalues=[
        ("verbose", "warning"),
        ("warning", "loud"),
    ],
)
def test_invalid_level(write_ini, logger_level, stream_handler_level):
    path = write_ini(
        logger_level=logger_level, stream_handler_level=stream_handler_level
    )

    with pytest.raises(ValueError) as exc_info:
        settings.read_logging_settings(path)

    (text,) = exc_info.value.args
    assert text == (
        "settings.ini contains invalid value "
        f"for one of the logger levels ({logger_level} or {stream_handler_level})"
    )
