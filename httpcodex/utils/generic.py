import contextlib
import logging

from ..errors.codes import InvalidStatusCodeType
from ..settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


@contextlib.contextmanager
def wrap_errors(value, expected="an integer"):

    try:
        yield
    except TypeError:
        log.debug(f"Rejecting {type(value).__name__} value {value!r}")
        raise InvalidStatusCodeType(value, expected)
