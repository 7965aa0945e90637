import logging

import pytest

from httpcodex.settings import LOGGER_NAME, LOGGER_TRACE

log = logging.getLogger(LOGGER_NAME)


@pytest.fixture
def trace_log(caplog):
    """
    The package logger does not propagate, turn propagation on
    and lower the level so caplog sees TRACE records
    """
    old_level = log.level
    log.propagate = True
    log.setLevel(LOGGER_TRACE)
    caplog.set_level(LOGGER_TRACE, logger=LOGGER_NAME)
    yield caplog
    log.propagate = False
    log.setLevel(old_level)
