import pytest

from httpcodex import HttpCodexError
from httpcodex import InvalidStatusCodeType
from httpcodex import NoStatusCodeValue
from httpcodex import StatusClass
from httpcodex import StatusCode


@pytest.mark.parametrize("value", ["404", 404.0, None, [404]])
def test_from_int_rejects_non_integers(value):
    with pytest.raises(InvalidStatusCodeType) as exc_info:
        StatusCode.from_int(value)

    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, HttpCodexError)


def test_from_int_error_text():
    with pytest.raises(InvalidStatusCodeType) as exc_info:
        StatusCode.from_int("404")

    (text,) = exc_info.value.args
    assert text == "Expected an integer, got str ('404')"


def test_from_optional_int_rejects_non_integers():
    with pytest.raises(InvalidStatusCodeType):
        StatusCode.from_optional_int("410")


def test_from_status_code_rejects_integers():
    with pytest.raises(InvalidStatusCodeType) as exc_info:
        StatusClass.from_status_code(404)

    (text,) = exc_info.value.args
    assert text == "Expected a StatusCode, got int (404)"


@pytest.mark.parametrize("member", [StatusCode.UNKNOWN, StatusCode.NONE])
def test_int_of_sentinel(member):
    with pytest.raises(NoStatusCodeValue) as exc_info:
        int(member)

    assert isinstance(exc_info.value, ValueError)
