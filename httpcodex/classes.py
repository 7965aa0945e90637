"""
Status classes, so comparing a code's hundreds is not necessary
"""
from enum import Enum
from typing import Optional

from .codes import StatusCode
from .errors.codes import InvalidStatusCodeType


class StatusClass(Enum):
    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5

    UNKNOWN = "unknown"
    NONE = None

    @classmethod
    def from_status_code(cls, code: StatusCode) -> "StatusClass":
        """
        The class is the leading digit of the code, there is no
        code-to-class table to keep in sync with StatusCode.
        """
        if not isinstance(code, StatusCode):
            raise InvalidStatusCodeType(code, expected="a StatusCode")

        if code is StatusCode.NONE:
            return cls.NONE
        if code is StatusCode.UNKNOWN:
            return cls.UNKNOWN
        return cls(code.code // 100)  # type: ignore

    @classmethod
    def from_int(cls, value: int) -> "StatusClass":
        return cls.from_status_code(StatusCode.from_int(value))

    @classmethod
    def from_optional_int(cls, value: Optional[int] = None) -> "StatusClass":
        return cls.from_status_code(StatusCode.from_optional_int(value))


def is_informational(code: StatusCode) -> bool:
    return StatusClass.from_status_code(code) is StatusClass.INFORMATIONAL


def is_success(code: StatusCode) -> bool:
    return StatusClass.from_status_code(code) is StatusClass.SUCCESS


def is_redirect(code: StatusCode) -> bool:
    return StatusClass.from_status_code(code) is StatusClass.REDIRECTION


def is_client_error(code: StatusCode) -> bool:
    return StatusClass.from_status_code(code) is StatusClass.CLIENT_ERROR


def is_server_error(code: StatusCode) -> bool:
    return StatusClass.from_status_code(code) is StatusClass.SERVER_ERROR


def is_error(code: StatusCode) -> bool:
    return StatusClass.from_status_code(code) in (
        StatusClass.CLIENT_ERROR,
        StatusClass.SERVER_ERROR,
    )
