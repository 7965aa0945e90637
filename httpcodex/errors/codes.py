from .base import HttpCodexError


class InvalidStatusCodeType(HttpCodexError, TypeError):
    def __init__(self, value, expected="an integer"):
        text = f"Expected {expected}, got {type(value).__name__} ({value!r})"
        super(InvalidStatusCodeType, self).__init__(text)


class NoStatusCodeValue(HttpCodexError, ValueError):
    def __init__(self, member):
        super(NoStatusCodeValue, self).__init__(
            f"{member} has no integer value, it is a sentinel"
        )
