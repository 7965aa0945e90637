class HttpCodexError(Exception):
    ...
