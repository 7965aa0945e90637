"""
HTTP status codes as a closed enumeration.

Every integer converts to exactly one member: registered codes to their
named member, anything else to ``StatusCode.UNKNOWN``, and a missing
value to ``StatusCode.NONE``.
"""
import logging
import operator
from enum import Enum
from typing import Optional
from typing import Tuple

from .errors.codes import NoStatusCodeValue
from .settings import LOGGER_NAME
from .utils.generic import wrap_errors

log = logging.getLogger(LOGGER_NAME)


class StatusCode(Enum):
    """
    Registered HTTP status codes (IANA registry, WebDAV and
    experimental codes included) plus two sentinels:

        UNKNOWN -- an integer was given but it is not registered
        NONE    -- no integer was given at all

    :Example:
        >>> StatusCode.from_int(410)
        <StatusCode.GONE: 410>
        >>> StatusCode.from_optional_int(None)
        <StatusCode.NONE: None>
    """

    def __new__(cls, value, phrase: str, description: str = ""):
        obj = object.__new__(cls)
        obj._value_ = value

        obj.phrase = phrase
        obj.description = description
        return obj

    # 1xx Informational

    CONTINUE = (
        100,
        "Continue",
        "The client should continue the request, or ignore this if it has already finished.",
    )
    SWITCHING_PROTOCOLS = (
        101,
        "Switching Protocols",
        "The server is switching to the protocol asked for in the Upgrade header.",
    )
    PROCESSING = (
        102,
        "Processing",
        "The request was received and is being processed, no response is available yet.",
    )
    EARLY_HINTS = (
        103,
        "Early Hints",
        "Lets the user agent preload resources listed in Link headers before the final response.",
    )

    # 2xx Success

    OK = 200, "OK", "The request succeeded."
    CREATED = 201, "Created", "The request succeeded and a new resource was created."
    ACCEPTED = (
        202,
        "Accepted",
        "The request was received but has not been acted upon yet.",
    )
    NON_AUTHORITATIVE_INFORMATION = (
        203,
        "Non-Authoritative Information",
        "The returned metadata comes from a local or third-party copy, not the origin server.",
    )
    NO_CONTENT = 204, "No Content", "There is no content to send for this request."
    RESET_CONTENT = (
        205,
        "Reset Content",
        "The user agent should reset the document which sent this request.",
    )
    PARTIAL_CONTENT = (
        206,
        "Partial Content",
        "Only part of the resource is sent, as asked for by the Range header.",
    )
    MULTI_STATUS = (
        207,
        "Multi-Status",
        "The body carries status information for several independent operations.",
    )
    ALREADY_REPORTED = (
        208,
        "Already Reported",
        "Members of a DAV binding were already listed earlier in the response.",
    )
    IM_USED = (
        226,
        "IM Used",
        "The response is the result of instance-manipulations applied to the current instance.",
    )

    # 3xx Redirection

    MULTIPLE_CHOICES = (
        300,
        "Multiple Choices",
        "The request has more than one possible response and the user agent should choose one.",
    )
    MOVED_PERMANENTLY = (
        301,
        "Moved Permanently",
        "The URL of the requested resource has been changed permanently.",
    )
    FOUND = (
        302,
        "Found",
        "The URL of the requested resource has been changed temporarily.",
    )
    SEE_OTHER = (
        303,
        "See Other",
        "The client should get the resource at another URI with a GET request.",
    )
    NOT_MODIFIED = (
        304,
        "Not Modified",
        "The cached version of the response can still be used.",
    )
    USE_PROXY = (
        305,
        "Use Proxy",
        "Deprecated. The resource must be accessed through a proxy.",
    )
    TEMPORARY_REDIRECT = (
        307,
        "Temporary Redirect",
        "The resource is temporarily at another URI and the method must not change.",
    )
    PERMANENT_REDIRECT = (
        308,
        "Permanent Redirect",
        "The resource is permanently at another URI and the method must not change.",
    )

    # 4xx Client errors

    BAD_REQUEST = (
        400,
        "Bad Request",
        "The server cannot process the request because of a client error.",
    )
    UNAUTHORIZED = (
        401,
        "Unauthorized",
        "The client must authenticate itself to get the response.",
    )
    PAYMENT_REQUIRED = (
        402,
        "Payment Required",
        "Reserved for digital payment systems, rarely used.",
    )
    FORBIDDEN = (
        403,
        "Forbidden",
        "The client's identity is known but it has no access rights to the content.",
    )
    NOT_FOUND = 404, "Not Found", "The server cannot find the requested resource."
    METHOD_NOT_ALLOWED = (
        405,
        "Method Not Allowed",
        "The method is known by the server but not supported by the target resource.",
    )
    NOT_ACCEPTABLE = (
        406,
        "Not Acceptable",
        "No content matches the criteria given by the user agent.",
    )
    PROXY_AUTHENTICATION_REQUIRED = (
        407,
        "Proxy Authentication Required",
        "Authentication has to be done by a proxy.",
    )
    REQUEST_TIMEOUT = (
        408,
        "Request Timeout",
        "The server would like to shut down this unused connection.",
    )
    CONFLICT = (
        409,
        "Conflict",
        "The request conflicts with the current state of the server.",
    )
    GONE = (
        410,
        "Gone",
        "The content has been permanently deleted and has no forwarding address.",
    )
    LENGTH_REQUIRED = (
        411,
        "Length Required",
        "The server requires a Content-Length header field.",
    )
    PRECONDITION_FAILED = (
        412,
        "Precondition Failed",
        "The client indicated preconditions in its headers which the server does not meet.",
    )
    CONTENT_TOO_LARGE = (
        413,
        "Content Too Large",
        "The request entity is larger than the limits defined by the server.",
    )
    URI_TOO_LONG = (
        414,
        "URI Too Long",
        "The URI requested by the client is longer than the server will interpret.",
    )
    UNSUPPORTED_MEDIA_TYPE = (
        415,
        "Unsupported Media Type",
        "The media format of the requested data is not supported by the server.",
    )
    RANGE_NOT_SATISFIABLE = (
        416,
        "Range Not Satisfiable",
        "The range given by the Range header cannot be fulfilled.",
    )
    EXPECTATION_FAILED = (
        417,
        "Expectation Failed",
        "The expectation given by the Expect header cannot be met by the server.",
    )
    IM_A_TEAPOT = (
        418,
        "I'm a teapot",
        "The server refuses the attempt to brew coffee with a teapot.",
    )
    MISDIRECTED_REQUEST = (
        421,
        "Misdirected Request",
        "The request was directed at a server that is not able to produce a response.",
    )
    UNPROCESSABLE_CONTENT = (
        422,
        "Unprocessable Content",
        "The request was well-formed but could not be followed due to semantic errors.",
    )
    LOCKED = 423, "Locked", "The resource that is being accessed is locked."
    FAILED_DEPENDENCY = (
        424,
        "Failed Dependency",
        "The request failed because a previous request failed.",
    )
    TOO_EARLY = (
        425,
        "Too Early",
        "The server is unwilling to process a request that might be replayed.",
    )
    UPGRADE_REQUIRED = (
        426,
        "Upgrade Required",
        "The client has to switch to the protocol named in the Upgrade header.",
    )
    PRECONDITION_REQUIRED = (
        428,
        "Precondition Required",
        "The origin server requires the request to be conditional.",
    )
    TOO_MANY_REQUESTS = (
        429,
        "Too Many Requests",
        "The user has sent too many requests in a given amount of time.",
    )
    REQUEST_HEADER_FIELDS_TOO_LARGE = (
        431,
        "Request Header Fields Too Large",
        "The request header fields are too large for the server to process.",
    )
    UNAVAILABLE_FOR_LEGAL_REASONS = (
        451,
        "Unavailable For Legal Reasons",
        "The resource cannot legally be provided, such as a web page censored by a government.",
    )

    # 5xx Server errors

    INTERNAL_SERVER_ERROR = (
        500,
        "Internal Server Error",
        "The server has encountered a situation it does not know how to handle.",
    )
    NOT_IMPLEMENTED = (
        501,
        "Not Implemented",
        "The request method is not supported by the server and cannot be handled.",
    )
    BAD_GATEWAY = (
        502,
        "Bad Gateway",
        "The server, working as a gateway, got an invalid response.",
    )
    SERVICE_UNAVAILABLE = (
        503,
        "Service Unavailable",
        "The server is not ready to handle the request.",
    )
    GATEWAY_TIMEOUT = (
        504,
        "Gateway Timeout",
        "The server, acting as a gateway, cannot get a response in time.",
    )
    HTTP_VERSION_NOT_SUPPORTED = (
        505,
        "HTTP Version Not Supported",
        "The HTTP version used in the request is not supported by the server.",
    )
    VARIANT_ALSO_NEGOTIATES = (
        506,
        "Variant Also Negotiates",
        "The chosen variant resource is itself configured to do content negotiation.",
    )
    INSUFFICIENT_STORAGE = (
        507,
        "Insufficient Storage",
        "The server is unable to store the representation needed to complete the request.",
    )
    LOOP_DETECTED = (
        508,
        "Loop Detected",
        "The server detected an infinite loop while processing the request.",
    )
    NOT_EXTENDED = (
        510,
        "Not Extended",
        "Further extensions to the request are required for the server to fulfill it.",
    )
    NETWORK_AUTHENTICATION_REQUIRED = (
        511,
        "Network Authentication Required",
        "The client needs to authenticate to gain network access.",
    )

    # Sentinels

    UNKNOWN = (
        "unknown",
        "Unknown Status Code",
        "An integer was given but it is not registered.",
    )
    NONE = None, "No Status Code", "No status code was given."

    def __str__(self) -> str:
        if self.code is None:
            return self.phrase
        return f"{self.code} {self.phrase}"

    def __int__(self) -> int:
        if self.code is None:
            raise NoStatusCodeValue(self)
        return self.value

    @property
    def code(self) -> Optional[int]:
        """
        Integer of a registered member, None for UNKNOWN and NONE
        """
        if isinstance(self.value, int):
            return self.value
        return None

    @classmethod
    def registered(cls) -> Tuple["StatusCode", ...]:
        return tuple(member for member in cls if member.code is not None)

    @classmethod
    def from_int(cls, value: int) -> "StatusCode":
        """
        Any integer type is accepted (anything with __index__).
        Integers outside the registered set give UNKNOWN.
        """
        with wrap_errors(value):
            value = operator.index(value)

        member = _registered_codes.get(value)
        if member is None:
            log.trace(  # type: ignore
                "Status code %s is not registered, using %r", value, cls.UNKNOWN
            )
            return cls.UNKNOWN
        return member

    @classmethod
    def from_optional_int(cls, value: Optional[int] = None) -> "StatusCode":
        if value is None:
            return cls.NONE
        return cls.from_int(value)


_registered_codes = {member.code: member for member in StatusCode.registered()}
