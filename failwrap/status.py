"""HTTP statuses, responses and errors produced from declared error types."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus

from .errors import ErrorKind, FailwrapError

VALID_CODES = frozenset(
    {
        100, 101, 102,
        200, 201, 202, 203, 204, 205, 206, 207, 208, 226,
        300, 301, 302, 303, 304, 305, 307, 308,
        400, 401, 402, 403, 404, 405, 406, 407, 408, 409, 410, 411, 412,
        413, 414, 415, 416, 417, 418, 421, 422, 423, 424, 426, 428,
        429, 431, 451,
        500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511,
    }
)

NAMED_STATUSES = {
    "Continue": 100,
    "SwitchingProtocols": 101,
    "Processing": 102,
    "Ok": 200,
    "Created": 201,
    "Accepted": 202,
    "NonAuthoritativeInformation": 203,
    "NoContent": 204,
    "ResetContent": 205,
    "PartialContent": 206,
    "MultiStatus": 207,
    "AlreadyReported": 208,
    "ImUsed": 226,
    "MultipleChoices": 300,
    "MovedPermanently": 301,
    "Found": 302,
    "SeeOther": 303,
    "NotModified": 304,
    "UseProxy": 305,
    "TemporaryRedirect": 307,
    "PermanentRedirect": 308,
    "BadRequest": 400,
    "Unauthorized": 401,
    "PaymentRequired": 402,
    "Forbidden": 403,
    "NotFound": 404,
    "MethodNotAllowed": 405,
    "NotAcceptable": 406,
    "ProxyAuthenticationRequired": 407,
    "RequestTimeout": 408,
    "Conflict": 409,
    "Gone": 410,
    "LengthRequired": 411,
    "PreconditionFailed": 412,
    "PayloadTooLarge": 413,
    "UriTooLong": 414,
    "UnsupportedMediaType": 415,
    "RangeNotSatisfiable": 416,
    "ExpectationFailed": 417,
    "ImATeapot": 418,
    "MisdirectedRequest": 421,
    "UnprocessableEntity": 422,
    "Locked": 423,
    "FailedDependency": 424,
    "UpgradeRequired": 426,
    "PreconditionRequired": 428,
    "TooManyRequests": 429,
    "RequestHeaderFieldsTooLarge": 431,
    "UnavailableForLegalReasons": 451,
    "InternalServerError": 500,
    "NotImplemented": 501,
    "BadGateway": 502,
    "ServiceUnavailable": 503,
    "GatewayTimeout": 504,
    "VersionNotSupported": 505,
    "VariantAlsoNegotiates": 506,
    "InsufficientStorage": 507,
    "LoopDetected": 508,
    "NotExtended": 510,
    "NetworkAuthenticationRequired": 511,
}

_EXPECTED_VALUES = ("u16 literal", "status ident")


def _phrase(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


@dataclass(frozen=True)
class HttpResponse:
    """A finished HTTP response: a status code and a text body."""

    status: int
    body: str = ""

    @property
    def reason(self) -> str:
        return _phrase(self.status)


class HttpError(Exception):
    """An error that carries the HTTP status it should be answered with."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    def as_response(self) -> HttpResponse:
        return HttpResponse(self.status, self.message)


@dataclass(frozen=True)
class Status:
    """A supported HTTP status, optionally known by its symbolic name."""

    code: int
    name: str | None = None

    def __post_init__(self) -> None:
        if self.code not in VALID_CODES:
            raise FailwrapError(ErrorKind.INVALID_HTTP_CODE)

    @property
    def reason(self) -> str:
        return _phrase(self.code)

    def respond(self, body: str) -> HttpResponse:
        """Build a response with this status and the given body."""
        return HttpResponse(self.code, body)

    def error(self, body: str) -> HttpError:
        """Build an HTTP error with this status and the given message."""
        return HttpError(self.code, body)


def parse_status(value: object) -> Status:
    """Turn a status code or a status name such as ``"NotFound"`` into a Status."""
    if isinstance(value, Status):
        return value
    if isinstance(value, bool):
        raise FailwrapError(ErrorKind.INVALID_VALUE, _EXPECTED_VALUES)
    if isinstance(value, int):
        return Status(int(value))
    if isinstance(value, str) and value in NAMED_STATUSES:
        return Status(NAMED_STATUSES[value], value)
    raise FailwrapError(ErrorKind.INVALID_VALUE, _EXPECTED_VALUES)