"""Declare exception hierarchies whose members map onto HTTP responses."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from .errors import ErrorKind, FailwrapError
from .status import HttpError, HttpResponse, Status, parse_status

_CONFIG_ATTR = "__failwrap_config__"
_STATUS_ATTR = "__failwrap_status__"
_ROOT_ATTR = "__failwrap_root__"

_KEYS = ("transform", "default_status")

DEFAULT_STATUS = Status(500, "InternalServerError")

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class Config:
    """Options shared by every member of a declared error type."""

    transform: Callable[[Status, str], Any] | None = None
    default_status: Status | None = None


def parse_config(options: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> Config:
    """Validate ``transform`` and ``default_status`` options into a Config."""
    pairs = options.items() if isinstance(options, Mapping) else options
    found: dict[str, Any] = {}
    for key, value in pairs:
        if not isinstance(key, str) or not key.isidentifier():
            raise FailwrapError(ErrorKind.INVALID_IDENT)
        if key not in _KEYS:
            raise FailwrapError(ErrorKind.INVALID_KEY, _KEYS)
        if key in found:
            raise FailwrapError(ErrorKind.DUPLICATE_IDENT)
        if key == "transform":
            if not callable(value):
                raise FailwrapError(ErrorKind.INVALID_IDENT)
            found[key] = value
        else:
            found[key] = parse_status(value)
    return Config(**found)


def failwrap(**kwargs: Any) -> Callable[[T], T]:
    """Attach configuration to an error type declared with ``response_error``."""
    config = parse_config(kwargs)

    def decorate(cls: T) -> T:
        if _CONFIG_ATTR in vars(cls):
            raise FailwrapError(ErrorKind.DUPLICATE_ATTR)
        setattr(cls, _CONFIG_ATTR, config)
        return cls

    return decorate


def status(value: object) -> Callable[[T], T]:
    """Give one member of a declared error type its own HTTP status."""
    parsed = parse_status(value)

    def decorate(cls: T) -> T:
        if _STATUS_ATTR in vars(cls):
            raise FailwrapError(ErrorKind.DUPLICATE_ATTR)
        setattr(cls, _STATUS_ATTR, parsed)
        return cls

    return decorate


def response_error(cls: T) -> T:
    """Declare an exception class whose subclasses convert into HTTP responses."""
    if not (isinstance(cls, type) and issubclass(cls, BaseException)):
        raise FailwrapError(ErrorKind.INVALID_EXPECTED_ENUM)
    setattr(cls, _ROOT_ATTR, cls)
    cls.into_response = into_response
    cls.into_error = into_error
    return cls


def _resolve(error: BaseException) -> tuple[Config, Status]:
    cls = type(error)
    root = getattr(cls, _ROOT_ATTR, None)
    if root is None:
        raise TypeError(f"{cls.__name__} is not declared with response_error")
    config = vars(root).get(_CONFIG_ATTR) or Config()
    for klass in cls.__mro__:
        declared = vars(klass).get(_STATUS_ATTR)
        if declared is not None:
            return config, declared
        if klass is root:
            break
    return config, config.default_status or DEFAULT_STATUS


def into_response(error: BaseException) -> Any:
    """Convert a declared error into a response, through ``transform`` if set."""
    config, chosen = _resolve(error)
    if config.transform is not None:
        return config.transform(chosen, str(error))
    return chosen.respond(str(error))


def into_error(error: BaseException) -> HttpError:
    """Convert a declared error into an HttpError with the matching status."""
    _, chosen = _resolve(error)
    return chosen.error(str(error))


HttpResult = HttpResponse