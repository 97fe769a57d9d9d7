# failwrap

`failwrap` lets you declare, in one place, which HTTP status each kind of
error in your application stands for. You declare a root exception class,
give its subclasses their statuses, and then turn any raised error into a
response or into an HTTP error that carries the error's message.

## Installation

```
pip install failwrap
```

## Declaring errors

Decorate a root exception class with `response_error`. Give a subclass its
status with `status(...)`. Errors whose class (or any class between it and the
root) has no status fall back to the default, which is `InternalServerError`
(500) unless `failwrap(default_status=...)` on the root sets another one.

```python
from failwrap.response_error import failwrap, response_error, status


@response_error
@failwrap(default_status="BadRequest")
class ApiError(Exception):
    pass


@status(404)
class NotFound(ApiError):
    pass


@status("Forbidden")
class Forbidden(ApiError):
    pass


class Malformed(ApiError):
    pass
```

A status is either a numeric code from the supported set or a status name such
as `NotFound` or `InternalServerError`. `failwrap` accepts only the options
`transform` and `default_status`.

Mistakes in a declaration raise `failwrap.errors.FailwrapError`, whose `kind`
is one of the `ErrorKind` members: an unsupported code (`INVALID_HTTP_CODE`),
a value that is neither a code nor a known name (`INVALID_VALUE`), an unknown
option (`INVALID_KEY`), a `transform` that is not callable (`INVALID_IDENT`),
applying `failwrap` or `status` twice to the same class (`DUPLICATE_ATTR`), or
`response_error` on something that is not an exception class
(`INVALID_EXPECTED_ENUM`).

## Turning errors into responses

```python
from failwrap.response_error import into_error, into_response

response = into_response(NotFound("no such user"))
response.status   # 404
response.body     # "no such user"
response.reason   # "Not Found"

error = into_error(Malformed("bad body"))   # an HttpError with status 400
error.as_response()                         # HttpResponse(status=400, body="bad body")
```

`response_error` also attaches both functions as methods, so
`NotFound("no such user").into_response()` works the same way. Calling them on
an error whose class was not declared with `response_error` raises `TypeError`.

## Custom response shapes

Pass `transform` to `failwrap` to build every response yourself. It is called
with the chosen `Status` and the error's message, and `into_response` returns
whatever it returns. `into_error` is not affected by `transform`.

```python
from failwrap.status import HttpResponse


def as_json(status, message):
    return HttpResponse(status.code, '{"error": "%s"}' % message)


@response_error
@failwrap(transform=as_json)
class StorageError(Exception):
    pass


@status(507)
class DiskFull(StorageError):
    pass
```

## Lower-level pieces

- `failwrap.status.parse_status` turns a code, a status name or a `Status` into a `Status`.
- `Status(code, name=None)` checks the code against the supported set; `Status.reason` gives the standard phrase.
- `Status.respond(body)` gives an `HttpResponse`, and `Status.error(body)` gives an `HttpError`.
- `failwrap.response_error.parse_config` validates a mapping or a sequence of `(key, value)` pairs into a `Config`.

## What it does not do

`failwrap` is not tied to any web framework and runs no server. `HttpResponse`
is a plain value holding a status code and a text body, and `HttpError` is a
plain exception holding a status and a message; sending them over the wire is
left to your application.