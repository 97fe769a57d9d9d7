import pytest

from failwrap.errors import ErrorKind, FailwrapError
from failwrap.response_error import (
    Config,
    failwrap,
    into_error,
    into_response,
    parse_config,
    response_error,
    status,
)
from failwrap.status import HttpError, HttpResponse, Status, parse_status


@response_error
class AppError(Exception):
    pass


@status(404)
class Missing(AppError):
    pass


@status("Conflict")
class Clash(AppError):
    pass


class Unknown(AppError):
    pass


class DeepMissing(Missing):
    pass


@response_error
@failwrap(default_status="BadRequest")
class InputError(Exception):
    pass


class BadField(InputError):
    pass


@response_error
@failwrap(transform=lambda chosen, body: (chosen.code, body.upper()))
class Transformed(Exception):
    pass


@status(404)
class TransformedMissing(Transformed):
    pass


def test_variant_status():
    assert into_response(Missing("missing")) == HttpResponse(404, "missing")


def test_named_variant_status():
    assert into_response(Clash("clash")).status == parse_status("Conflict").code


def test_default_is_internal_server_error():
    assert into_response(Unknown("oops")) == HttpResponse(500, "oops")


def test_status_inherited_by_subclass():
    assert into_response(DeepMissing("deep")).status == 404


def test_configured_default_status():
    assert into_response(BadField("bad")) == HttpResponse(400, "bad")


def test_transform_receives_status_and_body():
    assert into_response(TransformedMissing("gone")) == (404, "GONE")
    assert into_response(Transformed("x")) == (500, "X")


def test_into_error_ignores_transform():
    error = into_error(TransformedMissing("gone"))
    assert isinstance(error, HttpError)
    assert (error.status, str(error)) == (404, "gone")


def test_methods_attached():
    err = Missing("missing")
    assert err.into_response() == into_response(err)
    assert err.into_error().status == 404


def test_undeclared_error_rejected():
    with pytest.raises(TypeError):
        into_response(ValueError("nope"))


def test_non_exception_rejected():
    with pytest.raises(FailwrapError) as info:
        response_error(int)
    assert info.value.kind is ErrorKind.INVALID_EXPECTED_ENUM


def test_duplicate_status_rejected():
    with pytest.raises(FailwrapError) as info:

        @status(404)
        @status(500)
        class Twice(AppError):
            pass

    assert info.value.kind is ErrorKind.DUPLICATE_ATTR


def test_duplicate_failwrap_rejected():
    with pytest.raises(FailwrapError) as info:

        @failwrap(default_status=404)
        @failwrap(default_status=500)
        class Twice(Exception):
            pass

    assert info.value.kind is ErrorKind.DUPLICATE_ATTR


def test_parse_config_values():
    config = parse_config({"default_status": 404})
    assert config == Config(default_status=Status(404))
    assert config.transform is None


def test_parse_config_invalid_key():
    with pytest.raises(FailwrapError) as info:
        parse_config({"colour": 1})
    assert info.value.kind is ErrorKind.INVALID_KEY
    assert info.value.expected == ("transform", "default_status")


def test_parse_config_duplicate_key():
    with pytest.raises(FailwrapError) as info:
        parse_config([("default_status", 404), ("default_status", 500)])
    assert info.value.kind is ErrorKind.DUPLICATE_IDENT


def test_parse_config_transform_must_be_callable():
    with pytest.raises(FailwrapError) as info:
        parse_config({"transform": "not callable"})
    assert info.value.kind is ErrorKind.INVALID_IDENT


def test_failwrap_bad_status():
    with pytest.raises(FailwrapError) as info:
        failwrap(default_status=306)
    assert info.value.kind is ErrorKind.INVALID_HTTP_CODE