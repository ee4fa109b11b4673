from types import SimpleNamespace

import pytest

from ns1rest.errors import (
    APIError,
    ApplicationMissingError,
    DatasetNotFoundError,
    IPWhitelistMissingError,
    KeyExistsError,
    KeyMissingError,
    NS1Error,
    TeamExistsError,
    TeamMissingError,
    UserExistsError,
    UserMissingError,
    ViewExistsError,
    ViewMissingError,
    resource_missing_match,
)


@pytest.mark.parametrize(
    "cls, message",
    [
        (KeyExistsError, "key already exists"),
        (KeyMissingError, "key does not exist"),
        (TeamExistsError, "team already exists"),
        (TeamMissingError, "team does not exist"),
        (UserExistsError, "user already exists"),
        (UserMissingError, "user does not exist"),
        (IPWhitelistMissingError, "whitelist does not exist"),
        (ApplicationMissingError, "application does not exist"),
        (DatasetNotFoundError, "dataset not found"),
        (ViewExistsError, "DNS view already exists"),
        (ViewMissingError, "DNS view not found"),
    ],
)
def test_fixed_messages(cls, message):
    err = cls()
    assert str(err) == message
    assert isinstance(err, NS1Error)
    assert err.response is None


def test_fixed_error_carries_response():
    response = SimpleNamespace(status_code=404)
    err = ApplicationMissingError(response=response)
    assert err.response is response
    assert str(err) == "application does not exist"


def test_api_error_string_and_status():
    request = SimpleNamespace(method="GET", url="https://example.com/v1/zones")
    response = SimpleNamespace(status_code=404, request=request)
    err = APIError(response, "test error")
    assert err.status_code == 404
    assert err.message == "test error"
    assert str(err) == "GET https://example.com/v1/zones: 404 test error"
    assert "test error" in str(err)


def test_api_error_is_raisable_as_base():
    response = SimpleNamespace(status_code=500, request=None)
    with pytest.raises(NS1Error) as info:
        raise APIError(response, "boom")
    assert info.value.response is response


@pytest.mark.parametrize(
    "message, expected",
    [
        ("zone not found", True),
        ("pulsar app not found", True),
        ("Resource not found", True),
        ("notfound", False),
        ("zone Not found", False),
        ("", False),
    ],
)
def test_resource_missing_match(message, expected):
    assert resource_missing_match(message) is expected