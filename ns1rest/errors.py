"""Exceptions raised by the NS1 REST client and its services."""

from __future__ import annotations

import re
from typing import Any

_RESOURCE_MISSING = re.compile(" not found")


def resource_missing_match(message: str) -> bool:
    """Return True when an API error message reports a missing resource."""
    return _RESOURCE_MISSING.search(message) is not None


class NS1Error(Exception):
    """Base class for every error raised by this package."""


class APIError(NS1Error):
    """A response from the API outside the 2xx range."""

    def __init__(self, response: Any, message: str = "") -> None:
        self.response = response
        self.message = message
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        request = getattr(self.response, "request", None)
        status = self.response.status_code
        if request is None:
            return f"{status} {self.message}"
        return f"{request.method} {request.url}: {status} {self.message}"


class _FixedMessageError(NS1Error):
    """An error with a fixed message, optionally carrying the HTTP response."""

    default_message = ""

    def __init__(self, response: Any = None) -> None:
        super().__init__(self.default_message)
        self.response = response

    def __str__(self) -> str:
        return self.default_message


class KeyExistsError(_FixedMessageError):
    default_message = "key already exists"


class KeyMissingError(_FixedMessageError):
    default_message = "key does not exist"


class TeamExistsError(_FixedMessageError):
    default_message = "team already exists"


class TeamMissingError(_FixedMessageError):
    default_message = "team does not exist"


class UserExistsError(_FixedMessageError):
    default_message = "user already exists"


class UserMissingError(_FixedMessageError):
    default_message = "user does not exist"


class IPWhitelistMissingError(_FixedMessageError):
    default_message = "whitelist does not exist"


class ApplicationMissingError(_FixedMessageError):
    default_message = "application does not exist"


class DatasetNotFoundError(_FixedMessageError):
    default_message = "dataset not found"


class ViewExistsError(_FixedMessageError):
    default_message = "DNS view already exists"


class ViewMissingError(_FixedMessageError):
    default_message = "DNS view not found"