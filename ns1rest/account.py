"""Services for the account endpoints.

These cover activity, API keys, settings, teams, users, usage warnings and
global IP whitelists.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from ns1rest.client import Param, Service
from ns1rest.errors import (
    APIError,
    IPWhitelistMissingError,
    KeyExistsError,
    KeyMissingError,
    TeamExistsError,
    TeamMissingError,
    UserExistsError,
    UserMissingError,
    resource_missing_match,
)

_USER_EXISTS_MESSAGE = "request failed:Login Name is already in use."
_UNKNOWN_USER_MESSAGE = "Unknown user"


def _field(obj: Any, name: str) -> str:
    """Read a field from a mapping or an object; a missing field reads as ""."""
    if isinstance(obj, Mapping):
        value = obj.get(name)
    else:
        value = getattr(obj, name, None)
    return "" if value is None else str(value)


def _refresh(target: Any, value: Any) -> Any:
    """Merge the API's reply into ``target`` when it is a mutable mapping.

    Fields absent from the reply keep their old values. Returns the merged
    target, or the decoded reply when the target cannot be updated in place.
    """
    if isinstance(target, MutableMapping) and isinstance(value, Mapping):
        target.update(value)
        return target
    return value


class ActivityService(Service):
    """The 'account/activity' endpoint."""

    def list(self, *args: Param) -> list[Any]:
        """Return account activity, filtered by optional query parameters."""
        request = self.client.new_request("GET", "account/activity", None)
        activity, _ = self.client.do(request, *args)
        return activity


class APIKeysService(Service):
    """The 'account/apikeys' endpoint."""

    def list(self) -> list[Any]:
        """Return every API key in the account."""
        request = self.client.new_request("GET", "account/apikeys", None)
        keys, _ = self.client.do(request)
        return keys

    def get(self, key_id: str) -> Any:
        """Return one API key by its id (not by the key itself)."""
        request = self.client.new_request("GET", f"account/apikeys/{key_id}", None)
        try:
            key, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise KeyMissingError(exc.response) from exc
            raise
        return key

    def create(self, key: Any) -> Any:
        """Create an API key and refresh ``key`` with what the API returns."""
        request = self.client.new_request("PUT", "account/apikeys", key)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if exc.message == f'api key with name "{_field(key, "name")}" exists':
                raise KeyExistsError(exc.response) from exc
            raise
        return _refresh(key, value)

    def update(self, key: Any) -> Any:
        """Change the name or access rights of an API key."""
        path = f"account/apikeys/{_field(key, 'id')}"
        request = self.client.new_request("POST", path, key)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise KeyMissingError(exc.response) from exc
            raise
        return _refresh(key, value)

    def delete(self, key_id: str) -> Any:
        """Delete an API key and return the HTTP response."""
        request = self.client.new_request("DELETE", f"account/apikeys/{key_id}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise KeyMissingError(exc.response) from exc
            raise
        return response


class SettingsService(Service):
    """The 'account/settings' endpoint."""

    def get(self) -> Any:
        """Return the account's basic contact details."""
        request = self.client.new_request("GET", "account/settings", None)
        setting, _ = self.client.do(request)
        return setting

    def update(self, setting: Any) -> Any:
        """Change the contact details, except the customer id."""
        request = self.client.new_request("POST", "account/settings", setting)
        value, _ = self.client.do(request)
        return _refresh(setting, value)


class TeamsService(Service):
    """The 'account/teams' endpoint."""

    def list(self) -> list[Any]:
        """Return every team in the account."""
        request = self.client.new_request("GET", "account/teams", None)
        teams, _ = self.client.do(request)
        return teams

    def get(self, team_id: str) -> Any:
        """Return one team."""
        request = self.client.new_request("GET", f"account/teams/{team_id}", None)
        try:
            team, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise TeamMissingError(exc.response) from exc
            raise
        return team

    def create(self, team: Any) -> Any:
        """Create a team and refresh ``team`` with what the API returns."""
        request = self.client.new_request("PUT", "account/teams", team)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if exc.message == f'team with name "{_field(team, "name")}" exists':
                raise TeamExistsError(exc.response) from exc
            raise
        return _refresh(team, value)

    def update(self, team: Any) -> Any:
        """Change the name or access rights of a team."""
        path = f"account/teams/{_field(team, 'id')}"
        request = self.client.new_request("POST", path, team)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise TeamMissingError(exc.response) from exc
            raise
        return _refresh(team, value)

    def delete(self, team_id: str) -> Any:
        """Delete a team and return the HTTP response."""
        request = self.client.new_request("DELETE", f"account/teams/{team_id}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise TeamMissingError(exc.response) from exc
            raise
        return response


class UsersService(Service):
    """The 'account/users' endpoint."""

    def list(self) -> list[Any]:
        """Return every user in the account."""
        request = self.client.new_request("GET", "account/users", None)
        users, _ = self.client.do(request)
        return users

    def get(self, username: str) -> Any:
        """Return one user."""
        request = self.client.new_request("GET", f"account/users/{username}", None)
        try:
            user, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise UserMissingError(exc.response) from exc
            raise
        return user

    def create(self, user: Any) -> Any:
        """Create a user and refresh ``user`` with what the API returns."""
        request = self.client.new_request("PUT", "account/users", user)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if exc.message == _USER_EXISTS_MESSAGE:
                raise UserExistsError(exc.response) from exc
            raise
        return _refresh(user, value)

    def update(self, user: Any) -> Any:
        """Change contact details, notification settings or access rights."""
        path = f"account/users/{_field(user, 'username')}"
        request = self.client.new_request("POST", path, user)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if exc.message == _UNKNOWN_USER_MESSAGE:
                raise UserMissingError(exc.response) from exc
            raise
        return _refresh(user, value)

    def delete(self, username: str) -> Any:
        """Delete a user and return the HTTP response."""
        request = self.client.new_request("DELETE", f"account/users/{username}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if exc.message == _UNKNOWN_USER_MESSAGE:
                raise UserMissingError(exc.response) from exc
            raise
        return response


class WarningsService(Service):
    """The 'account/usagewarnings' endpoint."""

    def get(self) -> Any:
        """Return the toggles and thresholds for overage warnings."""
        request = self.client.new_request("GET", "account/usagewarnings", None)
        warning, _ = self.client.do(request)
        return warning

    def update(self, warning: Any) -> Any:
        """Change the toggles and thresholds for overage warnings."""
        request = self.client.new_request("POST", "account/usagewarnings", warning)
        value, _ = self.client.do(request)
        return _refresh(warning, value)


class GlobalIPWhitelistService(Service):
    """The 'account/whitelist' endpoint."""

    def list(self) -> list[Any]:
        """Return every global IP whitelist in the account."""
        request = self.client.new_request("GET", "account/whitelist", None)
        whitelists, _ = self.client.do(request)
        return whitelists

    def get(self, whitelist_id: str) -> Any:
        """Return one global IP whitelist."""
        request = self.client.new_request("GET", f"account/whitelist/{whitelist_id}", None)
        try:
            whitelist, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise IPWhitelistMissingError(exc.response) from exc
            raise
        return whitelist

    def create(self, whitelist: Any) -> Any:
        """Create a global IP whitelist."""
        request = self.client.new_request("PUT", "account/whitelist", whitelist)
        value, _ = self.client.do(request)
        return _refresh(whitelist, value)

    def update(self, whitelist: Any) -> Any:
        """Change the name or values of a global IP whitelist."""
        path = f"account/whitelist/{_field(whitelist, 'id')}"
        request = self.client.new_request("POST", path, whitelist)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise IPWhitelistMissingError(exc.response) from exc
            raise
        return _refresh(whitelist, value)

    def delete(self, whitelist_id: str) -> Any:
        """Delete a global IP whitelist and return the HTTP response."""
        request = self.client.new_request("DELETE", f"account/whitelist/{whitelist_id}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if resource_missing_match(exc.message):
                raise IPWhitelistMissingError(exc.response) from exc
            raise
        return response