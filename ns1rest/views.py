"""Service for the DNS views endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from ns1rest.account import _field, _refresh
from ns1rest.client import Service
from ns1rest.errors import APIError, ViewExistsError, ViewMissingError

_PREFERENCES_PATH = "config/views/preference"


class DNSViewService(Service):
    """The 'views' endpoint and the view preference configuration."""

    def list(self) -> Any:
        """Return every DNS view."""
        request = self.client.new_request("GET", "views", None)
        views, _ = self.client.do(request)
        return views

    def create(self, view: Any) -> Any:
        """Create a DNS view, which needs at least a name; return the HTTP response."""
        path = f"/v1/views/{_field(view, 'name')}"
        request = self.client.new_request("PUT", path, view)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if exc.status_code == HTTPStatus.CONFLICT:
                raise ViewExistsError(exc.response) from exc
            raise
        return response

    def get(self, view_name: str) -> Any:
        """Return one DNS view by name."""
        request = self.client.new_request("GET", f"views/{view_name}", None)
        try:
            view, _ = self.client.do(request)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ViewMissingError(exc.response) from exc
            raise
        return view

    def update(self, view: Any) -> Any:
        """Update the DNS view with the same name and refresh it from the reply."""
        path = f"views/{_field(view, 'name')}"
        request = self.client.new_request("POST", path, view)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ViewMissingError(exc.response) from exc
            raise
        return _refresh(view, value)

    def delete(self, view_name: str) -> Any:
        """Delete a DNS view and return the HTTP response."""
        request = self.client.new_request("DELETE", f"views/{view_name}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ViewMissingError(exc.response) from exc
            raise
        return response

    def get_preferences(self) -> dict[str, int]:
        """Return the view preferences as a mapping of view name to preference."""
        request = self.client.new_request("GET", _PREFERENCES_PATH, None)
        preferences, _ = self.client.do(request)
        return dict(preferences or {})

    def update_preferences(self, preferences: dict[str, int]) -> dict[str, int]:
        """Set the view preferences and return them as the API now has them."""
        request = self.client.new_request("POST", _PREFERENCES_PATH, preferences)
        try:
            updated, _ = self.client.do(request)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ViewMissingError(exc.response) from exc
            raise
        return dict(updated or {})