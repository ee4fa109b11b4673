"""Service for the pulsar applications endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from ns1rest.account import _field, _refresh
from ns1rest.client import Service
from ns1rest.errors import APIError, ApplicationMissingError


class ApplicationsService(Service):
    """The 'pulsar/apps' endpoint."""

    def list(self) -> Any:
        """Return every pulsar application."""
        request = self.client.new_request("GET", "pulsar/apps", None)
        applications, _ = self.client.do(request)
        return applications

    def get(self, app_id: str) -> Any:
        """Return one pulsar application by its id."""
        request = self.client.new_request("GET", f"pulsar/apps/{app_id}", None)
        try:
            application, _ = self.client.do(request)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ApplicationMissingError(exc.response) from exc
            raise
        return application

    def create(self, application: Any) -> Any:
        """Create an application and refresh it with what the API returns."""
        request = self.client.new_request("PUT", "pulsar/apps", application)
        value, _ = self.client.do(request)
        return _refresh(application, value)

    def update(self, application: Any) -> Any:
        """Update the application that has the same id."""
        path = f"pulsar/apps/{_field(application, 'id')}"
        request = self.client.new_request("POST", path, application)
        try:
            value, _ = self.client.do(request)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ApplicationMissingError(exc.response) from exc
            raise
        return _refresh(application, value)

    def delete(self, app_id: str) -> Any:
        """Delete an application and return the HTTP response."""
        request = self.client.new_request("DELETE", f"pulsar/apps/{app_id}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                raise ApplicationMissingError(exc.response) from exc
            raise
        return response