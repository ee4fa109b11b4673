"""Ready-made mock test cases for redirect, TSIG, version and zone endpoints."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from ns1rest.mockns1.cases import _field, _id, _name


def _zone_name(zone: Any) -> str:
    return _field(zone, "zone", "Zone")


class DnsCasesMixin:
    """Shortcuts that register test cases for DNS related API calls.

    Classes using this mixin must provide ``add_test_case`` with the
    signature ``(method, uri, return_status, request_headers,
    response_headers, request_body, response_body, *params)``.
    """

    # Redirects

    def add_redirect_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing redirects."""
        self.add_test_case(
            "GET", "/redirect", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_redirect_get_test_case(
        self, redirect_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one redirect."""
        self.add_test_case(
            "GET", "/redirect/" + redirect_id, HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_redirect_create_test_case(
        self, request_headers, response_headers, request, response
    ) -> None:
        """Register a case for creating a redirect."""
        self.add_test_case(
            "PUT", "/redirect", HTTPStatus.CREATED,
            request_headers, response_headers, request, response,
        )

    def add_redirect_update_test_case(
        self, request_headers, response_headers, request, response
    ) -> None:
        """Register a case for updating a redirect."""
        self.add_test_case(
            "POST", "/redirect/" + _id(request), HTTPStatus.OK,
            request_headers, response_headers, request, response,
        )

    def add_redirect_delete_test_case(
        self, redirect_id, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a redirect."""
        self.add_test_case(
            "DELETE", "/redirect/" + redirect_id, HTTPStatus.NO_CONTENT,
            request_headers, response_headers, "", "",
        )

    # Redirect certificates

    def add_redirect_certificate_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing redirect certificates."""
        self.add_test_case(
            "GET", "/redirect/certificates", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_redirect_certificate_get_test_case(
        self, certificate_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one redirect certificate."""
        self.add_test_case(
            "GET", "/redirect/certificates/" + certificate_id, HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_redirect_certificate_create_test_case(
        self, request_headers, response_headers, request, response
    ) -> None:
        """Register a case for creating a redirect certificate."""
        self.add_test_case(
            "PUT", "/redirect/certificates", HTTPStatus.CREATED,
            request_headers, response_headers, request, response,
        )

    def add_redirect_certificate_update_test_case(
        self, request_headers, response_headers, certificate_id, response
    ) -> None:
        """Register a case for renewing a redirect certificate."""
        self.add_test_case(
            "POST", "/redirect/certificates/" + certificate_id, HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_redirect_certificate_delete_test_case(
        self, certificate_id, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a redirect certificate."""
        self.add_test_case(
            "DELETE", "/redirect/certificates/" + certificate_id, HTTPStatus.NO_CONTENT,
            request_headers, response_headers, "", "",
        )

    # TSIG keys

    def add_tsig_key_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing TSIG keys."""
        self.add_test_case(
            "GET", "tsig", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_tsig_key_get_test_case(
        self, name, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one TSIG key."""
        self.add_test_case(
            "GET", f"/tsig/{name}", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_tsig_key_create_test_case(
        self, request_headers, response_headers, tsig_key, response
    ) -> None:
        """Register a case for creating a TSIG key."""
        self.add_test_case(
            "PUT", f"tsig/{_name(tsig_key)}", HTTPStatus.OK,
            request_headers, response_headers, tsig_key, response,
        )

    def add_tsig_key_update_test_case(
        self, request_headers, response_headers, tsig_key, response
    ) -> None:
        """Register a case for updating a TSIG key."""
        self.add_test_case(
            "POST", f"tsig/{_name(tsig_key)}", HTTPStatus.OK,
            request_headers, response_headers, tsig_key, response,
        )

    def add_tsig_key_delete_test_case(
        self, request_headers, response_headers, tsig_key, response
    ) -> None:
        """Register a case for deleting a TSIG key."""
        self.add_test_case(
            "DELETE", f"tsig/{_name(tsig_key)}", HTTPStatus.OK,
            request_headers, response_headers, "", "",
        )

    # Zone versions

    def add_version_list_test_case(
        self, zone_name, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing the versions of a zone."""
        self.add_test_case(
            "GET", f"/zones/{zone_name}/versions", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_create_version_test_case(
        self, zone_name, request_headers, response_headers, response
    ) -> None:
        """Register a case for creating a zone version."""
        self.add_test_case(
            "PUT", f"/zones/{zone_name}/versions?force=false", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_delete_version_test_case(
        self, zone_name, version_id, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a zone version."""
        self.add_test_case(
            "DELETE", f"/zones/{zone_name}/versions/{int(version_id)}", HTTPStatus.OK,
            request_headers, response_headers, "", None,
        )

    def add_activate_version_test_case(
        self, zone_name, version_id, request_headers, response_headers
    ) -> None:
        """Register a case for activating a zone version."""
        self.add_test_case(
            "POST",
            f"/zones/{zone_name}/versions/{int(version_id)}/activate",
            HTTPStatus.OK,
            request_headers, response_headers, "", None,
        )

    # Zones

    def add_zone_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing zones."""
        self.add_test_case(
            "GET", "/zones", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_zone_get_test_case(
        self, name, request_headers, response_headers, response, records
    ) -> None:
        """Register a case for fetching a zone, with or without its records."""
        uri = "/zones/" + name
        if not records:
            uri += "?records=false"
        self.add_test_case(
            "GET", uri, HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_zone_create_test_case(
        self, request_headers, response_headers, zone, response
    ) -> None:
        """Register a case for creating a zone."""
        self.add_test_case(
            "PUT", "/zones/" + _zone_name(zone), HTTPStatus.CREATED,
            request_headers, response_headers, zone, response,
        )

    def add_zone_update_test_case(
        self, request_headers, response_headers, zone, response
    ) -> None:
        """Register a case for updating a zone."""
        self.add_test_case(
            "POST", "/zones/" + _zone_name(zone), HTTPStatus.OK,
            request_headers, response_headers, zone, response,
        )

    def add_zone_delete_test_case(
        self, name, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a zone."""
        self.add_test_case(
            "DELETE", "/zones/" + name, HTTPStatus.NO_CONTENT,
            request_headers, response_headers, "", "",
        )