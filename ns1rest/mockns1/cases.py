"""Ready-made mock test cases for account, pulsar, dataset and view endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from ns1rest.client import Param


def _field(obj: Any, *names: str) -> str:
    """Read an identifying field from a mapping or an object.

    The first name that is present wins. A missing field reads as the empty
    string, the way an unset identifier would.
    """
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj and obj[name] is not None:
                return str(obj[name])
        else:
            value = getattr(obj, name, None)
            if value is not None:
                return str(value)
    return ""


def _id(obj: Any) -> str:
    return _field(obj, "id", "ID")


def _name(obj: Any) -> str:
    return _field(obj, "name", "Name")


def _app_id(obj: Any) -> str:
    return _field(obj, "app_id", "appid", "AppID")


def _job_id(obj: Any) -> str:
    return _field(obj, "job_id", "jobid", "JobID")


class ApiCasesMixin:
    """Shortcuts that register test cases for common API calls.

    Classes using this mixin must provide ``add_test_case`` with the
    signature ``(method, uri, return_status, request_headers,
    response_headers, request_body, response_body, *params)``.
    """

    # Account activity

    def add_activity_list_test_case(
        self, request_headers, response_headers, response, *args: Param
    ) -> None:
        """Register a case for listing account activity."""
        self.add_test_case(
            "GET", "/account/activity", HTTPStatus.OK,
            request_headers, response_headers, "", response, *args,
        )

    # Global IP whitelist

    def add_global_ip_whitelist_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing global IP whitelists."""
        self.add_test_case(
            "GET", "/account/whitelist", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_global_ip_whitelist_get_test_case(
        self, whitelist_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one global IP whitelist."""
        self.add_test_case(
            "GET", f"/account/whitelist/{whitelist_id}", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_global_ip_whitelist_create_test_case(
        self, request_headers, response_headers, whitelist, response
    ) -> None:
        """Register a case for creating a global IP whitelist."""
        self.add_test_case(
            "PUT", "/account/whitelist", HTTPStatus.CREATED,
            request_headers, response_headers, whitelist, response,
        )

    def add_global_ip_whitelist_update_test_case(
        self, request_headers, response_headers, whitelist, response
    ) -> None:
        """Register a case for updating a global IP whitelist."""
        self.add_test_case(
            "POST", f"/account/whitelist/{_id(whitelist)}", HTTPStatus.OK,
            request_headers, response_headers, whitelist, response,
        )

    def add_global_ip_whitelist_delete_test_case(
        self, whitelist_id, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a global IP whitelist."""
        self.add_test_case(
            "DELETE", f"/account/whitelist/{whitelist_id}", HTTPStatus.OK,
            request_headers, response_headers, "", "",
        )

    # Pulsar applications

    def add_application_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing pulsar applications."""
        self.add_test_case(
            "GET", "/pulsar/apps", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_application_get_test_case(
        self, app_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one pulsar application."""
        self.add_test_case(
            "GET", "/pulsar/apps/" + app_id, HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_application_create_test_case(
        self, request_headers, response_headers, application, response
    ) -> None:
        """Register a case for creating a pulsar application."""
        self.add_test_case(
            "PUT", "/pulsar/apps", HTTPStatus.CREATED,
            request_headers, response_headers, application, response,
        )

    def add_application_update_test_case(
        self, request_headers, response_headers, application, response
    ) -> None:
        """Register a case for updating a pulsar application."""
        self.add_test_case(
            "POST", "/pulsar/apps/" + _id(application), HTTPStatus.OK,
            request_headers, response_headers, application, response,
        )

    def add_application_delete_test_case(
        self, app_id, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a pulsar application."""
        self.add_test_case(
            "DELETE", "/pulsar/apps/" + app_id, HTTPStatus.NO_CONTENT,
            request_headers, response_headers, "", "",
        )

    # Datasets

    def add_dataset_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing datasets."""
        self.add_test_case(
            "GET", "/datasets", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_dataset_get_test_case(
        self, dataset_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one dataset."""
        self.add_test_case(
            "GET", "/datasets/" + dataset_id, HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_dataset_create_test_case(
        self, request_headers, response_headers, request, response
    ) -> None:
        """Register a case for creating a dataset."""
        self.add_test_case(
            "PUT", "/datasets", HTTPStatus.CREATED,
            request_headers, response_headers, request, response,
        )

    def add_dataset_delete_test_case(
        self, dataset_id, request_headers, response_headers
    ) -> None:
        """Register a case for deleting a dataset."""
        self.add_test_case(
            "DELETE", "/datasets/" + dataset_id, HTTPStatus.NO_CONTENT,
            request_headers, response_headers, "", "",
        )

    def add_dataset_get_report_test_case(
        self, dataset_id, report_id, request_headers, response_headers, file_contents
    ) -> None:
        """Register a case for downloading a dataset report."""
        self.add_test_case(
            "GET", f"/datasets/{dataset_id}/reports/{report_id}", HTTPStatus.OK,
            request_headers, response_headers, "", file_contents,
        )

    # DNS views

    def add_dns_view_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing DNS views."""
        self.add_test_case(
            "GET", "views", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_dns_view_get_test_case(
        self, view_name, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one DNS view."""
        self.add_test_case(
            "GET", f"views/{view_name}", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_dns_view_create_test_case(
        self, request_headers, response_headers, view, response
    ) -> None:
        """Register a case for creating a DNS view."""
        self.add_test_case(
            "PUT", f"views/{_name(view)}", HTTPStatus.OK,
            request_headers, response_headers, view, response,
        )

    def add_dns_view_update_test_case(
        self, request_headers, response_headers, view, response
    ) -> None:
        """Register a case for updating a DNS view."""
        self.add_test_case(
            "POST", f"views/{_name(view)}", HTTPStatus.OK,
            request_headers, response_headers, view, response,
        )

    def add_dns_view_get_preferences_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for reading DNS view preferences."""
        self.add_test_case(
            "GET", "config/views/preference", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_dns_view_update_preferences_test_case(
        self, request_headers, response_headers, body, response
    ) -> None:
        """Register a case for updating DNS view preferences."""
        self.add_test_case(
            "POST", "config/views/preference", HTTPStatus.OK,
            request_headers, response_headers, body, response,
        )

    # Monitoring regions and networks

    def add_monitor_regions_list_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing monitoring regions."""
        self.add_test_case(
            "GET", "/monitoring/regions", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def network_get_test_case(
        self, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing networks."""
        self.add_test_case(
            "GET", "/networks", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    # Pulsar jobs

    def add_pulsar_job_list_test_case(
        self, app_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for listing the jobs of a pulsar application."""
        self.add_test_case(
            "GET", f"/pulsar/apps/{app_id}/jobs", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_pulsar_job_get_test_case(
        self, app_id, job_id, request_headers, response_headers, response
    ) -> None:
        """Register a case for fetching one pulsar job."""
        self.add_test_case(
            "GET", f"/pulsar/apps/{app_id}/jobs/{job_id}", HTTPStatus.OK,
            request_headers, response_headers, "", response,
        )

    def add_pulsar_job_create_test_case(
        self, request_headers, response_headers, pulsar_job, response
    ) -> None:
        """Register a case for creating a pulsar job."""
        self.add_test_case(
            "PUT", f"pulsar/apps/{_app_id(pulsar_job)}/jobs", HTTPStatus.OK,
            request_headers, response_headers, pulsar_job, response,
        )

    def add_pulsar_job_update_test_case(
        self, request_headers, response_headers, pulsar_job, response
    ) -> None:
        """Register a case for updating a pulsar job."""
        self.add_test_case(
            "POST",
            f"pulsar/apps/{_app_id(pulsar_job)}/jobs/{_job_id(pulsar_job)}",
            HTTPStatus.OK,
            request_headers, response_headers, pulsar_job, response,
        )

    def add_pulsar_job_delete_test_case(
        self, request_headers, response_headers, pulsar_job, response
    ) -> None:
        """Register a case for deleting a pulsar job."""
        self.add_test_case(
            "DELETE",
            f"pulsar/apps/{_app_id(pulsar_job)}/jobs/{_job_id(pulsar_job)}",
            HTTPStatus.OK,
            request_headers, response_headers, "", "",
        )