"""Service for the datasets endpoint."""

from __future__ import annotations

from typing import Any

from ns1rest.account import _refresh
from ns1rest.client import DECODE_BYTES, Service
from ns1rest.errors import APIError, DatasetNotFoundError


def _is_not_found(error: APIError) -> bool:
    return error.message.endswith(" not found")


class DatasetsService(Service):
    """The 'datasets' endpoint."""

    def list(self) -> Any:
        """Return the configured datasets."""
        request = self.client.new_request("GET", "datasets", None)
        datasets, _ = self.client.do(request)
        return datasets

    def get(self, dataset_id: str) -> Any:
        """Return one dataset with all its data."""
        request = self.client.new_request("GET", f"datasets/{dataset_id}", None)
        try:
            dataset, _ = self.client.do(request)
        except APIError as exc:
            if _is_not_found(exc):
                raise DatasetNotFoundError(exc.response) from exc
            raise
        return dataset

    def create(self, dataset: Any) -> Any:
        """Create a dataset and return it refreshed from the reply."""
        request = self.client.new_request("PUT", "datasets", dataset)
        value, _ = self.client.do(request)
        return _refresh(dataset, value)

    def delete(self, dataset_id: str) -> Any:
        """Delete a dataset and return the HTTP response."""
        request = self.client.new_request("DELETE", f"datasets/{dataset_id}", None)
        try:
            _, response = self.client.do(request, decode=None)
        except APIError as exc:
            if _is_not_found(exc):
                raise DatasetNotFoundError(exc.response) from exc
            raise
        return response

    def get_report(self, dataset_id: str, report_id: str) -> bytes:
        """Return the raw contents of a dataset report."""
        path = f"datasets/{dataset_id}/reports/{report_id}"
        request = self.client.new_request("GET", path, None)
        try:
            content, _ = self.client.do(request, decode=DECODE_BYTES)
        except APIError as exc:
            if _is_not_found(exc):
                raise DatasetNotFoundError(exc.response) from exc
            raise
        return content