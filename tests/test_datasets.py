import pytest
import requests

from ns1rest.client import Client
from ns1rest.datasets import DatasetsService
from ns1rest.errors import APIError, DatasetNotFoundError
from ns1rest.mockns1.service import MockService

DATASET_ID = "87461586-c681-43b7-b283-f840be95e13c"
REPORT_ID = "f840be95e13c"


class _ErrorClient:
    def send(self, request):
        raise requests.ConnectionError("no connection")


def _dataset():
    return {
        "name": "My dataset",
        "datatype": {"type": "num_queries", "scope": "account", "data": None},
        "repeat": None,
        "timeframe": {"aggregation": "monthly", "cycles": 1},
        "export_type": "csv",
        "recipient_emails": None,
    }


@pytest.fixture
def mock():
    with MockService() as service:
        yield service


@pytest.fixture
def datasets(mock):
    return DatasetsService(Client(mock.http_client(), endpoint=mock.endpoint))


@pytest.fixture
def failing_datasets():
    client = Client(_ErrorClient(), endpoint="http://example.invalid/v1/")
    return DatasetsService(client)


def test_list_success(mock, datasets):
    listed = [
        {"id": "dt-1", "name": "My dataset 1",
         "datatype": {"type": "num_queries", "scope": "account", "data": None}},
        {"id": "dt-2", "name": "My dataset 2",
         "datatype": {"type": "num_queries", "scope": "account", "data": None}},
    ]
    mock.add_dataset_list_test_case(None, None, listed)
    result = datasets.list()
    assert len(result) == len(listed)
    assert [d["id"] for d in result] == ["dt-1", "dt-2"]


def test_list_http_error(mock, datasets):
    mock.add_test_case("GET", "/datasets", 404, None, None, "", '{"message": "test error"}')
    with pytest.raises(APIError) as info:
        datasets.list()
    assert "test error" in str(info.value)
    assert info.value.status_code == 404


def test_list_other_error(failing_datasets):
    with pytest.raises(requests.ConnectionError):
        failing_datasets.list()


def test_get_success(mock, datasets):
    dataset = _dataset()
    mock.add_dataset_get_test_case(DATASET_ID, None, None, dataset)
    result = datasets.get(DATASET_ID)
    assert result.get("id") == dataset.get("id")
    assert result == dataset


def test_get_http_error(mock, datasets):
    mock.add_test_case("GET", "/datasets/" + DATASET_ID, 404, None, None, "", '{"message": "test error"}')
    with pytest.raises(APIError) as info:
        datasets.get(DATASET_ID)
    assert "test error" in str(info.value)
    assert info.value.status_code == 404


def test_get_not_found(mock, datasets):
    mock.add_test_case("GET", "/datasets/" + DATASET_ID, 404, None, None, "", '{"message": "dataset not found"}')
    with pytest.raises(DatasetNotFoundError):
        datasets.get(DATASET_ID)


def test_get_other_error(failing_datasets):
    with pytest.raises(requests.ConnectionError):
        failing_datasets.get(DATASET_ID)


def test_create_success(mock, datasets):
    dataset = _dataset()
    mock.add_dataset_create_test_case(None, None, dataset, dict(dataset, id="dt-1"))
    result = datasets.create(dataset)
    assert result["id"] == "dt-1"
    assert result["name"] == "My dataset"


def test_create_error(mock, datasets):
    dataset = _dataset()
    mock.add_test_case("PUT", "/datasets", 409, None, None, dataset, '{"message": "invalid parameters"}')
    with pytest.raises(APIError) as info:
        datasets.create(dataset)
    assert "invalid parameters" in str(info.value)


def test_delete_success(mock, datasets):
    mock.add_dataset_delete_test_case(DATASET_ID, None, None)
    assert datasets.delete(DATASET_ID).status_code == 204


def test_delete_not_found(mock, datasets):
    mock.add_test_case("DELETE", "/datasets/" + DATASET_ID, 404, None, None, "", '{"message": "dataset not found"}')
    with pytest.raises(DatasetNotFoundError) as info:
        datasets.delete(DATASET_ID)
    assert str(info.value) == "dataset not found"


def test_get_report_success(mock, datasets):
    contents = b"foo,bar"
    mock.add_dataset_get_report_test_case(DATASET_ID, REPORT_ID, None, None, contents)
    assert datasets.get_report(DATASET_ID, REPORT_ID) == contents


def test_get_report_not_found(mock, datasets):
    mock.add_test_case(
        "GET", f"/datasets/{DATASET_ID}/reports/{REPORT_ID}", 404, None, None, "",
        '{"message": "dataset not found"}',
    )
    with pytest.raises(DatasetNotFoundError):
        datasets.get_report(DATASET_ID, REPORT_ID)