import pytest
import requests

from ns1rest.api import NS1
from ns1rest.client import DEFAULT_ENDPOINT, DEFAULT_USER_AGENT, RateLimit
from ns1rest.errors import DatasetNotFoundError
from ns1rest.mockns1.service import MockService


@pytest.fixture(scope="module")
def mock():
    with MockService() as service:
        yield service


@pytest.fixture(autouse=True)
def clear(mock):
    yield
    mock.clear_test_cases()


def test_defaults():
    ns1 = NS1()
    assert ns1.endpoint == DEFAULT_ENDPOINT
    assert ns1.user_agent == DEFAULT_USER_AGENT
    assert ns1.api_key == ""
    assert ns1.follow_pagination is True
    assert isinstance(ns1.http_client, requests.Session)


def test_services_share_the_client():
    ns1 = NS1(None, api_key="placeholder")
    services = [
        ns1.activity, ns1.api_keys, ns1.settings, ns1.teams, ns1.users,
        ns1.warnings, ns1.global_ip_whitelist, ns1.applications,
        ns1.data_feeds, ns1.data_sources, ns1.datasets, ns1.views,
    ]
    assert all(service.client is ns1 for service in services)
    assert ns1.api_key == "placeholder"


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        NS1(None, no_such_option=True)


def test_end_to_end_list(mock):
    ns1 = NS1(mock.http_client(), endpoint=mock.endpoint)
    mock.add_dataset_list_test_case(None, None, [{"id": "dt-1"}, {"id": "dt-2"}])
    assert [d["id"] for d in ns1.datasets.list()] == ["dt-1", "dt-2"]


def test_api_key_header_sent(mock):
    ns1 = NS1(mock.http_client(), endpoint=mock.endpoint, api_key="placeholder")
    mock.add_test_case(
        "GET", "views", 200, {"X-NSONE-Key": "placeholder"}, None, "", [{"name": "v"}]
    )
    assert ns1.views.list() == [{"name": "v"}]

    other = NS1(mock.http_client(), endpoint=mock.endpoint, api_key="token")
    with pytest.raises(Exception) as info:
        other.views.list()
    assert "request not found" in str(info.value)


def test_rate_limit_func_receives_headers(mock):
    seen = []
    ns1 = NS1(mock.http_client(), endpoint=mock.endpoint, rate_limit_func=seen.append)
    headers = {
        "X-Ratelimit-Limit": "10",
        "X-Ratelimit-Remaining": "10",
        "X-Ratelimit-Period": "10",
    }
    mock.add_dns_view_get_preferences_test_case(None, headers, {"view1": 1})
    assert ns1.views.get_preferences() == {"view1": 1}
    assert seen == [RateLimit(limit=10, remaining=10, period=10)]


def test_error_mapping_through_facade(mock):
    ns1 = NS1(mock.http_client(), endpoint=mock.endpoint)
    mock.add_test_case(
        "DELETE", "/datasets/abc", 404, None, None, "", '{"message": "dataset not found"}'
    )
    with pytest.raises(DatasetNotFoundError):
        ns1.datasets.delete("abc")