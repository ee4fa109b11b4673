import pytest

from ns1rest.client import Client
from ns1rest.data import DataFeedsService, DataSourcesService
from ns1rest.errors import APIError
from ns1rest.mockns1.service import MockService


@pytest.fixture
def mock():
    with MockService() as service:
        yield service


@pytest.fixture
def client(mock):
    return Client(mock.http_client(), endpoint=mock.endpoint)


@pytest.fixture
def feeds(client):
    return DataFeedsService(client)


@pytest.fixture
def sources(client):
    return DataSourcesService(client)


def test_feed_list(mock, feeds):
    listed = [{"id": "f1", "name": "Buffalo Feed"}, {"id": "f2", "name": "London Feed"}]
    mock.add_test_case("GET", "data/feeds/src-1", 200, None, None, "", listed)
    assert feeds.list("src-1") == listed


def test_feed_get(mock, feeds):
    feed = {"id": "f1", "name": "Buffalo Feed", "config": {"label": "Buffalo-US"}}
    mock.add_test_case("GET", "data/feeds/src-1/f1", 200, None, None, "", feed)
    assert feeds.get("src-1", "f1") == feed


def test_feed_create_refreshes(mock, feeds):
    feed = {"name": "Buffalo Feed", "config": {"label": "Buffalo-US"}}
    reply = dict(feed, id="f1")
    mock.add_test_case("PUT", "data/feeds/src-1", 200, None, None, feed, reply)
    result = feeds.create("src-1", feed)
    assert result is feed
    assert feed["id"] == "f1"
    assert feed["name"] == "Buffalo Feed"


def test_feed_update_uses_id(mock, feeds):
    feed = {"id": "f1", "name": "Renamed"}
    mock.add_test_case("POST", "data/feeds/src-1/f1", 200, None, None, feed, feed)
    assert feeds.update("src-1", feed) == {"id": "f1", "name": "Renamed"}


def test_feed_delete(mock, feeds):
    mock.add_test_case("DELETE", "data/feeds/src-1/f1", 204, None, None, "", "")
    assert feeds.delete("src-1", "f1").status_code == 204


def test_source_list_and_get(mock, sources):
    source = {"id": "src-1", "name": "my api source", "sourcetype": "nsone_v1"}
    mock.add_test_case("GET", "data/sources", 200, None, None, "", [source])
    mock.add_test_case("GET", "data/sources/src-1", 200, None, None, "", source)
    assert sources.list() == [source]
    assert sources.get("src-1") == source


def test_source_create_refreshes(mock, sources):
    source = {"name": "my api source", "sourcetype": "nsone_v1"}
    mock.add_test_case("PUT", "data/sources", 200, None, None, source, dict(source, id="src-1"))
    sources.create(source)
    assert source["id"] == "src-1"


def test_source_update_and_delete(mock, sources):
    source = {"id": "src-1", "name": "renamed"}
    mock.add_test_case("POST", "data/sources/src-1", 200, None, None, source, source)
    mock.add_test_case("DELETE", "data/sources/src-1", 204, None, None, "", "")
    assert sources.update(source)["name"] == "renamed"
    assert sources.delete("src-1").status_code == 204


def test_publish(mock, sources):
    update = {"Buffalo-US": {"up": True}}
    mock.add_test_case("POST", "feed/src-1", 200, None, None, update, "")
    assert sources.publish("src-1", update).status_code == 200


def test_source_get_error(mock, sources):
    mock.add_test_case("GET", "data/sources/missing", 404, None, None, "", '{"message": "source not found"}')
    with pytest.raises(APIError) as info:
        sources.get("missing")
    assert info.value.message == "source not found"
    assert info.value.status_code == 404