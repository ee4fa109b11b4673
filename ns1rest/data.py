"""Services for data sources and data feeds."""

from __future__ import annotations

from typing import Any

from ns1rest.account import _field, _refresh
from ns1rest.client import Service


class DataFeedsService(Service):
    """The 'data/feeds' endpoint."""

    def list(self, source_id: str) -> Any:
        """Return every feed connected to a data source."""
        request = self.client.new_request("GET", f"data/feeds/{source_id}", None)
        feeds, _ = self.client.do(request)
        return feeds

    def get(self, source_id: str, feed_id: str) -> Any:
        """Return one feed of a data source."""
        request = self.client.new_request("GET", f"data/feeds/{source_id}/{feed_id}", None)
        feed, _ = self.client.do(request)
        return feed

    def create(self, source_id: str, feed: Any) -> Any:
        """Connect a new feed to a data source and refresh it from the reply."""
        request = self.client.new_request("PUT", f"data/feeds/{source_id}", feed)
        value, _ = self.client.do(request)
        return _refresh(feed, value)

    def update(self, source_id: str, feed: Any) -> Any:
        """Modify a feed; its data, destinations and networks are not changed."""
        path = f"data/feeds/{source_id}/{_field(feed, 'id')}"
        request = self.client.new_request("POST", path, feed)
        value, _ = self.client.do(request)
        return _refresh(feed, value)

    def delete(self, source_id: str, feed_id: str) -> Any:
        """Disconnect a feed from its data source and return the HTTP response."""
        request = self.client.new_request("DELETE", f"data/feeds/{source_id}/{feed_id}", None)
        _, response = self.client.do(request, decode=None)
        return response


class DataSourcesService(Service):
    """The 'data/sources' endpoint."""

    def list(self) -> Any:
        """Return every connected data source."""
        request = self.client.new_request("GET", "data/sources", None)
        sources, _ = self.client.do(request)
        return sources

    def get(self, source_id: str) -> Any:
        """Return one data source."""
        request = self.client.new_request("GET", f"data/sources/{source_id}", None)
        source, _ = self.client.do(request)
        return source

    def create(self, source: Any) -> Any:
        """Create a data source and refresh it from the reply."""
        request = self.client.new_request("PUT", "data/sources", source)
        value, _ = self.client.do(request)
        return _refresh(source, value)

    def update(self, source: Any) -> Any:
        """Modify the basic details of a data source; this publishes no data."""
        path = f"data/sources/{_field(source, 'id')}"
        request = self.client.new_request("POST", path, source)
        value, _ = self.client.do(request)
        return _refresh(source, value)

    def delete(self, source_id: str) -> Any:
        """Remove a data source and its feeds; return the HTTP response."""
        request = self.client.new_request("DELETE", f"data/sources/{source_id}", None)
        _, response = self.client.do(request, decode=None)
        return response

    def publish(self, source_id: str, data: Any) -> Any:
        """Publish data to a data source and return the HTTP response."""
        request = self.client.new_request("POST", f"feed/{source_id}", data)
        _, response = self.client.do(request, decode=None)
        return response