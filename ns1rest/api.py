"""The NS1 client with every endpoint service attached."""

from __future__ import annotations

from typing import Any

from ns1rest.account import (
    ActivityService,
    APIKeysService,
    GlobalIPWhitelistService,
    SettingsService,
    TeamsService,
    UsersService,
    WarningsService,
)
from ns1rest.applications import ApplicationsService
from ns1rest.client import Client
from ns1rest.data import DataFeedsService, DataSourcesService
from ns1rest.datasets import DatasetsService
from ns1rest.views import DNSViewService


class NS1(Client):
    """A client for the NS1 REST API exposing one attribute per endpoint.

    Keyword arguments are those of ``Client``: api_key, endpoint,
    user_agent, rate_limit_func and follow_pagination.
    """

    def __init__(self, http_client: Any = None, **kwargs: Any) -> None:
        super().__init__(http_client, **kwargs)
        self.activity = ActivityService(self)
        self.api_keys = APIKeysService(self)
        self.settings = SettingsService(self)
        self.teams = TeamsService(self)
        self.users = UsersService(self)
        self.warnings = WarningsService(self)
        self.global_ip_whitelist = GlobalIPWhitelistService(self)
        self.applications = ApplicationsService(self)
        self.data_feeds = DataFeedsService(self)
        self.data_sources = DataSourcesService(self)
        self.datasets = DatasetsService(self)
        self.views = DNSViewService(self)