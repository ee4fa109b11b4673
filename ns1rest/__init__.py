"""Client for the NS1 managed DNS REST API, with services for account, pulsar application, data source, dataset and DNS view endpoints."""

__version__ = "2.12.0"

__all__ = [
    "account",
    "api",
    "applications",
    "client",
    "data",
    "datasets",
    "errors",
    "views",
]