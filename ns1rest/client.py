"""Core HTTP client for the NS1 REST API."""

from __future__ import annotations

import dataclasses
import json
import math
import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Optional
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests

from ns1rest.errors import APIError

CLIENT_VERSION = "2.12.0"

DEFAULT_ENDPOINT = "https://api.nsone.net/v1/"
DEFAULT_SHOULD_FOLLOW_PAGINATION = True
DEFAULT_USER_AGENT = "ns1rest/" + CLIENT_VERSION

HEADER_AUTH = "X-NSONE-Key"
HEADER_RATE_LIMIT = "X-Ratelimit-Limit"
HEADER_RATE_REMAINING = "X-Ratelimit-Remaining"
HEADER_RATE_PERIOD = "X-Ratelimit-Period"

DEFAULT_RATE_LIMIT_WAIT_TIME = timedelta(milliseconds=100)

DECODE_JSON = "json"
DECODE_BYTES = "bytes"

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Param:
    """A single URL query parameter."""

    key: str
    value: str


@dataclass
class RateLimit:
    """Values of the X-Ratelimit-* response headers."""

    limit: int = 0
    remaining: int = 0
    period: int = 0

    def percentage_left(self) -> int:
        """Remaining requests as a percentage of the limit."""
        return int(self.remaining * 100 / self.limit)

    def wait_time(self) -> timedelta:
        """Period divided by limit, or a short default when headers are missing."""
        if self.limit == 0 or self.period == 0:
            return DEFAULT_RATE_LIMIT_WAIT_TIME
        return timedelta(seconds=self.period) / self.limit

    def wait_time_remaining(self) -> timedelta:
        """Period divided by the remaining request count."""
        if self.remaining < 2:
            return timedelta(seconds=self.period)
        return timedelta(seconds=self.period) / self.remaining


def _ignore_rate_limit(rate_limit: RateLimit) -> None:
    return None


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _parse_int(value: Optional[str]) -> int:
    if value and _INTEGER.fullmatch(value):
        return int(value)
    return 0


def parse_rate(response: Any) -> RateLimit:
    """Read rate-limit headers from a response; absent or bad values become 0."""
    headers = response.headers
    return RateLimit(
        limit=_parse_int(headers.get(HEADER_RATE_LIMIT)),
        remaining=_parse_int(headers.get(HEADER_RATE_REMAINING)),
        period=_parse_int(headers.get(HEADER_RATE_PERIOD)),
    )


def _error_message(body: bytes) -> str:
    text = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if data is None:
        return ""
    if not isinstance(data, dict):
        return text
    message = ""
    for key, value in data.items():
        if key.lower() != "message" or value is None:
            continue
        if not isinstance(value, str):
            return text
        message = value
    return message


def check_response(response: Any) -> None:
    """Raise APIError when the response status is outside the 2xx range."""
    if 200 <= response.status_code <= 299:
        return
    body = response.content or b""
    if not body:
        raise APIError(response)
    raise APIError(response, _error_message(body))


def time_param(key: str, moment: datetime) -> Param:
    """A query parameter holding a Unix timestamp in seconds."""
    return Param(key, str(math.floor(moment.timestamp())))


def bool_param(key: str, value: bool) -> Param:
    """A query parameter holding "true" or "false"."""
    return Param(key, "true" if value else "false")


def string_param(key: str, value: str) -> Param:
    """A query parameter holding a string."""
    return Param(key, value)


def int_param(key: str, value: int) -> Param:
    """A query parameter holding an integer."""
    return Param(key, str(int(value)))


def _apply_params(url: str, params: tuple[Param, ...]) -> str:
    parts = urlsplit(url)
    values: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        values.setdefault(key, []).append(value)
    for param in params:
        values[param.key] = [param.value]
    query = urlencode([(key, value) for key in sorted(values) for value in values[key]])
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


class Client:
    """Sends requests to the NS1 REST API and decodes the replies."""

    def __init__(
        self,
        http_client: Any = None,
        *,
        api_key: str = "",
        endpoint: str = DEFAULT_ENDPOINT,
        user_agent: str = DEFAULT_USER_AGENT,
        rate_limit_func: Optional[Callable[[RateLimit], None]] = None,
        follow_pagination: bool = DEFAULT_SHOULD_FOLLOW_PAGINATION,
    ) -> None:
        self.http_client = http_client if http_client is not None else requests.Session()
        self.api_key = api_key
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.rate_limit_func = rate_limit_func or _ignore_rate_limit
        self.follow_pagination = follow_pagination

    def new_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest:
        """Build a request for a path relative to the endpoint, with a JSON body."""
        url = urljoin(self.endpoint, path)
        data = b""
        if body is not None:
            data = (
                json.dumps(body, default=_json_default, separators=(",", ":")) + "\n"
            ).encode("utf-8")
        request = requests.Request(
            method,
            url,
            data=data,
            headers={HEADER_AUTH: self.api_key, "User-Agent": self.user_agent},
        )
        return request.prepare()

    def do(
        self,
        request: requests.PreparedRequest,
        *params: Param,
        decode: Optional[str] = DECODE_JSON,
    ) -> tuple[Any, Any]:
        """Send a request and return (decoded body, response).

        ``decode`` is "json" to parse the body, "bytes" for the raw body, or
        None to skip it. Non-2xx responses raise APIError.
        """
        if decode not in (DECODE_JSON, DECODE_BYTES, None):
            raise ValueError(f"unknown decode mode: {decode!r}")
        new_url = _apply_params(request.url, params)
        if new_url != request.url:
            request.prepare_url(new_url, None)

        response = self.http_client.send(request)
        self.rate_limit_func(parse_rate(response))
        check_response(response)

        if decode is None:
            return None, response
        if decode == DECODE_BYTES:
            return response.content, response
        text = (response.content or b"").decode("utf-8")
        value, _ = json.JSONDecoder().raw_decode(text.lstrip())
        return value, response

    def get_uri(self, uri: str) -> tuple[Any, Any]:
        """GET a URI and decode its JSON body."""
        return self.do(self.new_request("GET", uri, None))

    def rate_limit_strategy_sleep(self) -> None:
        """After each response, sleep for the period spread over what remains."""

        def sleep(rate_limit: RateLimit) -> None:
            time.sleep(rate_limit.wait_time_remaining().total_seconds())

        self.rate_limit_func = sleep

    def rate_limit_strategy_concurrent(self, parallelism: int) -> None:
        """Sleep wait_time * parallelism once remaining drops to parallelism."""

        def sleep(rate_limit: RateLimit) -> None:
            if rate_limit.remaining <= parallelism:
                time.sleep((rate_limit.wait_time() * parallelism).total_seconds())

        self.rate_limit_func = sleep


class Service:
    """Base for endpoint services sharing one client."""

    def __init__(self, client: Client) -> None:
        self.client = client