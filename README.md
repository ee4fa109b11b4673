# ns1rest

A Python client for part of the NS1 managed DNS REST API, together with
`ns1rest.mockns1`, a local HTTP server that answers API requests from test
cases you register, so that code built on the client can be tested without
the real service.

## Installation

```
pip install ns1rest
```

With the test requirements:

```
pip install "ns1rest[test]"
```

## The client

`ns1rest.client.Client` builds requests against an endpoint (by default
`https://api.nsone.net/v1/`), sends the API key in the `X-NSONE-Key` header,
reads rate-limit headers and raises on non-2xx responses. Any object with a
`send(prepared_request)` method can be passed as the HTTP client; with `None`
a `requests.Session` is used.

Each area of the API is handled by a service class that takes the client.
`ns1rest.api.NS1` is a `Client` with one instance of every service attached:

```python
from ns1rest.api import NS1
from ns1rest.client import Param
from ns1rest.errors import APIError, ApplicationMissingError

ns1 = NS1(None, api_key="placeholder", user_agent="my-tool/1.0")

teams = ns1.teams.list()
recent = ns1.activity.list(Param("limit", "10"))

try:
    ns1.applications.get("a32fc")
except ApplicationMissingError:
    print("no such application")
except APIError as err:
    print("the API refused the request:", err)
```

| Attribute of `NS1` | Class | Module |
| --- | --- | --- |
| `activity` | `ActivityService` | `ns1rest.account` |
| `api_keys` | `APIKeysService` | `ns1rest.account` |
| `settings` | `SettingsService` | `ns1rest.account` |
| `teams` | `TeamsService` | `ns1rest.account` |
| `users` | `UsersService` | `ns1rest.account` |
| `warnings` | `WarningsService` | `ns1rest.account` |
| `global_ip_whitelist` | `GlobalIPWhitelistService` | `ns1rest.account` |
| `applications` | `ApplicationsService` | `ns1rest.applications` |
| `data_sources` | `DataSourcesService` | `ns1rest.data` |
| `data_feeds` | `DataFeedsService` | `ns1rest.data` |
| `datasets` | `DatasetsService` | `ns1rest.datasets` |
| `views` | `DNSViewService` | `ns1rest.views` |

Services work with plain decoded JSON: `list` and `get` return lists and
dicts. `create` and `update` send the object you pass and, when it is a
mutable mapping, merge the API's reply into it and return it; otherwise they
return the decoded reply. `delete` and `DataSourcesService.publish` return
the HTTP response. `DatasetsService.get_report` returns the report as bytes.
`DNSViewService.get_preferences` and `update_preferences` return a dict of
view name to preference.

For calls not covered by a service, use the client directly:

```python
request = ns1.new_request("GET", "zones", None)
zones, response = ns1.do(request, Param("records", "false"))
raw, response = ns1.do(request, decode="bytes")   # or decode=None
```

`ns1rest.client` also has `time_param`, `bool_param`, `string_param` and
`int_param` for building `Param` values.

### Errors

Every non-2xx response raises `ns1rest.errors.APIError`, which carries the
`response`, its `status_code` and the `message` the API sent. Some service
methods turn a known answer into a more specific error that carries the
same `response`: `KeyExistsError`, `KeyMissingError`, `TeamExistsError`,
`TeamMissingError`, `UserExistsError`, `UserMissingError`,
`IPWhitelistMissingError`, `ApplicationMissingError`,
`DatasetNotFoundError`, `ViewExistsError` and `ViewMissingError`. These
derive from `ns1rest.errors.NS1Error`, as `APIError` does, but not from
`APIError` itself.

### Rate limiting

After every response the client reads the `X-Ratelimit-Limit`,
`X-Ratelimit-Remaining` and `X-Ratelimit-Period` headers into a `RateLimit`
and passes it to `rate_limit_func` (which does nothing by default). Two
strategies are built in:

```python
ns1.rate_limit_strategy_sleep()          # sleep by wait_time_remaining()
ns1.rate_limit_strategy_concurrent(4)    # sleep wait_time() * 4 when 4 or fewer calls remain
```

`RateLimit.percentage_left()`, `wait_time()` and `wait_time_remaining()` are
there for writing your own.

## Testing with the mock server

`ns1rest.mockns1.service.MockService` starts a plain-HTTP server on
`127.0.0.1` as soon as it is created and stops on `shutdown()` or on leaving a
`with` block. Point a client at its `endpoint` and use its `http_client()`:

```python
from ns1rest.api import NS1
from ns1rest.mockns1.service import MockService

with MockService() as mock:
    ns1 = NS1(mock.http_client(), endpoint=mock.endpoint)
    mock.add_zone_list_test_case(None, None, [{"zone": "foo.bar"}])

    request = ns1.new_request("GET", "zones", None)
    zones, _ = ns1.do(request)
    assert zones[0]["zone"] == "foo.bar"
```

`add_test_case(method, uri, status, request_headers, response_headers,
request_body, response_body, *params)` registers one case; `/v1/` is put in
front of the URI when missing and any `Param` values are added as a query
string. A request is answered by the first case for its method and URI whose
headers and body match; JSON bodies compare by value, strings and bytes
exactly. Registering the same case twice raises `DuplicateTestCaseError`, and
`clear_test_cases()` removes them all. Unmatched requests get a 404 with a
`{"message": "request not found: ..."}` body. `handle(method, uri, headers,
body)` answers a request without going through HTTP and returns a
`MockResponse`.

Helper methods register the cases for common calls with the right method,
path and status, for example `add_activity_list_test_case`,
`add_application_get_test_case`, `add_dataset_get_report_test_case`,
`add_dns_view_update_test_case`, `add_global_ip_whitelist_delete_test_case`,
`add_tsig_key_create_test_case`, `add_version_list_test_case`,
`add_redirect_update_test_case` and `add_zone_get_test_case`.

## What this package does not do

- There are no service classes for zones, records, DNSSEC, TSIG keys, zone
  versions, networks, monitoring jobs and regions, notification lists,
  pulsar jobs, search, statistics or redirects. The mock server has helpers
  for several of these endpoints, but the client reaches them only through
  `new_request` and `do`.
- Responses are not turned into model objects; services return decoded JSON.
- Paginated responses are not followed: `follow_pagination` is stored on the
  client but nothing reads it, and `Link` headers are left to the caller.
- The mock server speaks plain HTTP, not TLS.
- There is no command-line program.