"""A local HTTP server that answers NS1 API requests from registered test cases."""

from __future__ import annotations

import dataclasses
import json
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional

import requests

from ns1rest.client import Param
from ns1rest.errors import NS1Error
from ns1rest.mockns1.cases import ApiCasesMixin
from ns1rest.mockns1.dns_cases import DnsCasesMixin

_NO_BODY_STATUSES = (204, 304)


class DuplicateTestCaseError(NS1Error):
    """A test case with the same method, URI, headers and body already exists."""

    def __init__(self) -> None:
        super().__init__("test case already registered")


@dataclass
class MockResponse:
    """What the mock service answers to one request."""

    status: int
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class _RegisteredCase:
    status: int
    request_headers: dict[str, list[str]]
    request_body: bytes
    request_json: bool
    response_headers: dict[str, list[str]]
    response_body: bytes


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _convert_body(body: Any) -> tuple[bytes, bool]:
    """Turn a body into bytes; the flag tells whether it was JSON-encoded."""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body), False
    if isinstance(body, str):
        return body.encode("utf-8"), False
    text = json.dumps(body, default=_json_default, separators=(",", ":"))
    return text.encode("utf-8"), True


def _header_lists(headers: Optional[Mapping[str, Any]], lower: bool) -> dict[str, list[str]]:
    result: dict[str, list[str]] = {}
    if not headers:
        return result
    for name, values in headers.items():
        if isinstance(values, (str, bytes)):
            values = [values]
        key = name.lower() if lower else name
        result.setdefault(key, []).extend(
            v.decode("latin-1") if isinstance(v, bytes) else str(v) for v in values
        )
    return result


def _headers_match(expected: dict[str, list[str]], actual: dict[str, list[str]]) -> bool:
    for name, values in expected.items():
        present = actual.get(name)
        if present is None:
            return False
        if any(value not in present for value in values):
            return False
    return True


def _bodies_match(case: _RegisteredCase, body: bytes) -> bool:
    if not case.request_json:
        return case.request_body == body
    try:
        return json.loads(case.request_body) == json.loads(body)
    except ValueError:
        return False


def _not_found(reason: str) -> MockResponse:
    message = f'{{"message": "request not found: {reason}"}}'
    return MockResponse(404, {}, message.encode("utf-8"))


def _make_handler(service: "MockService") -> type[BaseHTTPRequestHandler]:
    class _Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            headers: dict[str, list[str]] = {}
            for name, value in self.headers.items():
                headers.setdefault(name, []).append(value)

            result = service.handle(self.command, self.path, headers, body)
            status = int(result.status)

            self.send_response(status)
            for name, values in result.headers.items():
                for value in values:
                    self.send_header(name, value)
            if status not in _NO_BODY_STATUSES:
                self.send_header("Content-Length", str(len(result.body)))
            self.end_headers()
            if self.command != "HEAD" and status not in _NO_BODY_STATUSES and result.body:
                self.wfile.write(result.body)

        do_GET = _dispatch
        do_POST = _dispatch
        do_PUT = _dispatch
        do_DELETE = _dispatch
        do_PATCH = _dispatch
        do_HEAD = _dispatch
        do_OPTIONS = _dispatch

        def log_message(self, format: str, *args: Any) -> None:
            return None

    return _Handler


class MockService(ApiCasesMixin, DnsCasesMixin):
    """A running HTTP server that emulates the NS1 API from registered cases.

    Test cases are kept per method and URI; a request is answered by the first
    case whose request headers and body match. The server starts on creation
    and stops on ``shutdown`` or when used as a context manager.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tests: dict[str, dict[str, list[_RegisteredCase]]] = {}
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(self))
        self._server.daemon_threads = True
        host, port = self._server.server_address[:2]
        self.address = f"{host}:{port}"
        self.endpoint = f"http://{self.address}/v1/"
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        self._running = True

    def __enter__(self) -> "MockService":
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()

    def http_client(self) -> requests.Session:
        """A session suitable for talking to this server."""
        session = requests.Session()
        session.trust_env = False
        return session

    def shutdown(self) -> None:
        """Stop the server; calling it again does nothing."""
        if not self._running:
            return
        self._running = False
        self._server.shutdown()
        self._server.server_close()
        self._thread.join()

    def add_test_case(
        self,
        method: str,
        uri: str,
        return_status: int,
        request_headers: Optional[Mapping[str, Any]],
        response_headers: Optional[Mapping[str, Any]],
        request_body: Any,
        response_body: Any,
        *args: Param,
    ) -> None:
        """Register a case, unique by method, URI, request headers and body."""
        if not uri.startswith("/v1/"):
            uri = "/v1/" + uri
        if args:
            uri += "?" + "&".join(f"{p.key}={p.value}" for p in args)
        uri = uri.replace("//", "/")

        try:
            req_body, req_json = _convert_body(request_body)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"unable to convert request body to bytes: {exc}") from exc
        try:
            resp_body, _ = _convert_body(response_body)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"unable to convert response body to bytes: {exc}") from exc

        case = _RegisteredCase(
            status=int(return_status),
            request_headers=_header_lists(request_headers, lower=True),
            request_body=req_body,
            request_json=req_json,
            response_headers=_header_lists(response_headers, lower=False),
            response_body=resp_body,
        )

        with self._lock:
            cases = self._tests.setdefault(method, {}).setdefault(uri, [])
            for existing in cases:
                if (
                    existing.request_headers == case.request_headers
                    and existing.request_body == case.request_body
                ):
                    raise DuplicateTestCaseError()
            cases.append(case)

    def clear_test_cases(self) -> None:
        """Remove every registered case."""
        with self._lock:
            self._tests = {}

    def handle(
        self,
        method: str,
        uri: str,
        headers: Optional[Mapping[str, Any]] = None,
        body: Optional[bytes] = b"",
    ) -> MockResponse:
        """Answer one request from the registered cases."""
        body = body or b""
        actual = _header_lists(headers, lower=True)
        with self._lock:
            by_uri = self._tests.get(method)
            if by_uri is None:
                return _not_found("method")
            cases = by_uri.get(uri)
            if cases is None:
                return _not_found("uri")
            for case in cases:
                if _bodies_match(case, body) and _headers_match(case.request_headers, actual):
                    return MockResponse(
                        case.status,
                        {name: list(values) for name, values in case.response_headers.items()},
                        case.response_body,
                    )
        return _not_found("no test")