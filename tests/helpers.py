"""Transport doubles shared by the test modules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import json
from typing import Any

import httpx

BASE_URL = "https://api.test.local/v3"


@dataclass
class RecordingTransport:
    """Handler for `httpx.MockTransport` that records every request it sees."""

    handler: Callable[[httpx.Request], httpx.Response]
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@dataclass
class RaisingClient:
    """HTTP client double whose `request` raises a fixed exception."""

    error: BaseException
    calls: int = 0

    def request(self, method: str, url: str, *, json: Any = None) -> httpx.Response:
        del method, url, json
        self.calls += 1
        raise self.error


def json_response(status_code: int, body: Any) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(status_code, json=body)

    return handler


def raising(error: BaseException) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        raise error

    return handler


@dataclass
class ReturningClient:
    """HTTP client double that hands back one prepared response and records the call."""

    response: httpx.Response
    calls: list[tuple[str, str, Any]] = field(default_factory=list)

    def request(self, method: str, url: str, *, json: Any = None) -> httpx.Response:
        self.calls.append((method, url, json))
        return self.response
