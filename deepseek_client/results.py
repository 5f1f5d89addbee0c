"""Outcome of a single request attempt.

Every call to ``Resource.send_request`` returns exactly one of three variants:

- ``Success``: the transport returned a 2xx/3xx response.
- ``BadResult``: the API answered with an error status (4xx/5xx); the response
  is kept verbatim so callers can inspect status and body.
- ``Failure``: no response object is available (network/protocol error, or any
  other exception). Carries a numeric code and a message string.

Callers branch with ``match``:

    match result:
        case Success(response=r): ...
        case BadResult(response=r): ...
        case Failure(code=c, content=msg): ...
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal

import httpx


class _ResponseBody:
    """Accessors shared by the variants that wrap an `httpx.Response`."""

    response: httpx.Response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def content(self) -> str:
        return self.response.text

    def json(self) -> Any:
        return self.response.json()


@dataclass(frozen=True)
class Success(_ResponseBody):
    response: httpx.Response
    kind: Literal["success"] = "success"

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class BadResult(_ResponseBody):
    response: httpx.Response
    kind: Literal["bad"] = "bad"

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    code: int
    content: str
    kind: Literal["failure"] = "failure"

    @property
    def ok(self) -> bool:
        return False

    @property
    def status_code(self) -> None:
        return None

    def json(self) -> Any:
        # Transport failures carry the raw message, not a JSON document.
        try:
            return json.loads(self.content)
        except json.JSONDecodeError:
            return {"error": self.content}


Result = Success | BadResult | Failure
