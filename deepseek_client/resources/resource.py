from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from deepseek_client.config import ChatDefaults
from deepseek_client.constants import EndpointSuffix, RequestMethod
from deepseek_client.results import BadResult, Failure, Result, Success

from .params import ParamSpec, chat_param_spec, merge_payload, resolve_params

logger = logging.getLogger(__name__)


class HTTPClient(Protocol):
    """The subset of `httpx.Client` a Resource talks to."""

    def request(self, method: str, url: str, *, json: Any = None) -> httpx.Response: ...


def _error_code(exc: BaseException) -> int:
    for attr in ("code", "errno"):
        v = getattr(exc, attr, None)
        if isinstance(v, int) and not isinstance(v, bool):
            return v
    return 0


class Resource:
    """
    One remote operation (endpoint suffix) of the API.

    Builds the payload from caller data plus the recognized parameters, performs
    exactly one HTTP call through the injected client and returns a Result.
    send_request never raises.
    """

    def __init__(
        self,
        client: HTTPClient,
        endpoint_suffix: str | None = None,
        *,
        defaults: ChatDefaults | None = None,
    ) -> None:
        self._client = client
        self._endpoint_suffix = endpoint_suffix or EndpointSuffix.CHAT.value
        self._param_spec = chat_param_spec(defaults or ChatDefaults())

    @property
    def endpoint_suffix(self) -> str:
        return self._endpoint_suffix

    @property
    def param_spec(self) -> Mapping[str, ParamSpec]:
        return self._param_spec

    def prepare_custom_header_params(self, query: Mapping[str, Any]) -> dict[str, Any]:
        return resolve_params(query, self._param_spec)

    def resolve_headers(self, request_data: Mapping[str, Any]) -> dict[str, Any]:
        return merge_payload(request_data, self.prepare_custom_header_params(request_data))

    def send_request(
        self,
        request_data: Mapping[str, Any],
        request_method: RequestMethod | str = RequestMethod.POST,
    ) -> Result:
        try:
            method = RequestMethod(request_method.upper())
            payload = self.resolve_headers(request_data)
            logger.debug("%s %s model=%s", method.value, self._endpoint_suffix, payload.get("model"))
            response = self._client.request(method.value, self._endpoint_suffix, json=payload)
            # Only 4xx/5xx are API errors; 1xx/3xx answers are passed through as Success.
            if response.is_error:
                logger.warning("%s answered %s", self._endpoint_suffix, response.status_code)
                return BadResult(response)
            return Success(response)
        except httpx.HTTPStatusError as bad_response:
            # Clients that raise on error status themselves.
            logger.warning("%s answered %s", self._endpoint_suffix, bad_response.response.status_code)
            return BadResult(bad_response.response)
        except httpx.HTTPError as error:
            logger.warning("%s transport error: %s: %s", self._endpoint_suffix, type(error).__name__, error)
            return Failure(_error_code(error), str(error))
        except Exception as error:
            logger.exception("%s unexpected error", self._endpoint_suffix)
            return Failure(_error_code(error), json.dumps({"error": str(error)}))
