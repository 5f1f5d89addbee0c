from __future__ import annotations

from typing import Any

import httpx

from deepseek_client.config import ChatDefaults, Settings, load_settings
from deepseek_client.constants import EndpointSuffix, QueryFlag, RequestMethod
from deepseek_client.http import build_http_client
from deepseek_client.resources import Resource
from deepseek_client.results import Result


class DeepSeekClient:
    """
    Fluent chat client on top of Resource.

        result = DeepSeekClient.build().query("Hello").with_model("deepseek-coder").run()

    Queued messages and per-request overrides live here; Resource itself keeps no call state.
    """

    def __init__(self, http_client: httpx.Client, *, defaults: ChatDefaults | None = None) -> None:
        self.http_client = http_client
        self.defaults = defaults or ChatDefaults()
        self.messages: list[dict[str, str]] = []
        self.model: str | None = None
        self.stream: bool | None = None
        self.temperature: float | None = None

    @classmethod
    def build(cls, settings: Settings | None = None) -> DeepSeekClient:
        settings = settings or load_settings()
        return cls(build_http_client(settings), defaults=settings.chat_defaults())

    def query(self, content: str, role: str = "user") -> DeepSeekClient:
        self.messages.append({"role": role, "content": content})
        return self

    def with_model(self, model: str) -> DeepSeekClient:
        self.model = model
        return self

    def with_stream(self, stream: bool = True) -> DeepSeekClient:
        self.stream = stream
        return self

    def set_temperature(self, temperature: float) -> DeepSeekClient:
        self.temperature = temperature
        return self

    def _resource(self, suffix: EndpointSuffix) -> Resource:
        return Resource(self.http_client, suffix.value, defaults=self.defaults)

    def run(self) -> Result:
        """Send the queued messages to the chat endpoint, then clear the queue."""
        request_data: dict[str, Any] = {QueryFlag.MESSAGES.value: list(self.messages)}
        if self.model is not None:
            request_data[QueryFlag.MODEL.value] = self.model
        if self.stream is not None:
            request_data[QueryFlag.STREAM.value] = self.stream
        if self.temperature is not None:
            request_data[QueryFlag.TEMPERATURE.value] = self.temperature

        result = self._resource(EndpointSuffix.CHAT).send_request(request_data, RequestMethod.POST)
        self.messages = []
        return result

    def get_models_list(self) -> Result:
        return self._resource(EndpointSuffix.MODELS_LIST).send_request({}, RequestMethod.GET)

    def get_user_balance(self) -> Result:
        return self._resource(EndpointSuffix.USER_BALANCE).send_request({}, RequestMethod.GET)

    def close(self) -> None:
        self.http_client.close()
