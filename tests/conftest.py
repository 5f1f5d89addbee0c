"""Pytest configuration and fixtures.

Provides environment isolation and an httpx client bound to a mock transport
so no test touches the network.
"""

from __future__ import annotations

from contextlib import suppress

import httpx
import pytest

from tests.helpers import BASE_URL, RecordingTransport


@pytest.fixture
def make_http_client():
    """Factory: handler -> (httpx.Client on a MockTransport, RecordingTransport)."""
    clients: list[httpx.Client] = []

    def _make(handler):
        recorder = RecordingTransport(handler)
        client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield _make
    for c in clients:
        c.close()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests."""
    with suppress(Exception):
        monkeypatch.setattr("deepseek_client.config.load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def clear_deepseek_env(monkeypatch):
    for key in (
        "DEEPSEEK_API_KEY",
        "DEEPSEEK_BASE_URL",
        "DEEPSEEK_MODEL",
        "DEEPSEEK_STREAM",
        "DEEPSEEK_TIMEOUT",
        "DEEPSEEK_LOG_DIR",
    ):
        monkeypatch.delenv(key, raising=False)
