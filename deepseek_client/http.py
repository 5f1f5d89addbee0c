from __future__ import annotations

import httpx

from deepseek_client.config import Settings


def build_http_client(settings: Settings, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """
    Build the shared HTTP client resources send through.
    Endpoint suffixes are resolved against `settings.base_url`.
    """
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if settings.api_key:
        headers["Authorization"] = f"Bearer {settings.api_key}"
    return httpx.Client(
        base_url=settings.base_url.rstrip("/"),
        headers=headers,
        timeout=settings.timeout_s,
        transport=transport,
    )
