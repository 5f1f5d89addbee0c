"""Exceptions raised by configuration and CLI wiring.

``Resource.send_request`` never raises; its failures are returned as values
(see ``deepseek_client.results``).
"""

from __future__ import annotations


class DeepSeekError(Exception):
    """Base exception for deepseek_client."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(DeepSeekError):
    """Configuration could not be loaded or validated."""
