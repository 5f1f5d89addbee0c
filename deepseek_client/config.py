from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from deepseek_client.constants import DEFAULT_BASE_URL, DEFAULT_STREAM_FLAG, DEFAULT_TIMEOUT_S, Model
from deepseek_client.errors import ConfigurationError


@dataclass(frozen=True)
class ChatDefaults:
    """Values substituted for recognized parameters the caller leaves out."""

    model: str = Model.CHAT.value
    stream: bool = False


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    base_url: str
    model: str
    stream_flag: str
    timeout_s: float
    log_dir: Path

    def chat_defaults(self) -> ChatDefaults:
        return ChatDefaults(model=self.model, stream=self.stream_flag.strip().lower() == "true")


def load_settings() -> Settings:
    # Allow users to keep secrets in a local `.env` (not committed).
    load_dotenv(override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    api_key = getenv("DEEPSEEK_API_KEY", None)
    base_url = (getenv("DEEPSEEK_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL).strip()
    model = (getenv("DEEPSEEK_MODEL", Model.CHAT.value) or Model.CHAT.value).strip()
    stream_flag = getenv("DEEPSEEK_STREAM", DEFAULT_STREAM_FLAG) or DEFAULT_STREAM_FLAG

    raw_timeout = getenv("DEEPSEEK_TIMEOUT", str(DEFAULT_TIMEOUT_S)) or str(DEFAULT_TIMEOUT_S)
    try:
        timeout_s = float(raw_timeout)
    except ValueError as exc:
        raise ConfigurationError(
            f"DEEPSEEK_TIMEOUT must be a number of seconds, got {raw_timeout!r}",
            hint="Set DEEPSEEK_TIMEOUT to e.g. 30",
        ) from exc
    if timeout_s <= 0:
        raise ConfigurationError(f"DEEPSEEK_TIMEOUT must be positive, got {timeout_s}")

    log_dir = Path(getenv("DEEPSEEK_LOG_DIR", "logs") or "logs").resolve()

    return Settings(
        api_key=api_key,
        base_url=base_url,
        model=model,
        stream_flag=stream_flag,
        timeout_s=timeout_s,
        log_dir=log_dir,
    )
