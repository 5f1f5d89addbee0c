from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deepseek_client.results import Result, Success


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str  # "system" | "user" | "assistant"
    content: str | None = None
    reasoning_content: str | None = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int = 0
    message: ChatMessage
    finish_reason: str | None = None


class Usage(BaseModel):
    model_config = ConfigDict(extra="allow")

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletion(BaseModel):
    """Body of a successful (non-streaming) chat completion."""

    model_config = ConfigDict(extra="allow")

    id: str = ""
    model: str = ""
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None

    @property
    def text(self) -> str:
        # DeepSeek returns: choices[0].message.content
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


def parse_completion(result: Result) -> ChatCompletion | None:
    """Return the parsed completion for a Success whose body is a chat completion, else None."""
    if not isinstance(result, Success):
        return None
    try:
        return ChatCompletion.model_validate_json(result.content)
    except ValidationError:
        return None
