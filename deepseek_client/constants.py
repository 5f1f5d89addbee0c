from __future__ import annotations

from enum import Enum


class Model(str, Enum):
    CHAT = "deepseek-chat"
    CODER = "deepseek-coder"
    REASONER = "deepseek-reasoner"


class EndpointSuffix(str, Enum):
    CHAT = "/chat/completions"
    MODELS_LIST = "/models"
    USER_BALANCE = "/user/balance"


class QueryFlag(str, Enum):
    MODEL = "model"
    STREAM = "stream"
    MESSAGES = "messages"
    TEMPERATURE = "temperature"


class DataType(str, Enum):
    STRING = "string"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    ARRAY = "array"
    OBJECT = "object"


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"


DEFAULT_BASE_URL = "https://api.deepseek.com/v3"
DEFAULT_TIMEOUT_S = 30.0
# Compared against the literal "true" when deriving the stream default.
DEFAULT_STREAM_FLAG = "false"
