from .params import ParamSpec, chat_param_spec, coerce, merge_payload, resolve_params
from .resource import HTTPClient, Resource

__all__ = [
    "HTTPClient",
    "ParamSpec",
    "Resource",
    "chat_param_spec",
    "coerce",
    "merge_payload",
    "resolve_params",
]
