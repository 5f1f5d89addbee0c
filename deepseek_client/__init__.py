from .client import DeepSeekClient
from .config import ChatDefaults, Settings, load_settings
from .constants import EndpointSuffix, Model, RequestMethod
from .resources import Resource
from .results import BadResult, Failure, Result, Success

__all__ = [
    "BadResult",
    "ChatDefaults",
    "DeepSeekClient",
    "EndpointSuffix",
    "Failure",
    "Model",
    "RequestMethod",
    "Resource",
    "Result",
    "Settings",
    "Success",
    "load_settings",
]
