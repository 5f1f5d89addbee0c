from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from deepseek_client.config import ChatDefaults
from deepseek_client.constants import DataType, QueryFlag

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class ParamSpec:
    type: DataType
    default: Callable[[], Any]


def chat_param_spec(defaults: ChatDefaults) -> Mapping[str, ParamSpec]:
    """Recognized parameters of the chat resource, in resolution order."""
    return MappingProxyType(
        {
            QueryFlag.MODEL.value: ParamSpec(DataType.STRING, lambda: defaults.model),
            QueryFlag.STREAM.value: ParamSpec(DataType.BOOL, lambda: defaults.stream),
        }
    )


def _to_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_STRINGS:
            return True
        if v in _FALSE_STRINGS:
            return False
    return None


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _to_str(value: Any) -> str | None:
    if isinstance(value, (str, int, float)):
        # bool is an int subclass; keep JSON spelling.
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    return None


def _to_list(value: Any) -> list[Any] | None:
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _to_dict(value: Any) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        return dict(value)
    return None


_CONVERTERS: dict[DataType, Callable[[Any], Any]] = {
    DataType.STRING: _to_str,
    DataType.BOOL: _to_bool,
    DataType.INTEGER: _to_int,
    DataType.FLOAT: _to_float,
    DataType.ARRAY: _to_list,
    DataType.OBJECT: _to_dict,
}


def coerce(value: Any, type_: DataType, default: Callable[[], Any]) -> Any:
    """
    Convert `value` to `type_`.
    Missing (None) or unconvertible input is not an error: the default supplier is used instead.
    """
    if value is None:
        return default()
    converted = _CONVERTERS[type_](value)
    if converted is None:
        return default()
    return converted


def resolve_params(request_data: Mapping[str, Any], spec: Mapping[str, ParamSpec]) -> dict[str, Any]:
    # Output keys are exactly the keys of `spec`; unknown caller keys never pass through here.
    return {key: coerce(request_data.get(key), p.type, p.default) for key, p in spec.items()}


def merge_payload(request_data: Mapping[str, Any], resolved: Mapping[str, Any]) -> dict[str, Any]:
    # Shallow merge, resolved values win on collision.
    return {**request_data, **resolved}
