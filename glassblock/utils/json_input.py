# glassblock/utils/json_input.py
import json
from typing import Any, Dict, Mapping, Union

from .errors import ParseError, ValidationError

DesignInput = Union[str, Mapping[str, Any]]


def parse_text(text: str) -> Dict[str, Any]:
    """Parse serialized design text into a mapping, or raise ParseError."""
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        raise ParseError(f"Invalid design JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Design JSON must be an object, got {type(data).__name__}")
    return data


def require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ParseError(f"{what} data must be an object, got {type(data).__name__}")
    return data


def optional_list(data: Mapping[str, Any], key: str, label: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{label} must be a list")
    return list(value)


def json_int(value: Any) -> Any:
    """JSON numbers like 6.0 are whole numbers; hand them to setters as int."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
