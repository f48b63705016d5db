"""Generation result serialization to JSON.

Results are frozen dataclasses of floats, strings, enums and tuples, so a
single recursive walk covers every model. Infinite Hill factors are written
as the string "inf" because JSON has no literal for them.
"""

import dataclasses
import json
import math
from enum import Enum
from typing import Any

from ..models.result import SystemResult


def result_to_dict(result: SystemResult) -> dict[str, Any]:
    """Convert a generation result to a JSON-compatible dictionary.

    Args:
        result: Result to serialize

    Returns:
        Nested dict with enums as their values and tuples as lists
    """
    return _serialize_value(result)


def result_to_json(result: SystemResult, indent: int | None = 2) -> str:
    """Serialize a result to a JSON string with sorted keys.

    The same seed and class always produce the same string.
    """
    return json.dumps(result_to_dict(result), indent=indent, sort_keys=True)


def _serialize_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _serialize_value(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [_serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {str(_serialize_value(k)): _serialize_value(v) for k, v in value.items()}
    if isinstance(value, float) and math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value
