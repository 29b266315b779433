"""Normalization of host values into JSON-compatible values."""

import dataclasses
import json
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional

from .types import JsonArray, JsonValue


def normalize_value(value: Any) -> JsonValue:
    """Normalize a value to a JSON-compatible structure.

    Key order of mappings is preserved. Objects the codec has no rule for
    are rendered through ``str()``.

    Args:
        value: Any Python value

    Returns:
        Normalized JSON value
    """
    if value is None or isinstance(value, (bool, str, int)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return value

    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        if value == value.to_integral_value():
            return int(value)
        return float(value)

    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()

    if isinstance(value, Mapping):
        return {str(k): normalize_value(v) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]

    if isinstance(value, (set, frozenset)):
        return [normalize_value(item) for item in value]

    # pydantic v2, then v1
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump) and hasattr(type(value), "model_fields"):
        return normalize_value(model_dump())
    if hasattr(type(value), "__fields__") and callable(getattr(value, "dict", None)):
        return normalize_value(value.dict())

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return normalize_value(
            {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
        )

    if hasattr(value, "__iter__") and not isinstance(value, (bytes, bytearray)):
        return [normalize_value(item) for item in value]

    return str(value)


def looks_like_json(text: str) -> bool:
    """Check whether text starts, after trimming, with ``{`` or ``[``."""
    stripped = text.strip()
    return stripped != "" and stripped[0] in "{["


def parse_json_text(text: str) -> Optional[JsonValue]:
    """Parse JSON-looking text, returning None when it is not a valid object or array."""
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    if isinstance(parsed, (dict, list)):
        return parsed
    return None


def is_json_primitive(value: Any) -> bool:
    """Check if value is a JSON primitive."""
    return value is None or isinstance(value, (str, int, float, bool))


def is_json_array(value: Any) -> bool:
    """Check if value is an array."""
    return isinstance(value, list)


def is_json_object(value: Any) -> bool:
    """Check if value is an object."""
    return isinstance(value, dict)


def is_array_of_objects(value: JsonArray) -> bool:
    """Check if every element of the array is an object."""
    return all(is_json_object(item) for item in value)
