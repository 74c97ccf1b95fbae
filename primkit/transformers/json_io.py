"""
Guarded JSON stringify/parse and deep cloning.
"""

import json
from typing import Any

from ..core.canonical import stringify_deterministic, to_json_compatible
from ..core.errors import DeserializationError, SerializationError
from ..core.json_guards import (
    can_json_be_deserialized,
    can_json_be_serialized,
    validate_json_deserialization_result,
    validate_json_serialization_result,
)


def stringify_json(value: Any) -> str:
    """
    Compact JSON string of a record or array, keys in insertion order.

    Raises:
        UnsupportedDataTypeError: If value is not a record or an array
        SerializationError: If the encoder fails or returns a degenerate result
    """
    can_json_be_serialized(value)
    try:
        result = json.dumps(
            to_json_compatible(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"The value could not be serialized into a JSON string: {e}") from e
    validate_json_serialization_result(value, result)
    return result


def stringify_json_deterministically(value: Any) -> str:
    """Same as stringify_json but with keys sorted at every level."""
    return stringify_deterministic(value)


def parse_json(value: str) -> Any:
    """
    Parse JSON text that must describe a record or an array.

    Raises:
        UnsupportedDataTypeError: If value is not a non-empty string
        DeserializationError: If the text is malformed or decodes to a primitive
    """
    can_json_be_deserialized(value)
    try:
        result = json.loads(value)
    except (ValueError, RecursionError) as e:
        raise DeserializationError(f"Unable to parse the JSON value: {e}") from e
    validate_json_deserialization_result(value, result)
    return result


def create_deep_clone(value: Any) -> Any:
    """
    Clone a record or array through a JSON round trip.

    The clone only holds JSON types: tuples become lists and UNDEFINED
    fields are gone.
    """
    return parse_json(stringify_json(value))
