"""
Canonical serialization for deterministic output and comparison.

Equality and cache keys depend on this output being byte-identical for
values that only differ in key order, so every deterministic encoding must go
through these functions.
"""

import hashlib
import json
import logging
import math
from typing import Any

from .errors import SerializationError
from .json_guards import can_json_be_serialized, validate_json_serialization_result
from .values import UNDEFINED, ValueKind, classify, collapse_integral_float

logger = logging.getLogger(__name__)


def sort_keys_deep(value: Any) -> Any:
    """
    Rebuild a value with record keys sorted at every level.

    Rules:
    - record keys sorted ascending by code point (compared as strings)
    - array element order kept, tuples become lists
    - UNDEFINED fields dropped from records, UNDEFINED elements become None
    - primitives returned unchanged

    Inputs must be acyclic.
    """
    kind = classify(value)
    if kind is ValueKind.ARRAY:
        return [None if x is UNDEFINED else sort_keys_deep(x) for x in value]
    if kind is ValueKind.RECORD:
        return {
            k: sort_keys_deep(value[k])
            for k in sorted(value.keys(), key=str)
            if value[k] is not UNDEFINED
        }
    return value


def _encodable(value: Any, sort_keys: bool) -> Any:
    kind = classify(value)
    if kind is ValueKind.NUMBER:
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return collapse_integral_float(value)
    if kind is ValueKind.ARRAY:
        return [None if x is UNDEFINED else _encodable(x, sort_keys) for x in value]
    if kind is ValueKind.RECORD:
        keys = sorted(value.keys(), key=str) if sort_keys else value.keys()
        return {k: _encodable(value[k], sort_keys) for k in keys if value[k] is not UNDEFINED}
    if value is UNDEFINED:
        return None
    return value


def to_json_compatible(value: Any) -> Any:
    """
    Map a value onto what a JSON encoder accepts, keeping key order.

    NaN and +/-Infinity have no JSON literal and become None. Whole-number
    floats become ints so 1.0 and 1 encode alike. UNDEFINED fields are
    dropped and UNDEFINED elements become None. Unsupported leaves are left
    in place for the encoder to reject.
    """
    return _encodable(value, sort_keys=False)


def stringify_deterministic(value: Any) -> str:
    """
    Deterministic JSON string of a record or array.

    Guarantees:
    - keys sorted at every level, as in sort_keys_deep()
    - numbers equal in value encode alike (1.0 and 1 both give 1)
    - separators carry no whitespace
    - ensure_ascii=False keeps unicode text as-is

    Raises:
        UnsupportedDataTypeError: If value is not a record or an array
        SerializationError: If the encoder fails or returns a degenerate result
    """
    can_json_be_serialized(value)
    try:
        canon = _encodable(value, sort_keys=True)
        result = json.dumps(canon, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("canonical encoding failed: %s", e)
        raise SerializationError(
            f"The value could not be serialized into a deterministic JSON string: {e}"
        ) from e
    validate_json_serialization_result(value, result)
    return result


def canonical_json_bytes(value: Any) -> bytes:
    """UTF-8 bytes of stringify_deterministic(value)."""
    return stringify_deterministic(value).encode("utf-8")


def canonical_hash(value: Any) -> str:
    """
    SHA-256 hex digest of the canonical form, usable as a cache key.

    Example:
        canonical_hash({"b": 1, "a": 2}) == canonical_hash({"a": 2, "b": 1})
    """
    return hashlib.sha256(canonical_json_bytes(value)).hexdigest()
