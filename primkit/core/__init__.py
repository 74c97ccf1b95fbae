"""
Core primitives shared by every primkit module.

This module provides:
- Values: Classification of arbitrary values into JSON-like kinds
- Canonical: Deterministic serialization with deep key sorting
- Equality: Deep comparison through canonical strings
- JSON guards: Shape checks around encoding and decoding
- Errors: Kind-tagged exception hierarchy and Outcome results
"""

from .values import UNDEFINED, ValueKind, classify, is_container, number_to_str
from .canonical import (
    sort_keys_deep,
    to_json_compatible,
    stringify_deterministic,
    canonical_json_bytes,
    canonical_hash,
)
from .equality import is_equal
from .json_guards import (
    can_json_be_serialized,
    validate_json_serialization_result,
    can_json_be_deserialized,
    validate_json_deserialization_result,
)
from .errors import (
    ErrorKind,
    PrimkitError,
    UnsupportedDataTypeError,
    SerializationError,
    DeserializationError,
    InvalidArrayError,
    InvalidObjectError,
    MixedDataTypesError,
)
from .result import Outcome, attempt

__all__ = [
    "UNDEFINED",
    "ValueKind",
    "classify",
    "is_container",
    "number_to_str",
    "sort_keys_deep",
    "to_json_compatible",
    "stringify_deterministic",
    "canonical_json_bytes",
    "canonical_hash",
    "is_equal",
    "can_json_be_serialized",
    "validate_json_serialization_result",
    "can_json_be_deserialized",
    "validate_json_deserialization_result",
    "ErrorKind",
    "PrimkitError",
    "UnsupportedDataTypeError",
    "SerializationError",
    "DeserializationError",
    "InvalidArrayError",
    "InvalidObjectError",
    "MixedDataTypesError",
    "Outcome",
    "attempt",
]
