"""
Value classification.

Maps arbitrary Python values onto a closed set of JSON-like kinds so the
normalizer, canonical serializer and validators can branch exhaustively.
"""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

# JSON runtimes print magnitudes outside [1e-6, 1e21) in exponent notation
MIN_PLAIN_NUMBER = 1e-6
MAX_PLAIN_NUMBER = 1e21

_EXPONENT_PADDING_RE = re.compile(r"e([+-])0*(\d)")


class _Undefined:
    """Sentinel for "no value". Dropped from records, null in arrays."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class ValueKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    RECORD = "record"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """
    Return the ValueKind of a value.

    bool is checked before numbers since it subclasses int.
    """
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None or value is UNDEFINED:
        return ValueKind.NULL
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    return ValueKind.OTHER


def is_container(value: Any) -> bool:
    """True for records and arrays (empty ones included)."""
    return classify(value) in (ValueKind.RECORD, ValueKind.ARRAY)


def number_to_str(value: float) -> str:
    """
    Render a number the way JSON-native runtimes print it.

    Examples:
        number_to_str(1.0) -> "1"
        number_to_str(1e-5) -> "0.00001"
        number_to_str(1e-7) -> "1e-7"
        number_to_str(float("inf")) -> "Infinity"
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        collapsed = collapse_integral_float(value)
        if isinstance(collapsed, int):
            return str(collapsed)
        text = repr(value)
        if "e" in text and MIN_PLAIN_NUMBER <= abs(value) < MAX_PLAIN_NUMBER:
            return format(Decimal(text), "f")
        return _EXPONENT_PADDING_RE.sub(r"e\1\2", text)
    return str(value)


def collapse_integral_float(value: float) -> Any:
    """
    Turn a whole-number float into an int, since JSON has no separate
    integer type. Values from MAX_PLAIN_NUMBER up keep their float form.

    Example:
        collapse_integral_float(2.0) -> 2
        collapse_integral_float(2.5) -> 2.5
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < MAX_PLAIN_NUMBER:
        return int(value)
    return value
