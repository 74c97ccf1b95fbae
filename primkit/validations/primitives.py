"""
Type and range predicates for primitive values.

None of these raise; a wrong type simply yields False.
"""

import math
from typing import Any, Optional

from ..core.values import ValueKind, classify

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

# Smallest accepted ms timestamp (start of the Unix epoch at UTC-4)
MIN_TIMESTAMP = 14400000


def is_string_valid(value: Any, min_length: Optional[int] = None, max_length: Optional[int] = None) -> bool:
    """True if value is a str whose length is within the optional range."""
    return (
        isinstance(value, str)
        and (min_length is None or len(value) >= min_length)
        and (max_length is None or len(value) <= max_length)
    )


def is_number_valid(value: Any, min: float = MIN_SAFE_INTEGER, max: float = MAX_SAFE_INTEGER) -> bool:
    """
    True if value is an int or float within [min, max].

    Booleans are not numbers here. NaN fails every comparison so it is
    always rejected, as are infinities under the default bounds.
    """
    return classify(value) is ValueKind.NUMBER and min <= value <= max


def is_integer_valid(value: Any, min: Optional[float] = None, max: Optional[float] = None) -> bool:
    """True if value is a number within range whose value is integral."""
    if not is_number_valid(
        value,
        MIN_SAFE_INTEGER if min is None else min,
        MAX_SAFE_INTEGER if max is None else max,
    ):
        return False
    return isinstance(value, int) or (math.isfinite(value) and float(value).is_integer())


def is_timestamp_valid(value: Any) -> bool:
    """True if value is a plausible Unix timestamp in milliseconds."""
    return is_integer_valid(value, MIN_TIMESTAMP)


def is_object_valid(value: Any, allow_empty: bool = False) -> bool:
    """True if value is a mapping, non-empty unless allow_empty."""
    return classify(value) is ValueKind.RECORD and (allow_empty or len(value) > 0)


def is_array_valid(value: Any, allow_empty: bool = False) -> bool:
    """True if value is a list or tuple, non-empty unless allow_empty."""
    return classify(value) is ValueKind.ARRAY and (allow_empty or len(value) > 0)
