"""
Deep equality over records and arrays.
"""

from typing import Any

from .canonical import stringify_deterministic
from .errors import SerializationError, UnsupportedDataTypeError
from .values import is_container


def _canonical_side(value: Any, side: str) -> str:
    try:
        return stringify_deterministic(value)
    except SerializationError as e:
        raise SerializationError(
            f"Value '{side}' could not be serialized into a JSON string in order to be compared: "
            f"{e.message}"
        ) from e


def is_equal(a: Any, b: Any) -> bool:
    """
    Compare two records or arrays by their canonical strings.

    Key order never matters, array order always does.

    Raises:
        UnsupportedDataTypeError: If either side is not a record or an array
        SerializationError: If either side cannot be canonically serialized
    """
    if not is_container(a):
        raise UnsupportedDataTypeError("Value 'a' must be an object or an array in order to be compared.")
    if not is_container(b):
        raise UnsupportedDataTypeError("Value 'b' must be an object or an array in order to be compared.")
    return _canonical_side(a, "a") == _canonical_side(b, "b")
