"""
Guard rails around JSON encoding and decoding.

Only records and arrays may be serialized, and only non-empty strings may be
parsed. Failures are translated into typed primkit errors.
"""

from typing import Any

from .errors import DeserializationError, SerializationError, UnsupportedDataTypeError
from .values import is_container


def can_json_be_serialized(value: Any) -> None:
    """
    Check that a value can be stringified.

    Raises:
        UnsupportedDataTypeError: If value is not a record or an array
    """
    if not is_container(value):
        raise UnsupportedDataTypeError(
            f"The JSON value must be an object or an array in order to be stringified. "
            f"Received: {value!r}"
        )


def validate_json_serialization_result(value: Any, result: Any) -> None:
    """
    Check the output of an encoder.

    Raises:
        SerializationError: If result is not a non-empty string
    """
    if not isinstance(result, str) or not result:
        raise SerializationError(
            f"Stringifying the JSON value {value!r} produced an invalid result: {result!r}."
        )


def can_json_be_deserialized(value: Any) -> None:
    """
    Check that a value can be parsed.

    Raises:
        UnsupportedDataTypeError: If value is not a non-empty string
    """
    if not isinstance(value, str) or not value:
        raise UnsupportedDataTypeError(
            f"The JSON value must be a non-empty string in order to be parsed. Received: {value!r}"
        )


def validate_json_deserialization_result(value: str, result: Any) -> None:
    """
    Check the output of a decoder.

    Raises:
        DeserializationError: If result is not a record or an array
    """
    if not is_container(result):
        raise DeserializationError(
            f"Parsing the JSON value {value!r} produced an invalid result: {result!r}."
        )
