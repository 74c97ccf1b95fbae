"""
Exception types for primkit.

Every failure carries an ErrorKind. Callers should branch on `err.kind`,
never on message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    UNSUPPORTED_DATA_TYPE = "UNSUPPORTED_DATA_TYPE"
    UNABLE_TO_SERIALIZE_JSON = "UNABLE_TO_SERIALIZE_JSON"
    UNABLE_TO_DESERIALIZE_JSON = "UNABLE_TO_DESERIALIZE_JSON"
    INVALID_OR_EMPTY_ARRAY = "INVALID_OR_EMPTY_ARRAY"
    INVALID_OR_EMPTY_OBJECT = "INVALID_OR_EMPTY_OBJECT"
    MIXED_OR_UNSUPPORTED_DATA_TYPES = "MIXED_OR_UNSUPPORTED_DATA_TYPES"


class PrimkitError(Exception):
    """
    Base error for all primkit operations.

    The kind is appended to the rendered message so it survives being
    logged or stringified.
    """

    kind: ErrorKind = ErrorKind.UNSUPPORTED_DATA_TYPE

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{message} [{self.kind.value}]")


class UnsupportedDataTypeError(PrimkitError):
    """Raised when an input does not have the required shape."""
    kind = ErrorKind.UNSUPPORTED_DATA_TYPE


class SerializationError(PrimkitError):
    """Raised when a value cannot be encoded as JSON."""
    kind = ErrorKind.UNABLE_TO_SERIALIZE_JSON


class DeserializationError(PrimkitError):
    """Raised when JSON text cannot be decoded into an object or array."""
    kind = ErrorKind.UNABLE_TO_DESERIALIZE_JSON


class InvalidArrayError(PrimkitError):
    """Raised when a list argument is missing, too short or empty."""
    kind = ErrorKind.INVALID_OR_EMPTY_ARRAY


class InvalidObjectError(PrimkitError):
    """Raised when a mapping argument is missing or empty."""
    kind = ErrorKind.INVALID_OR_EMPTY_OBJECT


class MixedDataTypesError(PrimkitError):
    """Raised when values cannot be compared because their types differ."""
    kind = ErrorKind.MIXED_OR_UNSUPPORTED_DATA_TYPES
