"""
primkit

Primitive validation predicates, value transformers and helpers, built
around deterministic JSON serialization, deep equality and query filtering.
"""

__version__ = "0.1.0"

from .core import (
    UNDEFINED,
    ErrorKind,
    PrimkitError,
    UnsupportedDataTypeError,
    SerializationError,
    DeserializationError,
    InvalidArrayError,
    InvalidObjectError,
    MixedDataTypesError,
    Outcome,
    attempt,
    sort_keys_deep,
    stringify_deterministic,
    canonical_hash,
    is_equal,
)
from .validations import (
    is_string_valid,
    is_number_valid,
    is_integer_valid,
    is_timestamp_valid,
    is_object_valid,
    is_array_valid,
    is_email_valid,
    is_slug_valid,
    is_password_valid,
    is_otp_secret_valid,
    is_otp_token_valid,
    is_jwt_valid,
    is_authorization_header_valid,
    is_semver_valid,
    is_url_valid,
    is_uuid_valid,
)
from .transformers import (
    NumberFormatConfig,
    prettify_number,
    prettify_date,
    prettify_file_size,
    prettify_badge_count,
    capitalize_first,
    to_title_case,
    to_slug,
    truncate_text,
    mask_middle,
    stringify_json,
    stringify_json_deterministically,
    parse_json,
    create_deep_clone,
)
from .utils import (
    SortDirection,
    FilterByQueryOptions,
    generate_uuid,
    generate_random_string,
    generate_random_float,
    generate_random_integer,
    generate_sequence,
    sort_primitives,
    sort_records,
    shuffle_array,
    pick_props,
    omit_props,
    build_query_tokens,
    normalize_item_value,
    filter_by_query,
    delay,
    retry_async_function,
)

__all__ = [
    # core
    "UNDEFINED",
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
    "sort_keys_deep",
    "stringify_deterministic",
    "canonical_hash",
    "is_equal",
    # validations
    "is_string_valid",
    "is_number_valid",
    "is_integer_valid",
    "is_timestamp_valid",
    "is_object_valid",
    "is_array_valid",
    "is_email_valid",
    "is_slug_valid",
    "is_password_valid",
    "is_otp_secret_valid",
    "is_otp_token_valid",
    "is_jwt_valid",
    "is_authorization_header_valid",
    "is_semver_valid",
    "is_url_valid",
    "is_uuid_valid",
    # transformers
    "NumberFormatConfig",
    "prettify_number",
    "prettify_date",
    "prettify_file_size",
    "prettify_badge_count",
    "capitalize_first",
    "to_title_case",
    "to_slug",
    "truncate_text",
    "mask_middle",
    "stringify_json",
    "stringify_json_deterministically",
    "parse_json",
    "create_deep_clone",
    # utils
    "SortDirection",
    "FilterByQueryOptions",
    "generate_uuid",
    "generate_random_string",
    "generate_random_float",
    "generate_random_integer",
    "generate_sequence",
    "sort_primitives",
    "sort_records",
    "shuffle_array",
    "pick_props",
    "omit_props",
    "build_query_tokens",
    "normalize_item_value",
    "filter_by_query",
    "delay",
    "retry_async_function",
]
