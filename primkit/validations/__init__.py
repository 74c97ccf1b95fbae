"""
Validation predicates.

Every predicate accepts any value and returns a bool; none of them raise.
"""

from .primitives import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    is_string_valid,
    is_number_valid,
    is_integer_valid,
    is_timestamp_valid,
    is_object_valid,
    is_array_valid,
)
from .formats import (
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

__all__ = [
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
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
]
