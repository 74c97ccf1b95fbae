"""
Format predicates: emails, slugs, passwords, OTP, JWT, semver, URLs, UUIDs.
"""

import re
from typing import Any, Optional
from urllib.parse import urlsplit

from .primitives import is_string_valid

_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
    r"\.[A-Za-z]{2,}$"
)
_SLUG_RE = re.compile(r"^[a-zA-Z0-9\-._]+$")
_PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_])[A-Za-z\d\W_]+$")
_OTP_SECRET_RE = re.compile(r"^[A-Z2-7]{16,64}$")
_OTP_TOKEN_RE = re.compile(r"^[0-9]{6}$")
_JWT_RE = re.compile(r"^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+$")
_SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-([0-9a-f])[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)

MAX_EMAIL_LENGTH = 254
MAX_URL_LENGTH = 2048


def is_email_valid(value: Any) -> bool:
    return is_string_valid(value, 5, MAX_EMAIL_LENGTH) and _EMAIL_RE.fullmatch(value) is not None


def is_slug_valid(value: Any, min_length: int = 2, max_length: int = 16) -> bool:
    """
    Letters, digits and any of "-", "." or "_", within a length range
    (defaults to 2-16).
    """
    return is_string_valid(value, min_length, max_length) and _SLUG_RE.fullmatch(value) is not None


def is_password_valid(value: Any, min_length: int = 8, max_length: int = 2048) -> bool:
    """
    Requires at least one lowercase letter, one uppercase letter, one digit
    and one special character, within a length range (defaults to 8-2048).
    """
    return is_string_valid(value, min_length, max_length) and _PASSWORD_RE.fullmatch(value) is not None


def is_otp_secret_valid(value: Any) -> bool:
    """Base32 (RFC 4648, unpadded, uppercase) secret of 16-64 characters."""
    return isinstance(value, str) and _OTP_SECRET_RE.fullmatch(value) is not None


def is_otp_token_valid(value: Any) -> bool:
    return isinstance(value, str) and _OTP_TOKEN_RE.fullmatch(value) is not None


def is_jwt_valid(value: Any) -> bool:
    """Shape check only: three base64url segments. Signatures are not verified."""
    return isinstance(value, str) and _JWT_RE.fullmatch(value) is not None


def is_authorization_header_valid(value: Any) -> bool:
    """True for "Bearer <jwt>"."""
    if not isinstance(value, str) or not value.startswith("Bearer "):
        return False
    return is_jwt_valid(value[len("Bearer "):])


def is_semver_valid(value: Any) -> bool:
    return is_string_valid(value, 5, 256) and _SEMVER_RE.fullmatch(value) is not None


def is_url_valid(value: Any) -> bool:
    """http(s) URL with a host and no whitespace."""
    if not is_string_valid(value, 1, MAX_URL_LENGTH) or any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
        # accessing port validates it
        parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def is_uuid_valid(value: Any, version: Optional[int] = None) -> bool:
    """
    Canonical 8-4-4-4-12 UUID with RFC 4122 variant bits.

    If version is given (4 or 7), the version nibble must match.
    """
    if not isinstance(value, str):
        return False
    m = _UUID_RE.fullmatch(value)
    if m is None:
        return False
    return version is None or m.group(1) == str(version)
