"""
Tests for validation predicates.
"""

import pytest

from primkit.validations import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    is_array_valid,
    is_authorization_header_valid,
    is_email_valid,
    is_integer_valid,
    is_jwt_valid,
    is_number_valid,
    is_object_valid,
    is_otp_secret_valid,
    is_otp_token_valid,
    is_password_valid,
    is_semver_valid,
    is_slug_valid,
    is_string_valid,
    is_timestamp_valid,
    is_url_valid,
    is_uuid_valid,
)

BAD_TYPES = [None, {}, [], True]

JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)


@pytest.mark.parametrize(
    "value, min_length, max_length, expected",
    [
        ("", None, None, True),
        (" ", None, None, True),
        ("Hello World!", None, None, True),
        ("", 1, None, False),
        ("A", 1, None, True),
        ("ABCDE", None, 5, True),
        ("ABCDEF", None, 5, False),
        ("ABCDEF", 1, 5, False),
        (1, None, None, False),
    ]
    + [(v, None, None, False) for v in BAD_TYPES],
)
def test_is_string_valid(value, min_length, max_length, expected):
    assert is_string_valid(value, min_length, max_length) is expected


@pytest.mark.parametrize(
    "value, lo, hi, expected",
    [
        (1, None, None, True),
        (0, None, None, True),
        (-1, None, None, True),
        (55.85, None, None, True),
        (MIN_SAFE_INTEGER, None, None, True),
        (MAX_SAFE_INTEGER, None, None, True),
        (0, 1, 5, False),
        (1, 1, 5, True),
        (5, 1, 5, True),
        (6, 1, 5, False),
        (float("nan"), None, None, False),
        (float("nan"), 0, None, False),
        (MIN_SAFE_INTEGER - 1, None, None, False),
        (MAX_SAFE_INTEGER + 1, None, None, False),
        (float("inf"), None, None, False),
        (float("-inf"), None, None, False),
        (-1, 0, None, False),
        (1, None, 0, False),
        ("1", None, None, False),
    ]
    + [(v, None, None, False) for v in BAD_TYPES],
)
def test_is_number_valid(value, lo, hi, expected):
    kwargs = {}
    if lo is not None:
        kwargs["min"] = lo
    if hi is not None:
        kwargs["max"] = hi
    assert is_number_valid(value, **kwargs) is expected


@pytest.mark.parametrize(
    "value, lo, hi, expected",
    [
        (1, None, None, True),
        (0, None, None, True),
        (-1, None, None, True),
        (2.0, None, None, True),
        (1562851996000, None, None, True),
        (MAX_SAFE_INTEGER, None, None, True),
        (0, 1, 5, False),
        (3, 1, 5, True),
        (6, 1, 5, False),
        (55.85, None, None, False),
        (float("inf"), None, None, False),
        (float("nan"), None, None, False),
        (MAX_SAFE_INTEGER + 1, None, None, False),
        ("1", None, None, False),
        (True, None, None, False),
    ],
)
def test_is_integer_valid(value, lo, hi, expected):
    assert is_integer_valid(value, lo, hi) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (14400000, True),
        (MAX_SAFE_INTEGER, True),
        (1562851996000, True),
        (14300000, False),
        (14400000.5, False),
        (MAX_SAFE_INTEGER + 1, False),
        (123, False),
        ("a", False),
        (None, False),
        (True, False),
    ],
)
def test_is_timestamp_valid(value, expected):
    assert is_timestamp_valid(value) is expected


@pytest.mark.parametrize(
    "value, allow_empty, expected",
    [
        ({}, True, True),
        ({"foo": "bar", "obj": {"arr": [1, 2]}}, False, True),
        ({}, False, False),
        ([], True, False),
        (None, False, False),
        ("a", False, False),
        (123, False, False),
    ],
)
def test_is_object_valid(value, allow_empty, expected):
    assert is_object_valid(value, allow_empty) is expected


@pytest.mark.parametrize(
    "value, allow_empty, expected",
    [
        ([], True, True),
        ([1, 2, 3], False, True),
        ((1, 2), False, True),
        ([[1, 2], [3, 4]], False, True),
        ([], False, False),
        ({}, True, False),
        ("abc", False, False),
        (None, False, False),
    ],
)
def test_is_array_valid(value, allow_empty, expected):
    assert is_array_valid(value, allow_empty) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("jane@example.com", True),
        ("john.doe+tag@mail.co.uk", True),
        ("x_y@sub-domain.io", True),
        ("plainaddress", False),
        ("@example.com", False),
        ("jane@", False),
        ("jane@example", False),
        ("jane doe@example.com", False),
        ("jane@example.com\n", False),
        (123, False),
    ],
)
def test_is_email_valid(value, expected):
    assert is_email_valid(value) is expected


@pytest.mark.parametrize(
    "value, min_length, max_length, expected",
    [
        ("jesusgraterol", 2, 16, True),
        ("Jes15-Graterol_.", 2, 16, True),
        ("__", 2, 16, True),
        ("je", 2, 5, True),
        ("jesus", 2, 5, True),
        ("j", 2, 5, False),
        ("jesusg", 2, 5, False),
        ("Jes15-Gratero_.!", 2, 16, False),
        ("jesu()", 2, 16, False),
        ("asdjkhxaslkdj546512asdkasd", 2, 16, False),
        ("   ", 2, 16, False),
        (123, 2, 16, False),
    ],
)
def test_is_slug_valid(value, min_length, max_length, expected):
    assert is_slug_valid(value, min_length, max_length) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("aaaaaA7!", True),
        ("aA1!aaaaK", True),
        ("Jes15-Graterol_.", True),
        ("PythonWiz333@", True),
        ("restAPI12.-_", True),
        ("@>|4xtZx", True),
        ("Jes15-G", False),
        ("jes15-gratero_.as", False),
        ("12345678", False),
        ("aaaaaaaa", False),
        ("!!!!!!!!", False),
        ("AAAAAA665", False),
        ("A5/5fZf", False),
        ("          ", False),
        (None, False),
    ],
)
def test_is_password_valid(value, expected):
    assert is_password_valid(value) is expected


def test_is_password_valid_length_range():
    assert is_password_valid("aA1!" * 600) is False
    assert is_password_valid("aA1!" * 600, 8, 4096) is True


@pytest.mark.parametrize(
    "value, expected",
    [
        ("JBSWY3DPEHPK3PXP", True),
        ("NB2W45DFOIZA" * 2 + "ABCD", True),
        ("JBSWY3DPEHPK3PX", False),  # too short
        ("jbswy3dpehpk3pxp", False),  # lowercase
        ("JBSWY3DPEHPK3PX1", False),  # 1 is not base32
        (None, False),
    ],
)
def test_is_otp_secret_valid(value, expected):
    assert is_otp_secret_valid(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("123456", True), ("000000", True), ("12345", False), ("1234567", False), ("12345a", False), (123456, False)],
)
def test_is_otp_token_valid(value, expected):
    assert is_otp_token_valid(value) is expected


def test_is_jwt_valid():
    assert is_jwt_valid(JWT)
    assert not is_jwt_valid("abc.def")
    assert not is_jwt_valid("abc.def.")
    assert not is_jwt_valid("abc.d=f.ghi")
    assert not is_jwt_valid(None)


def test_is_authorization_header_valid():
    assert is_authorization_header_valid(f"Bearer {JWT}")
    assert not is_authorization_header_valid(JWT)
    assert not is_authorization_header_valid(f"bearer {JWT}")
    assert not is_authorization_header_valid(f"Bearer  {JWT}")
    assert not is_authorization_header_valid("Bearer ")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1.0.0", True),
        ("0.12.3", True),
        ("1.0.0-alpha.1", True),
        ("1.0.0+build.5", True),
        ("1.0.0-rc.1+exp.sha.5114f85", True),
        ("1.0", False),
        ("01.0.0", False),
        ("v1.0.0", False),
        ("1.0.0-", False),
        (100, False),
    ],
)
def test_is_semver_valid(value, expected):
    assert is_semver_valid(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://example.com", True),
        ("http://localhost:8080/path?q=1#frag", True),
        ("https://sub.domain.org/a/b", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("https://", False),
        ("https://exa mple.com", False),
        ("http://example.com:99999", False),
        ("", False),
        (None, False),
    ],
)
def test_is_url_valid(value, expected):
    assert is_url_valid(value) is expected


@pytest.mark.parametrize(
    "value, version, expected",
    [
        ("9b1deb4d-3b7d-4bad-9bdd-2b0d7b3dcb6d", None, True),
        ("9b1deb4d-3b7d-4bad-9bdd-2b0d7b3dcb6d", 4, True),
        ("9B1DEB4D-3B7D-4BAD-9BDD-2B0D7B3DCB6D", 4, True),
        ("9b1deb4d-3b7d-4bad-9bdd-2b0d7b3dcb6d", 7, False),
        ("01890a5d-ac96-774b-bcce-b302099a8057", 7, True),
        ("01890a5d-ac96-774b-bcce-b302099a8057", 4, False),
        ("9b1deb4d-3b7d-4bad-cbdd-2b0d7b3dcb6d", None, False),  # bad variant
        ("9b1deb4d3b7d4bad9bdd2b0d7b3dcb6d", None, False),
        ("not-a-uuid", None, False),
        (None, None, False),
    ],
)
def test_is_uuid_valid(value, version, expected):
    assert is_uuid_valid(value, version) is expected
