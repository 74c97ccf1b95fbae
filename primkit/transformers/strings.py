"""
String case conversion, slugs, truncation and masking.
"""

import re
import unicodedata

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s_-]")
_SLUG_DASH_RE = re.compile(r"[\s_-]+")


def capitalize_first(value: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return value[:1].upper() + value[1:]


def to_title_case(value: str) -> str:
    """
    Capitalize every space separated word and lowercase the rest of it.

    Example:
        to_title_case("JESUS GRATEROL") -> "Jesus Graterol"
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in value.split(" "))


def to_slug(value: str) -> str:
    """
    Build a URL slug: ASCII, lowercase, words joined by "-".

    Example:
        to_slug("This Should work!!@") -> "this-should-work"
    """
    ascii_text = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    cleaned = _SLUG_STRIP_RE.sub("", ascii_text.lower())
    return _SLUG_DASH_RE.sub("-", cleaned).strip("-")


def truncate_text(value: str, max_length: int, ellipsis: str = "...") -> str:
    """
    Cut text down to max_length characters, ellipsis included.

    Text that already fits is returned unchanged.
    """
    if max_length < 0:
        raise ValueError("max_length must not be negative")
    if len(value) <= max_length:
        return value
    if max_length <= len(ellipsis):
        return ellipsis[:max_length]
    return value[: max_length - len(ellipsis)].rstrip() + ellipsis


def mask_middle(value: str, visible_chars: int = 4, mask_char: str = "*") -> str:
    """
    Hide everything but the first and last visible_chars characters.

    Text too short to leave anything hidden is fully masked.

    Example:
        mask_middle("4111111111111111") -> "4111********1111"
    """
    if visible_chars < 0:
        raise ValueError("visible_chars must not be negative")
    if len(value) <= visible_chars * 2:
        return mask_char * len(value)
    hidden = len(value) - visible_chars * 2
    return value[:visible_chars] + mask_char * hidden + value[len(value) - visible_chars:]
