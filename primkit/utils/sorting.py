"""
Comparators for sorting primitives and records.

Use with functools.cmp_to_key:

    sorted(names, key=cmp_to_key(sort_primitives("asc")))
    sorted(users, key=cmp_to_key(sort_records("age", "desc")))
"""

from typing import Any, Callable, Literal, Mapping

from ..core.errors import MixedDataTypesError
from ..core.values import ValueKind, classify

SortDirection = Literal["asc", "desc"]
Comparator = Callable[[Any, Any], int]


def _compare_strings(a: str, b: str, direction: SortDirection) -> int:
    a, b = a.lower(), b.lower()
    if a > b:
        return 1 if direction == "asc" else -1
    if b > a:
        return -1 if direction == "asc" else 1
    return 0


def _compare_numbers(a: float, b: float, direction: SortDirection) -> int:
    if a == b:
        return 0
    result = 1 if a > b else -1
    return result if direction == "asc" else -result


def _compare(a: Any, b: Any, direction: SortDirection, what: str) -> int:
    kind_a, kind_b = classify(a), classify(b)
    if kind_a is ValueKind.STRING and kind_b is ValueKind.STRING:
        return _compare_strings(a, b, direction)
    if kind_a is ValueKind.NUMBER and kind_b is ValueKind.NUMBER:
        return _compare_numbers(a, b, direction)
    raise MixedDataTypesError(
        f"Unable to sort list of {what} values as they can only be str | int | float and must not be "
        f"mixed. Received: {type(a).__name__}, {type(b).__name__}"
    )


def sort_primitives(direction: SortDirection) -> Comparator:
    """
    Comparator for strings (case-insensitive) or numbers.

    Raises (when called):
        MixedDataTypesError: If the two values are mixed or of another type
    """
    def comparator(a: Any, b: Any) -> int:
        return _compare(a, b, direction, "primitive")
    return comparator


def sort_records(key: str, direction: SortDirection) -> Comparator:
    """
    Comparator for records by the value stored under key.

    Raises (when called):
        MixedDataTypesError: If the two values are mixed or of another type
    """
    def comparator(a: Mapping[str, Any], b: Mapping[str, Any]) -> int:
        return _compare(a.get(key), b.get(key), direction, "record")
    return comparator
