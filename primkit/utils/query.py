"""
Query filtering over collections.

A query is split into lowercase tokens; an item matches when any token is a
substring of its normalized form. Matching is boolean: surviving items keep
their input order and are never ranked.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, TypeVar

from ..core.values import ValueKind, classify, number_to_str

T = TypeVar("T")


@dataclass(frozen=True)
class FilterByQueryOptions:
    """
    Options for filter_by_query.

    Fields:
        query_prop: Field matched against instead of the whole item (None = whole item)
        limit: Maximum number of items returned (None = unbounded)
    """
    query_prop: Optional[str] = None
    limit: Optional[int] = None


def build_query_tokens(query: str) -> List[str]:
    """
    Lowercase a query and split it on single spaces, dropping empty tokens.

    Duplicates and order are kept.

    Example:
        build_query_tokens("  Foo   bar ") -> ["foo", "bar"]
    """
    return [token for token in query.lower().split(" ") if token]


def normalize_item_value(value: Any) -> str:
    """
    Flatten a value into one lowercase string for substring matching.

    Records contribute their values (not their keys) in iteration order,
    arrays their elements in index order, joined by single spaces. None and
    UNDEFINED become "". Never raises; inputs must be acyclic.
    """
    kind = classify(value)
    if kind is ValueKind.STRING:
        return value.lower()
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return number_to_str(value).lower()
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.ARRAY:
        return " ".join(normalize_item_value(x) for x in value)
    if kind is ValueKind.RECORD:
        return " ".join(normalize_item_value(v) for v in value.values())
    return str(value).lower()


def _select(item: Any, query_prop: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(query_prop)
    return getattr(item, query_prop, None)


def filter_by_query(
    items: Sequence[T],
    query: str,
    options: Optional[FilterByQueryOptions] = None,
) -> List[T]:
    """
    Keep the items whose normalized form contains any query token.

    Args:
        items: Items to filter (records, objects or primitives)
        query: Raw query string
        options: Field selector and result limit

    Returns:
        Matching items in input order, truncated to options.limit.
        An empty or blank query returns all items.

    Example:
        filter_by_query([{"name": "Alice"}, {"name": "Bob"}], "ali",
                        FilterByQueryOptions(query_prop="name"))
        -> [{"name": "Alice"}]
    """
    if not items or not query:
        return list(items)
    tokens = build_query_tokens(query)
    if not tokens:
        return list(items)

    options = options or FilterByQueryOptions()
    matches: List[T] = []
    for item in items:
        target = item if options.query_prop is None else _select(item, options.query_prop)
        normalized = normalize_item_value(target)
        if any(token in normalized for token in tokens):
            matches.append(item)
            if options.limit is not None and len(matches) >= options.limit:
                break

    if options.limit is not None:
        return matches[: max(options.limit, 0)]
    return matches
