"""
Miscellaneous helpers.

This module provides:
- Generators: UUIDs, random strings and numbers, sequences
- Sorting: Comparators for primitives and records
- Objects: Shuffle, pick and omit
- Query: Tokenizing, normalizing and filtering by a search query
- Retry: Async delay and retry-with-schedule
"""

from .generators import (
    UUIDVersion,
    generate_uuid,
    generate_random_string,
    generate_random_float,
    generate_random_integer,
    generate_sequence,
)
from .sorting import SortDirection, sort_primitives, sort_records
from .objects import shuffle_array, pick_props, omit_props
from .query import FilterByQueryOptions, build_query_tokens, normalize_item_value, filter_by_query
from .retry import delay, retry_async_function

__all__ = [
    "UUIDVersion",
    "generate_uuid",
    "generate_random_string",
    "generate_random_float",
    "generate_random_integer",
    "generate_sequence",
    "SortDirection",
    "sort_primitives",
    "sort_records",
    "shuffle_array",
    "pick_props",
    "omit_props",
    "FilterByQueryOptions",
    "build_query_tokens",
    "normalize_item_value",
    "filter_by_query",
    "delay",
    "retry_async_function",
]
